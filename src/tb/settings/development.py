# -*- coding: utf-8 -*-
from .base import *

DEBUG = True

STATIC_ROOT = '/tmp/tb/static'

LOGGING['loggers']['django']['level'] = 'INFO'
LOGGING['loggers']['django.server'] = {
    'handlers': [ 'console' ],
    'level': 'INFO',
    'propagate': False,
}
LOGGING['loggers']['tb']['level'] = 'DEBUG'
