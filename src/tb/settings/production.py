# -*- coding: utf-8 -*-
from .base import *

DEBUG = False

# TLS terminates at the reverse proxy
SECURE_PROXY_SSL_HEADER = ( 'HTTP_X_FORWARDED_PROTO', 'https' )
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True

# The API speaks JSON only; no browsable renderer.
REST_FRAMEWORK = dict( REST_FRAMEWORK )
REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] = [
    'rest_framework.renderers.JSONRenderer',
]

LOGGING['formatters']['process'] = {
    'format': '{asctime} {levelname} {name} [{process:d}:{threadName}] {message}',
    'style': '{',
}
LOGGING['handlers']['console']['formatter'] = 'process'
LOGGING['loggers']['django']['level'] = 'ERROR'
LOGGING['loggers']['django.db.backends'] = {
    'handlers': [ 'console' ],
    'level': 'ERROR',
    'propagate': False,
}
