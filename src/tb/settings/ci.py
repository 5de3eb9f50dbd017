# -*- coding: utf-8 -*-
"""
CI/Testing settings - inherits from development with SQLite database.

Use this for test runs: DJANGO_SETTINGS_MODULE=tb.settings.ci
"""
import os
import tempfile

os.environ.setdefault( 'DJANGO_SECRET_KEY', 'ci-only-not-a-secret' )
os.environ.setdefault( 'TB_DB_PATH', tempfile.gettempdir() )

from .development import *  # noqa: E402

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'tb.sqlite3' ),
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

NOTIFICATIONS_ENABLED = True

# Background work runs inline so tests see its effects deterministically
UNIT_TESTING = True

# Quiet test output
LOGGING['loggers']['django']['level'] = 'WARNING'
LOGGING['loggers']['django.server']['level'] = 'WARNING'
LOGGING['loggers']['tb']['level'] = 'WARNING'
