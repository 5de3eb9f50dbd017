# -*- coding: utf-8 -*-
"""
Settings shared by every environment.  Environment-specific modules
(development, ci, production) import everything from here and override.
"""
import os

from tb.environment.server import EnvironmentSettings

ENV = EnvironmentSettings.get()

BASE_DIR = os.path.dirname( os.path.dirname( os.path.dirname( os.path.abspath( __file__ ))))

SECRET_KEY = ENV.SECRET_KEY

DEBUG = False

ALLOWED_HOSTS = list( ENV.ALLOWED_HOSTS )
CSRF_TRUSTED_ORIGINS = list( ENV.CSRF_TRUSTED_ORIGINS )

DJANGO_SUPERUSER_EMAIL = ENV.DJANGO_SUPERUSER_EMAIL
DJANGO_SUPERUSER_PASSWORD = ENV.DJANGO_SUPERUSER_PASSWORD

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'custom',
    'tb.apps.plans',
    'tb.apps.members',
    'tb.apps.bookings',
    'tb.apps.notify',
    'tb.apps.api',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'tb.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'tb.wsgi.application'
ASGI_APPLICATION = 'tb.asgi.application'

if ENV.has_server_database:
    DATABASES = {
        'default': {
            'ENGINE': ENV.DATABASE_ENGINE,
            'HOST': ENV.DATABASE_HOST,
            'PORT': ENV.DATABASE_PORT,
            'NAME': ENV.DATABASE_NAME,
            'USER': ENV.DATABASE_USER,
            'PASSWORD': ENV.DATABASE_PASSWORD,
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'tb.sqlite3' ),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

AUTH_USER_MODEL = 'custom.CustomUser'

AUTH_PASSWORD_VALIDATORS = [
    { 'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator', },
    { 'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator', },
    { 'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator', },
    { 'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator', },
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = os.path.join( BASE_DIR, 'static' )

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'EXCEPTION_HANDLER': 'tb.apps.api.exception_handler.exception_handler',
}

# ====================
# Collaboration engine

# Master switch for notification fan-out (persisted in-app notifications).
NOTIFICATIONS_ENABLED = ENV.NOTIFICATIONS_ENABLED

# Thread pool size for post-commit notification delivery.
NOTIFY_BACKGROUND_WORKERS = ENV.NOTIFY_BACKGROUND_WORKERS

# When True, background tasks run inline in the calling thread.
UNIT_TESTING = False

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
        'tb': {
            'handlers': ['console'],
            'level': 'INFO',
        },
    },
}
