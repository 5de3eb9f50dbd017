from dataclasses import dataclass, field
import os
import re
from typing import List, Tuple
import urllib.parse

from django.core.exceptions import ImproperlyConfigured

# Always trusted, whatever TB_EXTRA_HOST_URLS adds
LOCAL_HOSTS = ( '127.0.0.1', 'localhost' )


@dataclass
class EnvironmentSettings:
    """
    Everything the settings modules read from the process environment,
    parsed in one place.

    A database must be configured one of two ways:
      - server:  TB_DB_HOST, TB_DB_PORT, TB_DB_NAME, TB_DB_USER, TB_DB_PASSWORD
                 (plus optional TB_DB_ENGINE, PostgreSQL by default)
      - SQLite:  TB_DB_PATH, the directory holding the database file
    """

    DJANGO_SETTINGS_MODULE     : str           = ''
    DJANGO_SERVER_PORT         : int           = 8000
    SECRET_KEY                 : str           = ''
    DJANGO_SUPERUSER_EMAIL     : str           = ''
    DJANGO_SUPERUSER_PASSWORD  : str           = ''
    ALLOWED_HOSTS              : Tuple[ str ]  = field( default_factory = tuple )
    CSRF_TRUSTED_ORIGINS       : Tuple[ str ]  = field( default_factory = tuple )
    DATABASE_ENGINE            : str           = 'django.db.backends.postgresql'
    DATABASE_HOST              : str           = ''
    DATABASE_PORT              : str           = ''
    DATABASE_NAME              : str           = ''
    DATABASE_USER              : str           = ''
    DATABASE_PASSWORD          : str           = ''
    DATABASES_NAME_PATH        : str           = ''
    NOTIFICATIONS_ENABLED      : bool          = True
    NOTIFY_BACKGROUND_WORKERS  : int           = 4

    @property
    def environment_name(self) -> str:
        """ Last component of the settings module, e.g. "ci". """
        module_name, _, leaf = self.DJANGO_SETTINGS_MODULE.rpartition( '.' )
        return leaf if module_name else 'unknown'

    @property
    def has_server_database(self) -> bool:
        return all([
            self.DATABASE_HOST,
            self.DATABASE_PORT,
            self.DATABASE_NAME,
            self.DATABASE_USER,
            self.DATABASE_PASSWORD,
        ])

    @property
    def has_sqlite_database(self) -> bool:
        return bool( self.DATABASES_NAME_PATH )

    @classmethod
    def get( cls ) -> 'EnvironmentSettings':
        defaults = cls()
        env_settings = cls(
            # Read by Django itself; kept for environment_name
            DJANGO_SETTINGS_MODULE = cls.get_env_variable( 'DJANGO_SETTINGS_MODULE', '' ),
            DJANGO_SERVER_PORT = cls.get_int( 'DJANGO_SERVER_PORT', defaults.DJANGO_SERVER_PORT ),
            SECRET_KEY = cls.get_env_variable( 'DJANGO_SECRET_KEY' ),
            DJANGO_SUPERUSER_EMAIL = cls.get_env_variable( 'DJANGO_SUPERUSER_EMAIL', '' ),
            DJANGO_SUPERUSER_PASSWORD = cls.get_env_variable( 'DJANGO_SUPERUSER_PASSWORD', '' ),
            DATABASE_ENGINE = cls.get_env_variable( 'TB_DB_ENGINE', defaults.DATABASE_ENGINE ),
            DATABASE_HOST = cls.get_env_variable( 'TB_DB_HOST', '' ),
            DATABASE_PORT = cls.get_env_variable( 'TB_DB_PORT', '' ),
            DATABASE_NAME = cls.get_env_variable( 'TB_DB_NAME', '' ),
            DATABASE_USER = cls.get_env_variable( 'TB_DB_USER', '' ),
            DATABASE_PASSWORD = cls.get_env_variable( 'TB_DB_PASSWORD', '' ),
            DATABASES_NAME_PATH = cls.get_env_variable( 'TB_DB_PATH', '' ),
            NOTIFICATIONS_ENABLED = cls.to_bool( cls.get_env_variable(
                'TB_NOTIFICATIONS_ENABLED',
                defaults.NOTIFICATIONS_ENABLED,
            )),
            NOTIFY_BACKGROUND_WORKERS = max( 1, cls.get_int(
                'TB_NOTIFY_WORKERS',
                defaults.NOTIFY_BACKGROUND_WORKERS,
            )),
        )

        allowed_hosts = list( LOCAL_HOSTS )
        trusted_origins = [ f'http://{x}:{env_settings.DJANGO_SERVER_PORT}' for x in LOCAL_HOSTS ]
        for host, origin in cls.parse_url_list_str( cls.get_env_variable( 'TB_EXTRA_HOST_URLS', '' )):
            allowed_hosts.append( host )
            trusted_origins.append( origin )
            continue
        env_settings.ALLOWED_HOSTS = tuple( allowed_hosts )
        env_settings.CSRF_TRUSTED_ORIGINS = tuple( trusted_origins )

        env_settings.validate_database_config()
        return env_settings

    def validate_database_config(self) -> None:
        if self.has_server_database or self.has_sqlite_database:
            return
        raise ImproperlyConfigured(
            'No database configured. Set TB_DB_HOST, TB_DB_PORT, TB_DB_NAME,'
            ' TB_DB_USER and TB_DB_PASSWORD, or TB_DB_PATH for SQLite.'
        )

    @classmethod
    def get_env_variable( cls, var_name : str, default = None ):
        """ Variables without a default are required. """
        value = os.environ.get( var_name )
        if value is not None:
            return value
        if default is None:
            raise ImproperlyConfigured( f'Set the {var_name} environment variable' )
        return default

    @classmethod
    def get_int( cls, var_name : str, default : int ) -> int:
        try:
            return int( cls.get_env_variable( var_name, default ))
        except ( TypeError, ValueError ):
            return default

    @classmethod
    def to_bool( cls, value : object ) -> bool:
        if isinstance( value, str ):
            return value.strip().lower() in { 'true', '1', 'on', 'yes', 'y', 't', 'enabled' }
        return bool( value )

    @classmethod
    def parse_url_list_str( cls, a_string : str ) -> List[ Tuple[ str, str ]]:
        """
        Splits a comma/semicolon/space separated URL list into (host, origin)
        pairs.  Entries that are not absolute URLs are skipped.
        """
        host_origin_list = list()
        for url_str in re.split( r'[\s;,]+', a_string or '' ):
            parsed_url = urllib.parse.urlparse( url_str )
            if not ( parsed_url.scheme and parsed_url.hostname ):
                continue
            try:
                port = parsed_url.port
            except ValueError:
                continue
            origin = f'{parsed_url.scheme}://{parsed_url.hostname}'
            if port:
                origin += f':{port}'
            host_origin_list.append( ( parsed_url.hostname, origin ) )
            continue
        return host_origin_list
