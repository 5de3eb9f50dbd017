#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def main():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tb.settings.development')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    add_runserver_port_if_needed( sys.argv )
    execute_from_command_line( sys.argv )


def add_runserver_port_if_needed( argv ):
    """
    Bare "runserver" listens on DJANGO_SERVER_PORT when it is set, so the
    port matches the CSRF trusted origins built from the same variable.
    """
    if len( argv ) < 2 or argv[1] != 'runserver':
        return
    default_port = os.environ.get( 'DJANGO_SERVER_PORT' )
    if not default_port:
        return
    if any( not arg.startswith( '--' ) for arg in argv[2:] ):
        return
    argv.append( f'localhost:{default_port}' )
    return


if __name__ == '__main__':
    main()
