"""
Utility functions for API request data handling.
"""
from typing import Optional
from uuid import UUID


def get_str( request_data, key : str, default : str = '' ) -> str:
    """
    String value from request data, stripped of leading/trailing
    whitespace, or default if the key is missing or None.
    """
    value = request_data.get( key )
    if value is None:
        return default
    return str( value ).strip()


def get_uuid( request_data, key : str ) -> Optional[ UUID ]:
    """ UUID from request data, or None if missing or malformed. """
    value = request_data.get( key )
    if value is None:
        return None

    str_value = str( value ).strip()
    if not str_value:
        return None

    try:
        return UUID( str_value )
    except ( ValueError, AttributeError ):
        return None


def get_bool( request_data, key : str, default : bool = False ) -> bool:
    value = request_data.get( key )
    if value is None:
        return default
    if isinstance( value, bool ):
        return value
    return bool( str( value ).strip().lower() in ( '1', 'true', 'yes', 'on' ))
