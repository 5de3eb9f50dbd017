from typing import Optional

from django.core.exceptions import BadRequest

from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from tb.exceptions import CollaborationError

from .constants import APIFields as F
from .messages import APIMessages as M


def exception_handler( exc : Exception, context : dict ) -> Optional[ Response ]:
    """
    Extends DRF's default handler so every error body has the form
    {"error": message}:

    - CollaborationError -> its own status code
    - Django's BadRequest -> 400
    - DRF's own exceptions keep their status; a bare "detail" body is
      rewritten to "error".
    """
    if isinstance( exc, CollaborationError ):
        return Response(
            { F.ERROR: exc.message },
            status = exc.status_code,
        )

    response = drf_exception_handler( exc, context )

    if response is not None:
        if isinstance( exc, drf_exceptions.NotAuthenticated ):
            # Session authentication has no WWW-Authenticate challenge, so DRF
            # would downgrade this to 403.
            response.status_code = status.HTTP_401_UNAUTHORIZED
        if isinstance( response.data, dict ) and ( set( response.data.keys() ) == { 'detail' } ):
            response.data = { F.ERROR: str( response.data[ 'detail' ] ) }
        return response

    if isinstance( exc, BadRequest ):
        return Response(
            { F.ERROR: str( exc ) or M.BAD_REQUEST },
            status = status.HTTP_400_BAD_REQUEST,
        )

    # Anything else propagates (500)
    return None
