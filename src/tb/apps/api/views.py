from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .constants import APIFields as F


class TbApiView( APIView ):
    """
    Base class for travel buddy API views.

    Wraps successful response data in a consistent envelope: {"data": ...}
    Only 2xx responses with a body are wrapped. Error responses pass
    through unchanged.
    """

    def finalize_response( self,
                           request  : Request,
                           response : Response,
                           *args,
                           **kwargs ) -> Response:
        response = super().finalize_response( request, response, *args, **kwargs )

        if ( hasattr( response, 'data' )
             and ( response.data is not None )
             and 200 <= response.status_code < 300 ):
            response.data = {
                F.DATA: response.data,
            }
        return response
