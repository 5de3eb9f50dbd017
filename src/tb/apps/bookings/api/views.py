from uuid import UUID

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from tb.apps.api.constants import APIFields as F
from tb.apps.api.messages import APIMessages as M
from tb.apps.api.utils import get_str
from tb.apps.api.views import TbApiView
from tb.apps.bookings.booking_workflow import BookingWorkflow

from .serializers import BookingRequestSerializer, BookingResponseResultSerializer


class BookingCollectionView( TbApiView ):
    """
    POST /api/v1/bookings/
    Request to join a PUBLIC or UNLISTED plan: {"plan_uuid": ..., "message": ...}
    """
    permission_classes = [ IsAuthenticated ]

    def post( self, request : Request ) -> Response:
        serializer = BookingRequestSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        booking = BookingWorkflow().request_to_join(
            actor = request.user,
            plan_uuid = serializer.validated_data[ 'plan_uuid' ],
            message = serializer.validated_data.get( 'message' ),
        )
        return Response( BookingRequestSerializer( booking ).data, status = status.HTTP_201_CREATED )


class MyBookingCollectionView( TbApiView ):
    """
    GET /api/v1/bookings/mine/
    The caller's own booking requests, newest first.
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request : Request ) -> Response:
        bookings = BookingWorkflow().list_my_requests( request.user )
        return Response( BookingRequestSerializer( bookings, many = True ).data )


class PlanBookingCollectionView( TbApiView ):
    """
    GET /api/v1/plans/{uuid}/bookings/
    Pending requests for the plan, oldest first (needs can_manage_members).
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request : Request, plan_uuid : UUID ) -> Response:
        bookings = BookingWorkflow().list_pending_for_plan( request.user, plan_uuid )
        return Response( BookingRequestSerializer( bookings, many = True ).data )


class BookingItemView( TbApiView ):
    """
    DELETE /api/v1/bookings/{uuid}/
    Requester withdraws a pending request.
    """
    permission_classes = [ IsAuthenticated ]

    def delete( self, request : Request, booking_uuid : UUID ) -> Response:
        BookingWorkflow().cancel( actor = request.user, booking_uuid = booking_uuid )
        return Response( status = status.HTTP_204_NO_CONTENT )


class BookingRespondView( TbApiView ):
    """
    POST /api/v1/bookings/{uuid}/respond/
    {"status": "APPROVED" | "REJECTED"}
    """
    permission_classes = [ IsAuthenticated ]

    def post( self, request : Request, booking_uuid : UUID ) -> Response:
        decision = get_str( request.data, F.STATUS )
        if not decision:
            return Response(
                { F.ERROR: M.is_required( 'Status' ) },
                status = status.HTTP_400_BAD_REQUEST,
            )
        result = BookingWorkflow().respond(
            actor = request.user,
            booking_uuid = booking_uuid,
            decision = decision,
        )
        return Response( BookingResponseResultSerializer( result ).data )
