from uuid import UUID

from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from tb.apps.api.constants import APIFields as F
from tb.apps.api.utils import get_bool
from tb.apps.api.views import TbApiView
from tb.apps.notify.services import NotificationService

from .serializers import NotificationSerializer


class NotificationCollectionView( TbApiView ):
    """
    GET /api/v1/notifications/?unread=true
    The caller's notifications, newest first.
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request : Request ) -> Response:
        notifications = NotificationService.list_for_user(
            request.user,
            unread_only = get_bool( request.query_params, F.UNREAD ),
        )
        return Response( NotificationSerializer( notifications, many = True ).data )


class NotificationUnreadCountView( TbApiView ):

    permission_classes = [ IsAuthenticated ]

    def get( self, request : Request ) -> Response:
        return Response({
            F.UNREAD_COUNT: NotificationService.unread_count( request.user ),
        })


class NotificationReadView( TbApiView ):

    permission_classes = [ IsAuthenticated ]

    def post( self, request : Request, notification_uuid : UUID ) -> Response:
        notification = NotificationService.mark_read( request.user, notification_uuid )
        return Response( NotificationSerializer( notification ).data )


class NotificationReadAllView( TbApiView ):

    permission_classes = [ IsAuthenticated ]

    def post( self, request : Request ) -> Response:
        return Response({
            F.UPDATED_COUNT: NotificationService.mark_all_read( request.user ),
        })
