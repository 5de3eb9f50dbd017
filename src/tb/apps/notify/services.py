import logging
from typing import List
from uuid import UUID

from django.core.exceptions import ValidationError

from tb.exceptions import NotFoundError

from .models import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Reading side of a user's notification inbox.  A user only ever sees
    or changes their own notifications; anyone else's are reported as
    not found.
    """

    NOT_FOUND_MESSAGE = 'Notification not found.'

    @classmethod
    def list_for_user( cls, user, unread_only : bool = False ) -> List[ Notification ]:
        if unread_only:
            return list( Notification.objects.unread_for_user( user ))
        return list( Notification.objects.for_user( user ))

    @classmethod
    def unread_count( cls, user ) -> int:
        return Notification.objects.unread_for_user( user ).count()

    @classmethod
    def mark_read( cls, user, notification_uuid : UUID ) -> Notification:
        try:
            notification = Notification.objects.for_user( user ).get( uuid = notification_uuid )
        except ( Notification.DoesNotExist, ValidationError ):
            raise NotFoundError( cls.NOT_FOUND_MESSAGE )

        if not notification.is_read:
            notification.is_read = True
            notification.save( update_fields = [ 'is_read' ] )
        return notification

    @classmethod
    def mark_all_read( cls, user ) -> int:
        updated_count = Notification.objects.unread_for_user( user ).update( is_read = True )
        logger.debug( f'Marked {updated_count} notifications read for {user}' )
        return updated_count
