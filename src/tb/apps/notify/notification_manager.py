import logging
from typing import Iterable, List, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction

from tb.apps.common.background_tasks import BackgroundTaskRunner
from tb.apps.common.singleton import Singleton
from tb.exceptions import NotFoundError

from .models import Notification
from .schemas import NotificationPayload

User = get_user_model()
logger = logging.getLogger(__name__)


class NotificationManager( Singleton ):
    """
    Best-effort notification fan-out.

    Callers use the default non_blocking mode: delivery is queued to run
    after the caller's transaction commits, on a background thread, and its
    outcome (including any failure) never reaches the caller.  Blocking
    mode delivers immediately and returns the number of recipients reached.
    Either way, each recipient is delivered independently, so one failure
    does not stop the others.
    """

    def notify_user( self,
                     user_id       : int,
                     payload       : NotificationPayload,
                     non_blocking  : bool = True ) -> Optional[ int ]:
        return self.notify_users(
            user_ids = [ user_id ],
            payload = payload,
            non_blocking = non_blocking,
        )

    def notify_users( self,
                      user_ids      : Iterable[ int ],
                      payload       : NotificationPayload,
                      non_blocking  : bool = True ) -> Optional[ int ]:
        user_ids = self._unique_ids( user_ids )
        if not self.is_enabled:
            logger.debug( f'Notifications disabled. Dropping: {payload.title}' )
            return 0
        if non_blocking:
            BackgroundTaskRunner().run_after_commit(
                f'notify_users[{payload.notification_type}]',
                self._deliver_all,
                user_ids,
                payload,
            )
            return None
        return self._deliver_all( user_ids, payload )

    def notify_plan_members( self,
                             plan_id          : int,
                             exclude_user_id  : Optional[ int ],
                             payload          : NotificationPayload,
                             non_blocking     : bool = True ) -> Optional[ int ]:
        if not self.is_enabled:
            logger.debug( f'Notifications disabled. Dropping: {payload.title}' )
            return 0
        if non_blocking:
            BackgroundTaskRunner().run_after_commit(
                f'notify_plan_members[{payload.notification_type}]',
                self._deliver_to_plan_members,
                plan_id,
                exclude_user_id,
                payload,
            )
            return None
        return self._deliver_to_plan_members( plan_id, exclude_user_id, payload )

    @property
    def is_enabled(self) -> bool:
        return bool( settings.NOTIFICATIONS_ENABLED )

    def _deliver_to_plan_members( self,
                                  plan_id          : int,
                                  exclude_user_id  : Optional[ int ],
                                  payload          : NotificationPayload ) -> int:
        from tb.apps.members.models import TripMember

        user_ids = TripMember.objects.joined().filter(
            plan_id = plan_id,
        ).exclude(
            user_id = exclude_user_id,
        ).values_list( 'user_id', flat = True )
        return self._deliver_all( list( user_ids ), payload )

    def _deliver_all( self, user_ids : List[ int ], payload : NotificationPayload ) -> int:
        delivered_count = 0
        for user_id in user_ids:
            try:
                with transaction.atomic():
                    self._deliver( user_id, payload )
                delivered_count += 1
            except Exception:
                logger.exception( f'Failed to notify user {user_id}: {payload.title}' )
            continue
        return delivered_count

    def _deliver( self, user_id : int, payload : NotificationPayload ) -> Notification:
        if not User.objects.filter( pk = user_id ).exists():
            raise NotFoundError( 'User not found.' )

        notification = Notification.objects.create(
            user_id = user_id,
            notification_type = payload.notification_type,
            title = payload.title,
            message = payload.message or '',
            data = payload.data or {},
        )
        logger.debug( f'Notified user {user_id}: {payload.title}' )
        return notification

    def _unique_ids( self, user_ids : Iterable[ int ] ) -> List[ int ]:
        return [ x for x in dict.fromkeys( user_ids ) if x is not None ]
