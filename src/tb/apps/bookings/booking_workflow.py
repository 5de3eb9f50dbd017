import logging
from typing import List, Optional, Union
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils import timezone

from tb.apps.common.singleton import Singleton
from tb.apps.members.enums import MembershipStatus
from tb.apps.members.models import TripMember
from tb.apps.notify.enums import NotificationType
from tb.apps.notify.notification_manager import NotificationManager
from tb.apps.notify.schemas import NotificationPayload
from tb.apps.plans.access import PlanAccess
from tb.apps.plans.capabilities import Capability
from tb.apps.plans.enums import TripRole
from tb.apps.plans.models import TravelPlan
from tb.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)

from .enums import BookingStatus
from .models import BookingRequest
from .schemas import BookingResponseResult

logger = logging.getLogger(__name__)


class BookingWorkflow( Singleton ):
    """
    Request/approval path for users who want to join a plan they were not
    invited to.

    Approval is the one multi-write operation of membership handling: the
    booking status change and the new VIEWER membership commit together
    or not at all.  Notifications are sent only after the writes commit.
    """

    # Role granted on approval.  Approvers cannot choose it.
    APPROVED_MEMBER_ROLE = TripRole.VIEWER

    PENDING_EXISTS_MESSAGE = 'You already have a pending request for this plan.'
    ALREADY_MEMBER_MESSAGE = 'You are already a member of this plan.'
    BOOKING_NOT_FOUND_MESSAGE = 'Booking request not found.'

    def request_to_join( self,
                         actor,
                         plan_uuid  : UUID,
                         message    : Optional[ str ] = None ) -> BookingRequest:
        if not actor or not actor.is_authenticated:
            raise UnauthorizedError( 'Authentication required to request to join a plan.' )

        with transaction.atomic():
            # Row lock serializes concurrent requests for the same plan
            plan = PlanAccess.get_plan( plan_uuid, for_update = True )

            if not plan.visibility.accepts_join_requests:
                raise ForbiddenError(
                    'Cannot request to join a private plan. You must receive an invitation.'
                )
            if TripMember.objects.get_joined( plan_id = plan.pk, user = actor ):
                raise BadRequestError( self.ALREADY_MEMBER_MESSAGE )
            if BookingRequest.objects.pending_for( plan = plan, user = actor ).exists():
                raise BadRequestError( self.PENDING_EXISTS_MESSAGE )

            try:
                with transaction.atomic():
                    booking = BookingRequest.objects.create(
                        plan = plan,
                        user = actor,
                        message = message or '',
                        status = BookingStatus.PENDING,
                    )
            except IntegrityError:
                raise BadRequestError( self.PENDING_EXISTS_MESSAGE )

        logger.info( f'User {actor} requested to join plan {plan.pk} (booking {booking.pk})' )
        self._notify_plan_managers_of_request( plan = plan, booking = booking )
        return booking

    def list_my_requests( self, actor ) -> List[ BookingRequest ]:
        return list( BookingRequest.objects.for_user( actor )
                     .select_related( 'plan', 'user', 'responded_by' )
                     .order_by( '-created_datetime', '-pk' ))

    def list_pending_for_plan( self, actor, plan_uuid : UUID ) -> List[ BookingRequest ]:
        plan = PlanAccess.get_plan( plan_uuid )
        PlanAccess.assert_capability(
            actor,
            plan.pk,
            Capability.CAN_MANAGE_MEMBERS,
            'You do not have permission to view booking requests for this plan.',
        )
        return list( BookingRequest.objects.pending()
                     .for_plan( plan )
                     .select_related( 'plan', 'user', 'responded_by' )
                     .order_by( 'created_datetime', 'pk' ))

    def respond( self,
                 actor,
                 booking_uuid  : UUID,
                 decision      : Union[ BookingStatus, str ] ) -> BookingResponseResult:
        decision = self._parse_decision( decision )
        booking = self._get_booking( booking_uuid )
        self._assert_pending( booking )
        PlanAccess.assert_capability(
            actor,
            booking.plan_id,
            Capability.CAN_MANAGE_MEMBERS,
            'You do not have permission to respond to booking requests.',
        )

        with transaction.atomic():
            # Re-check under lock: another manager may have responded meanwhile
            booking = BookingRequest.objects.select_for_update().select_related(
                'plan', 'user',
            ).get( pk = booking.pk )
            self._assert_pending( booking )

            booking.status = decision
            booking.responded_by = actor
            booking.responded_datetime = timezone.now()
            booking.save( update_fields = [ 'status', 'responded_by', 'responded_datetime',
                                            'modified_datetime' ] )

            if decision == BookingStatus.APPROVED:
                trip_member = self._grant_membership( actor = actor, booking = booking )
            else:
                trip_member = None

        logger.info( f'User {actor} {decision} booking {booking.pk} on plan {booking.plan_id}' )
        self._notify_requester_of_decision( booking = booking )
        return BookingResponseResult(
            booking = booking,
            member = trip_member,
        )

    def cancel( self, actor, booking_uuid : UUID ) -> None:
        booking = self._get_booking( booking_uuid )
        if not actor.is_authenticated or ( booking.user_id != actor.pk ):
            raise ForbiddenError( 'You can only cancel your own booking requests.' )
        if not booking.status.is_pending:
            raise BadRequestError( 'Only pending requests can be cancelled.' )

        booking.delete()
        logger.info( f'User {actor} cancelled booking request on plan {booking.plan_id}' )
        return

    def _grant_membership( self, actor, booking : BookingRequest ) -> TripMember:
        """
        Must run inside the approval transaction.  A row left behind in a
        non-joined status is re-activated rather than duplicated.
        """
        stale_member = TripMember.objects.select_for_update().filter(
            plan_id = booking.plan_id,
            user_id = booking.user_id,
        ).exclude( status = MembershipStatus.JOINED ).first()

        if stale_member:
            stale_member.role = self.APPROVED_MEMBER_ROLE
            stale_member.status = MembershipStatus.JOINED
            stale_member.added_by = actor
            stale_member.save( update_fields = [ 'role', 'status', 'added_by' ] )
            return stale_member

        try:
            with transaction.atomic():
                return TripMember.objects.create(
                    plan_id = booking.plan_id,
                    user_id = booking.user_id,
                    role = self.APPROVED_MEMBER_ROLE,
                    status = MembershipStatus.JOINED,
                    added_by = actor,
                )
        except IntegrityError:
            raise ConflictError( 'User is already a member of this plan.' )

    def _notify_plan_managers_of_request( self, plan : TravelPlan, booking : BookingRequest ) -> None:
        admin_user_ids = TripMember.objects.joined().for_plan( plan ).with_role(
            TripRole.ADMIN,
        ).values_list( 'user_id', flat = True )

        NotificationManager().notify_users(
            user_ids = [ plan.owner_id ] + list( admin_user_ids ),
            payload = NotificationPayload(
                notification_type = NotificationType.INVITATION_RECEIVED,
                title = 'New join request for your travel plan',
                message = f'{booking.user.display_name} wants to join "{plan.title}"',
                data = {
                    'plan_id': str( plan.uuid ),
                    'booking_id': str( booking.uuid ),
                    'user_id': str( booking.user.uuid ),
                },
            ),
        )
        return

    def _notify_requester_of_decision( self, booking : BookingRequest ) -> None:
        if booking.status == BookingStatus.APPROVED:
            payload = NotificationPayload(
                notification_type = NotificationType.INVITATION_ACCEPTED,
                title = 'Your join request was approved!',
                message = f'You are now a member of "{booking.plan.title}"',
            )
        else:
            payload = NotificationPayload(
                notification_type = NotificationType.INVITATION_DECLINED,
                title = 'Join request declined',
                message = f'Your request to join "{booking.plan.title}" was declined',
            )
        payload.data = {
            'plan_id': str( booking.plan.uuid ),
            'booking_id': str( booking.uuid ),
        }
        NotificationManager().notify_user( user_id = booking.user_id, payload = payload )
        return

    def _get_booking( self, booking_uuid : UUID ) -> BookingRequest:
        try:
            return BookingRequest.objects.select_related( 'plan', 'user' ).get( uuid = booking_uuid )
        except ( BookingRequest.DoesNotExist, ValidationError ):
            raise NotFoundError( self.BOOKING_NOT_FOUND_MESSAGE )

    def _assert_pending( self, booking : BookingRequest ) -> None:
        if not booking.status.is_pending:
            raise BadRequestError(
                f'This booking has already been {booking.status.label.lower()}.'
            )
        return

    def _parse_decision( self, decision : Union[ BookingStatus, str ] ) -> BookingStatus:
        try:
            decision = BookingStatus.coerce( decision )
        except ValueError:
            decision = None
        if not decision or not decision.is_decision:
            raise BadRequestError( 'Decision must be APPROVED or REJECTED.' )
        return decision
