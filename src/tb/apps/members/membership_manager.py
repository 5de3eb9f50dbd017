import logging
from typing import List, Union
from uuid import UUID

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from tb.apps.common.singleton import Singleton
from tb.apps.notify.enums import NotificationType
from tb.apps.notify.notification_manager import NotificationManager
from tb.apps.notify.schemas import NotificationPayload
from tb.apps.plans.access import PlanAccess
from tb.apps.plans.capabilities import Capability
from tb.apps.plans.enums import TripRole
from tb.apps.plans.models import TravelPlan
from tb.exceptions import BadRequestError, ConflictError, NotFoundError

from .enums import MembershipStatus
from .models import TripMember

User = get_user_model()
logger = logging.getLogger(__name__)


class MembershipManager( Singleton ):
    """
    Creates, lists, re-roles and removes plan memberships.

    The OWNER membership is outside its reach: it is created together with
    the plan and can be neither granted, changed nor removed here.
    """

    ALREADY_MEMBER_MESSAGE = 'User is already a member of this plan.'
    ASSIGN_OWNER_MESSAGE = 'Cannot assign OWNER role. OWNER is set automatically when creating a plan.'
    CHANGE_OWNER_MESSAGE = 'Cannot change the role of the plan owner.'
    REMOVE_OWNER_MESSAGE = 'Cannot remove the plan owner. Transfer ownership first or delete the plan.'
    MEMBER_NOT_FOUND_MESSAGE = 'Trip member not found.'

    def add_member( self,
                    actor,
                    plan_uuid         : UUID,
                    target_user_uuid  : UUID,
                    role              : Union[ TripRole, str ] ) -> TripMember:
        role = self._parse_assignable_role( role )
        plan = PlanAccess.get_plan( plan_uuid )
        PlanAccess.assert_capability( actor, plan.pk, Capability.CAN_INVITE )

        try:
            target_user = User.objects.get( uuid = target_user_uuid )
        except ( User.DoesNotExist, ValidationError ):
            raise NotFoundError( 'User not found.' )

        return self._create_membership( actor = actor, plan = plan, target_user = target_user, role = role )

    def add_member_by_email( self,
                             actor,
                             plan_uuid  : UUID,
                             email      : str,
                             role       : Union[ TripRole, str ] ) -> TripMember:
        role = self._parse_assignable_role( role )
        plan = PlanAccess.get_plan( plan_uuid )
        PlanAccess.assert_capability( actor, plan.pk, Capability.CAN_INVITE )

        target_user = User.objects.filter( email__iexact = ( email or '' ).strip() ).first()
        if not target_user:
            raise NotFoundError( 'User with this email not found.' )

        return self._create_membership( actor = actor, plan = plan, target_user = target_user, role = role )

    def list_members( self, actor, plan_uuid : UUID ) -> List[ TripMember ]:
        plan = PlanAccess.get_plan( plan_uuid )
        PlanAccess.assert_can_view(
            actor,
            plan,
            message = 'You are not allowed to view members of this plan.',
        )
        return list( TripMember.objects.joined()
                     .for_plan( plan )
                     .select_related( 'plan', 'user', 'added_by' )
                     .in_display_order() )

    def update_role( self,
                     actor,
                     member_uuid  : UUID,
                     new_role     : Union[ TripRole, str ] ) -> TripMember:
        new_role = self._parse_role( new_role )
        trip_member = self._get_member( member_uuid )
        PlanAccess.assert_capability( actor, trip_member.plan_id, Capability.CAN_MANAGE_MEMBERS )

        if trip_member.is_owner:
            raise BadRequestError( self.CHANGE_OWNER_MESSAGE )
        if new_role.is_owner:
            raise BadRequestError( self.ASSIGN_OWNER_MESSAGE )

        previous_role = trip_member.role
        trip_member.role = new_role
        trip_member.save( update_fields = [ 'role' ] )

        logger.info( f'User {actor} changed role of member {trip_member.pk} on plan'
                     f' {trip_member.plan_id} from {previous_role} to {new_role}' )
        return trip_member

    def remove_member( self, actor, member_uuid : UUID ) -> TripMember:
        trip_member = self._get_member( member_uuid )

        if trip_member.is_owner:
            raise BadRequestError( self.REMOVE_OWNER_MESSAGE )

        is_self_removal = bool( actor.is_authenticated and ( actor.pk == trip_member.user_id ))
        if not is_self_removal:
            PlanAccess.assert_capability( actor, trip_member.plan_id, Capability.CAN_MANAGE_MEMBERS )

        trip_member.delete()

        if is_self_removal:
            logger.info( f'User {actor} left plan {trip_member.plan_id}' )
        else:
            logger.info( f'User {actor} removed {trip_member.user} from plan {trip_member.plan_id}' )
        return trip_member

    def _create_membership( self, actor, plan : TravelPlan, target_user, role : TripRole ) -> TripMember:
        if TripMember.objects.filter( plan = plan, user = target_user ).exists():
            raise ConflictError( self.ALREADY_MEMBER_MESSAGE )

        try:
            with transaction.atomic():
                trip_member = TripMember.objects.create(
                    plan = plan,
                    user = target_user,
                    role = role,
                    status = MembershipStatus.JOINED,
                    added_by = actor,
                )
        except IntegrityError:
            # Lost a race with a concurrent add of the same user
            raise ConflictError( self.ALREADY_MEMBER_MESSAGE )

        logger.info( f'User {actor} added {target_user} to plan {plan.pk} as {role}' )

        NotificationManager().notify_user(
            user_id = plan.owner_id,
            payload = NotificationPayload(
                notification_type = NotificationType.MEMBER_JOINED,
                title = 'New member joined your travel plan',
                message = f'{target_user.display_name} joined "{plan.title}"',
                data = {
                    'plan_id': str( plan.uuid ),
                    'member_id': str( trip_member.uuid ),
                },
            ),
        )
        return trip_member

    def _get_member( self, member_uuid : UUID ) -> TripMember:
        try:
            return TripMember.objects.select_related( 'plan', 'user' ).get( uuid = member_uuid )
        except ( TripMember.DoesNotExist, ValidationError ):
            raise NotFoundError( self.MEMBER_NOT_FOUND_MESSAGE )

    def _parse_role( self, role : Union[ TripRole, str ] ) -> TripRole:
        try:
            return TripRole.coerce( role )
        except ValueError:
            raise BadRequestError( f'Unknown role "{role}".' )

    def _parse_assignable_role( self, role : Union[ TripRole, str ] ) -> TripRole:
        role = self._parse_role( role )
        if role.is_owner:
            raise BadRequestError( self.ASSIGN_OWNER_MESSAGE )
        return role
