"""
Capability resolution for "what may this user do on this plan?".

Every feature module guards its privileged actions through PlanAccess
rather than inspecting roles or memberships itself.
"""
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError

from tb.exceptions import ForbiddenError, NotFoundError, UnauthorizedError

from .capabilities import NO_CAPABILITIES, Capability, CapabilitySet, ROLE_CAPABILITIES
from .enums import TripRole
from .models import TravelPlan

logger = logging.getLogger(__name__)


class PrincipalKind( Enum ):

    SYSTEM_ADMIN  = 'system_admin'
    MEMBER        = 'member'
    NON_MEMBER    = 'non_member'


@dataclass( frozen = True )
class ResolvedAccess:

    principal_kind  : PrincipalKind
    membership      : Optional[ 'TripMember' ]  # noqa: F821
    capabilities    : CapabilitySet

    @property
    def role(self) -> Optional[ TripRole ]:
        if self.membership:
            return self.membership.role
        return None

    @property
    def is_member(self) -> bool:
        return bool( self.membership is not None )

    @property
    def bypasses_membership(self) -> bool:
        return bool( self.principal_kind == PrincipalKind.SYSTEM_ADMIN )


class PlanAccess:

    PLAN_NOT_FOUND_MESSAGE = 'Travel plan not found.'

    @classmethod
    def get_plan( cls, plan_uuid : UUID, for_update : bool = False ) -> TravelPlan:
        queryset = TravelPlan.objects.all()
        if for_update:
            queryset = queryset.select_for_update()
        try:
            return queryset.get( uuid = plan_uuid )
        except ( TravelPlan.DoesNotExist, ValidationError ):
            raise NotFoundError( cls.PLAN_NOT_FOUND_MESSAGE )

    @classmethod
    def resolve( cls, user, plan_id : int ) -> ResolvedAccess:
        """
        Effective capabilities of user on the plan.  Never raises: callers
        without a membership (including anonymous ones, or a plan that does
        not exist) get the no-permission baseline.
        """
        from tb.apps.members.models import TripMember

        if cls._is_system_admin( user ):
            membership = None
            principal_kind = PrincipalKind.SYSTEM_ADMIN
        else:
            membership = TripMember.objects.get_joined( plan_id = plan_id, user = user )
            if membership:
                principal_kind = PrincipalKind.MEMBER
            else:
                principal_kind = PrincipalKind.NON_MEMBER

        if principal_kind == PrincipalKind.SYSTEM_ADMIN:
            capabilities = ROLE_CAPABILITIES[ TripRole.OWNER ]
        elif principal_kind == PrincipalKind.MEMBER:
            capabilities = ROLE_CAPABILITIES[ membership.role ]
        elif principal_kind == PrincipalKind.NON_MEMBER:
            capabilities = NO_CAPABILITIES
        else:
            raise AssertionError( f'Unhandled principal kind: {principal_kind}' )

        return ResolvedAccess(
            principal_kind = principal_kind,
            membership = membership,
            capabilities = capabilities,
        )

    @classmethod
    def assert_capability( cls,
                           user,
                           plan_id     : int,
                           capability  : Capability,
                           message     : str = None ) -> ResolvedAccess:
        resolved_access = cls.resolve( user, plan_id )
        if not resolved_access.capabilities.allows( capability ):
            logger.debug( f'Denied {capability.value} on plan {plan_id} for {user}' )
            raise ForbiddenError(
                message or f'You do not have permission to {capability.description}.'
            )
        return resolved_access

    @classmethod
    def assert_can_view( cls,
                         user,
                         plan     : TravelPlan,
                         message  : str = 'You are not allowed to view this plan.' ) -> ResolvedAccess:
        """
        Read-visibility rule: public plans are readable by anyone; all other
        plans need an authenticated member.  System administrators get no
        exception here: their override covers capabilities, not membership.
        """
        resolved_access = cls.resolve( user, plan.pk )
        if plan.visibility.is_public:
            return resolved_access
        if not user or not user.is_authenticated:
            raise UnauthorizedError( 'Authentication required to view this plan.' )
        if not resolved_access.is_member:
            raise ForbiddenError( message )
        return resolved_access

    @classmethod
    def assert_can_edit( cls, user, plan : TravelPlan ) -> ResolvedAccess:
        return cls.assert_capability(
            user,
            plan.pk,
            Capability.CAN_EDIT_PLAN,
            'You are not allowed to modify this plan.',
        )

    @classmethod
    def assert_can_delete( cls, user, plan : TravelPlan ) -> ResolvedAccess:
        return cls.assert_capability(
            user,
            plan.pk,
            Capability.CAN_DELETE_PLAN,
            'You are not allowed to delete this plan.',
        )

    @classmethod
    def _is_system_admin( cls, user ) -> bool:
        return bool( user
                     and user.is_authenticated
                     and getattr( user, 'is_system_admin', False ))
