import uuid

from django.conf import settings
from django.db import models

from tb.apps.common.model_fields import LabeledEnumField
from tb.apps.plans.capabilities import CapabilitySet, capabilities_for_role
from tb.apps.plans.enums import TripRole
from tb.apps.plans.models import TravelPlan

from .enums import MembershipStatus
from . import managers


class TripMember( models.Model ):
    """
    Binds one user to one plan with a role.  At most one row per
    (plan, user), enforced by the database so concurrent adds cannot
    both succeed.
    """
    objects = managers.TripMemberManager()

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    plan = models.ForeignKey(
        TravelPlan,
        on_delete = models.CASCADE,
        related_name = 'members',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'plan_memberships',
    )
    role = LabeledEnumField(
        TripRole,
        'Role',
    )
    status = LabeledEnumField(
        MembershipStatus,
        'Status',
    )
    added_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.SET_NULL,
        null = True,
        related_name = 'plan_members_added',
    )
    joined_datetime = models.DateTimeField( auto_now_add = True )

    class Meta:
        verbose_name = 'Trip Member'
        verbose_name_plural = 'Trip Members'
        constraints = [
            models.UniqueConstraint(
                fields = [ 'plan', 'user' ],
                name = 'tripmember_plan_user',
            ),
        ]

    def __str__(self):
        return f'{self.user} - {self.plan.title} ({self.role})'

    @property
    def capabilities(self) -> CapabilitySet:
        return capabilities_for_role( self.role )

    @property
    def is_owner(self) -> bool:
        return self.role.is_owner
