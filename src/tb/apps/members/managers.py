from django.db import models

from tb.apps.plans.enums import TripRole

from .enums import MembershipStatus


class TripMemberQuerySet(models.QuerySet):

    def joined(self):
        return self.filter( status = MembershipStatus.JOINED )

    def for_plan(self, plan):
        return self.filter( plan = plan )

    def for_user(self, user):
        return self.filter( user = user )

    def with_role(self, role : TripRole):
        return self.filter( role = role )

    def in_display_order(self):
        """Role definition order (OWNER first), then earliest joined."""
        role_rank = models.Case(
            *[ models.When( role = role, then = models.Value( role.rank ))
               for role in TripRole ],
            output_field = models.IntegerField(),
        )
        return self.annotate( role_rank = role_rank ).order_by( 'role_rank', 'joined_datetime', 'pk' )


class TripMemberManager(models.Manager.from_queryset(TripMemberQuerySet)):

    def get_joined(self, plan_id : int, user):
        """The JOINED membership of user on the plan, or None."""
        if not user or not user.is_authenticated:
            return None
        return self.joined().select_related( 'plan' ).filter(
            plan_id = plan_id,
            user = user,
        ).first()
