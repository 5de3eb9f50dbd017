from django.db import models, transaction


class TravelPlanManager(models.Manager):

    def for_user(self, user):
        """Get all plans where user is a joined member (any role)."""
        from tb.apps.members.enums import MembershipStatus
        return self.filter(
            members__user = user,
            members__status = MembershipStatus.JOINED,
        ).distinct()

    def create_with_owner(self, owner, **plan_fields):
        """
        Create a new plan together with its single OWNER membership.

        Both rows are written in one transaction; this is the only code
        path that ever creates an OWNER membership.

        Example:
            plan = TravelPlan.objects.create_with_owner(
                owner = request.user,
                title = 'Summer in Lisbon',
                visibility = PlanVisibility.PUBLIC,
            )
        """
        from tb.apps.members.enums import MembershipStatus
        from tb.apps.members.models import TripMember
        from .enums import TripRole

        with transaction.atomic():
            plan = self.create( owner = owner, **plan_fields )

            TripMember.objects.create(
                plan = plan,
                user = owner,
                role = TripRole.OWNER,
                status = MembershipStatus.JOINED,
                added_by = owner,
            )

        return plan
