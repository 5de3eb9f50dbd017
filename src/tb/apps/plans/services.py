import logging
from typing import Any, Dict, List
from uuid import UUID

from .access import PlanAccess, ResolvedAccess
from .models import TravelPlan

logger = logging.getLogger(__name__)


class TravelPlanService:
    """
    Plan lifecycle operations.  Authorization for each goes through
    PlanAccess; the owner is fixed at creation.
    """

    EDITABLE_FIELDS = ( 'title', 'description', 'visibility' )

    @classmethod
    def create( cls, owner, validated_data : Dict[ str, Any ] ) -> TravelPlan:
        plan = TravelPlan.objects.create_with_owner(
            owner = owner,
            **cls._editable_fields( validated_data ),
        )
        logger.info( f'User {owner} created plan {plan.pk}' )
        return plan

    @classmethod
    def list_for_user( cls, user ) -> List[ TravelPlan ]:
        return list( TravelPlan.objects.for_user( user ).select_related( 'owner' ))

    @classmethod
    def get_for_viewing( cls, user, plan_uuid : UUID ) -> TravelPlan:
        plan = PlanAccess.get_plan( plan_uuid )
        PlanAccess.assert_can_view( user, plan )
        return plan

    @classmethod
    def get_access( cls, user, plan_uuid : UUID ) -> ResolvedAccess:
        plan = PlanAccess.get_plan( plan_uuid )
        return PlanAccess.resolve( user, plan.pk )

    @classmethod
    def update( cls, user, plan_uuid : UUID, validated_data : Dict[ str, Any ] ) -> TravelPlan:
        plan = PlanAccess.get_plan( plan_uuid )
        PlanAccess.assert_can_edit( user, plan )

        changed_fields = cls._editable_fields( validated_data )
        for field_name, value in changed_fields.items():
            setattr( plan, field_name, value )
            continue
        if changed_fields:
            plan.save( update_fields = list( changed_fields.keys() ) + [ 'modified_datetime' ] )
            logger.info( f'User {user} updated plan {plan.pk}: {sorted( changed_fields.keys() )}' )
        return plan

    @classmethod
    def delete( cls, user, plan_uuid : UUID ) -> None:
        plan = PlanAccess.get_plan( plan_uuid )
        PlanAccess.assert_can_delete( user, plan )
        plan_id = plan.pk
        plan.delete()
        logger.info( f'User {user} deleted plan {plan_id}' )
        return

    @classmethod
    def _editable_fields( cls, validated_data : Dict[ str, Any ] ) -> Dict[ str, Any ]:
        return { key: value for key, value in validated_data.items()
                 if key in cls.EDITABLE_FIELDS }
