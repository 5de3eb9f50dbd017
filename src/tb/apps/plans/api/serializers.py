from typing import Any, Dict, Optional

from rest_framework import serializers

from tb.apps.api.constants import APIFields as F
from tb.apps.plans.access import ResolvedAccess
from tb.apps.plans.enums import PlanVisibility
from tb.apps.plans.models import TravelPlan


def user_summary( user ) -> Optional[ Dict[ str, Any ] ]:
    if not user:
        return None
    return {
        F.UUID: str( user.uuid ),
        F.EMAIL: user.email,
        F.DISPLAY_NAME: user.display_name,
    }


class TravelPlanSerializer( serializers.Serializer ):
    """
    Explicit serializer for TravelPlan with manual field mapping.  The
    owner is read-only: it is the creating user and never changes.
    """
    uuid = serializers.UUIDField( read_only = True )
    title = serializers.CharField( max_length = 200 )
    description = serializers.CharField( required = False, allow_blank = True )
    visibility = serializers.CharField( required = False )

    def validate_visibility( self, value : str ) -> PlanVisibility:
        try:
            return PlanVisibility.from_name( value )
        except ValueError:
            names = ', '.join( x.name for x in PlanVisibility )
            raise serializers.ValidationError( f'Must be one of: {names}' )

    def to_representation( self, instance : TravelPlan ) -> Dict[ str, Any ]:
        return {
            F.UUID: str( instance.uuid ),
            F.TITLE: instance.title,
            F.DESCRIPTION: instance.description,
            F.VISIBILITY: instance.visibility.name,
            F.OWNER: user_summary( instance.owner ),
            F.CREATED_DATETIME: instance.created_datetime.isoformat(),
            F.MODIFIED_DATETIME: instance.modified_datetime.isoformat(),
        }


class ResolvedAccessSerializer( serializers.BaseSerializer ):

    def to_representation( self, instance : ResolvedAccess ) -> Dict[ str, Any ]:
        return {
            F.PRINCIPAL: instance.principal_kind.value,
            F.ROLE: instance.role.name if instance.role else None,
            F.IS_MEMBER: instance.is_member,
            F.CAPABILITIES: instance.capabilities.to_dict(),
        }
