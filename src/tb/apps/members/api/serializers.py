from typing import Any, Dict

from rest_framework import serializers

from tb.apps.api.constants import APIFields as F
from tb.apps.members.models import TripMember
from tb.apps.plans.api.serializers import user_summary


class TripMemberSerializer( serializers.BaseSerializer ):

    def to_representation( self, instance : TripMember ) -> Dict[ str, Any ]:
        return {
            F.UUID: str( instance.uuid ),
            F.PLAN_UUID: str( instance.plan.uuid ),
            F.USER: user_summary( instance.user ),
            F.ROLE: instance.role.name,
            F.STATUS: instance.status.name,
            F.ADDED_BY: user_summary( instance.added_by ),
            F.JOINED_DATETIME: instance.joined_datetime.isoformat(),
            F.CAPABILITIES: instance.capabilities.to_dict(),
        }
