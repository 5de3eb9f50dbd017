from typing import Any, Dict

from rest_framework import serializers

from tb.apps.api.constants import APIFields as F
from tb.apps.bookings.models import BookingRequest
from tb.apps.bookings.schemas import BookingResponseResult
from tb.apps.members.api.serializers import TripMemberSerializer
from tb.apps.plans.api.serializers import user_summary


class BookingRequestSerializer( serializers.Serializer ):

    plan_uuid = serializers.UUIDField()
    message = serializers.CharField( required = False, allow_blank = True, allow_null = True )

    def to_representation( self, instance : BookingRequest ) -> Dict[ str, Any ]:
        if instance.responded_datetime:
            responded_datetime = instance.responded_datetime.isoformat()
        else:
            responded_datetime = None
        return {
            F.UUID: str( instance.uuid ),
            F.PLAN: {
                F.UUID: str( instance.plan.uuid ),
                F.TITLE: instance.plan.title,
            },
            F.USER: user_summary( instance.user ),
            F.MESSAGE: instance.message,
            F.STATUS: instance.status.name,
            F.RESPONDED_BY: user_summary( instance.responded_by ),
            F.RESPONDED_DATETIME: responded_datetime,
            F.CREATED_DATETIME: instance.created_datetime.isoformat(),
        }


class BookingResponseResultSerializer( serializers.BaseSerializer ):

    def to_representation( self, instance : BookingResponseResult ) -> Dict[ str, Any ]:
        if instance.member:
            member_data = TripMemberSerializer( instance.member ).data
        else:
            member_data = None
        return {
            F.BOOKING: BookingRequestSerializer( instance.booking ).data,
            F.MEMBER: member_data,
        }
