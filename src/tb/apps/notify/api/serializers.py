from typing import Any, Dict

from rest_framework import serializers

from tb.apps.api.constants import APIFields as F
from tb.apps.notify.models import Notification


class NotificationSerializer( serializers.BaseSerializer ):

    def to_representation( self, instance : Notification ) -> Dict[ str, Any ]:
        return {
            F.UUID: str( instance.uuid ),
            F.NOTIFICATION_TYPE: instance.notification_type.name,
            F.TITLE: instance.title,
            F.MESSAGE: instance.message,
            F.DATA: instance.data,
            F.IS_READ: instance.is_read,
            F.CREATED_DATETIME: instance.created_datetime.isoformat(),
        }
