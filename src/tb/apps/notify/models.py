import uuid

from django.conf import settings
from django.db import models

from tb.apps.common.model_fields import LabeledEnumField

from .enums import NotificationType
from . import managers


class Notification( models.Model ):

    objects = managers.NotificationRecordManager()

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'notifications',
    )
    notification_type = LabeledEnumField(
        NotificationType,
        'Type',
    )
    title = models.CharField(
        max_length = 255,
    )
    message = models.TextField(
        blank = True,
    )
    data = models.JSONField(
        default = dict,
        blank = True,
    )
    is_read = models.BooleanField(
        default = False,
    )
    created_datetime = models.DateTimeField(
        'Created',
        auto_now_add = True,
        db_index = True,
    )

    class Meta:
        verbose_name = 'Notification'
        verbose_name_plural = 'Notifications'

    def __str__(self):
        return f'{self.user} - {self.title}'
