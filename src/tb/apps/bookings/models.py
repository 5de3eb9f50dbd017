import uuid

from django.conf import settings
from django.db import models

from tb.apps.common.model_fields import LabeledEnumField

from .enums import BookingStatus
from . import managers


class BookingRequest( models.Model ):
    """
    A non-member's request to join a plan.  The database allows at most
    one PENDING request per (plan, user); resolved requests are kept as
    history.
    """
    objects = managers.BookingRequestManager()

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    plan = models.ForeignKey(
        'plans.TravelPlan',
        on_delete = models.CASCADE,
        related_name = 'booking_requests',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'booking_requests',
    )
    message = models.TextField(
        blank = True,
    )
    status = LabeledEnumField(
        BookingStatus,
        'Status',
    )
    responded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.SET_NULL,
        null = True,
        blank = True,
        related_name = 'booking_requests_responded',
    )
    responded_datetime = models.DateTimeField(
        null = True,
        blank = True,
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Booking Request'
        verbose_name_plural = 'Booking Requests'
        constraints = [
            models.UniqueConstraint(
                fields = [ 'plan', 'user' ],
                condition = models.Q( status = 'pending' ),
                name = 'bookingrequest_one_pending_per_plan_user',
            ),
        ]

    def __str__(self):
        return f'{self.user} -> {self.plan.title} ({self.status})'
