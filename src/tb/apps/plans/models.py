import uuid

from django.conf import settings
from django.db import models

from tb.apps.common.model_fields import LabeledEnumField

from .enums import PlanVisibility
from . import managers


class TravelPlan( models.Model ):
    """
    The shared trip entity.  Access is controlled via the TripMember role
    model; the owner is fixed at creation (see
    TravelPlanManager.create_with_owner) and never reassigned.
    """
    objects = managers.TravelPlanManager()

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    title = models.CharField(
        max_length = 200,
    )
    description = models.TextField(
        blank = True,
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'owned_plans',
    )
    visibility = LabeledEnumField(
        PlanVisibility,
        'Visibility',
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Travel Plan'
        verbose_name_plural = 'Travel Plans'
        ordering = [ '-created_datetime' ]

    @classmethod
    def from_db( cls, db, field_names, values ):
        instance = super().from_db( db, field_names, values )
        instance._loaded_owner_id = instance.__dict__.get( 'owner_id' )
        return instance

    def save( self, *args, **kwargs ):
        loaded_owner_id = getattr( self, '_loaded_owner_id', None )
        if loaded_owner_id is not None and loaded_owner_id != self.owner_id:
            raise ValueError( f'Owner of plan {self.pk} cannot be changed.' )
        super().save( *args, **kwargs )
        self._loaded_owner_id = self.owner_id
        return

    def __str__(self):
        return f'{self.title} [{self.pk}]'
