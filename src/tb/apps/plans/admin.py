from django.contrib import admin

from tb.apps.members.models import TripMember

from . import models


class TripMemberInline( admin.TabularInline ):
    model = TripMember
    fk_name = 'plan'
    extra = 0
    show_change_link = True
    fields = ( 'user', 'role', 'status', 'added_by', 'joined_datetime' )
    readonly_fields = ( 'joined_datetime', )


@admin.register( models.TravelPlan )
class TravelPlanAdmin( admin.ModelAdmin ):

    show_full_result_count = False

    list_display = (
        'title',
        'owner',
        'visibility',
        'created_datetime',
    )
    search_fields = [ 'title', 'owner__email' ]
    readonly_fields = ( 'uuid', 'owner', 'created_datetime', 'modified_datetime' )
    inlines = [ TripMemberInline ]

    def get_readonly_fields( self, request, obj = None ):
        if obj is None:
            return ( 'uuid', 'created_datetime', 'modified_datetime' )
        return self.readonly_fields
