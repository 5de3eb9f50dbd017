from django.contrib import admin

from . import models


@admin.register( models.TripMember )
class TripMemberAdmin( admin.ModelAdmin ):

    show_full_result_count = False

    list_display = (
        'user',
        'plan',
        'role',
        'status',
        'joined_datetime',
    )
    list_filter = ( 'role', 'status' )
    search_fields = [ 'user__email', 'plan__title' ]
    readonly_fields = ( 'uuid', 'joined_datetime' )
