from django.contrib import admin

from . import models


@admin.register( models.BookingRequest )
class BookingRequestAdmin( admin.ModelAdmin ):

    show_full_result_count = False

    list_display = (
        'user',
        'plan',
        'status',
        'created_datetime',
        'responded_by',
        'responded_datetime',
    )
    list_filter = ( 'status', )
    search_fields = [ 'user__email', 'plan__title' ]
    readonly_fields = ( 'uuid', 'created_datetime', 'modified_datetime' )
