from django.contrib import admin

from . import models


@admin.register( models.Notification )
class NotificationAdmin( admin.ModelAdmin ):

    show_full_result_count = False

    list_display = (
        'user',
        'notification_type',
        'title',
        'is_read',
        'created_datetime',
    )
    list_filter = ( 'notification_type', 'is_read' )
    search_fields = [ 'user__email', 'title' ]
    readonly_fields = ( 'uuid', 'created_datetime' )
