from django.db import models


class NotificationRecordManager(models.Manager):

    def for_user(self, user):
        return self.filter( user = user ).order_by( '-created_datetime', '-pk' )

    def unread_for_user(self, user):
        return self.for_user( user ).filter( is_read = False )
