from django.db import models

from .enums import BookingStatus


class BookingRequestQuerySet(models.QuerySet):

    def for_user(self, user):
        return self.filter( user = user )

    def for_plan(self, plan):
        return self.filter( plan = plan )

    def pending(self):
        return self.filter( status = BookingStatus.PENDING )

    def pending_for(self, plan, user):
        return self.pending().filter( plan = plan, user = user )


class BookingRequestManager(models.Manager.from_queryset(BookingRequestQuerySet)):
    pass
