from django.urls import include, path


urlpatterns = [
    path( 'v1/plans/', include( 'tb.apps.plans.api.urls' )),
    path( 'v1/members/', include( 'tb.apps.members.api.urls' )),
    path( 'v1/bookings/', include( 'tb.apps.bookings.api.urls' )),
    path( 'v1/notifications/', include( 'tb.apps.notify.api.urls' )),
]
