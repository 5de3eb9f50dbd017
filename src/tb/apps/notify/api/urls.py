from django.urls import path

from . import views


urlpatterns = [
    path( '', views.NotificationCollectionView.as_view(), name = 'api_notification_collection' ),
    path(
        'unread-count/',
        views.NotificationUnreadCountView.as_view(),
        name = 'api_notification_unread_count',
    ),
    path( 'read-all/', views.NotificationReadAllView.as_view(), name = 'api_notification_read_all' ),
    path(
        '<uuid:notification_uuid>/read/',
        views.NotificationReadView.as_view(),
        name = 'api_notification_read',
    ),
]
