from django.urls import path

from . import views


urlpatterns = [
    path( '', views.BookingCollectionView.as_view(), name = 'api_booking_collection' ),
    path( 'mine/', views.MyBookingCollectionView.as_view(), name = 'api_booking_mine' ),
    path( '<uuid:booking_uuid>/', views.BookingItemView.as_view(), name = 'api_booking_item' ),
    path(
        '<uuid:booking_uuid>/respond/',
        views.BookingRespondView.as_view(),
        name = 'api_booking_respond',
    ),
]
