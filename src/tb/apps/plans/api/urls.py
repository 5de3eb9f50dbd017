from django.urls import path

from tb.apps.bookings.api.views import PlanBookingCollectionView
from tb.apps.members.api.views import PlanMemberCollectionView

from . import views


urlpatterns = [
    path( '', views.PlanCollectionView.as_view(), name = 'api_plan_collection' ),
    path( '<uuid:plan_uuid>/', views.PlanItemView.as_view(), name = 'api_plan_item' ),
    path( '<uuid:plan_uuid>/access/', views.PlanAccessView.as_view(), name = 'api_plan_access' ),
    path(
        '<uuid:plan_uuid>/members/',
        PlanMemberCollectionView.as_view(),
        name = 'api_plan_member_collection',
    ),
    path(
        '<uuid:plan_uuid>/bookings/',
        PlanBookingCollectionView.as_view(),
        name = 'api_plan_booking_collection',
    ),
]
