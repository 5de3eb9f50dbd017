from django.urls import path

from . import views


urlpatterns = [
    path( '<uuid:member_uuid>/', views.MemberItemView.as_view(), name = 'api_member_item' ),
]
