from uuid import UUID

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from tb.apps.api.constants import APIFields as F
from tb.apps.api.messages import APIMessages as M
from tb.apps.api.utils import get_str, get_uuid
from tb.apps.api.views import TbApiView
from tb.apps.members.membership_manager import MembershipManager

from .serializers import TripMemberSerializer


class PlanMemberCollectionView( TbApiView ):
    """
    GET /api/v1/plans/{uuid}/members/
    Joined members, OWNER first then by role and join time.

    POST /api/v1/plans/{uuid}/members/
    Adds a member by "email" or "user_uuid" with a non-OWNER "role".
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request : Request, plan_uuid : UUID ) -> Response:
        trip_members = MembershipManager().list_members( request.user, plan_uuid )
        return Response( TripMemberSerializer( trip_members, many = True ).data )

    def post( self, request : Request, plan_uuid : UUID ) -> Response:
        role = get_str( request.data, F.ROLE )
        if not role:
            return Response(
                { F.ERROR: M.is_required( 'Role' ) },
                status = status.HTTP_400_BAD_REQUEST,
            )

        email = get_str( request.data, F.EMAIL )
        if email:
            trip_member = MembershipManager().add_member_by_email(
                actor = request.user,
                plan_uuid = plan_uuid,
                email = email,
                role = role,
            )
        elif request.data.get( F.USER_UUID ) is not None:
            user_uuid = get_uuid( request.data, F.USER_UUID )
            if not user_uuid:
                return Response(
                    { F.ERROR: M.is_invalid( F.USER_UUID ) },
                    status = status.HTTP_400_BAD_REQUEST,
                )
            trip_member = MembershipManager().add_member(
                actor = request.user,
                plan_uuid = plan_uuid,
                target_user_uuid = user_uuid,
                role = role,
            )
        else:
            return Response(
                { F.ERROR: M.one_of_required( F.EMAIL, F.USER_UUID ) },
                status = status.HTTP_400_BAD_REQUEST,
            )

        return Response( TripMemberSerializer( trip_member ).data, status = status.HTTP_201_CREATED )


class MemberItemView( TbApiView ):
    """
    PATCH /api/v1/members/{uuid}/   change role (needs can_manage_members)
    DELETE /api/v1/members/{uuid}/  remove, or leave when it is the caller's own row
    """
    permission_classes = [ IsAuthenticated ]

    def patch( self, request : Request, member_uuid : UUID ) -> Response:
        role = get_str( request.data, F.ROLE )
        if not role:
            return Response(
                { F.ERROR: M.is_required( 'Role' ) },
                status = status.HTTP_400_BAD_REQUEST,
            )
        trip_member = MembershipManager().update_role(
            actor = request.user,
            member_uuid = member_uuid,
            new_role = role,
        )
        return Response( TripMemberSerializer( trip_member ).data )

    def delete( self, request : Request, member_uuid : UUID ) -> Response:
        MembershipManager().remove_member( actor = request.user, member_uuid = member_uuid )
        return Response( status = status.HTTP_204_NO_CONTENT )
