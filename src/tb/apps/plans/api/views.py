from uuid import UUID

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from tb.apps.api.views import TbApiView
from tb.apps.plans.services import TravelPlanService

from .serializers import ResolvedAccessSerializer, TravelPlanSerializer


class PlanCollectionView( TbApiView ):
    """
    GET /api/v1/plans/
    Plans where the caller is a joined member, newest first.

    POST /api/v1/plans/
    Creates a plan. Caller becomes its OWNER.
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request : Request ) -> Response:
        plans = TravelPlanService.list_for_user( request.user )
        serializer = TravelPlanSerializer( plans, many = True )
        return Response( serializer.data )

    def post( self, request : Request ) -> Response:
        serializer = TravelPlanSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        plan = TravelPlanService.create(
            owner = request.user,
            validated_data = serializer.validated_data,
        )
        return Response( TravelPlanSerializer( plan ).data, status = status.HTTP_201_CREATED )


class PlanItemView( TbApiView ):
    """
    GET /api/v1/plans/{uuid}/     read-visibility rule (anonymous ok for public plans)
    PATCH /api/v1/plans/{uuid}/   needs can_edit_plan
    DELETE /api/v1/plans/{uuid}/  needs can_delete_plan
    """

    def get_permissions( self ):
        if self.request.method == 'GET':
            return [ AllowAny() ]
        return [ IsAuthenticated() ]

    def get( self, request : Request, plan_uuid : UUID ) -> Response:
        plan = TravelPlanService.get_for_viewing( request.user, plan_uuid )
        return Response( TravelPlanSerializer( plan ).data )

    def patch( self, request : Request, plan_uuid : UUID ) -> Response:
        serializer = TravelPlanSerializer( data = request.data, partial = True )
        serializer.is_valid( raise_exception = True )

        plan = TravelPlanService.update(
            user = request.user,
            plan_uuid = plan_uuid,
            validated_data = serializer.validated_data,
        )
        return Response( TravelPlanSerializer( plan ).data )

    def delete( self, request : Request, plan_uuid : UUID ) -> Response:
        TravelPlanService.delete( user = request.user, plan_uuid = plan_uuid )
        return Response( status = status.HTTP_204_NO_CONTENT )


class PlanAccessView( TbApiView ):
    """
    GET /api/v1/plans/{uuid}/access/
    The caller's resolved role and capability set on the plan.
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request : Request, plan_uuid : UUID ) -> Response:
        resolved_access = TravelPlanService.get_access( request.user, plan_uuid )
        return Response( ResolvedAccessSerializer( resolved_access ).data )
