"""
Tests for the booking API views.
"""
import logging

from django.test import TestCase
from rest_framework.test import APIClient

from tb.apps.bookings.booking_workflow import BookingWorkflow
from tb.apps.bookings.enums import BookingStatus
from tb.apps.bookings.models import BookingRequest
from tb.apps.plans.enums import PlanVisibility, TripRole
from tb.apps.plans.tests.synthetic_data import PlanSyntheticData

logging.disable( logging.CRITICAL )


class BookingViewsTestCase( TestCase ):

    @classmethod
    def setUpTestData( cls ):
        cls.owner = PlanSyntheticData.create_test_user( 'owner@test.com' )
        cls.editor = PlanSyntheticData.create_test_user( 'editor@test.com' )
        cls.requester = PlanSyntheticData.create_test_user( 'req@test.com' )
        cls.plan = PlanSyntheticData.create_test_plan(
            owner = cls.owner,
            title = 'Kyoto',
            visibility = PlanVisibility.PUBLIC,
        )
        cls.private_plan = PlanSyntheticData.create_test_plan( owner = cls.owner )
        PlanSyntheticData.add_plan_member( cls.plan, cls.editor, role = TripRole.EDITOR )

    def setUp( self ):
        self.client = APIClient()

    def test_request_to_join( self ):
        self.client.force_authenticate( user = self.requester )
        response = self.client.post(
            '/api/v1/bookings/',
            { 'plan_uuid': str( self.plan.uuid ), 'message': 'Count me in' },
            format = 'json',
        )
        self.assertEqual( response.status_code, 201 )
        data = response.json()[ 'data' ]
        self.assertEqual( data[ 'status' ], 'PENDING' )
        self.assertEqual( data[ 'plan' ][ 'title' ], 'Kyoto' )
        self.assertEqual( data[ 'message' ], 'Count me in' )

    def test_duplicate_request_is_400( self ):
        BookingWorkflow().request_to_join( self.requester, self.plan.uuid )
        self.client.force_authenticate( user = self.requester )
        response = self.client.post(
            '/api/v1/bookings/',
            { 'plan_uuid': str( self.plan.uuid ) },
            format = 'json',
        )
        self.assertEqual( response.status_code, 400 )
        self.assertEqual(
            response.json(),
            { 'error': 'You already have a pending request for this plan.' },
        )

    def test_private_plan_is_403( self ):
        self.client.force_authenticate( user = self.requester )
        response = self.client.post(
            '/api/v1/bookings/',
            { 'plan_uuid': str( self.private_plan.uuid ) },
            format = 'json',
        )
        self.assertEqual( response.status_code, 403 )

    def test_anonymous_request_is_401( self ):
        response = self.client.post(
            '/api/v1/bookings/',
            { 'plan_uuid': str( self.plan.uuid ) },
            format = 'json',
        )
        self.assertEqual( response.status_code, 401 )

    def test_my_bookings( self ):
        BookingWorkflow().request_to_join( self.requester, self.plan.uuid )
        self.client.force_authenticate( user = self.requester )
        response = self.client.get( '/api/v1/bookings/mine/' )

        self.assertEqual( response.status_code, 200 )
        self.assertEqual( len( response.json()[ 'data' ] ), 1 )

    def test_plan_pending_bookings_for_manager_only( self ):
        BookingWorkflow().request_to_join( self.requester, self.plan.uuid )
        url = f'/api/v1/plans/{self.plan.uuid}/bookings/'

        self.client.force_authenticate( user = self.editor )
        self.assertEqual( self.client.get( url ).status_code, 403 )

        self.client.force_authenticate( user = self.owner )
        response = self.client.get( url )
        self.assertEqual( response.status_code, 200 )
        self.assertEqual( response.json()[ 'data' ][0][ 'user' ][ 'email' ], 'req@test.com' )

    def test_approve( self ):
        booking = BookingWorkflow().request_to_join( self.requester, self.plan.uuid )
        self.client.force_authenticate( user = self.owner )
        response = self.client.post(
            f'/api/v1/bookings/{booking.uuid}/respond/',
            { 'status': 'APPROVED' },
            format = 'json',
        )
        self.assertEqual( response.status_code, 200 )
        data = response.json()[ 'data' ]
        self.assertEqual( data[ 'booking' ][ 'status' ], 'APPROVED' )
        self.assertEqual( data[ 'member' ][ 'role' ], 'VIEWER' )

    def test_respond_validation( self ):
        booking = BookingWorkflow().request_to_join( self.requester, self.plan.uuid )
        self.client.force_authenticate( user = self.owner )
        url = f'/api/v1/bookings/{booking.uuid}/respond/'

        self.assertEqual( self.client.post( url, {}, format = 'json' ).status_code, 400 )
        self.assertEqual( self.client.post( url, { 'status': 'PENDING' }, format = 'json' ).status_code, 400 )

        self.client.force_authenticate( user = self.editor )
        self.assertEqual( self.client.post( url, { 'status': 'REJECTED' }, format = 'json' ).status_code, 403 )

    def test_cancel( self ):
        booking = BookingWorkflow().request_to_join( self.requester, self.plan.uuid )

        self.client.force_authenticate( user = self.owner )
        self.assertEqual( self.client.delete( f'/api/v1/bookings/{booking.uuid}/' ).status_code, 403 )

        self.client.force_authenticate( user = self.requester )
        self.assertEqual( self.client.delete( f'/api/v1/bookings/{booking.uuid}/' ).status_code, 204 )
        self.assertFalse( BookingRequest.objects.filter( pk = booking.pk ).exists() )

    def test_cancel_resolved_is_400( self ):
        booking = BookingWorkflow().request_to_join( self.requester, self.plan.uuid )
        BookingWorkflow().respond( self.owner, booking.uuid, BookingStatus.REJECTED )

        self.client.force_authenticate( user = self.requester )
        response = self.client.delete( f'/api/v1/bookings/{booking.uuid}/' )
        self.assertEqual( response.status_code, 400 )
