"""
Tests for the member API views.
"""
import logging

from django.test import TestCase
from rest_framework.test import APIClient

from tb.apps.members.models import TripMember
from tb.apps.plans.enums import TripRole
from tb.apps.plans.tests.synthetic_data import PlanSyntheticData

logging.disable( logging.CRITICAL )


class PlanMemberCollectionViewTestCase( TestCase ):

    @classmethod
    def setUpTestData( cls ):
        cls.owner = PlanSyntheticData.create_test_user( 'owner@test.com' )
        cls.viewer = PlanSyntheticData.create_test_user( 'viewer@test.com' )
        cls.target = PlanSyntheticData.create_test_user( 'target@test.com' )
        cls.plan = PlanSyntheticData.create_test_plan( owner = cls.owner )
        PlanSyntheticData.add_plan_member( cls.plan, cls.viewer, role = TripRole.VIEWER )

    def setUp( self ):
        self.client = APIClient()
        self.url = f'/api/v1/plans/{self.plan.uuid}/members/'

    def test_list_members( self ):
        self.client.force_authenticate( user = self.viewer )
        response = self.client.get( self.url )

        self.assertEqual( response.status_code, 200 )
        data = response.json()[ 'data' ]
        self.assertEqual( [ x[ 'role' ] for x in data ], [ 'OWNER', 'VIEWER' ] )
        self.assertEqual( data[0][ 'user' ][ 'email' ], 'owner@test.com' )

    def test_add_by_email( self ):
        self.client.force_authenticate( user = self.owner )
        response = self.client.post(
            self.url,
            { 'email': 'target@test.com', 'role': 'EDITOR' },
            format = 'json',
        )
        self.assertEqual( response.status_code, 201 )
        self.assertEqual( response.json()[ 'data' ][ 'role' ], 'EDITOR' )

    def test_add_by_user_uuid( self ):
        self.client.force_authenticate( user = self.owner )
        response = self.client.post(
            self.url,
            { 'user_uuid': str( self.target.uuid ), 'role': 'VIEWER' },
            format = 'json',
        )
        self.assertEqual( response.status_code, 201 )
        self.assertTrue( TripMember.objects.filter( plan = self.plan, user = self.target ).exists() )

    def test_add_duplicate_is_409( self ):
        self.client.force_authenticate( user = self.owner )
        response = self.client.post(
            self.url,
            { 'email': 'viewer@test.com', 'role': 'VIEWER' },
            format = 'json',
        )
        self.assertEqual( response.status_code, 409 )
        self.assertEqual( response.json(), { 'error': 'User is already a member of this plan.' } )

    def test_add_owner_role_is_400( self ):
        self.client.force_authenticate( user = self.owner )
        response = self.client.post(
            self.url,
            { 'email': 'target@test.com', 'role': 'OWNER' },
            format = 'json',
        )
        self.assertEqual( response.status_code, 400 )

    def test_viewer_add_is_403( self ):
        self.client.force_authenticate( user = self.viewer )
        response = self.client.post(
            self.url,
            { 'email': 'target@test.com', 'role': 'VIEWER' },
            format = 'json',
        )
        self.assertEqual( response.status_code, 403 )

    def test_add_requires_target_and_role( self ):
        self.client.force_authenticate( user = self.owner )
        response = self.client.post( self.url, { 'role': 'VIEWER' }, format = 'json' )
        self.assertEqual( response.status_code, 400 )

        response = self.client.post( self.url, { 'email': 'target@test.com' }, format = 'json' )
        self.assertEqual( response.status_code, 400 )

        response = self.client.post( self.url, { 'user_uuid': 'garbage', 'role': 'VIEWER' }, format = 'json' )
        self.assertEqual( response.status_code, 400 )


class MemberItemViewTestCase( TestCase ):

    @classmethod
    def setUpTestData( cls ):
        cls.owner = PlanSyntheticData.create_test_user( 'owner@test.com' )
        cls.editor = PlanSyntheticData.create_test_user( 'editor@test.com' )
        cls.plan = PlanSyntheticData.create_test_plan( owner = cls.owner )
        cls.owner_member = TripMember.objects.get( plan = cls.plan, user = cls.owner )

    def setUp( self ):
        self.client = APIClient()
        self.editor_member = PlanSyntheticData.add_plan_member( self.plan, self.editor, role = TripRole.EDITOR )

    def test_owner_changes_role( self ):
        self.client.force_authenticate( user = self.owner )
        response = self.client.patch(
            f'/api/v1/members/{self.editor_member.uuid}/',
            { 'role': 'ADMIN' },
            format = 'json',
        )
        self.assertEqual( response.status_code, 200 )
        self.assertEqual( response.json()[ 'data' ][ 'role' ], 'ADMIN' )

    def test_changing_owner_role_is_400( self ):
        self.client.force_authenticate( user = self.owner )
        response = self.client.patch(
            f'/api/v1/members/{self.owner_member.uuid}/',
            { 'role': 'VIEWER' },
            format = 'json',
        )
        self.assertEqual( response.status_code, 400 )

    def test_member_leaves( self ):
        self.client.force_authenticate( user = self.editor )
        response = self.client.delete( f'/api/v1/members/{self.editor_member.uuid}/' )
        self.assertEqual( response.status_code, 204 )
        self.assertFalse( TripMember.objects.filter( pk = self.editor_member.pk ).exists() )

    def test_missing_member_is_404( self ):
        self.client.force_authenticate( user = self.owner )
        response = self.client.delete( '/api/v1/members/00000000-0000-0000-0000-000000000000/' )
        self.assertEqual( response.status_code, 404 )
