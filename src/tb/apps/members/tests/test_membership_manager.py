import logging
from unittest.mock import patch

from django.contrib.auth.models import AnonymousUser
from django.db import IntegrityError
from django.test import TestCase

from tb.apps.members.enums import MembershipStatus
from tb.apps.members.membership_manager import MembershipManager
from tb.apps.members.models import TripMember
from tb.apps.notify.enums import NotificationType
from tb.apps.notify.models import Notification
from tb.apps.plans.enums import PlanVisibility, TripRole
from tb.apps.plans.tests.synthetic_data import PlanSyntheticData
from tb.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)

logging.disable(logging.CRITICAL)


class AddMemberTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.owner = PlanSyntheticData.create_test_user( 'owner@test.com', 'Olga', 'Owner' )
        cls.admin = PlanSyntheticData.create_test_user( 'admin@test.com' )
        cls.viewer = PlanSyntheticData.create_test_user( 'viewer@test.com' )
        cls.target = PlanSyntheticData.create_test_user( 'target@test.com', 'Tina', 'Target' )
        cls.sysadmin = PlanSyntheticData.create_test_user( 'root@test.com', is_superuser = True )
        cls.plan = PlanSyntheticData.create_test_plan( owner = cls.owner, title = 'Alps' )
        PlanSyntheticData.add_plan_member( cls.plan, cls.admin, role = TripRole.ADMIN )
        PlanSyntheticData.add_plan_member( cls.plan, cls.viewer, role = TripRole.VIEWER )

    def setUp(self):
        self.manager = MembershipManager()

    def test_admin_adds_editor(self):
        trip_member = self.manager.add_member(
            self.admin, self.plan.uuid, self.target.uuid, TripRole.EDITOR,
        )
        self.assertEqual( trip_member.role, TripRole.EDITOR )
        self.assertEqual( trip_member.status, MembershipStatus.JOINED )
        self.assertEqual( trip_member.added_by, self.admin )

    def test_role_accepts_name_string(self):
        trip_member = self.manager.add_member( self.owner, self.plan.uuid, self.target.uuid, 'viewer' )
        self.assertEqual( trip_member.role, TripRole.VIEWER )

    def test_unknown_role_is_bad_request(self):
        with self.assertRaises( BadRequestError ):
            self.manager.add_member( self.owner, self.plan.uuid, self.target.uuid, 'captain' )

    def test_viewer_cannot_add(self):
        with self.assertRaises( ForbiddenError ):
            self.manager.add_member( self.viewer, self.plan.uuid, self.target.uuid, TripRole.VIEWER )
        self.assertFalse( TripMember.objects.filter( plan = self.plan, user = self.target ).exists() )

    def test_anonymous_cannot_add(self):
        with self.assertRaises( ForbiddenError ):
            self.manager.add_member( AnonymousUser(), self.plan.uuid, self.target.uuid, TripRole.VIEWER )

    def test_system_admin_can_add_without_membership(self):
        trip_member = self.manager.add_member(
            self.sysadmin, self.plan.uuid, self.target.uuid, TripRole.ADMIN,
        )
        self.assertEqual( trip_member.role, TripRole.ADMIN )

    def test_owner_role_never_assignable(self):
        for actor in [ self.owner, self.sysadmin, self.viewer ]:
            with self.assertRaises( BadRequestError ):
                self.manager.add_member( actor, self.plan.uuid, self.target.uuid, TripRole.OWNER )
            continue
        self.assertFalse( TripMember.objects.filter( plan = self.plan, user = self.target ).exists() )

    def test_duplicate_membership_is_conflict(self):
        self.manager.add_member( self.owner, self.plan.uuid, self.target.uuid, TripRole.VIEWER )
        with self.assertRaises( ConflictError ):
            self.manager.add_member( self.owner, self.plan.uuid, self.target.uuid, TripRole.EDITOR )
        self.assertEqual( TripMember.objects.filter( plan = self.plan, user = self.target ).count(), 1 )

    def test_lost_race_is_conflict(self):
        with patch.object( TripMember.objects, 'create', side_effect = IntegrityError( 'duplicate' )):
            with self.assertRaises( ConflictError ):
                self.manager.add_member( self.owner, self.plan.uuid, self.target.uuid, TripRole.VIEWER )

    def test_missing_plan_and_user(self):
        with self.assertRaises( NotFoundError ):
            self.manager.add_member(
                self.owner, '00000000-0000-0000-0000-000000000000', self.target.uuid, TripRole.VIEWER,
            )
        with self.assertRaises( NotFoundError ):
            self.manager.add_member(
                self.owner, self.plan.uuid, '00000000-0000-0000-0000-000000000000', TripRole.VIEWER,
            )

    def test_add_by_email_is_case_insensitive(self):
        trip_member = self.manager.add_member_by_email(
            self.owner, self.plan.uuid, '  TARGET@test.com ', TripRole.VIEWER,
        )
        self.assertEqual( trip_member.user, self.target )

    def test_add_by_unknown_email(self):
        with self.assertRaises( NotFoundError ) as context:
            self.manager.add_member_by_email( self.owner, self.plan.uuid, 'nobody@test.com', 'viewer' )
        self.assertEqual( context.exception.message, 'User with this email not found.' )

    def test_owner_is_notified_after_commit(self):
        with self.captureOnCommitCallbacks( execute = True ) as callbacks:
            trip_member = self.manager.add_member(
                self.admin, self.plan.uuid, self.target.uuid, TripRole.VIEWER,
            )
        self.assertEqual( len( callbacks ), 1 )

        notification = Notification.objects.get( user = self.owner )
        self.assertEqual( notification.notification_type, NotificationType.MEMBER_JOINED )
        self.assertEqual( notification.title, 'New member joined your travel plan' )
        self.assertEqual( notification.message, 'Tina Target joined "Alps"' )
        self.assertEqual( notification.data, {
            'plan_id': str( self.plan.uuid ),
            'member_id': str( trip_member.uuid ),
        })

    def test_notification_failure_does_not_undo_add(self):
        with patch( 'tb.apps.notify.notification_manager.Notification.objects.create',
                    side_effect = RuntimeError( 'store down' )):
            with self.captureOnCommitCallbacks( execute = True ):
                trip_member = self.manager.add_member(
                    self.admin, self.plan.uuid, self.target.uuid, TripRole.VIEWER,
                )
        self.assertTrue( TripMember.objects.filter( pk = trip_member.pk ).exists() )
        self.assertFalse( Notification.objects.exists() )


class ListMembersTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.owner = PlanSyntheticData.create_test_user( 'owner@test.com' )
        cls.viewer = PlanSyntheticData.create_test_user( 'viewer@test.com' )
        cls.editor = PlanSyntheticData.create_test_user( 'editor@test.com' )
        cls.admin = PlanSyntheticData.create_test_user( 'admin@test.com' )
        cls.parked = PlanSyntheticData.create_test_user( 'parked@test.com' )
        cls.outsider = PlanSyntheticData.create_test_user( 'outsider@test.com' )
        cls.sysadmin = PlanSyntheticData.create_test_user( 'root@test.com', is_superuser = True )
        cls.plan = PlanSyntheticData.create_test_plan( owner = cls.owner )
        cls.public_plan = PlanSyntheticData.create_test_plan(
            owner = cls.owner,
            visibility = PlanVisibility.PUBLIC,
        )
        # Added in reverse of display order
        PlanSyntheticData.add_plan_member( cls.plan, cls.viewer, role = TripRole.VIEWER )
        PlanSyntheticData.add_plan_member( cls.plan, cls.editor, role = TripRole.EDITOR )
        PlanSyntheticData.add_plan_member( cls.plan, cls.admin, role = TripRole.ADMIN )
        PlanSyntheticData.add_plan_member(
            cls.plan, cls.parked, role = TripRole.ADMIN, status = MembershipStatus.LEFT,
        )

    def test_members_in_role_order_joined_only(self):
        trip_members = MembershipManager().list_members( self.viewer, self.plan.uuid )
        self.assertEqual(
            [ x.user for x in trip_members ],
            [ self.owner, self.admin, self.editor, self.viewer ],
        )

    def test_non_member_cannot_list_private_plan(self):
        with self.assertRaises( ForbiddenError ):
            MembershipManager().list_members( self.outsider, self.plan.uuid )

    def test_system_admin_cannot_list_private_plan(self):
        with self.assertRaises( ForbiddenError ):
            MembershipManager().list_members( self.sysadmin, self.plan.uuid )
        self.assertFalse( TripMember.objects.filter( user = self.sysadmin ).exists() )

    def test_anonymous_private_plan_is_unauthorized(self):
        with self.assertRaises( UnauthorizedError ):
            MembershipManager().list_members( AnonymousUser(), self.plan.uuid )

    def test_anyone_can_list_public_plan(self):
        trip_members = MembershipManager().list_members( AnonymousUser(), self.public_plan.uuid )
        self.assertEqual( [ x.user for x in trip_members ], [ self.owner ] )


class UpdateRoleTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.owner = PlanSyntheticData.create_test_user( 'owner@test.com' )
        cls.admin = PlanSyntheticData.create_test_user( 'admin@test.com' )
        cls.editor = PlanSyntheticData.create_test_user( 'editor@test.com' )
        cls.plan = PlanSyntheticData.create_test_plan( owner = cls.owner )
        cls.owner_member = TripMember.objects.get( plan = cls.plan, user = cls.owner )

    def setUp(self):
        self.admin_member = PlanSyntheticData.add_plan_member( self.plan, self.admin, role = TripRole.ADMIN )
        self.editor_member = PlanSyntheticData.add_plan_member( self.plan, self.editor, role = TripRole.EDITOR )

    def test_admin_promotes_editor(self):
        trip_member = MembershipManager().update_role( self.admin, self.editor_member.uuid, 'admin' )
        self.assertEqual( trip_member.role, TripRole.ADMIN )
        self.editor_member.refresh_from_db()
        self.assertEqual( self.editor_member.role, TripRole.ADMIN )

    def test_editor_cannot_change_roles(self):
        with self.assertRaises( ForbiddenError ):
            MembershipManager().update_role( self.editor, self.admin_member.uuid, TripRole.VIEWER )

    def test_owner_row_is_immutable(self):
        with self.assertRaises( BadRequestError ):
            MembershipManager().update_role( self.owner, self.owner_member.uuid, TripRole.ADMIN )
        self.owner_member.refresh_from_db()
        self.assertEqual( self.owner_member.role, TripRole.OWNER )

    def test_cannot_promote_to_owner(self):
        with self.assertRaises( BadRequestError ):
            MembershipManager().update_role( self.owner, self.editor_member.uuid, TripRole.OWNER )

    def test_missing_member(self):
        with self.assertRaises( NotFoundError ):
            MembershipManager().update_role(
                self.owner, '00000000-0000-0000-0000-000000000000', TripRole.VIEWER,
            )


class RemoveMemberTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.owner = PlanSyntheticData.create_test_user( 'owner@test.com' )
        cls.admin = PlanSyntheticData.create_test_user( 'admin@test.com' )
        cls.viewer = PlanSyntheticData.create_test_user( 'viewer@test.com' )
        cls.plan = PlanSyntheticData.create_test_plan( owner = cls.owner )
        cls.owner_member = TripMember.objects.get( plan = cls.plan, user = cls.owner )

    def setUp(self):
        self.admin_member = PlanSyntheticData.add_plan_member( self.plan, self.admin, role = TripRole.ADMIN )
        self.viewer_member = PlanSyntheticData.add_plan_member( self.plan, self.viewer, role = TripRole.VIEWER )

    def test_admin_removes_viewer(self):
        MembershipManager().remove_member( self.admin, self.viewer_member.uuid )
        self.assertFalse( TripMember.objects.filter( pk = self.viewer_member.pk ).exists() )

    def test_viewer_cannot_remove_others(self):
        with self.assertRaises( ForbiddenError ):
            MembershipManager().remove_member( self.viewer, self.admin_member.uuid )

    def test_viewer_can_leave(self):
        MembershipManager().remove_member( self.viewer, self.viewer_member.uuid )
        self.assertFalse( TripMember.objects.filter( pk = self.viewer_member.pk ).exists() )

    def test_owner_cannot_be_removed_even_by_self(self):
        for actor in [ self.owner, self.admin ]:
            with self.assertRaises( BadRequestError ):
                MembershipManager().remove_member( actor, self.owner_member.uuid )
            continue
        self.assertTrue( TripMember.objects.filter( pk = self.owner_member.pk ).exists() )

    def test_removed_member_loses_access(self):
        from tb.apps.plans.access import PlanAccess

        MembershipManager().remove_member( self.admin, self.viewer_member.uuid )
        resolved = PlanAccess.resolve( self.viewer, self.plan.pk )
        self.assertFalse( resolved.is_member )
