import logging

from django.test import TestCase

from tb.apps.bookings.enums import BookingStatus
from tb.apps.plans.enums import PlanVisibility, TripRole

logging.disable(logging.CRITICAL)


class LabeledEnumTestCase(TestCase):

    def test_values_follow_definition_order(self):
        self.assertEqual( [ x.value for x in TripRole ], [ 1, 2, 3, 4 ] )
        self.assertLess( TripRole.OWNER.value, TripRole.VIEWER.value )

    def test_str_is_lowercase_name(self):
        self.assertEqual( str( TripRole.ADMIN ), 'admin' )
        self.assertEqual( str( BookingStatus.PENDING ), 'pending' )

    def test_from_name_is_case_and_whitespace_insensitive(self):
        self.assertEqual( TripRole.from_name( ' Editor ' ), TripRole.EDITOR )
        self.assertEqual( PlanVisibility.from_name( 'PUBLIC' ), PlanVisibility.PUBLIC )

    def test_from_name_rejects_unknown(self):
        for name in [ 'captain', '', None, 3 ]:
            with self.assertRaises( ValueError ):
                TripRole.from_name( name )
            continue

    def test_coerce_accepts_member_or_name(self):
        self.assertIs( TripRole.coerce( TripRole.ADMIN ), TripRole.ADMIN )
        self.assertIs( BookingStatus.coerce( 'Approved' ), BookingStatus.APPROVED )
        with self.assertRaises( ValueError ):
            BookingStatus.coerce( TripRole.ADMIN )

    def test_rank_orders_roles(self):
        ranked = sorted( [ TripRole.VIEWER, TripRole.OWNER, TripRole.EDITOR ], key = lambda x: x.rank )
        self.assertEqual( ranked, [ TripRole.OWNER, TripRole.EDITOR, TripRole.VIEWER ] )

    def test_choices_use_stored_names(self):
        self.assertIn( ( 'owner', 'Owner' ), TripRole.choices() )
        self.assertEqual( PlanVisibility.default(), PlanVisibility.PRIVATE )
