from tb.apps.common.enums import LabeledEnum


class MembershipStatus( LabeledEnum ):
    """
    Only JOINED rows grant access.  Leaving or being removed deletes the
    row outright, so LEFT only appears on rows parked by an operator.
    """
    JOINED  = ( 'Joined', 'Active member of the plan' )
    LEFT    = ( 'Left', 'No longer participating' )
