from tb.apps.common.enums import LabeledEnum


class TripRole( LabeledEnum ):
    """
    Closed set of roles a member can hold on a travel plan.  Definition
    order is display order (OWNER first).
    """
    OWNER   = ( 'Owner', 'Full control including deletion and sharing' )
    ADMIN   = ( 'Admin', 'Can edit the plan and manage members' )
    EDITOR  = ( 'Editor', 'Can edit the itinerary' )
    VIEWER  = ( 'Viewer', 'Can view trip content' )

    @classmethod
    def default(cls):
        return cls.VIEWER

    @property
    def is_owner(self):
        return bool( self == TripRole.OWNER )


class PlanVisibility( LabeledEnum ):

    PUBLIC    = ( 'Public', 'Readable by anyone' )
    PRIVATE   = ( 'Private', 'Members only, join by invitation' )
    UNLISTED  = ( 'Unlisted', 'Members only, but open to join requests' )

    @classmethod
    def default(cls):
        return cls.PRIVATE

    @property
    def is_public(self):
        return bool( self == PlanVisibility.PUBLIC )

    @property
    def accepts_join_requests(self):
        return bool( self != PlanVisibility.PRIVATE )
