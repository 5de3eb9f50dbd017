from tb.apps.common.enums import LabeledEnum


class BookingStatus( LabeledEnum ):
    """
    Join request lifecycle: PENDING -> APPROVED | REJECTED, both terminal.
    A requester may also withdraw (delete) a request while it is PENDING.
    """
    PENDING   = ( 'Pending', 'Waiting for a plan owner or admin' )
    APPROVED  = ( 'Approved', 'Requester was added to the plan' )
    REJECTED  = ( 'Rejected', 'Request was declined' )

    @property
    def is_pending(self):
        return bool( self == BookingStatus.PENDING )

    @property
    def is_decision(self):
        return bool( self in [ BookingStatus.APPROVED, BookingStatus.REJECTED ])
