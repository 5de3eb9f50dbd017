from tb.apps.common.enums import LabeledEnum


class NotificationType( LabeledEnum ):

    MEMBER_JOINED        = ( 'Member Joined', 'A new member was added to your plan' )
    INVITATION_RECEIVED  = ( 'Join Request', 'Someone asked to join your plan' )
    INVITATION_ACCEPTED  = ( 'Request Approved', 'Your join request was approved' )
    INVITATION_DECLINED  = ( 'Request Declined', 'Your join request was declined' )
