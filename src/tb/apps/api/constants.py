"""
API field name constants for consistent serialization.

These constants define the JSON keys used in API responses and requests.
Check here first before adding a new field.
"""


class APIFields:
    """
    Field names for API responses and requests.
    """

    # -------------------------------------------------------------------------
    # Common fields
    # -------------------------------------------------------------------------
    DATA = 'data'
    ERROR = 'error'
    UUID = 'uuid'
    TITLE = 'title'
    EMAIL = 'email'
    MESSAGE = 'message'
    STATUS = 'status'
    CREATED_DATETIME = 'created_datetime'
    MODIFIED_DATETIME = 'modified_datetime'

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------
    USER = 'user'
    USER_UUID = 'user_uuid'
    DISPLAY_NAME = 'display_name'

    # -------------------------------------------------------------------------
    # Plans
    # -------------------------------------------------------------------------
    PLAN = 'plan'
    PLAN_UUID = 'plan_uuid'
    DESCRIPTION = 'description'
    VISIBILITY = 'visibility'
    OWNER = 'owner'

    # -------------------------------------------------------------------------
    # Access / members
    # -------------------------------------------------------------------------
    ROLE = 'role'
    PRINCIPAL = 'principal'
    IS_MEMBER = 'is_member'
    CAPABILITIES = 'capabilities'
    ADDED_BY = 'added_by'
    JOINED_DATETIME = 'joined_datetime'
    MEMBER = 'member'

    # -------------------------------------------------------------------------
    # Bookings
    # -------------------------------------------------------------------------
    BOOKING = 'booking'
    RESPONDED_BY = 'responded_by'
    RESPONDED_DATETIME = 'responded_datetime'

    # -------------------------------------------------------------------------
    # Notifications
    # -------------------------------------------------------------------------
    NOTIFICATION_TYPE = 'notification_type'
    IS_READ = 'is_read'
    UNREAD = 'unread'
    UNREAD_COUNT = 'unread_count'
    UPDATED_COUNT = 'updated_count'
