"""
Role -> capability table.  The only place capability bits are decided;
every guard in the codebase reads them from here.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from django.core.exceptions import ImproperlyConfigured

from .enums import TripRole


class Capability( str, Enum ):
    """Names of the individual permission bits of a CapabilitySet."""

    CAN_INVITE          = 'can_invite'
    CAN_EDIT_ITINERARY  = 'can_edit_itinerary'
    CAN_EDIT_PLAN       = 'can_edit_plan'
    CAN_DELETE_PLAN     = 'can_delete_plan'
    CAN_MANAGE_MEMBERS  = 'can_manage_members'

    @property
    def description(self) -> str:
        return self.value.replace( 'can_', '' ).replace( '_', ' ' )


@dataclass( frozen = True )
class CapabilitySet:

    can_invite          : bool = False
    can_edit_itinerary  : bool = False
    can_edit_plan       : bool = False
    can_delete_plan     : bool = False
    can_manage_members  : bool = False

    def allows( self, capability : Capability ) -> bool:
        return bool( getattr( self, capability.value ))

    def to_dict(self) -> Dict[ str, bool ]:
        return { x.value: self.allows( x ) for x in Capability }


ROLE_CAPABILITIES : Dict[ TripRole, CapabilitySet ] = {
    TripRole.OWNER: CapabilitySet(
        can_invite = True,
        can_edit_itinerary = True,
        can_edit_plan = True,
        can_delete_plan = True,
        can_manage_members = True,
    ),
    TripRole.ADMIN: CapabilitySet(
        can_invite = True,
        can_edit_itinerary = True,
        can_edit_plan = True,
        can_delete_plan = False,
        can_manage_members = True,
    ),
    TripRole.EDITOR: CapabilitySet(
        can_edit_itinerary = True,
    ),
    TripRole.VIEWER: CapabilitySet(),
}

# Baseline for callers without a membership: no bits set.
NO_CAPABILITIES = ROLE_CAPABILITIES[ TripRole.VIEWER ]


def capabilities_for_role( role : TripRole ) -> CapabilitySet:
    return ROLE_CAPABILITIES[ role ]


def check_role_table_is_complete( table : Dict[ TripRole, CapabilitySet ] = ROLE_CAPABILITIES ) -> None:
    missing = [ str( x ) for x in TripRole if x not in table ]
    if missing:
        raise ImproperlyConfigured(
            f'No capability row for trip role(s): {", ".join( missing )}'
        )
    return


check_role_table_is_complete()
