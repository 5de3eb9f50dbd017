from dataclasses import dataclass
from typing import Optional

from tb.apps.members.models import TripMember

from .models import BookingRequest


@dataclass
class BookingResponseResult:

    booking  : BookingRequest
    member   : Optional[ TripMember ]  = None

    @property
    def is_approved(self) -> bool:
        return bool( self.member is not None )
