from dataclasses import dataclass, field
from typing import Any, Dict

from .enums import NotificationType


@dataclass
class NotificationPayload:

    notification_type  : NotificationType
    title              : str
    message            : str               = ''
    data               : Dict[str, Any]    = field( default_factory = dict )
