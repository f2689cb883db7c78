"""
Transient user notifications (toasts) emitted by the client views.
"""

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Variant(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Notification(BaseModel):
    message: str
    variant: Variant
    vertical: str = "top"
    horizontal: str = "right"


class Notifier:
    """Queue of notifications waiting to be shown."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def enqueue(self, message: str, variant: Variant, vertical: str = "top", horizontal: str = "right") -> Notification:
        notification = Notification(message=message, variant=variant, vertical=vertical, horizontal=horizontal)
        self.notifications.append(notification)
        logger.debug(f"Notification [{variant.value}] {message}")
        return notification

    def drain(self) -> List[Notification]:
        """Return and clear everything queued so far."""
        pending, self.notifications = self.notifications, []
        return pending

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None
