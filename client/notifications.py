"""Transient user notifications."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from core.log import get_logger
from core.utils import get_current_timestamp

logger = get_logger(__name__)


class NotificationLevel(str, Enum):
    INFO = "info"
    ERROR = "error"


@dataclass
class Notification:
    message: str
    level: NotificationLevel = NotificationLevel.ERROR
    created_at: str = field(default_factory=get_current_timestamp)


class Notifier:
    """Collects notifications and forwards them to subscribers."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []
        self._subscribers: list[Callable[[Notification], None]] = []

    def subscribe(self, callback: Callable[[Notification], None]) -> None:
        self._subscribers.append(callback)

    def notify(
        self, message: str, level: NotificationLevel = NotificationLevel.ERROR
    ) -> Notification:
        notification = Notification(message=message, level=level)
        self.notifications.append(notification)
        for callback in self._subscribers:
            callback(notification)
        return notification

    def error(self, message: str) -> Notification:
        logger.warning(message)
        return self.notify(message, NotificationLevel.ERROR)

    def dismiss(self, notification: Notification) -> None:
        if notification in self.notifications:
            self.notifications.remove(notification)

    def clear(self) -> None:
        self.notifications.clear()
