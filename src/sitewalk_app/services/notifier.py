"""User-facing notifications (toasts)."""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
import logging

from shared.enums import NotificationVariant


@dataclass(frozen=True)
class Notification:
    title: str
    description: str = ""
    variant: NotificationVariant = NotificationVariant.DEFAULT
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def is_error(self) -> bool:
        return self.variant is NotificationVariant.DESTRUCTIVE


class Notifier:
    """Collects notifications and forwards them to registered listeners.

    The view layer registers a listener that shows the message; everything
    else only calls ``notify``/``error``.
    """

    def __init__(self, history_size=50):
        self.history = deque(maxlen=history_size)
        self._listeners = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def add_listener(self, callback):
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def notify(self, title, description="", variant=NotificationVariant.DEFAULT) -> Notification:
        notification = Notification(title=title, description=description, variant=NotificationVariant(variant))
        self.history.append(notification)
        if notification.is_error:
            self.logger.warning(f"{title}: {description}")
        else:
            self.logger.info(f"{title}: {description}")
        for callback in list(self._listeners):
            callback(notification)
        return notification

    def error(self, title, description="") -> Notification:
        return self.notify(title, description, NotificationVariant.DESTRUCTIVE)

    @property
    def last(self):
        return self.history[-1] if self.history else None
