"""
Canal unique de notifications utilisateur (équivalent toast), non bloquant.
Toutes les erreurs récupérables de l'édition passent par ici.
"""
import logging
from enum import Enum
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR   = "error"


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: NotificationLevel
    message: str


class Notifier:
    """
    Collecte les notifications et les relaie à un `sink` optionnel (UI, websocket…).

    Usage:
        >>> notifier = Notifier()
        >>> notifier.error("Failed to save.")
        >>> notifier.last.message
        'Failed to save.'
    """

    def __init__(self, sink: Optional[Callable[[Notification], None]] = None):
        self.history: List[Notification] = []
        self._sink = sink

    def success(self, message: str) -> Notification:
        return self._post(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self._post(NotificationLevel.ERROR, message)

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None

    def drain(self) -> List[Notification]:
        """Retourne et vide l'historique."""
        items, self.history = self.history, []
        return items

    def _post(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self.history.append(notification)
        log.info("Notification %s : %s", level.value, message)
        if self._sink is not None:
            self._sink(notification)
        return notification
