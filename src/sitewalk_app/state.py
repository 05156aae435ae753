"""Application state management for the Site Walk client."""
from dataclasses import dataclass, field
from typing import Callable, List, Optional
import logging

from shared.enums import EquipmentKind

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """The single source of truth for what the user is looking at.

    Views subscribe instead of keeping their own copy of the current
    project, so a selection made anywhere is seen everywhere. Listeners are
    called as ``callback(state)`` and only when the selection actually
    changes.
    """
    current_project: Optional[dict] = None
    current_kind: EquipmentKind = EquipmentKind.ACCESS_POINTS
    _listeners: List[Callable] = field(default_factory=list, repr=False)

    @property
    def current_project_id(self) -> Optional[int]:
        return self.current_project.get('id') if self.current_project else None

    def select_project(self, project: Optional[dict]) -> bool:
        """Make ``project`` current. Returns False if it already was."""
        new_id = project.get('id') if project else None
        if new_id == self.current_project_id:
            # Same project, but keep the freshest copy of its fields
            self.current_project = project
            return False
        self.current_project = project
        logger.info(f"Selected project: {new_id}")
        self._notify()
        return True

    def clear_project(self) -> bool:
        return self.select_project(None)

    def select_kind(self, kind) -> bool:
        kind = EquipmentKind(kind)
        if kind is self.current_kind:
            return False
        self.current_kind = kind
        self._notify()
        return True

    def subscribe(self, callback: Callable) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)
        return unsubscribe

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)
