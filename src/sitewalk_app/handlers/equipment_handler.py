"""Equipment table handlers for the Site Walk client.

This module connects an editable ``DataTable`` to the entity store and the
query cache for one equipment kind of the current project.
"""
import logging

from shared.enums import EquipmentKind
from ..services.api_service import APIError
from ..services.entity_store import equipment_query_key
from ..table.data_table import DataTable
from ..table.equipment_columns import SEARCH_COLUMN, build_columns


class EquipmentTableHandler:
    """Handles loading and editing one equipment list.

    Cell commits arrive as ``handle_cell_update(row_index, column_id, value)``.
    The handler resolves the entity through the table's current view,
    writes the new value into the query cache right away, persists it, and
    invalidates the query so the table ends up showing server data. A failed
    update restores the previous cache data and raises a destructive
    notification.

    Attributes:
        kind: Equipment kind shown by the table
        table: The DataTable being driven
        logger: Logger instance for this handler
    """

    def __init__(self, kind, store, cache, notifier, columns=None):
        """Initialize the equipment handler.

        Args:
            kind: EquipmentKind (or its value)
            store: EntityStore used for persistence
            cache: Shared QueryCache
            notifier: Notifier for user-facing messages
            columns: Optional column override (defaults to the kind's layout)
        """
        self.kind = EquipmentKind(kind)
        self.store = store
        self.cache = cache
        self.notifier = notifier
        self.project_id = None
        self.table = DataTable(
            columns or build_columns(self.kind),
            on_update=self.handle_cell_update,
            search_column=SEARCH_COLUMN,
        )
        self._unsubscribe = None
        self._listeners = []
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def query_key(self):
        return equipment_query_key(self.project_id, self.kind)

    def add_listener(self, callback):
        """Call ``callback()`` whenever the table content changes."""
        self._listeners.append(callback)

    def _changed(self):
        for callback in list(self._listeners):
            callback()

    def _on_data(self, rows):
        self.table.set_rows(rows or [])
        self._changed()

    def load(self, project_id):
        """Show the equipment of ``project_id``.

        Returns:
            True if the rows were loaded
        """
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.project_id = project_id

        if project_id is None:
            self._on_data([])
            return False

        key = self.query_key
        self._unsubscribe = self.cache.subscribe(key, self._on_data)
        try:
            rows = self.cache.fetch(key, lambda: self.store.list(self.kind, project_id))
        except APIError as e:
            self.logger.error(f"Failed to load {self.kind.value} for project {project_id}: {e}")
            self.notifier.error("Error", f"Failed to load {self.kind.singular} list: {e.message}")
            self._on_data([])
            return False

        # Subscribers are only notified on a network fetch; cached data still needs rendering
        self._on_data(rows)
        self.logger.info(f"Loaded {len(rows)} {self.kind.value} for project {project_id}")
        return True

    def handle_cell_update(self, row_index, column_id, value):
        """Persist one committed cell edit.

        Returns:
            True if the update was stored
        """
        entity = self.table.row_at(row_index)
        entity_id = entity['id']
        key = self.query_key
        previous = self.cache.get(key)

        if previous is not None:
            self.cache.set_data(key, [
                {**row, column_id: value} if row.get('id') == entity_id else row
                for row in previous
            ])

        try:
            self.store.update(self.kind, entity_id, {column_id: value})
            return True
        except APIError as e:
            if previous is not None:
                self.cache.set_data(key, previous)
            self.logger.error(f"Failed to update {self.kind.singular} {entity_id} ({column_id}): {e}")
            self.notifier.error("Error", f"Failed to update {self.kind.singular}: {e.message}")
            return False
        finally:
            self.cache.invalidate(key)

    def search(self, term):
        count = self.table.search(term)
        self._changed()
        return count

    def sort(self, column_id):
        direction = self.table.sort(column_id)
        self._changed()
        return direction

    def duplicate(self, row_index):
        """Duplicate the entity shown at ``row_index``; returns the copy or None."""
        entity = self.table.row_at(row_index)
        try:
            copy = self.store.duplicate(self.kind, entity['id'])
        except APIError as e:
            self.logger.error(f"Failed to duplicate {self.kind.singular} {entity['id']}: {e}")
            self.notifier.error("Error", f"Failed to duplicate {self.kind.singular}: {e.message}")
            return None
        self.notifier.notify("Success", f"{self.kind.singular.capitalize()} duplicated successfully")
        self.cache.invalidate(self.query_key)
        return copy

    def delete(self, row_index):
        """Delete the entity shown at ``row_index``; returns True on success."""
        entity = self.table.row_at(row_index)
        try:
            self.store.delete(self.kind, entity['id'])
        except APIError as e:
            self.logger.error(f"Failed to delete {self.kind.singular} {entity['id']}: {e}")
            self.notifier.error("Error", f"Failed to delete {self.kind.singular}: {e.message}")
            return False
        self.notifier.notify("Success", f"{self.kind.singular.capitalize()} deleted successfully")
        self.cache.invalidate(self.query_key)
        return True

    def refresh(self):
        if self.project_id is not None:
            self.cache.invalidate(self.query_key)

    def close(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
