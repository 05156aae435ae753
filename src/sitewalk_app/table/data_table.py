"""Sortable, searchable table of editable cells.

The table never owns entity data: rows are pushed in with ``set_rows`` and
edits leave through ``on_update(row_index, column_id, value)``, where
``row_index`` is the position in the current (filtered and sorted) view.
"""
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple
import logging

from shared.enums import CellMode, SortDirection
from .columns import ActionColumn, BaseColumn, ColumnConfigError, validate_columns
from .editable_cell import CellView, EditableCell, UpdateCallback

_NEXT_DIRECTION = {
    SortDirection.NONE: SortDirection.ASC,
    SortDirection.ASC: SortDirection.DESC,
    SortDirection.DESC: SortDirection.NONE,
}


@dataclass(frozen=True)
class Row:
    """A row of the current view."""
    index: int
    original: dict
    key: Any


def default_row_key(row: dict, position: int):
    """Rows are identified by their ``id``, falling back to their position."""
    row_id = row.get('id')
    return row_id if row_id is not None else ('position', position)


def _as_number(value) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


class DataTable:
    """Renders rows through column definitions.

    Args:
        columns: Column definitions, validated on construction
        on_update: Called once per committed cell change
        rows: Initial rows
        search_column: Column id the search term is matched against
        row_key: ``(row, position) -> key`` identifying a row across refreshes
    """

    def __init__(self, columns: Sequence[BaseColumn], on_update: UpdateCallback,
                 rows: Iterable[dict] = (), search_column: Optional[str] = None,
                 row_key: Callable[[dict, int], Any] = default_row_key):
        if on_update is None:
            raise ColumnConfigError("on_update callback is required")
        validate_columns(columns)
        self.columns: Tuple[BaseColumn, ...] = tuple(columns)
        self._columns_by_id: Dict[str, BaseColumn] = {c.id: c for c in self.columns}
        if search_column is not None:
            column = self._columns_by_id.get(search_column)
            if column is None or column.is_display:
                raise ColumnConfigError(f"Search column '{search_column}' is not an accessor column")
        self.search_column_id = search_column
        self.on_update = on_update
        self.row_key = row_key

        self.sort_column_id: Optional[str] = None
        self.sort_direction = SortDirection.NONE
        self.search_term = ""

        self._rows: List[Tuple[Any, dict]] = []
        self._view: List[Row] = []
        self._cells: Dict[Tuple[Any, str], EditableCell] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

        self.set_rows(rows)

    # Data

    def set_rows(self, rows: Iterable[dict]) -> None:
        """Replace the authoritative rows and refresh the view.

        Cells are kept per (row key, column id), so a cell being edited keeps
        its draft while its value and index are brought up to date.
        """
        self._rows = [(self.row_key(row, position), row) for position, row in enumerate(rows or [])]
        self._refresh_view()

    @property
    def rows(self) -> List[Row]:
        return list(self._view)

    def __len__(self):
        return len(self._view)

    def row_at(self, index: int) -> dict:
        """The original entity shown at ``index`` of the current view."""
        if not 0 <= index < len(self._view):
            raise IndexError(f"Row index {index} out of range (0..{len(self._view) - 1})")
        return self._view[index].original

    def column(self, column_id: str) -> BaseColumn:
        try:
            return self._columns_by_id[column_id]
        except KeyError:
            raise KeyError(f"Unknown column '{column_id}'") from None

    def cell(self, row_index: int, column_id: str) -> EditableCell:
        """The cell object at a view position.

        Raises:
            KeyError: For display-only or custom-rendered columns
        """
        column = self.column(column_id)
        row = self._view[row_index]
        try:
            return self._cells[(row.key, column.id)]
        except KeyError:
            raise KeyError(f"Column '{column_id}' has no editable cells") from None

    def render_cell(self, row_index: int, column_id: str) -> CellView:
        column = self.column(column_id)
        row = self._view[row_index]
        if column.is_display or column.cell is not None:
            value = column.get_value(row.original)
            text = column.cell(row.original, value) if column.cell else ""
            return CellView(mode=CellMode.DISPLAY, text=text, is_empty=text == "",
                            class_name=column.class_name)
        return self._cells[(row.key, column.id)].render()

    def editing_cells(self) -> List[EditableCell]:
        return [cell for cell in self._cells.values() if cell.is_editing]

    # Sorting

    def sort(self, column_id: str) -> SortDirection:
        """Activate a column header.

        Cycles the column through none, ascending and descending. Activating
        a different column starts it at ascending and clears the previous
        sort. Display columns without a comparator are ignored.

        Raises:
            KeyError: If the column does not exist
        """
        column = self.column(column_id)
        if not column.sortable:
            self.logger.warning(f"Column '{column_id}' is not sortable")
            return self.header_direction(column_id)

        if self.sort_column_id != column_id:
            self.sort_column_id = column_id
            self.sort_direction = SortDirection.ASC
        else:
            self.sort_direction = _NEXT_DIRECTION[self.sort_direction]
            if self.sort_direction is SortDirection.NONE:
                self.sort_column_id = None

        self.logger.debug(f"Sort {column_id}: {self.sort_direction.value}")
        self._refresh_view()
        return self.sort_direction

    def header_direction(self, column_id: str) -> SortDirection:
        if column_id == self.sort_column_id:
            return self.sort_direction
        return SortDirection.NONE

    def _sorted(self, rows):
        column = self.column(self.sort_column_id)
        descending = self.sort_direction is SortDirection.DESC

        if isinstance(column, ActionColumn):
            compare = column.comparator
            return sorted(rows, key=cmp_to_key(lambda a, b: compare(a[1], b[1])), reverse=descending)

        values = [(item, column.get_value(item[1])) for item in rows]
        present = [(item, value) for item, value in values if value is not None]
        missing = [item for item, value in values if value is None]

        numeric = column.sort_type == 'number' or (
            column.sort_type == 'auto' and present and all(
                isinstance(value, (int, float)) and not isinstance(value, bool) for _, value in present
            )
        )
        if numeric:
            numbers = [(item, _as_number(value)) for item, value in present]
            missing.extend(item for item, number in numbers if number is None)
            present = [(item, number) for item, number in numbers if number is not None]
            ordered = sorted(present, key=lambda pair: pair[1], reverse=descending)
        else:
            ordered = sorted(present, key=lambda pair: str(pair[1]), reverse=descending)

        # Missing values sort last in both directions
        return [item for item, _ in ordered] + missing

    # Searching

    def search(self, term: Optional[str]) -> int:
        """Filter rows by the search column.

        Matching is case-insensitive: a row matches when every word of the
        term is a substring of the raw or formatted value. An empty term
        shows all rows. Returns the number of visible rows.
        """
        if self.search_column_id is None:
            raise ColumnConfigError("Table has no search column")
        self.search_term = (term or "").strip()
        self._refresh_view()
        return len(self._view)

    def _matches(self, row: dict) -> bool:
        if not self.search_term:
            return True
        column = self.column(self.search_column_id)
        value = column.get_value(row)
        if value is None:
            return False
        # Every word of the term must occur; a plain substring always qualifies
        words = self.search_term.lower().split()
        candidates = {str(value).lower(), column.format_value(value).lower()}
        return any(all(word in candidate for word in words) for candidate in candidates)

    # View

    def _refresh_view(self):
        rows = [item for item in self._rows if self._matches(item[1])]
        if self.sort_column_id is not None:
            rows = self._sorted(rows)
        self._view = [Row(index=i, original=row, key=key) for i, (key, row) in enumerate(rows)]
        self._sync_cells()

    def _sync_cells(self):
        live = set()
        for row in self._view:
            for column in self.columns:
                if column.is_display or column.cell is not None:
                    continue
                cell_key = (row.key, column.id)
                live.add(cell_key)
                value = column.get_value(row.original)
                cell = self._cells.get(cell_key)
                if cell is None:
                    self._cells[cell_key] = EditableCell(column, row.index, value, self._handle_cell_update)
                else:
                    cell.sync(value, row.index)
        for cell_key in set(self._cells) - live:
            del self._cells[cell_key]

    def _handle_cell_update(self, row_index: int, column_id: str, value: Any):
        if not 0 <= row_index < len(self._view):
            self.logger.warning(f"Dropping update for stale row {row_index} ({column_id})")
            return
        self.logger.info(f"Cell update row={row_index} column={column_id}")
        self.on_update(row_index, column_id, value)
