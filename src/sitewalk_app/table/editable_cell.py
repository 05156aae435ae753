"""Inline editor for a single table cell.

A cell is either displaying its committed value or editing a draft. It only
ever reports a changed value through ``on_update``; the committed value is
replaced when the owning table pushes fresh data back in with ``sync``.
"""
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple
import logging

from shared.enums import CellMode, InputType
from shared.validation import ValidationError
from .columns import BaseColumn, SelectColumn

# on_update(row_index, column_id, value)
UpdateCallback = Callable[[int, str, Any], None]

_NO_VALUE = object()


@dataclass(frozen=True)
class CellView:
    """What a view needs to draw a cell."""
    mode: CellMode
    text: str
    editor: Optional[InputType] = None
    draft: Any = None
    options: Tuple = ()
    show_edit_icon: bool = False
    is_empty: bool = False
    error: Optional[str] = None
    class_name: str = ""


class EditableCell:
    CONFIRM_KEYS = ('Enter',)
    CANCEL_KEYS = ('Escape', 'Esc')

    def __init__(self, column: BaseColumn, row_index: int, value: Any, on_update: UpdateCallback):
        self.column = column
        self.row_index = row_index
        self.committed_value = value
        self.draft_value = None
        self.mode = CellMode.DISPLAY
        self.error: Optional[str] = None
        self.on_update = on_update
        self._pending_value = _NO_VALUE
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def column_id(self) -> str:
        return self.column.id

    @property
    def is_editing(self) -> bool:
        return self.mode is CellMode.EDITING

    @property
    def read_only(self) -> bool:
        return not self.column.editable

    def start_edit(self) -> bool:
        """Enter editing mode, seeding the draft from the committed value.

        Returns False (and does nothing) for read-only cells.
        """
        if self.read_only:
            return False
        if not self.is_editing:
            self.mode = CellMode.EDITING
            self.draft_value = self.committed_value
            self.error = None
        return True

    def set_draft(self, value: Any) -> None:
        if not self.is_editing:
            return
        self.draft_value = value
        self.error = None

    def commit(self) -> bool:
        """Confirm the draft.

        A draft equal to the committed value leaves editing without parsing.
        Otherwise the draft is parsed by the column; a parse failure keeps the
        cell editing with ``error`` set. A valid draft always leaves editing
        mode, and ``on_update`` is called once, only when the parsed value
        differs from the committed one.

        Returns:
            True if an update was emitted
        """
        if not self.is_editing:
            return False
        if self.draft_value == self.committed_value:
            # Untouched drafts skip parse
            self._leave_editing()
            return False
        try:
            value = self.column.parse(self.draft_value)
        except ValidationError as e:
            self.error = str(e)
            self.logger.debug(f"Rejected draft for {self.column_id}[{self.row_index}]: {e}")
            return False

        changed = value != self.committed_value
        self._leave_editing()
        if not changed:
            return False

        self.logger.debug(f"Cell {self.column_id}[{self.row_index}] changed to {value!r}")
        self.on_update(self.row_index, self.column_id, value)
        return True

    def cancel(self) -> None:
        """Discard the draft and return to display mode."""
        if self.is_editing:
            self._leave_editing()

    def confirm(self) -> bool:
        """Explicit confirm (the editor's check button)."""
        return self.commit()

    def blur(self) -> bool:
        """Focus left the text editor; confirms like Enter."""
        return self.commit()

    def close_selector(self) -> bool:
        """The option list was dismissed; commits the staged choice if any."""
        return self.commit()

    def select(self, value: Any) -> bool:
        """Pick an option: stage it as the draft and commit immediately."""
        if not self.is_editing or not isinstance(self.column, SelectColumn):
            return False
        self.set_draft(value)
        return self.commit()

    def handle_key(self, key: str) -> bool:
        """Keyboard input from the editor. Returns True if the key was handled."""
        if not self.is_editing:
            return False
        if key in self.CONFIRM_KEYS:
            self.commit()
            return True
        if key in self.CANCEL_KEYS:
            self.cancel()
            return True
        return False

    def sync(self, value: Any, row_index: Optional[int] = None) -> None:
        """Accept fresh upstream data for this cell.

        The row index always follows the table. While editing, the value is
        held back so the draft is not overwritten, and becomes the committed
        value when editing ends.
        """
        if row_index is not None:
            self.row_index = row_index
        if self.is_editing:
            self._pending_value = value
        else:
            self.committed_value = value

    def display_text(self) -> str:
        return self.column.format_value(self.committed_value)

    def render(self) -> CellView:
        if self.is_editing:
            options = self.column.options if isinstance(self.column, SelectColumn) else ()
            return CellView(
                mode=self.mode,
                text=self.display_text(),
                editor=self.column.input_type,
                draft=self.draft_value,
                options=options,
                error=self.error,
                class_name=self.column.class_name,
            )
        text = self.display_text()
        return CellView(
            mode=self.mode,
            text=text,
            show_edit_icon=not self.read_only and not self.column.hide_edit_icon,
            is_empty=text == "",
            class_name=self.column.class_name,
        )

    def _leave_editing(self):
        self.mode = CellMode.DISPLAY
        self.draft_value = None
        self.error = None
        if self._pending_value is not _NO_VALUE:
            self.committed_value = self._pending_value
            self._pending_value = _NO_VALUE

    def __repr__(self):
        return f"EditableCell({self.column_id!r}, row={self.row_index}, mode={self.mode.value})"
