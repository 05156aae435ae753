"""Equipment table UI view."""
import toga
from toga.style import Pack
from toga.style.pack import COLUMN, ROW

from shared.enums import CellMode, InputType, SortDirection

SORT_MARKERS = {
    SortDirection.NONE: '',
    SortDirection.ASC: ' ▲',
    SortDirection.DESC: ' ▼',
}
EMPTY_CELL_TEXT = '-'


class EquipmentTableView:
    """View class for one editable equipment table.

    Widgets are rebuilt from the DataTable after every change; all state
    lives in the table and its cells.
    """

    def __init__(self, handler):
        """Initialize the equipment table view.

        Args:
            handler: EquipmentTableHandler driving the table
        """
        self.handler = handler
        self.table = handler.table
        self.container = None
        self.body = None
        self.header = None
        self.search_input = None
        self._row_widgets = []
        self._header_buttons = {}
        handler.add_listener(self.refresh)

    def build(self):
        """Create and return the table widget tree.

        Returns:
            toga.Box: Search input, header row and body
        """
        self.search_input = toga.TextInput(
            placeholder=f'Search {self.handler.kind.value.replace("-", " ")} by location',
            on_change=self.on_search_change,
            style=Pack(padding=(5, 5, 10, 5)),
        )
        self._header_buttons = {
            column.id: toga.Button(
                self.header_label(column),
                on_press=lambda w, column_id=column.id: self.on_header_press(column_id),
                enabled=column.sortable,
                style=Pack(flex=1, padding=2),
            )
            for column in self.table.columns
        }
        self.header = toga.Box(children=list(self._header_buttons.values()), style=Pack(direction=ROW))
        self.body = toga.Box(style=Pack(direction=COLUMN))
        self.container = toga.Box(
            children=[self.search_input, self.header, self.body],
            style=Pack(direction=COLUMN, padding=10),
        )
        self.refresh()
        return self.container

    def header_label(self, column):
        return f'{column.header}{SORT_MARKERS[self.table.header_direction(column.id)]}'

    def refresh(self):
        """Rebuild the header labels and rows from the table."""
        if self.body is None:
            return
        for column in self.table.columns:
            self._header_buttons[column.id].text = self.header_label(column)

        for widget in self._row_widgets:
            self.body.remove(widget)
        self._row_widgets = [self._row_box(row.index) for row in self.table.rows]
        if not self._row_widgets:
            self._row_widgets = [toga.Label(f'No {self.handler.kind.value.replace("-", " ")} found', style=Pack(padding=10))]
        for widget in self._row_widgets:
            self.body.add(widget)

    def _row_box(self, row_index):
        return toga.Box(
            children=[self._cell_widget(row_index, column) for column in self.table.columns],
            style=Pack(direction=ROW),
        )

    def _cell_widget(self, row_index, column):
        if column.is_display:
            return self._actions_box(row_index)

        view = self.table.render_cell(row_index, column.id)
        if view.mode is CellMode.DISPLAY:
            text = view.text or EMPTY_CELL_TEXT
            if column.editable:
                if view.show_edit_icon:
                    text = f'{text} ✎'
                return toga.Button(
                    text,
                    on_press=lambda w: self.on_cell_press(row_index, column.id),
                    style=Pack(flex=1, padding=2),
                )
            return toga.Label(text, style=Pack(flex=1, padding=2))

        if view.editor is InputType.SELECT:
            return self._selector(row_index, column, view)
        return self._text_editor(row_index, column, view)

    def _selector(self, row_index, column, view):
        labels = [option.label for option in view.options]
        current = column.label_for(view.draft)
        selection = toga.Selection(
            items=labels,
            value=current if current in labels else None,
            on_change=lambda w: self.on_select(row_index, column.id, w.value),
            style=Pack(flex=1),
        )
        cancel = toga.Button('✕', on_press=lambda w: self.on_cancel(row_index, column.id), style=Pack(padding=2))
        return toga.Box(children=[selection, cancel], style=Pack(direction=ROW, flex=1))

    def _text_editor(self, row_index, column, view):
        editor = toga.TextInput(
            value='' if view.draft is None else str(view.draft),
            on_change=lambda w: self.on_draft_change(row_index, column.id, w.value),
            on_confirm=lambda w: self.on_key(row_index, column.id, 'Enter'),
            on_lose_focus=lambda w: self.on_blur(row_index, column.id),
            style=Pack(flex=1),
        )
        children = [
            editor,
            toga.Button('✓', on_press=lambda w: self.on_confirm(row_index, column.id), style=Pack(padding=2)),
            toga.Button('✕', on_press=lambda w: self.on_key(row_index, column.id, 'Escape'), style=Pack(padding=2)),
        ]
        if view.error:
            children.append(toga.Label(view.error, style=Pack(color='red', padding=2)))
        return toga.Box(children=children, style=Pack(direction=ROW, flex=1))

    def _actions_box(self, row_index):
        return toga.Box(
            children=[
                toga.Button('Duplicate', on_press=lambda w: self.handler.duplicate(row_index), style=Pack(padding=2)),
                toga.Button('Delete', on_press=lambda w: self.handler.delete(row_index), style=Pack(padding=2)),
            ],
            style=Pack(direction=ROW),
        )

    # Event handlers

    def on_search_change(self, widget):
        self.handler.search(widget.value)

    def on_header_press(self, column_id):
        self.handler.sort(column_id)

    def on_cell_press(self, row_index, column_id):
        if self.table.cell(row_index, column_id).start_edit():
            self.refresh()

    def on_draft_change(self, row_index, column_id, value):
        self.table.cell(row_index, column_id).set_draft(value)

    def on_key(self, row_index, column_id, key):
        self.table.cell(row_index, column_id).handle_key(key)
        self.refresh()

    def on_confirm(self, row_index, column_id):
        self.table.cell(row_index, column_id).confirm()
        self.refresh()

    def on_blur(self, row_index, column_id):
        cell = self.table.cell(row_index, column_id)
        if cell.is_editing:
            cell.blur()
            self.refresh()

    def on_select(self, row_index, column_id, label):
        column = self.table.column(column_id)
        for option in column.options:
            if option.label == label:
                self.table.cell(row_index, column_id).select(option.value)
                break
        self.refresh()

    def on_cancel(self, row_index, column_id):
        self.table.cell(row_index, column_id).cancel()
        self.refresh()
