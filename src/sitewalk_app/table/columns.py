"""Column definitions for editable entity tables.

A table column is one of a closed set of variants:

- ``TextColumn``: free-text editor
- ``NumberColumn``: numeric editor, drafts are coerced before commit
- ``SelectColumn``: single choice from an ordered option list
- ``ReadOnlyColumn``: shows an entity field, never editable
- ``ActionColumn``: display-only (buttons), no accessor, sortable only with
  a custom comparator

Accessor columns are normally built through a ``ColumnHelper`` bound to the
entity's field names so a column cannot reference a field the entity does
not have.
"""
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, Optional, Sequence, Tuple, Union
import logging

from shared.enums import InputType
from shared.validation import Validator, ValidationError

logger = logging.getLogger(__name__)

Accessor = Union[str, Callable[[dict], Any]]


class ColumnConfigError(ValueError):
    """Raised when a table is configured with invalid columns."""
    pass


@dataclass(frozen=True)
class ColumnOption:
    """One choice of a select column."""
    label: str
    value: Any


def create_options(items: Iterable) -> Tuple[ColumnOption, ...]:
    """Build select options from plain strings or ``{label, value}`` dicts.

    The label falls back to the value when it is missing or empty.
    """
    options = []
    for item in items:
        if isinstance(item, ColumnOption):
            options.append(item)
        elif isinstance(item, dict):
            value = item['value']
            options.append(ColumnOption(label=item.get('label') or str(value), value=value))
        else:
            options.append(ColumnOption(label=str(item), value=item))
    return tuple(options)


@dataclass(frozen=True)
class BaseColumn:
    """Fields and behavior common to every column variant.

    Attributes:
        id: Unique column id within a table
        header: Display label
        accessor: Row key or callable reading the value from a row
        cell: Custom renderer ``(row, value) -> str``; replaces the editor
        formatter: Display formatter, applied only while not editing
        hide_edit_icon: Hide the edit affordance without disabling editing
        class_name: Layout hint for the view
        sort_type: 'auto', 'text' or 'number'
    """
    id: str
    header: str = ""
    accessor: Optional[Accessor] = None
    cell: Optional[Callable[[dict, Any], str]] = None
    formatter: Optional[Callable[[Any], str]] = None
    hide_edit_icon: bool = False
    class_name: str = ""
    sort_type: str = "auto"

    read_only: ClassVar[bool] = False
    input_type: ClassVar[InputType] = InputType.TEXT

    @property
    def is_display(self) -> bool:
        return False

    @property
    def editable(self) -> bool:
        return not self.read_only and self.cell is None

    @property
    def sortable(self) -> bool:
        return True

    def get_value(self, row: dict) -> Any:
        if callable(self.accessor):
            return self.accessor(row)
        return row.get(self.accessor)

    def format_value(self, value: Any) -> str:
        if self.formatter is not None:
            return self.formatter(value)
        if value is None:
            return ""
        return str(value)

    def parse(self, raw: Any) -> Any:
        """Validate and coerce a draft value before it is committed.

        Raises:
            ValidationError: If the draft is not acceptable for this column
        """
        return raw


@dataclass(frozen=True)
class TextColumn(BaseColumn):
    """Free-text column. Empty drafts are committed as None."""
    required: bool = False
    max_length: Optional[int] = None

    def parse(self, raw):
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            if self.required:
                raise ValidationError(f"{self.header or self.id} is required")
            return None
        text = raw if isinstance(raw, str) else str(raw)
        if self.max_length is not None:
            Validator.validate_string_length(text, self.header or self.id, 0, self.max_length)
        return text


@dataclass(frozen=True)
class NumberColumn(BaseColumn):
    allow_float: bool = False
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    sort_type: str = "number"

    input_type: ClassVar[InputType] = InputType.NUMBER

    def parse(self, raw):
        return Validator.validate_number(
            raw, self.header or self.id,
            allow_float=self.allow_float, min_val=self.min_value, max_val=self.max_value,
        )


@dataclass(frozen=True)
class SelectColumn(BaseColumn):
    """Closed-set column; drafts must be one of the option values."""
    options: Tuple[ColumnOption, ...] = ()
    allow_empty: bool = True

    input_type: ClassVar[InputType] = InputType.SELECT

    def __post_init__(self):
        if not self.options:
            raise ColumnConfigError(f"Select column '{self.id}' needs at least one option")
        # Accept plain lists of strings or dicts in the constructor
        object.__setattr__(self, 'options', create_options(self.options))

    @property
    def option_values(self) -> list:
        return [option.value for option in self.options]

    def label_for(self, value) -> Optional[str]:
        for option in self.options:
            if option.value == value:
                return option.label
        return None

    def format_value(self, value):
        if self.formatter is not None:
            return self.formatter(value)
        if value is None:
            return ""
        label = self.label_for(value)
        return label if label is not None else str(value)

    def parse(self, raw):
        if raw is None or raw == "":
            if not self.allow_empty:
                raise ValidationError(f"{self.header or self.id} is required")
            return None
        return Validator.validate_choice(raw, self.header or self.id, self.option_values)


@dataclass(frozen=True)
class ReadOnlyColumn(BaseColumn):
    read_only: ClassVar[bool] = True


@dataclass(frozen=True)
class ActionColumn(BaseColumn):
    """Display-only column (row actions). Never edited, never sorted by value."""
    comparator: Optional[Callable[[dict, dict], int]] = None

    read_only: ClassVar[bool] = True

    def __post_init__(self):
        if self.accessor is not None:
            raise ColumnConfigError(f"Display column '{self.id}' cannot have an accessor")

    @property
    def is_display(self):
        return True

    @property
    def sortable(self):
        return self.comparator is not None

    def get_value(self, row):
        return None


def validate_columns(columns: Sequence[BaseColumn]) -> None:
    """Check a table's column list.

    Raises:
        ColumnConfigError: On empty or duplicate ids, or accessor columns
            without an accessor
    """
    seen = set()
    for column in columns:
        if not column.id:
            raise ColumnConfigError("Column id must not be empty")
        if column.id in seen:
            raise ColumnConfigError(f"Duplicate column id: '{column.id}'")
        if not column.is_display and column.accessor is None:
            raise ColumnConfigError(f"Column '{column.id}' has no accessor")
        seen.add(column.id)


class ColumnHelper:
    """Builds columns for one entity type.

    Accessor keys are checked against the entity's field names when the
    column is built, so a typo fails at table setup instead of rendering an
    always-empty column.

    Usage:
        helper = ColumnHelper.for_schema(CameraResponse)
        columns = [
            helper.text('location', 'Location', required=True),
            helper.select('camera_type', CAMERA_TYPES, 'Camera Type'),
            helper.display('actions', 'Actions'),
        ]
    """

    def __init__(self, fields: Iterable[str]):
        self.fields = frozenset(fields)

    @classmethod
    def for_schema(cls, schema) -> "ColumnHelper":
        """Create a helper from a pydantic model's declared fields."""
        return cls(schema.model_fields.keys())

    def accessor(self, key: Accessor, column_class=TextColumn, header: str = "",
                 id: Optional[str] = None, **options) -> BaseColumn:
        """Build an accessor column of the given variant.

        Args:
            key: Field name, or a callable computing the value from a row
            column_class: Column variant (TextColumn, NumberColumn, ...)
            header: Display label (defaults to a title-cased key)
            id: Column id, required for callable accessors
            **options: Variant-specific options

        Raises:
            ColumnConfigError: If the key is not a field of the entity
        """
        if column_class is ActionColumn:
            raise ColumnConfigError("Use display() for action columns")
        if callable(key):
            if not id:
                raise ColumnConfigError("Computed columns need an explicit id")
        elif key not in self.fields:
            raise ColumnConfigError(
                f"Unknown field '{key}'; expected one of: {', '.join(sorted(self.fields))}"
            )
        column_id = id or key
        return column_class(
            id=column_id,
            header=header or column_id.replace('_', ' ').title(),
            accessor=key,
            **options,
        )

    def text(self, key, header="", **options) -> TextColumn:
        return self.accessor(key, TextColumn, header, **options)

    def number(self, key, header="", **options) -> NumberColumn:
        return self.accessor(key, NumberColumn, header, **options)

    def select(self, key, options, header="", **extra) -> SelectColumn:
        return self.accessor(key, SelectColumn, header, options=create_options(options), **extra)

    def read_only(self, key, header="", **options) -> ReadOnlyColumn:
        return self.accessor(key, ReadOnlyColumn, header, **options)

    def display(self, id: str, header: str = "", **options) -> ActionColumn:
        """Build a display-only column (no accessor)."""
        if not id:
            raise ColumnConfigError("Display columns need a unique id")
        return ActionColumn(id=id, header=header, **options)
