"""Tests for table column definitions."""
import pytest
from shared.enums import EquipmentKind, InputType
from shared.schemas import CameraResponse
from shared.validation import ValidationError
from src.sitewalk_app.table.columns import (
    ActionColumn, ColumnConfigError, ColumnHelper, ColumnOption, NumberColumn, ReadOnlyColumn,
    SelectColumn, TextColumn, create_options, validate_columns,
)
from src.sitewalk_app.table.equipment_columns import build_columns


@pytest.fixture
def helper():
    return ColumnHelper(['id', 'location', 'floor_count', 'lock_type', 'notes'])


class TestColumnHelper:

    def test_text_column_defaults(self, helper):
        column = helper.text('location')
        assert isinstance(column, TextColumn)
        assert column.id == 'location'
        assert column.header == 'Location'
        assert column.input_type is InputType.TEXT
        assert column.get_value({'location': 'Lobby'}) == 'Lobby'

    def test_unknown_field_fails(self, helper):
        with pytest.raises(ColumnConfigError, match="Unknown field 'locaton'"):
            helper.text('locaton')

    def test_for_schema_uses_model_fields(self):
        helper = ColumnHelper.for_schema(CameraResponse)
        assert helper.select('camera_type', ['Fisheye']).id == 'camera_type'
        with pytest.raises(ColumnConfigError):
            helper.text('floor_count')

    def test_computed_column_needs_id(self, helper):
        with pytest.raises(ColumnConfigError, match='explicit id'):
            helper.read_only(lambda row: row['location'].upper())
        column = helper.read_only(lambda row: row['location'].upper(), id='shout')
        assert column.get_value({'location': 'roof'}) == 'ROOF'

    def test_display_column(self, helper):
        column = helper.display('actions', 'ACTIONS')
        assert isinstance(column, ActionColumn)
        assert column.is_display
        assert not column.editable
        assert not column.sortable
        assert column.get_value({'location': 'Lobby'}) is None

    def test_display_column_needs_id(self, helper):
        with pytest.raises(ColumnConfigError):
            helper.display('')

    def test_display_column_with_comparator_is_sortable(self, helper):
        column = helper.display('actions', comparator=lambda a, b: a['id'] - b['id'])
        assert column.sortable


class TestColumnVariants:

    def test_create_options(self):
        options = create_options(['Wall', {'label': 'Ceiling mount', 'value': 'Ceiling'}, {'value': 'Pole'}])
        assert options == (
            ColumnOption('Wall', 'Wall'),
            ColumnOption('Ceiling mount', 'Ceiling'),
            ColumnOption('Pole', 'Pole'),
        )

    def test_select_requires_options(self):
        with pytest.raises(ColumnConfigError):
            SelectColumn(id='lock_type', accessor='lock_type', options=())

    def test_select_parse(self):
        column = SelectColumn(id='lock_type', accessor='lock_type', options=['Standard', 'Mag'])
        assert column.parse('Mag') == 'Mag'
        assert column.parse('') is None
        with pytest.raises(ValidationError):
            column.parse('Padlock')

    def test_select_not_empty(self):
        column = SelectColumn(id='lock_type', accessor='lock_type', options=['Standard'], allow_empty=False)
        with pytest.raises(ValidationError, match='is required'):
            column.parse(None)

    def test_select_formats_label(self):
        column = SelectColumn(id='lock_type', accessor='lock_type',
                              options=[{'label': 'Mag Lock', 'value': 'Mag'}])
        assert column.format_value('Mag') == 'Mag Lock'
        assert column.format_value('Unknown') == 'Unknown'
        assert column.format_value(None) == ''

    def test_text_parse(self):
        column = TextColumn(id='notes', accessor='notes')
        assert column.parse('hello') == 'hello'
        assert column.parse('   ') is None
        required = TextColumn(id='location', header='Location', accessor='location', required=True)
        with pytest.raises(ValidationError, match='Location is required'):
            required.parse('')

    def test_number_parse(self):
        column = NumberColumn(id='floor_count', header='Floors', accessor='floor_count', min_value=0)
        assert column.input_type is InputType.NUMBER
        assert column.parse('12') == 12
        assert column.parse('') is None
        with pytest.raises(ValidationError, match='Floors must be a valid whole number'):
            column.parse('twelve')

    def test_formatter_only_affects_display(self):
        column = NumberColumn(id='floor_count', accessor='floor_count', formatter=lambda v: f'{v} floors')
        assert column.format_value(3) == '3 floors'
        assert column.parse('3') == 3

    def test_read_only_and_custom_cell_not_editable(self):
        assert not ReadOnlyColumn(id='id', accessor='id').editable
        assert not TextColumn(id='notes', accessor='notes', cell=lambda row, v: v).editable
        assert TextColumn(id='notes', accessor='notes', hide_edit_icon=True).editable

    def test_action_column_rejects_accessor(self):
        with pytest.raises(ColumnConfigError):
            ActionColumn(id='actions', accessor='location')


class TestValidateColumns:

    def test_duplicate_ids(self, helper):
        with pytest.raises(ColumnConfigError, match="Duplicate column id: 'location'"):
            validate_columns([helper.text('location'), helper.text('notes', id='location')])

    def test_accessor_column_without_accessor(self):
        with pytest.raises(ColumnConfigError, match='has no accessor'):
            validate_columns([TextColumn(id='location')])

    def test_valid(self, helper):
        validate_columns([helper.text('location'), helper.number('floor_count'), helper.display('actions')])


@pytest.mark.parametrize('kind', list(EquipmentKind))
def test_equipment_layouts_are_valid(kind):
    columns = build_columns(kind)
    validate_columns(columns)
    assert columns[0].id == 'location'
    assert columns[-1].is_display


def test_elevator_layout_has_number_column():
    columns = {column.id: column for column in build_columns(EquipmentKind.ELEVATORS)}
    assert isinstance(columns['floor_count'], NumberColumn)
