"""Column layouts of the equipment tables."""
from shared.enums import EquipmentKind
from shared.lookup import (
    QUICK_CONFIG_OPTIONS, READER_TYPES, LOCK_TYPES, MONITORING_TYPES, TAKEOVER_OPTIONS,
    INTERIOR_PERIMETER_OPTIONS, CAMERA_TYPES, MOUNTING_TYPES, RESOLUTIONS, ELEVATOR_TYPES,
    INTERCOM_TYPES,
)
from shared.schemas import AccessPointResponse, CameraResponse, ElevatorResponse, IntercomResponse
from .columns import ColumnHelper

SEARCH_COLUMN = 'location'


def _actions(helper):
    return helper.display('actions', 'ACTIONS', class_name='actions')


def access_point_columns():
    helper = ColumnHelper.for_schema(AccessPointResponse)
    return [
        helper.text('location', 'LOCATION', required=True),
        helper.select('quick_config', QUICK_CONFIG_OPTIONS, 'QUICK CONFIG', allow_empty=False),
        helper.select('reader_type', READER_TYPES, 'READER TYPE', allow_empty=False),
        helper.select('lock_type', LOCK_TYPES, 'LOCK TYPE', allow_empty=False),
        helper.select('monitoring_type', MONITORING_TYPES, 'MONITORING', allow_empty=False),
        helper.select('takeover', TAKEOVER_OPTIONS, 'TAKEOVER'),
        helper.select('interior_perimeter', INTERIOR_PERIMETER_OPTIONS, 'INTERIOR/PERIMETER'),
        helper.text('notes', 'NOTES', hide_edit_icon=True),
        _actions(helper),
    ]


def camera_columns():
    helper = ColumnHelper.for_schema(CameraResponse)
    return [
        helper.text('location', 'LOCATION', required=True),
        helper.select('camera_type', CAMERA_TYPES, 'CAMERA TYPE', allow_empty=False),
        helper.select('mounting_type', MOUNTING_TYPES, 'MOUNTING TYPE'),
        helper.select('resolution', RESOLUTIONS, 'RESOLUTION'),
        helper.text('field_of_view', 'FIELD OF VIEW'),
        helper.text('notes', 'NOTES', hide_edit_icon=True),
        _actions(helper),
    ]


def elevator_columns():
    helper = ColumnHelper.for_schema(ElevatorResponse)
    return [
        helper.text('location', 'LOCATION', required=True),
        helper.select('elevator_type', ELEVATOR_TYPES, 'ELEVATOR TYPE', allow_empty=False),
        helper.number('floor_count', 'FLOORS', min_value=0),
        helper.text('bank_name', 'BANK'),
        helper.text('notes', 'NOTES', hide_edit_icon=True),
        _actions(helper),
    ]


def intercom_columns():
    helper = ColumnHelper.for_schema(IntercomResponse)
    return [
        helper.text('location', 'LOCATION', required=True),
        helper.select('intercom_type', INTERCOM_TYPES, 'INTERCOM TYPE', allow_empty=False),
        helper.text('notes', 'NOTES', hide_edit_icon=True),
        _actions(helper),
    ]


COLUMN_BUILDERS = {
    EquipmentKind.ACCESS_POINTS: access_point_columns,
    EquipmentKind.CAMERAS: camera_columns,
    EquipmentKind.ELEVATORS: elevator_columns,
    EquipmentKind.INTERCOMS: intercom_columns,
}


def build_columns(kind):
    """Columns of the table for one equipment kind."""
    return COLUMN_BUILDERS[EquipmentKind(kind)]()
