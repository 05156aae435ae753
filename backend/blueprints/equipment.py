"""Equipment blueprints (access points, cameras, elevators, intercoms)."""
from flask import Blueprint
from ..models import EQUIPMENT_MODELS
from ..base.generic_crud import GenericCRUD, register_crud_routes
from shared.enums import EquipmentKind
from shared.schemas import (
    AccessPointCreate, AccessPointUpdate, AccessPointResponse,
    CameraCreate, CameraUpdate, CameraResponse,
    ElevatorCreate, ElevatorUpdate, ElevatorResponse,
    IntercomCreate, IntercomUpdate, IntercomResponse,
)

EQUIPMENT_SCHEMAS = {
    EquipmentKind.ACCESS_POINTS: (AccessPointCreate, AccessPointUpdate, AccessPointResponse),
    EquipmentKind.CAMERAS: (CameraCreate, CameraUpdate, CameraResponse),
    EquipmentKind.ELEVATORS: (ElevatorCreate, ElevatorUpdate, ElevatorResponse),
    EquipmentKind.INTERCOMS: (IntercomCreate, IntercomUpdate, IntercomResponse),
}


def mark_location_copy(values):
    """Suffix the location of a duplicated row with ' (Copy)'."""
    values['location'] = f"{values['location']} (Copy)"
    return values


def create_equipment_blueprint(kind):
    """Build the blueprint serving one equipment kind under /api."""
    create_schema, update_schema, response_schema = EQUIPMENT_SCHEMAS[kind]
    bp = Blueprint(kind.value.replace('-', '_'), __name__, url_prefix='/api')
    crud = GenericCRUD(
        model=EQUIPMENT_MODELS[kind],
        create_schema=create_schema,
        update_schema=update_schema,
        response_schema=response_schema,
        singular_name=kind.singular,
        logger_name=kind.value,
        duplicate_hook=mark_location_copy,
    )
    register_crud_routes(bp, crud, kind.value)
    return bp


blueprints = [create_equipment_blueprint(kind) for kind in EquipmentKind]
