from flask_sqlalchemy import SQLAlchemy
from shared.models import Base, Project, AccessPoint, Camera, Elevator, Intercom
from shared.enums import EquipmentKind

db = SQLAlchemy(model_class=Base)

EQUIPMENT_MODELS = {
    EquipmentKind.ACCESS_POINTS: AccessPoint,
    EquipmentKind.CAMERAS: Camera,
    EquipmentKind.ELEVATORS: Elevator,
    EquipmentKind.INTERCOMS: Intercom,
}
