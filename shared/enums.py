import enum


class EquipmentKind(str, enum.Enum):
    """Equipment collections recorded during a site walk.

    The value is the URL segment used by the REST API
    (``/api/projects/<id>/<value>`` and ``/api/<value>/<id>``).
    """
    ACCESS_POINTS = "access-points"
    CAMERAS = "cameras"
    ELEVATORS = "elevators"
    INTERCOMS = "intercoms"

    @property
    def singular(self):
        """Human readable singular name, e.g. 'access point'."""
        return {
            EquipmentKind.ACCESS_POINTS: "access point",
            EquipmentKind.CAMERAS: "camera",
            EquipmentKind.ELEVATORS: "elevator",
            EquipmentKind.INTERCOMS: "intercom",
        }[self]


class InputType(str, enum.Enum):
    """Editor widget types for editable table columns."""
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"


class CellMode(str, enum.Enum):
    """Modes of an editable table cell."""
    DISPLAY = "display"
    EDITING = "editing"


class SortDirection(str, enum.Enum):
    """Tri-state sort indicator of a table column."""
    NONE = "none"
    ASC = "asc"
    DESC = "desc"


class ReportName(str, enum.Enum):
    """Printable project reports served by the backend."""
    DOOR_SCHEDULE = "door-schedule"
    CAMERA_SCHEDULE = "camera-schedule"
    PROJECT_SUMMARY = "project-summary"


class NotificationVariant(str, enum.Enum):
    """Visual variants of user notifications."""
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
