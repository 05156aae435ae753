"""Pydantic schemas for validation and serialization."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict
from shared.validation import Validator

TEXT_MAX = 2000
NAME_MAX = 200


def sanitize_html(text: Optional[str]) -> Optional[str]:
    """Sanitize free text coming from the UI."""
    return Validator.sanitize_html(text)


def require_text(value: Optional[str], field_name: str, max_length: int = NAME_MAX) -> str:
    """Validate a required text field inside a pydantic validator.

    Raises ValueError so pydantic reports the failure with the field location.
    """
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    value = value.strip()
    if not value:
        raise ValueError(f"{field_name} is required")
    if len(value) > max_length:
        raise ValueError(f"{field_name} must be no more than {max_length} characters")
    return sanitize_html(value)


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return sanitize_html(value.strip())


# Project Schemas
PROJECT_FLAGS = (
    'replace_readers', 'need_credentials', 'takeover', 'pull_wire', 'visitor',
    'install_locks', 'ble', 'ppi_quote_needed', 'guard_controls', 'floorplan',
    'test_card', 'conduit_drawings', 'reports_available', 'photo_id',
    'on_site_security', 'photo_badging', 'kastle_connect', 'wireless_locks', 'rush',
)


class ProjectBase(BaseModel):
    name: str = Field(..., max_length=NAME_MAX)
    client: Optional[str] = Field(default=None, max_length=500)
    site_address: Optional[str] = Field(default=None, max_length=500)
    se_name: Optional[str] = Field(default=None, max_length=NAME_MAX)
    bdm_name: Optional[str] = Field(default=None, max_length=NAME_MAX)
    building_count: Optional[int] = Field(default=None, ge=0)
    progress_percentage: Optional[int] = Field(default=0, ge=0, le=100)
    progress_notes: Optional[str] = Field(default=None, max_length=TEXT_MAX)
    equipment_notes: Optional[str] = Field(default=None, max_length=TEXT_MAX)
    scope_notes: Optional[str] = Field(default=None, max_length=TEXT_MAX)
    replace_readers: bool = False
    need_credentials: bool = False
    takeover: bool = False
    pull_wire: bool = False
    visitor: bool = False
    install_locks: bool = False
    ble: bool = False
    ppi_quote_needed: bool = False
    guard_controls: bool = False
    floorplan: bool = False
    test_card: bool = False
    conduit_drawings: bool = False
    reports_available: bool = False
    photo_id: bool = False
    on_site_security: bool = False
    photo_badging: bool = False
    kastle_connect: bool = False
    wireless_locks: bool = False
    rush: bool = False

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return require_text(v, 'name')

    @field_validator('client', 'site_address', 'se_name', 'bdm_name',
                     'progress_notes', 'equipment_notes', 'scope_notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class ProjectCreate(ProjectBase):
    pass


class ProjectUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=NAME_MAX)
    client: Optional[str] = Field(None, max_length=500)
    site_address: Optional[str] = Field(None, max_length=500)
    se_name: Optional[str] = Field(None, max_length=NAME_MAX)
    bdm_name: Optional[str] = Field(None, max_length=NAME_MAX)
    building_count: Optional[int] = Field(None, ge=0)
    progress_percentage: Optional[int] = Field(None, ge=0, le=100)
    progress_notes: Optional[str] = Field(None, max_length=TEXT_MAX)
    equipment_notes: Optional[str] = Field(None, max_length=TEXT_MAX)
    scope_notes: Optional[str] = Field(None, max_length=TEXT_MAX)
    replace_readers: Optional[bool] = None
    need_credentials: Optional[bool] = None
    takeover: Optional[bool] = None
    pull_wire: Optional[bool] = None
    visitor: Optional[bool] = None
    install_locks: Optional[bool] = None
    ble: Optional[bool] = None
    ppi_quote_needed: Optional[bool] = None
    guard_controls: Optional[bool] = None
    floorplan: Optional[bool] = None
    test_card: Optional[bool] = None
    conduit_drawings: Optional[bool] = None
    reports_available: Optional[bool] = None
    photo_id: Optional[bool] = None
    on_site_security: Optional[bool] = None
    photo_badging: Optional[bool] = None
    kastle_connect: Optional[bool] = None
    wireless_locks: Optional[bool] = None
    rush: Optional[bool] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return require_text(v, 'name')

    @field_validator('client', 'site_address', 'se_name', 'bdm_name',
                     'progress_notes', 'equipment_notes', 'scope_notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class ProjectResponse(ProjectBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return v


# Access Point Schemas
class AccessPointBase(BaseModel):
    project_id: int = Field(..., gt=0)
    location: str = Field(..., max_length=NAME_MAX)
    quick_config: str = Field(..., max_length=NAME_MAX)
    reader_type: str = Field(..., max_length=NAME_MAX)
    lock_type: str = Field(..., max_length=NAME_MAX)
    monitoring_type: str = Field(..., max_length=NAME_MAX)
    lock_provider: Optional[str] = Field(default=None, max_length=NAME_MAX)
    takeover: Optional[str] = Field(default=None, max_length=NAME_MAX)
    interior_perimeter: Optional[str] = Field(default=None, max_length=NAME_MAX)
    exst_panel_location: Optional[str] = Field(default=None, max_length=NAME_MAX)
    exst_panel_type: Optional[str] = Field(default=None, max_length=NAME_MAX)
    exst_reader_type: Optional[str] = Field(default=None, max_length=NAME_MAX)
    new_panel_location: Optional[str] = Field(default=None, max_length=NAME_MAX)
    new_panel_type: Optional[str] = Field(default=None, max_length=NAME_MAX)
    new_reader_type: Optional[str] = Field(default=None, max_length=NAME_MAX)
    noisy_prop: Optional[str] = Field(default=None, max_length=NAME_MAX)
    crashbars: Optional[str] = Field(default=None, max_length=NAME_MAX)
    real_lock_type: Optional[str] = Field(default=None, max_length=NAME_MAX)
    notes: Optional[str] = Field(default=None, max_length=TEXT_MAX)

    @field_validator('location', 'quick_config', 'reader_type', 'lock_type', 'monitoring_type')
    @classmethod
    def validate_required_text(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator('lock_provider', 'takeover', 'interior_perimeter', 'exst_panel_location',
                     'exst_panel_type', 'exst_reader_type', 'new_panel_location', 'new_panel_type',
                     'new_reader_type', 'noisy_prop', 'crashbars', 'real_lock_type', 'notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class AccessPointCreate(AccessPointBase):
    pass


class AccessPointUpdate(BaseModel):
    location: Optional[str] = Field(None, max_length=NAME_MAX)
    quick_config: Optional[str] = Field(None, max_length=NAME_MAX)
    reader_type: Optional[str] = Field(None, max_length=NAME_MAX)
    lock_type: Optional[str] = Field(None, max_length=NAME_MAX)
    monitoring_type: Optional[str] = Field(None, max_length=NAME_MAX)
    lock_provider: Optional[str] = Field(None, max_length=NAME_MAX)
    takeover: Optional[str] = Field(None, max_length=NAME_MAX)
    interior_perimeter: Optional[str] = Field(None, max_length=NAME_MAX)
    exst_panel_location: Optional[str] = Field(None, max_length=NAME_MAX)
    exst_panel_type: Optional[str] = Field(None, max_length=NAME_MAX)
    exst_reader_type: Optional[str] = Field(None, max_length=NAME_MAX)
    new_panel_location: Optional[str] = Field(None, max_length=NAME_MAX)
    new_panel_type: Optional[str] = Field(None, max_length=NAME_MAX)
    new_reader_type: Optional[str] = Field(None, max_length=NAME_MAX)
    noisy_prop: Optional[str] = Field(None, max_length=NAME_MAX)
    crashbars: Optional[str] = Field(None, max_length=NAME_MAX)
    real_lock_type: Optional[str] = Field(None, max_length=NAME_MAX)
    notes: Optional[str] = Field(None, max_length=TEXT_MAX)

    @field_validator('location', 'quick_config', 'reader_type', 'lock_type', 'monitoring_type')
    @classmethod
    def validate_required_text(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator('lock_provider', 'takeover', 'interior_perimeter', 'exst_panel_location',
                     'exst_panel_type', 'exst_reader_type', 'new_panel_location', 'new_panel_type',
                     'new_reader_type', 'noisy_prop', 'crashbars', 'real_lock_type', 'notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class AccessPointResponse(BaseModel):
    id: int
    project_id: int
    location: str
    quick_config: str
    reader_type: str
    lock_type: str
    monitoring_type: str
    lock_provider: Optional[str] = None
    takeover: Optional[str] = None
    interior_perimeter: Optional[str] = None
    exst_panel_location: Optional[str] = None
    exst_panel_type: Optional[str] = None
    exst_reader_type: Optional[str] = None
    new_panel_location: Optional[str] = None
    new_panel_type: Optional[str] = None
    new_reader_type: Optional[str] = None
    noisy_prop: Optional[str] = None
    crashbars: Optional[str] = None
    real_lock_type: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# Camera Schemas
class CameraBase(BaseModel):
    project_id: int = Field(..., gt=0)
    location: str = Field(..., max_length=NAME_MAX)
    camera_type: str = Field(..., max_length=NAME_MAX)
    mounting_type: Optional[str] = Field(default=None, max_length=NAME_MAX)
    resolution: Optional[str] = Field(default=None, max_length=NAME_MAX)
    field_of_view: Optional[str] = Field(default=None, max_length=NAME_MAX)
    notes: Optional[str] = Field(default=None, max_length=TEXT_MAX)

    @field_validator('location', 'camera_type')
    @classmethod
    def validate_required_text(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator('mounting_type', 'resolution', 'field_of_view', 'notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class CameraCreate(CameraBase):
    pass


class CameraUpdate(BaseModel):
    location: Optional[str] = Field(None, max_length=NAME_MAX)
    camera_type: Optional[str] = Field(None, max_length=NAME_MAX)
    mounting_type: Optional[str] = Field(None, max_length=NAME_MAX)
    resolution: Optional[str] = Field(None, max_length=NAME_MAX)
    field_of_view: Optional[str] = Field(None, max_length=NAME_MAX)
    notes: Optional[str] = Field(None, max_length=TEXT_MAX)

    @field_validator('location', 'camera_type')
    @classmethod
    def validate_required_text(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator('mounting_type', 'resolution', 'field_of_view', 'notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class CameraResponse(BaseModel):
    id: int
    project_id: int
    location: str
    camera_type: str
    mounting_type: Optional[str] = None
    resolution: Optional[str] = None
    field_of_view: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# Elevator Schemas
class ElevatorBase(BaseModel):
    project_id: int = Field(..., gt=0)
    location: str = Field(..., max_length=NAME_MAX)
    elevator_type: str = Field(..., max_length=NAME_MAX)
    floor_count: Optional[int] = Field(default=None, ge=0)
    bank_name: Optional[str] = Field(default=None, max_length=NAME_MAX)
    notes: Optional[str] = Field(default=None, max_length=TEXT_MAX)

    @field_validator('location', 'elevator_type')
    @classmethod
    def validate_required_text(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator('bank_name', 'notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class ElevatorCreate(ElevatorBase):
    pass


class ElevatorUpdate(BaseModel):
    location: Optional[str] = Field(None, max_length=NAME_MAX)
    elevator_type: Optional[str] = Field(None, max_length=NAME_MAX)
    floor_count: Optional[int] = Field(None, ge=0)
    bank_name: Optional[str] = Field(None, max_length=NAME_MAX)
    notes: Optional[str] = Field(None, max_length=TEXT_MAX)

    @field_validator('location', 'elevator_type')
    @classmethod
    def validate_required_text(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator('bank_name', 'notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class ElevatorResponse(BaseModel):
    id: int
    project_id: int
    location: str
    elevator_type: str
    floor_count: Optional[int] = None
    bank_name: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# Intercom Schemas
class IntercomBase(BaseModel):
    project_id: int = Field(..., gt=0)
    location: str = Field(..., max_length=NAME_MAX)
    intercom_type: str = Field(..., max_length=NAME_MAX)
    notes: Optional[str] = Field(default=None, max_length=TEXT_MAX)

    @field_validator('location', 'intercom_type')
    @classmethod
    def validate_required_text(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator('notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class IntercomCreate(IntercomBase):
    pass


class IntercomUpdate(BaseModel):
    location: Optional[str] = Field(None, max_length=NAME_MAX)
    intercom_type: Optional[str] = Field(None, max_length=NAME_MAX)
    notes: Optional[str] = Field(None, max_length=TEXT_MAX)

    @field_validator('location', 'intercom_type')
    @classmethod
    def validate_required_text(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator('notes')
    @classmethod
    def sanitize_text_fields(cls, v):
        return optional_text(v)


class IntercomResponse(BaseModel):
    id: int
    project_id: int
    location: str
    intercom_type: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
