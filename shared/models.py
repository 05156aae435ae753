from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()

# Global timezone configuration - Eastern Time (US/Eastern)
# Uses zoneinfo for proper DST handling (EST/EDT)
from zoneinfo import ZoneInfo
APP_TIMEZONE = ZoneInfo('America/New_York')


def now():
    """Return current datetime in application timezone (Eastern Time, timezone-aware).

    Note: When stored in SQLite, timezone info is stripped (SQLite limitation).
    All stored datetimes should be treated as Eastern Time, even though they're stored naive.
    """
    return datetime.now(APP_TIMEZONE)


class TimestampMixin:
    """Mixin providing created/updated timestamps."""

    created_at = Column(DateTime, default=now)
    updated_at = Column(DateTime, default=now, onupdate=now)


class Project(Base, TimestampMixin):
    __tablename__ = 'projects'
    id = Column(Integer, primary_key=True, nullable=False)
    name = Column(String(200), nullable=False, server_default="")
    client = Column(Text)
    site_address = Column(Text)
    se_name = Column(String(200))
    bdm_name = Column(String(200))
    building_count = Column(Integer)
    progress_percentage = Column(Integer, default=0, server_default="0")
    progress_notes = Column(Text)
    equipment_notes = Column(Text)
    scope_notes = Column(Text)

    # Scope checklist
    replace_readers = Column(Boolean, default=False, server_default='0')
    need_credentials = Column(Boolean, default=False, server_default='0')
    takeover = Column(Boolean, default=False, server_default='0')
    pull_wire = Column(Boolean, default=False, server_default='0')
    visitor = Column(Boolean, default=False, server_default='0')
    install_locks = Column(Boolean, default=False, server_default='0')
    ble = Column(Boolean, default=False, server_default='0')
    ppi_quote_needed = Column(Boolean, default=False, server_default='0')
    guard_controls = Column(Boolean, default=False, server_default='0')
    floorplan = Column(Boolean, default=False, server_default='0')
    test_card = Column(Boolean, default=False, server_default='0')
    conduit_drawings = Column(Boolean, default=False, server_default='0')
    reports_available = Column(Boolean, default=False, server_default='0')
    photo_id = Column(Boolean, default=False, server_default='0')
    on_site_security = Column(Boolean, default=False, server_default='0')
    photo_badging = Column(Boolean, default=False, server_default='0')
    kastle_connect = Column(Boolean, default=False, server_default='0')
    wireless_locks = Column(Boolean, default=False, server_default='0')
    rush = Column(Boolean, default=False, server_default='0')

    access_points = relationship('AccessPoint', backref='project', lazy='select', cascade="all, delete-orphan")
    cameras = relationship('Camera', backref='project', lazy='select', cascade="all, delete-orphan")
    elevators = relationship('Elevator', backref='project', lazy='select', cascade="all, delete-orphan")
    intercoms = relationship('Intercom', backref='project', lazy='select', cascade="all, delete-orphan")


class AccessPoint(Base, TimestampMixin):
    __tablename__ = 'access_points'
    id = Column(Integer, primary_key=True, nullable=False)
    project_id = Column(Integer, ForeignKey('projects.id', ondelete='CASCADE'), nullable=False, index=True)
    location = Column(Text, nullable=False)
    quick_config = Column(Text, nullable=False)
    reader_type = Column(Text, nullable=False)
    lock_type = Column(Text, nullable=False)
    monitoring_type = Column(Text, nullable=False)
    lock_provider = Column(Text)
    takeover = Column(Text)
    interior_perimeter = Column(Text)
    exst_panel_location = Column(Text)
    exst_panel_type = Column(Text)
    exst_reader_type = Column(Text)
    new_panel_location = Column(Text)
    new_panel_type = Column(Text)
    new_reader_type = Column(Text)
    noisy_prop = Column(Text)
    crashbars = Column(Text)
    real_lock_type = Column(Text)
    notes = Column(Text)


class Camera(Base, TimestampMixin):
    __tablename__ = 'cameras'
    id = Column(Integer, primary_key=True, nullable=False)
    project_id = Column(Integer, ForeignKey('projects.id', ondelete='CASCADE'), nullable=False, index=True)
    location = Column(Text, nullable=False)
    camera_type = Column(Text, nullable=False)
    mounting_type = Column(Text)
    resolution = Column(Text)
    field_of_view = Column(Text)
    notes = Column(Text)


class Elevator(Base, TimestampMixin):
    __tablename__ = 'elevators'
    id = Column(Integer, primary_key=True, nullable=False)
    project_id = Column(Integer, ForeignKey('projects.id', ondelete='CASCADE'), nullable=False, index=True)
    location = Column(Text, nullable=False)
    elevator_type = Column(Text, nullable=False)
    floor_count = Column(Integer)
    bank_name = Column(Text)
    notes = Column(Text)


class Intercom(Base, TimestampMixin):
    __tablename__ = 'intercoms'
    id = Column(Integer, primary_key=True, nullable=False)
    project_id = Column(Integer, ForeignKey('projects.id', ondelete='CASCADE'), nullable=False, index=True)
    location = Column(Text, nullable=False)
    intercom_type = Column(Text, nullable=False)
    notes = Column(Text)


Index('idx_access_point_location', AccessPoint.project_id, AccessPoint.location)
Index('idx_camera_location', Camera.project_id, Camera.location)
