"""Pytest configuration and fixtures for Site Walk tests."""
import pytest
import tempfile
import os
from backend.app import create_app
from backend.models import db, Project, AccessPoint, Camera


@pytest.fixture
def app(tmp_path):
    """Create and configure a test app instance."""
    # Create temporary database for testing
    db_fd, db_path = tempfile.mkstemp()

    test_config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': f'sqlite:///{db_path}',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'LOG_DIR': str(tmp_path / 'logs'),
    }

    app = create_app(test_config)

    with app.app_context():
        db.create_all()

    yield app

    # Cleanup
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
    os.close(db_fd)
    os.unlink(db_path)


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """A test runner for the app's Click commands."""
    return app.test_cli_runner()


@pytest.fixture
def project_id(app):
    """A stored project with two access points and one camera."""
    with app.app_context():
        project = Project(name="Tower One", client="Acme Corp", site_address="1 Main St")
        db.session.add(project)
        db.session.flush()
        db.session.add_all([
            AccessPoint(
                project_id=project.id, location="Lobby",
                quick_config="Single Standard Door Exit Only Interior",
                reader_type="KR-100", lock_type="Standard", monitoring_type="Prop",
            ),
            AccessPoint(
                project_id=project.id, location="Roof",
                quick_config="Single Mag Exit Only Perimeter",
                reader_type="AIO", lock_type="Standard", monitoring_type="Alarmed",
                lock_provider="Kastle",
            ),
            Camera(project_id=project.id, location="Parking Garage", camera_type="Dome Indoor"),
        ])
        db.session.commit()
        return project.id


@pytest.fixture
def equipment_rows():
    """Rows as the equipment list endpoint returns them."""
    return [
        {'id': 1, 'location': 'Lobby', 'lock_type': 'Standard', 'floor_count': 12},
        {'id': 2, 'location': 'Roof', 'lock_type': None, 'floor_count': 3},
        {'id': 3, 'location': 'Conference Room 1', 'lock_type': 'Mag', 'floor_count': None},
    ]
