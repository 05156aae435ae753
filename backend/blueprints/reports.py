"""Reports blueprint: door schedule, camera schedule and project summary."""
from flask import Blueprint, jsonify
import logging
from ..models import db, Project, AccessPoint, Camera
from ..utils import api_error, count_project_equipment
from shared.schemas import ProjectResponse

bp = Blueprint('reports', __name__, url_prefix='/api/projects/<int:project_id>/reports')
logger = logging.getLogger(__name__)


def load_project(project_id):
    return db.session.get(Project, project_id)


def serialize_project(project):
    return ProjectResponse.model_validate(project).model_dump(mode='json')


@bp.route('/door-schedule', methods=['GET'])
def door_schedule(project_id):
    """Door schedule: one row per access point."""
    project = load_project(project_id)
    if project is None:
        return api_error('Project not found', 404)

    access_points = AccessPoint.query.filter_by(project_id=project_id).order_by(AccessPoint.id).all()
    doors = [
        {
            'id': ap.id,
            'location': ap.location,
            'quick_config': ap.quick_config,
            'reader_type': ap.reader_type,
            'lock_type': ap.lock_type,
            'monitoring_type': ap.monitoring_type,
            'lock_provider': ap.lock_provider or "None",
            'interior_perimeter': ap.interior_perimeter or "",
            'notes': ap.notes or "",
        }
        for ap in access_points
    ]
    logger.info(f"Built door schedule for project {project_id}: {len(doors)} doors")
    return jsonify({'project': serialize_project(project), 'doors': doors})


@bp.route('/camera-schedule', methods=['GET'])
def camera_schedule(project_id):
    """Camera schedule: one row per camera, blanks shown as N/A."""
    project = load_project(project_id)
    if project is None:
        return api_error('Project not found', 404)

    cameras = Camera.query.filter_by(project_id=project_id).order_by(Camera.id).all()
    rows = [
        {
            'id': camera.id,
            'location': camera.location,
            'camera_type': camera.camera_type,
            'mounting_type': camera.mounting_type or "N/A",
            'resolution': camera.resolution or "N/A",
            'field_of_view': camera.field_of_view or "N/A",
            'notes': camera.notes or "",
        }
        for camera in cameras
    ]
    logger.info(f"Built camera schedule for project {project_id}: {len(rows)} cameras")
    return jsonify({'project': serialize_project(project), 'cameras': rows})


@bp.route('/project-summary', methods=['GET'])
def project_summary(project_id):
    """Equipment counts for a project."""
    project = load_project(project_id)
    if project is None:
        return api_error('Project not found', 404)

    counts = count_project_equipment(project_id)
    summary = {
        'accessPointCount': counts['access-points'],
        'cameraCount': counts['cameras'],
        'elevatorCount': counts['elevators'],
        'intercomCount': counts['intercoms'],
        'totalEquipmentCount': sum(counts.values()),
    }
    return jsonify({'project': serialize_project(project), 'summary': summary})
