"""Backend utility functions for Site Walk application."""
from flask import jsonify
from .models import db, Project, EQUIPMENT_MODELS
import logging


logger = logging.getLogger(__name__)


def api_error(message, status_code=400, log_level='warning', details=None):
    """
    Standardized API error response with consistent logging.

    Args:
        message (str): Error message for the client
        status_code (int): HTTP status code
        log_level (str): Logging level ('debug', 'info', 'warning', 'error', 'critical')
        details (dict, optional): Additional details for logging

    Returns:
        Flask response: JSON error response
    """
    log_func = getattr(logger, log_level, logger.warning)
    extra = {'extra_fields': {'status_code': status_code}}
    if details:
        log_func(f"API Error ({status_code}): {message} - Details: {details}", extra=extra)
    else:
        log_func(f"API Error ({status_code}): {message}", extra=extra)

    return jsonify({'error': message}), status_code


def handle_api_exception(e, operation="operation", status_code=500):
    """
    Handle exceptions in API endpoints with consistent logging and responses.

    Args:
        e (Exception): The exception that occurred
        operation (str): Description of the operation being performed
        status_code (int): HTTP status code to return

    Returns:
        Flask response: JSON error response
    """
    logger.error(f"Exception during {operation}: {str(e)}", exc_info=True)
    db.session.rollback()
    return api_error(f"Failed to {operation}", status_code, 'error')


def project_exists(project_id):
    """Return True when a project with the given ID exists."""
    if project_id is None:
        return False
    return db.session.get(Project, project_id) is not None


def get_orphaned_equipment(kind=None):
    """
    Find equipment rows whose project no longer exists.

    Args:
        kind (EquipmentKind, optional): Restrict the check to one equipment kind.

    Returns:
        dict: Equipment kind value -> list of orphaned record IDs
    """
    orphaned = {}
    project_ids = {row[0] for row in db.session.query(Project.id).all()}

    for equipment_kind, model in EQUIPMENT_MODELS.items():
        if kind is not None and equipment_kind != kind:
            continue
        ids = [
            item.id for item in model.query.order_by(model.id).all()
            if item.project_id not in project_ids
        ]
        if ids:
            orphaned[equipment_kind.value] = ids

    return orphaned


def count_project_equipment(project_id):
    """
    Count equipment per kind for a project.

    Returns:
        dict: Equipment kind value -> number of rows
    """
    return {
        kind.value: model.query.filter_by(project_id=project_id).count()
        for kind, model in EQUIPMENT_MODELS.items()
    }
