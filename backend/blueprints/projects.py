"""Projects blueprint for Flask API."""
from flask import Blueprint
from ..models import Project
from ..base.generic_crud import GenericCRUD, register_crud_routes
from shared.schemas import ProjectCreate, ProjectUpdate, ProjectResponse

bp = Blueprint('projects', __name__, url_prefix='/api')


def mark_project_copy(values):
    """Name a duplicated project so it can be told apart from the original."""
    values['name'] = f"{values.get('name') or 'Project'} (Copy)"
    return values


project_crud = GenericCRUD(
    model=Project,
    create_schema=ProjectCreate,
    update_schema=ProjectUpdate,
    response_schema=ProjectResponse,
    singular_name='project',
    parent_field=None,
    logger_name='projects',
    duplicate_hook=mark_project_copy,
)

register_crud_routes(bp, project_crud, 'projects')
