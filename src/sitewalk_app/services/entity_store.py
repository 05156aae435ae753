"""REST entity store for projects and equipment."""
import logging

from shared.enums import EquipmentKind, ReportName

PROJECTS_QUERY_KEY = ('/api/projects',)
LOOKUP_QUERY_KEY = ('/api/lookup',)


def equipment_query_key(project_id, kind):
    """Query key of one project's equipment list."""
    return ('/api/projects', project_id, EquipmentKind(kind).value)


class EntityStore:
    """Typed access to the backend resources.

    Every method raises ``APIError`` when the backend answers with a
    non-success status or cannot be reached.
    """

    def __init__(self, api_service):
        self.api = api_service
        self.logger = logging.getLogger(self.__class__.__name__)

    # Equipment

    def list(self, kind, parent_id):
        kind = EquipmentKind(kind)
        return self.api.request_json('GET', f'/api/projects/{parent_id}/{kind.value}') or []

    def get(self, kind, entity_id):
        kind = EquipmentKind(kind)
        return self.api.request_json('GET', f'/api/{kind.value}/{entity_id}')

    def create(self, kind, fields):
        kind = EquipmentKind(kind)
        entity = self.api.request_json('POST', f'/api/{kind.value}', json=dict(fields))
        self.logger.info(f"Created {kind.singular} {entity.get('id')}")
        return entity

    def update(self, kind, entity_id, fields):
        """Partially update an entity; returns the stored entity."""
        kind = EquipmentKind(kind)
        entity = self.api.request_json('PUT', f'/api/{kind.value}/{entity_id}', json=dict(fields))
        self.logger.info(f"Updated {kind.singular} {entity_id}: {sorted(fields)}")
        return entity

    def delete(self, kind, entity_id):
        kind = EquipmentKind(kind)
        self.api.request_json('DELETE', f'/api/{kind.value}/{entity_id}')
        self.logger.info(f"Deleted {kind.singular} {entity_id}")

    def duplicate(self, kind, entity_id):
        kind = EquipmentKind(kind)
        return self.api.request_json('POST', f'/api/{kind.value}/{entity_id}/duplicate')

    # Projects

    def list_projects(self):
        return self.api.request_json('GET', '/api/projects') or []

    def get_project(self, project_id):
        return self.api.request_json('GET', f'/api/projects/{project_id}')

    def create_project(self, fields):
        return self.api.request_json('POST', '/api/projects', json=dict(fields))

    def update_project(self, project_id, fields):
        return self.api.request_json('PUT', f'/api/projects/{project_id}', json=dict(fields))

    def delete_project(self, project_id):
        self.api.request_json('DELETE', f'/api/projects/{project_id}')

    # Lookup and reports

    def lookup(self):
        return self.api.request_json('GET', '/api/lookup')

    def report(self, project_id, name):
        name = ReportName(name)
        return self.api.request_json('GET', f'/api/projects/{project_id}/reports/{name.value}')
