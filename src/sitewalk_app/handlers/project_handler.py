"""Project selection handlers for the Site Walk client."""
import logging

from ..services.api_service import APIError
from ..services.entity_store import PROJECTS_QUERY_KEY


class ProjectHandler:
    """Loads projects and keeps the current selection and history in step.

    Attributes:
        store: EntityStore
        cache: Shared QueryCache
        state: SessionState holding the current project
        history: ProjectHistory with pinned and recent ids
        notifier: Notifier for user-facing messages
    """

    def __init__(self, store, cache, state, history, notifier):
        self.store = store
        self.cache = cache
        self.state = state
        self.history = history
        self.notifier = notifier
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_projects(self, force=False):
        """All projects, from the cache when fresh."""
        try:
            return self.cache.fetch(PROJECTS_QUERY_KEY, self.store.list_projects, force=force)
        except APIError as e:
            self.logger.error(f"Failed to load projects: {e}")
            self.notifier.error("Error", f"Failed to load projects: {e.message}")
            return self.cache.get(PROJECTS_QUERY_KEY, [])

    def find_project(self, project_id):
        for project in self.cache.get(PROJECTS_QUERY_KEY) or []:
            if project.get('id') == project_id:
                return project
        return None

    def select_project(self, project_id):
        """Make a project current and record it as recently opened.

        Returns:
            The project dict, or None if it could not be found
        """
        project = self.find_project(project_id)
        if project is None:
            try:
                project = self.store.get_project(project_id)
            except APIError as e:
                self.logger.error(f"Failed to open project {project_id}: {e}")
                self.notifier.error("Error", f"Project not found: {e.message}")
                return None

        self.state.select_project(project)
        self.history.add_recent(project['id'])
        return project

    def clear_selection(self):
        self.state.clear_project()

    def pin_project(self, project_id):
        self.history.pin(project_id)
        self.notifier.notify("Project pinned", self._name(project_id))

    def unpin_project(self, project_id):
        self.history.unpin(project_id)
        self.notifier.notify("Project unpinned", self._name(project_id))

    def pinned_projects(self):
        """Pinned projects in project list order."""
        projects = self.cache.get(PROJECTS_QUERY_KEY) or []
        return [p for p in projects if self.history.is_pinned(p['id'])]

    def recent_projects(self):
        """Recently opened projects, most recent first; unknown ids are skipped."""
        recent = []
        for project_id in self.history.recent_ids:
            project = self.find_project(project_id)
            if project is not None:
                recent.append(project)
        return recent

    def _name(self, project_id):
        project = self.find_project(project_id)
        return project['name'] if project else f"Project {project_id}"
