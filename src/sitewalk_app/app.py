"""Site Walk App - Main application."""
import toga
from toga.style import Pack
from toga.style.pack import COLUMN, ROW
import logging

from shared.enums import EquipmentKind
from .config_manager import ConfigManager
from .logging_config import setup_logging
from .state import SessionState
from .services.api_service import APIService
from .services.entity_store import EntityStore
from .services.notifier import Notifier
from .services.project_history import ProjectHistory, default_history_path
from .services.query_cache import QueryCache
from .handlers.project_handler import ProjectHandler
from .handlers.equipment_handler import EquipmentTableHandler
from .ui.equipment_table_view import EquipmentTableView

KIND_LABELS = {
    EquipmentKind.ACCESS_POINTS: 'Card Access',
    EquipmentKind.CAMERAS: 'Cameras',
    EquipmentKind.ELEVATORS: 'Elevators',
    EquipmentKind.INTERCOMS: 'Intercoms',
}


class SiteWalkApp(toga.App):
    """Main SiteWalkApp class."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)
        super().__init__(formal_name='Site Walk', app_id='com.sitewalk.client')

    def startup(self):
        """Initialize the app"""
        setup_logging()
        self.logger.info("Starting SiteWalkApp initialization")

        self.config = ConfigManager()
        self.logger.info(f"Configuration loaded: API URL={self.config.api_base_url}")

        # Shared services are built once and passed to every handler
        self.api_service = APIService(
            self.config.api_base_url,
            max_retries=self.config.api_max_retries,
            retry_delay=self.config.api_retry_delay,
            timeout=self.config.api_timeout,
        )
        self.store = EntityStore(self.api_service)
        self.cache = QueryCache()
        self.notifier = Notifier()
        self.notifier.add_listener(self.show_notification)
        self.history = ProjectHistory(
            default_history_path(self.config.data_dir or None),
            max_recent=self.config.max_recent_projects,
        )
        self.state = SessionState(current_kind=EquipmentKind(self.config.default_equipment_kind))

        self.project_handler = ProjectHandler(self.store, self.cache, self.state, self.history, self.notifier)
        self.equipment_handlers = {
            kind: EquipmentTableHandler(kind, self.store, self.cache, self.notifier)
            for kind in EquipmentKind
        }
        self.table_views = {kind: EquipmentTableView(handler) for kind, handler in self.equipment_handlers.items()}
        self.state.subscribe(self.on_state_change)

        self.build_ui()
        self.load_projects(None)
        self.logger.info("SiteWalkApp initialization completed")

    def build_ui(self):
        self.projects_list = toga.Selection(items=[], on_change=self.on_project_selected, style=Pack(flex=1))
        self.pin_button = toga.Button('Pin', on_press=self.toggle_pin, style=Pack(padding=(0, 5)))
        refresh_button = toga.Button('Refresh', on_press=self.load_projects, style=Pack(padding=(0, 5)))
        self.kind_list = toga.Selection(
            items=[KIND_LABELS[kind] for kind in EquipmentKind],
            value=KIND_LABELS[self.state.current_kind],
            on_change=self.on_kind_selected,
            style=Pack(padding=(0, 5)),
        )
        toolbar = toga.Box(
            children=[self.projects_list, self.pin_button, refresh_button, self.kind_list],
            style=Pack(direction=ROW, padding=10),
        )
        self.recent_label = toga.Label('', style=Pack(padding=(0, 10)))
        self.status_label = toga.Label('Ready', style=Pack(padding=10))
        self.table_container = toga.Box(style=Pack(direction=COLUMN, flex=1))

        self.main_window = toga.MainWindow(title=self.formal_name, size=(self.config.window_width, self.config.window_height))
        self.main_window.content = toga.Box(
            children=[toolbar, self.recent_label, toga.ScrollContainer(content=self.table_container, style=Pack(flex=1)), self.status_label],
            style=Pack(direction=COLUMN),
        )
        self.main_window.show()

    def load_projects(self, widget):
        projects = self.project_handler.load_projects(force=widget is not None)
        self._project_labels = {self.project_label(p): p['id'] for p in projects}
        self.projects_list.items = list(self._project_labels)
        recent = ', '.join(p['name'] for p in self.project_handler.recent_projects())
        self.recent_label.text = f'Recent: {recent}' if recent else ''

    @staticmethod
    def project_label(project):
        client = project.get('client')
        return f"{project['name']} ({client})" if client else project['name']

    def on_project_selected(self, widget):
        project_id = self._project_labels.get(widget.value)
        if project_id is not None:
            self.project_handler.select_project(project_id)

    def on_kind_selected(self, widget):
        for kind, label in KIND_LABELS.items():
            if label == widget.value:
                self.state.select_kind(kind)

    def toggle_pin(self, widget):
        project_id = self.state.current_project_id
        if project_id is None:
            return
        if self.history.is_pinned(project_id):
            self.project_handler.unpin_project(project_id)
        else:
            self.project_handler.pin_project(project_id)
        self.pin_button.text = 'Unpin' if self.history.is_pinned(project_id) else 'Pin'

    def on_state_change(self, state):
        """Show the selected kind's table for the current project."""
        handler = self.equipment_handlers[state.current_kind]
        handler.load(state.current_project_id)
        view = self.table_views[state.current_kind]
        for child in list(self.table_container.children):
            self.table_container.remove(child)
        self.table_container.add(view.container or view.build())
        if state.current_project_id is not None:
            self.pin_button.text = 'Unpin' if self.history.is_pinned(state.current_project_id) else 'Pin'

    def show_notification(self, notification):
        self.status_label.text = f'{notification.title}: {notification.description}'


def main():
    return SiteWalkApp()


if __name__ == '__main__':
    main().main_loop()
