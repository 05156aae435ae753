"""Pinned and recently opened projects, persisted between sessions."""
import json
import logging
import os

import appdirs

APP_NAME = 'sitewalk'
HISTORY_FILE = 'project_history.json'
MAX_RECENT_PROJECTS = 5


def default_history_path(data_dir=None):
    data_dir = data_dir or appdirs.user_data_dir(APP_NAME, APP_NAME)
    return os.path.join(data_dir, HISTORY_FILE)


class ProjectHistory:
    """Pinned project ids and the most recently opened ones.

    Recent ids are de-duplicated and kept most recent first, capped at
    ``max_recent``. The file is re-written after every change.
    """

    def __init__(self, path=None, max_recent=MAX_RECENT_PROJECTS):
        self.path = path or default_history_path()
        self.max_recent = max_recent
        self.recent_ids = []
        self.pinned_ids = []
        self.logger = logging.getLogger(self.__class__.__name__)
        self.load()

    def load(self):
        """Read the history file; a missing or unreadable file means empty lists."""
        self.recent_ids, self.pinned_ids = [], []
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self.recent_ids = [int(i) for i in data.get('recent', [])][:self.max_recent]
            self.pinned_ids = [int(i) for i in data.get('pinned', [])]
        except (OSError, ValueError, TypeError, AttributeError) as e:
            self.logger.error(f"Failed to load project history from {self.path}: {e}")
            self.recent_ids, self.pinned_ids = [], []

    def save(self):
        try:
            os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump({'recent': self.recent_ids, 'pinned': self.pinned_ids}, f)
        except OSError as e:
            self.logger.error(f"Failed to save project history to {self.path}: {e}")

    def add_recent(self, project_id):
        project_id = int(project_id)
        self.recent_ids = [project_id] + [i for i in self.recent_ids if i != project_id]
        del self.recent_ids[self.max_recent:]
        self.save()

    def remove(self, project_id):
        """Forget a project entirely (e.g. after it was deleted)."""
        project_id = int(project_id)
        self.recent_ids = [i for i in self.recent_ids if i != project_id]
        self.pinned_ids = [i for i in self.pinned_ids if i != project_id]
        self.save()

    def is_pinned(self, project_id):
        return int(project_id) in self.pinned_ids

    def pin(self, project_id):
        project_id = int(project_id)
        if project_id not in self.pinned_ids:
            self.pinned_ids.append(project_id)
            self.save()

    def unpin(self, project_id):
        project_id = int(project_id)
        if project_id in self.pinned_ids:
            self.pinned_ids.remove(project_id)
            self.save()

    def toggle_pin(self, project_id):
        """Pin or unpin; returns the new pinned state."""
        if self.is_pinned(project_id):
            self.unpin(project_id)
            return False
        self.pin(project_id)
        return True
