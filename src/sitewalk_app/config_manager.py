"""Configuration Manager for the Site Walk client."""
from pydantic_settings import BaseSettings


class ConfigManager(BaseSettings):
    """Manages application configuration settings using Pydantic BaseSettings.

    Every field can be overridden from the environment with the
    ``SITEWALK_`` prefix, e.g. ``SITEWALK_API_BASE_URL``.
    """

    # API settings
    api_base_url: str = 'http://localhost:5000'
    api_timeout: float = 10.0
    api_max_retries: int = 3
    api_retry_delay: float = 1.0

    # Project history settings
    max_recent_projects: int = 5
    data_dir: str = ''  # empty: platform user data dir

    # UI settings
    default_equipment_kind: str = 'access-points'
    window_width: int = 1200
    window_height: int = 800

    class Config:
        env_prefix = 'SITEWALK_'
        case_sensitive = False

    def get(self, key, default=None):
        """Get a configuration value."""
        return getattr(self, key, default)

    def set(self, key, value):
        """Set a known configuration value."""
        if key not in type(self).model_fields:
            raise KeyError(f"Unknown configuration key: {key}")
        setattr(self, key, value)

    def get_all(self):
        """Get all configuration values as dictionary."""
        return self.model_dump()
