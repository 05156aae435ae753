"""Tests for configuration manager."""
import pytest
from src.sitewalk_app.config_manager import ConfigManager


class TestConfigManager:
    """Test configuration manager."""

    def test_default_values(self):
        """Test that default values are set correctly."""
        config = ConfigManager()
        assert config.get('api_base_url') == 'http://localhost:5000'
        assert config.get('api_timeout') == 10.0
        assert config.get('max_recent_projects') == 5

    def test_environment_override(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv('SITEWALK_API_TIMEOUT', '2.5')
        monkeypatch.setenv('SITEWALK_API_BASE_URL', 'http://walk.example:8080')

        config = ConfigManager()
        assert config.api_timeout == 2.5
        assert config.api_base_url == 'http://walk.example:8080'

    def test_get_with_default(self):
        config = ConfigManager()
        assert config.get('nonexistent_key', 'default') == 'default'
        assert config.get('api_max_retries', 'ignored') == 3

    def test_set_value(self):
        config = ConfigManager()
        config.set('max_recent_projects', 8)
        assert config.get('max_recent_projects') == 8

    def test_set_unknown_key(self):
        config = ConfigManager()
        with pytest.raises(KeyError):
            config.set('custom_key', 'custom_value')

    def test_get_all(self):
        all_config = ConfigManager().get_all()
        assert isinstance(all_config, dict)
        assert 'api_base_url' in all_config
        assert 'default_equipment_kind' in all_config
