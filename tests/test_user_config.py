"""
Unit tests for layered user configuration.
"""

import json

import pytest
from dupremover.user_config import UserConfig, get_user_config


@pytest.fixture
def user_config(temp_dir, monkeypatch):
    """UserConfig reading from an isolated directory."""
    monkeypatch.setenv('DUPREMOVER_CONFIG_DIR', str(temp_dir))
    for var in ('DUPREMOVER_KEY', 'DUPREMOVER_WORKERS', 'DUPREMOVER_INDEX_DB'):
        monkeypatch.delenv(var, raising=False)
    config = get_user_config()
    config.reload()
    yield config
    config.reload()


def write_config(config, data):
    config.config_file_path.write_text(json.dumps(data), encoding='utf-8')
    config.reload()


class TestUserConfig:
    """Test layered configuration lookups."""

    def test_singleton(self):
        """There is one shared instance."""
        assert UserConfig() is UserConfig()
        assert get_user_config() is UserConfig()

    def test_defaults(self, user_config):
        """Without a file or environment the built-in defaults apply."""
        assert user_config.default_key == 'sha256'
        assert user_config.default_workers == 4
        assert user_config.index_db_file is None

    def test_config_file(self, user_config):
        """Values in config.json replace the defaults."""
        write_config(user_config, {'default_key': 'filesize', 'default_workers': 8})
        assert user_config.default_key == 'filesize'
        assert user_config.default_workers == 8

    def test_environment_overrides_file(self, user_config, monkeypatch):
        """Environment variables win over config.json."""
        write_config(user_config, {'default_workers': 8})
        monkeypatch.setenv('DUPREMOVER_WORKERS', '2')
        assert user_config.default_workers == 2

    def test_invalid_values_fall_back(self, user_config):
        """Unusable values fall back to the defaults."""
        write_config(user_config, {'default_key': 'md5', 'default_workers': 'many'})
        assert user_config.default_key == 'sha256'
        assert user_config.default_workers == 4

    def test_broken_file_ignored(self, user_config):
        """A config.json that is not JSON is ignored."""
        user_config.config_file_path.write_text("{not json", encoding='utf-8')
        user_config.reload()
        assert user_config.default_key == 'sha256'

    def test_create_example_config(self, user_config):
        """The example file holds every default."""
        assert user_config.create_example_config() is True
        data = json.loads(user_config.config_file_path.read_text(encoding='utf-8'))
        assert data['default_key'] == 'sha256'
        assert data['index_db_file'] is None

    def test_lookup_reports_source(self, user_config, monkeypatch):
        """lookup() tells where each value came from."""
        assert user_config.lookup('default_workers') == (4, 'default')
        write_config(user_config, {'default_workers': 8})
        assert user_config.lookup('default_workers') == (8, 'file')
        monkeypatch.setenv('DUPREMOVER_WORKERS', '2')
        assert user_config.lookup('default_workers') == (2, 'env')
