"""
User configuration for Image Duplicate Remover.

Each setting resolves from the first source that defines it:
1. Command line option (handled by the argument parser)
2. Environment variable (DUPREMOVER_KEY, DUPREMOVER_WORKERS, DUPREMOVER_INDEX_DB)
3. ``config.json`` in the config directory (``~/.dupremover`` or $DUPREMOVER_CONFIG_DIR)
4. Built-in default from config.py

Example config.json:
{
    "default_key": "filesize",
    "default_workers": 8,
    "index_db_file": "/var/cache/dupremover/index.db"
}
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import logging

from .config import DEFAULT_KEY, DEFAULT_WORKERS, CONFIG_DIR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Setting:
    """A configurable value, its environment override and its default."""
    name: str
    env_var: str
    default: Any


SETTINGS = {
    setting.name: setting
    for setting in (
        Setting('default_key', 'DUPREMOVER_KEY', DEFAULT_KEY),
        Setting('default_workers', 'DUPREMOVER_WORKERS', DEFAULT_WORKERS),
        Setting('index_db_file', 'DUPREMOVER_INDEX_DB', None),
    )
}


def _parse_env_value(raw: str) -> Any:
    """Numbers and null arrive as JSON, anything else is a plain string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


class UserConfig:
    """
    Resolves settings from the environment and the user's config file.

    There is one shared instance. The file is parsed on first use and kept
    until reload().
    """

    _instance: Optional['UserConfig'] = None
    _file_values: Optional[dict] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def config_dir(self) -> Path:
        return Path(os.environ.get('DUPREMOVER_CONFIG_DIR') or CONFIG_DIR)

    @property
    def config_file_path(self) -> Path:
        return self.config_dir / 'config.json'

    def _read_file(self) -> dict:
        path = self.config_file_path
        if not path.is_file():
            return {}

        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring config file {path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {path}: top level must be an object")
            return {}

        unknown = sorted(set(data) - set(SETTINGS) - {'_comment'})
        if unknown:
            logger.debug(f"Unknown settings in {path}: {', '.join(unknown)}")
        return data

    def reload(self):
        """Forget the cached file contents."""
        self._file_values = None

    def lookup(self, name: str) -> tuple[Any, str]:
        """
        Resolve a setting.

        Args:
            name: One of the names in SETTINGS

        Returns:
            (value, source) where source is 'env', 'file' or 'default'

        Raises:
            KeyError: If name is not a known setting
        """
        setting = SETTINGS[name]

        raw = os.environ.get(setting.env_var)
        if raw is not None:
            return _parse_env_value(raw), 'env'

        if self._file_values is None:
            self._file_values = self._read_file()
        if name in self._file_values:
            return self._file_values[name], 'file'

        return setting.default, 'default'

    @property
    def default_key(self) -> str:
        """Fingerprint used for matching ('sha256' or 'filesize')."""
        value, source = self.lookup('default_key')
        if value in ('sha256', 'filesize'):
            return value
        logger.warning(f"Unknown default_key {value!r} from {source}, using {DEFAULT_KEY}")
        return DEFAULT_KEY

    @property
    def default_workers(self) -> int:
        """Worker threads for fingerprinting and matching, at least 1."""
        value, source = self.lookup('default_workers')
        if isinstance(value, bool):
            value = None
        try:
            return max(1, int(value))
        except (TypeError, ValueError):
            logger.warning(f"Invalid default_workers {value!r} from {source}, using {DEFAULT_WORKERS}")
            return DEFAULT_WORKERS

    @property
    def index_db_file(self) -> Optional[str]:
        """Persistent index database path; None keeps the index temporary."""
        value, _ = self.lookup('index_db_file')
        return str(value) if value else None

    def create_example_config(self) -> bool:
        """Write a config.json holding every default. Returns False on I/O errors."""
        example = {'_comment': "Image Duplicate Remover user configuration"}
        example.update({name: setting.default for name, setting in SETTINGS.items()})

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.config_file_path.write_text(json.dumps(example, indent=2), encoding='utf-8')
        except OSError as e:
            logger.error(f"Cannot write {self.config_file_path}: {e}")
            return False

        logger.info(f"Created example config file at {self.config_file_path}")
        self.reload()
        return True


_user_config = UserConfig()


def get_user_config() -> UserConfig:
    """Shared UserConfig instance."""
    return _user_config
