"""Persistent key/value store for telemetry settings.

Values live in a YAML file inside a cross-platform config directory:
Linux: ~/.config/<name>
macOS: ~/Library/Application Support/<name>
Windows: C:\\Users\\<user>\\AppData\\Local\\<name>
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "million"
CONFIG_FILENAME = "config.yaml"

# Environment variables that turn telemetry off without touching the store
DISABLE_ENV_VARS = ("MILLION_TELEMETRY_DISABLED", "DO_NOT_TRACK")


def get_config_dir(name: str = DEFAULT_NAMESPACE) -> Path:
    """Get the config directory for a namespace."""
    return Path(user_config_dir(name, appauthor=False))


def is_disabled_by_env(env: dict[str, str] | None = None) -> bool:
    """Check the opt-out environment variables.

    Args:
        env: Environment variables (defaults to ``os.environ``)

    Returns:
        True if any opt-out variable is set
    """
    env = os.environ if env is None else env
    return any(env.get(name) for name in DISABLE_ENV_VARS)


class GlobalConfig:
    """Flat key/value settings persisted as YAML.

    The file is re-read on every access so that separate processes see each
    other's writes. Read and write failures are logged and never raised: a
    broken file behaves like an empty store.
    """

    def __init__(self, name: str = DEFAULT_NAMESPACE, config_dir: Path | str | None = None):
        """Initialize the store.

        Args:
            name: Application namespace (selects the config directory)
            config_dir: Explicit directory, overrides the platform default
        """
        self.name = name
        self.config_dir = Path(config_dir) if config_dir else get_config_dir(name)
        self.path = self.config_dir / CONFIG_FILENAME

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path) as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, OSError) as e:
            logger.warning(f"Could not read config file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed config file {self.path}")
            return {}
        return data

    def _save(self, data: dict[str, Any]) -> None:
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                yaml.safe_dump(data, f, default_flow_style=False)
        except OSError as e:
            logger.warning(f"Could not write config file {self.path}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a stored value, or ``default`` if the key is missing."""
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store a value."""
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> None:
        """Remove a key if present."""
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def clear(self) -> None:
        """Remove every stored value."""
        if not self.path.exists():
            return
        try:
            self.path.unlink()
        except OSError as e:
            logger.warning(f"Could not remove config file {self.path}: {e}")

    def all(self) -> dict[str, Any]:
        """Get a copy of every stored value."""
        return dict(self._load())
