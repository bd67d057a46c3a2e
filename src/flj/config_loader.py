"""
Configuration Loader

Loads flj configuration from flj.json in the project root.
Environment variables always take precedence over config file values.

Config file location (in order of precedence):
1. FLJ_PROJECT_ROOT/flj.json (if FLJ_PROJECT_ROOT is set)
2. CWD/flj.json

Supported settings in flj.json:
{
    "debug_log": true,          // -> FLJ_DEBUG_LOG
    "log_level": "DEBUG",       // -> FLJ_LOG_LEVEL
    "log_dir": ".flj",          // -> FLJ_LOG_DIR
    "repr_limit": 10            // -> FLJ_REPR_LIMIT
}
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "flj.json"


class FljSettings(BaseModel):
    """
    Validated package settings.

    ::: This is-in-layer Configuration-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    debug_log: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_dir: Optional[str] = None
    repr_limit: int = Field(10, ge=0)


class ConfigLoader:
    """
    Loads configuration from flj.json file.

    ::: This is-in-layer Configuration-Layer.
    ::: This is a loader.
    ::: This is stateful.

    Priority: Environment variables > flj.json > defaults
    """

    # Mapping from flj.json keys to environment variable names
    CONFIG_KEY_TO_ENV = {
        "debug_log": "FLJ_DEBUG_LOG",
        "log_level": "FLJ_LOG_LEVEL",
        "log_dir": "FLJ_LOG_DIR",
        "repr_limit": "FLJ_REPR_LIMIT",
    }

    def __init__(self):
        self._config: Dict[str, Any] = {}
        self._config_path: Optional[Path] = None
        self._loaded = False

    def load(self, project_root: Optional[Path] = None) -> bool:
        """
        Load configuration from flj.json.

        Args:
            project_root: Project root directory. If None, uses FLJ_PROJECT_ROOT or CWD.

        Returns:
            True if config file was found and loaded, False otherwise.
        """
        if self._loaded:
            return self._config_path is not None

        if project_root is None:
            env_root = os.getenv("FLJ_PROJECT_ROOT")
            project_root = Path(env_root) if env_root else Path.cwd()

        config_path = Path(project_root) / CONFIG_FILENAME
        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level value must be an object")
                self._config = loaded
                self._config_path = config_path
                logger.debug("Loaded config from: %s", config_path)
            except json.JSONDecodeError as e:
                logger.warning("Invalid JSON in %s: %s", config_path, e)
            except (OSError, ValueError) as e:
                logger.warning("Error loading %s: %s", config_path, e)

        self._loaded = True
        return self._config_path is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value."""
        return self._config.get(key, default)

    def _raw_settings(self) -> Dict[str, Any]:
        """Merge config file values with environment overrides."""
        raw: Dict[str, Any] = {}
        for key, env_var in self.CONFIG_KEY_TO_ENV.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                if key == "debug_log":
                    raw[key] = env_value.lower() in ('true', '1', 'yes')
                elif key == "log_level":
                    raw[key] = env_value.upper()
                else:
                    raw[key] = env_value
            elif key in self._config:
                raw[key] = self._config[key]
        return raw

    def settings(self) -> FljSettings:
        """
        Build validated settings.

        Values that fail validation are reported and replaced by defaults.
        """
        self.load()
        try:
            return FljSettings(**self._raw_settings())
        except ValidationError as e:
            logger.warning("Invalid flj settings, using defaults: %s", e)
            return FljSettings()

    @property
    def config_path(self) -> Optional[Path]:
        """Path to the loaded config file, or None if not loaded."""
        return self._config_path

    @property
    def config(self) -> Dict[str, Any]:
        """The loaded configuration dictionary."""
        return self._config.copy()


# Global singleton instances
_config_loader: Optional[ConfigLoader] = None
_settings: Optional[FljSettings] = None


def get_config_loader() -> ConfigLoader:
    """Get the global config loader instance."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def get_settings() -> FljSettings:
    """Get the cached package settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = get_config_loader().settings()
    return _settings


def reset_settings() -> None:
    """Forget the loaded configuration so the next access reloads it."""
    global _config_loader, _settings
    _config_loader = None
    _settings = None
