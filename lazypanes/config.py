"""Configuration utilities for lazypanes.

Settings come from ``config.yaml`` in the config directory, which defaults
to ``~/.config/lazypanes`` and can be moved with LAZYPANES_CONFIG_DIR.

Example config.yaml:
    layout:
      side_panel_width: 40%
      side_panel_sizes:
        stash: 5px
      expand_focused_side_panel: false
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError
from .layout.config import LayoutSettings

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yaml"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

ENV_VAR_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "LAZYPANES_CONFIG_DIR": {
        "description": "Directory holding config.yaml and the log file",
        "default": None,
        "valid_values": None,
    },
    "LAZYPANES_LOG_LEVEL": {
        "description": "Log level for lazypanes loggers",
        "default": "INFO",
        "valid_values": list(VALID_LOG_LEVELS),
    },
}


def get_config_dir() -> Path:
    """Get the config directory, respecting LAZYPANES_CONFIG_DIR."""
    override = os.environ.get("LAZYPANES_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".config" / "lazypanes"


def get_env_var(name: str) -> Optional[str]:
    """Get a lazypanes environment variable, validated against its definition.

    Raises:
        ConfigurationError: If the value is not one of the allowed values.
    """
    definition = ENV_VAR_DEFINITIONS.get(name, {})
    value = os.environ.get(name)
    if value is None:
        return definition.get("default")

    valid_values = definition.get("valid_values")
    if valid_values is not None and value.upper() not in valid_values:
        raise ConfigurationError(
            f"Invalid value '{value}' for {name}. Valid values: {valid_values}", key=name
        )
    return value


def get_log_level() -> int:
    return getattr(logging, (get_env_var("LAZYPANES_LOG_LEVEL") or "INFO").upper())


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the raw config mapping.

    Args:
        path: Config file to read (defaults to config.yaml in the config dir)

    Returns:
        Config dict, empty if the file does not exist

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    path = path or get_config_dir() / CONFIG_FILE_NAME
    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("Config file must contain a mapping", path=str(path))
    return data


def load_settings(path: Optional[Path] = None) -> LayoutSettings:
    """Load layout settings from the ``layout`` section of the config file."""
    layout = load_config(path).get("layout") or {}
    if not isinstance(layout, dict):
        raise ConfigurationError("'layout' must be a mapping", key="layout")
    return LayoutSettings.from_dict(layout)


def save_settings(settings: LayoutSettings, path: Optional[Path] = None) -> Path:
    """Write settings back to the ``layout`` section, keeping other sections."""
    path = path or get_config_dir() / CONFIG_FILE_NAME
    data = load_config(path) if path.exists() else {}
    data["layout"] = settings.to_dict()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved layout settings to %s", path)
    return path
