from __future__ import annotations

"""
Configuration Domain Management.

Runtime configuration is a plain dictionary. Defaults can be overridden by
an optional JSON file in the user data directory and then by command-line
flags; anything unreadable falls back to the defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from foldertree.domain.constants import CURRENT_CONFIG_VERSION
from foldertree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        # Filtering
        "include_hidden": False,
        "gitignore_paths": [],
        "use_source_gitignore": True,
        # Output
        "print_tree": False,
        "encoding": "utf-8",
    }


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load persisted configuration merged over the defaults.

    Args:
        path: JSON file to read; defaults to the user data directory file.

    Returns:
        Dict[str, Any]: Merged configuration. Unknown keys are dropped.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(stored, dict):
        logger.warning(f"Config '{config_path}' is not a JSON object. Using defaults.")
        return config

    for key in config:
        if key in stored and key != "version":
            config[key] = stored[key]
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist known configuration keys as JSON.

    Returns:
        bool: True on success.
    """
    config_path = path or get_config_path()
    payload = {k: config.get(k, v) for k, v in get_default_config().items()}
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
    except OSError as e:
        logger.error(f"Failed to save config '{config_path}': {e}")
        return False
    return True
