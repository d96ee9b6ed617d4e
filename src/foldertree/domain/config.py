from __future__ import annotations

"""
Configuration Domain Management.

Defines the default tree settings and loads user overrides from a JSON
file. Loading never fails: missing or corrupted files fall back to the
defaults and the problem is logged.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from foldertree.domain.constants import (
    BOOTSTRAP_FOLDER_KEY,
    CURRENT_CONFIG_VERSION,
    PATH_SEPARATOR,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default tree configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Path addressing
        "path_separator": PATH_SEPARATOR,
        "bootstrap_folder": BOOTSTRAP_FOLDER_KEY,

        # Node construction
        "default_open": True,
        "require_extension": True,

        # Lookup policy
        "recursive_lookup": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """
    Load raw configuration overrides from disk.

    Args:
        config_path: Path to a JSON file. May be None or point nowhere.

    Returns:
        Dict[str, Any]: Defaults merged with the file contents.
    """
    defaults = get_default_config()

    if not config_path or not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    version = data.pop("version", None)
    if version and version != CURRENT_CONFIG_VERSION:
        logger.info(f"Config version {version} differs from {CURRENT_CONFIG_VERSION}; merging known keys.")

    defaults.update(data)
    return defaults


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load and validate the tree configuration in one step.
    """
    from foldertree.core.validator import validate_config

    cfg, warnings = validate_config(load_config_file(config_path))
    for w in warnings:
        logger.warning(w)
    return cfg
