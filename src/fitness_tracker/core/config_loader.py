"""
YAML → user configuration loader.

Reads optional overrides from ~/.fitness-tracker/config.yaml:

    settings_path: ~/Dropbox/fitness/settings.json
    default_parameter_type: Speed

A missing or unparsable file gives an empty config (no crash). Known keys
with unusable values are dropped with a warning; unknown keys are kept.
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Any

import yaml

from .config import DATA_DIR_NAME, USER_CONFIG_FILE_NAME
from .models import PARAMETER_TYPES


def get_data_dir() -> Path:
    """Return ~/.fitness-tracker (not created)."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    return home / DATA_DIR_NAME


def get_user_config_path() -> Path | None:
    """Return ~/.fitness-tracker/config.yaml if it exists, else None."""
    p = get_data_dir() / USER_CONFIG_FILE_NAME
    return p if p.exists() else None


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML mapping; return {} on any read or parse error."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def load_user_config(path: Path | None = None) -> dict[str, Any]:
    """
    Load user configuration.

    Args:
        path: Explicit config file; defaults to ~/.fitness-tracker/config.yaml

    Returns:
        Config dict. Empty dict if no usable file.
    """
    if path is None:
        path = get_user_config_path()
        if path is None:
            return {}

    config = _load_yaml_file(path)

    settings_path = config.get("settings_path")
    if settings_path is not None and not (isinstance(settings_path, str) and settings_path.strip()):
        warnings.warn(
            f"fitness-tracker: ignoring settings_path {settings_path!r} in {path}",
            stacklevel=2,
        )
        del config["settings_path"]

    parameter_type = config.get("default_parameter_type")
    if parameter_type is not None and parameter_type not in PARAMETER_TYPES:
        warnings.warn(
            f"fitness-tracker: ignoring default_parameter_type {parameter_type!r} in {path}; "
            f"expected one of {', '.join(PARAMETER_TYPES)}",
            stacklevel=2,
        )
        del config["default_parameter_type"]

    return config
