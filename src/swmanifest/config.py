"""Configuration utilities for swmanifest.

This module locates the project root and loads the JSON configuration
file into a Config.
"""

from __future__ import annotations

import json
from pathlib import Path

from swmanifest.core.exceptions import ConfigLoadError
from swmanifest.core.models import Config


CONFIG_FILENAME = "sw-config.json"


def find_project_root(start: Path | None = None) -> Path:
    """Find the project root directory by walking up from start directory.

    Searches for marker files in the following priority order:
    1. sw-config.json - Manifest configuration file
    2. pyproject.toml - Python project root
    3. .git - Version control root

    Args:
        start: Directory to start searching from. If None, uses current directory.

    Returns:
        Path to project root directory. Returns start directory if no markers found.
    """
    if start is None:
        start = Path.cwd()

    markers = [CONFIG_FILENAME, "pyproject.toml", ".git"]
    current = start.resolve()

    for parent in [current, *current.parents]:
        for marker in markers:
            if (parent / marker).exists():
                return parent

    return start.resolve()


def find_config(root: Path) -> Path | None:
    """Return the configuration file under root, or None if there is none."""
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(path: Path) -> Config:
    """Load a JSON configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        The parsed Config.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid JSON.
        ConfigurationError: If the JSON does not describe a valid config.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(
            f"Could not read configuration {path}: {e}",
            config_path=path,
            cause=e,
        ) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(
            f"Invalid JSON in {path.name}: {e.msg}",
            config_path=path,
            line=e.lineno,
            cause=e,
        ) from e

    return Config.from_dict(data)
