"""
Helper utilities for the creator window.

Provides:
- Settings loading (TOML merged over defaults)
- Destination directory resolution for a selected asset
- Search mode lookup from settings
"""

from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

from creator.search.tokens import SearchMode

DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / "data" / "settings.toml"


def _default_settings() -> Dict[str, Any]:
    return {
        "search": {
            "mode": SearchMode.EXTENDED.value,
            "match_display_label": False,
        },
        "output": {
            "root_directory": "Assets",
            "extension": ".asset",
        },
        "catalog": {
            "exclude_tags": ["editor", "internal"],
            "exclude_module_prefixes": [],
        },
    }


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load creator settings from a TOML file.

    Args:
        path: Settings file (defaults to creator/data/settings.toml)

    Returns:
        Dictionary containing settings with defaults applied

    Example settings.toml:
        [search]
        mode = "simple"
        match_display_label = true

        [output]
        root_directory = "Assets/Data"
    """
    defaults = _default_settings()
    settings_path = Path(path) if path else DEFAULT_SETTINGS_PATH

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def search_mode_from_settings(settings: Dict[str, Any]) -> SearchMode:
    """Read [search] mode, falling back to extended for unknown values."""
    value = settings.get("search", {}).get("mode", SearchMode.EXTENDED.value)
    try:
        return SearchMode(str(value).lower())
    except ValueError:
        logger.warning(f"Unknown search mode {value!r}, using {SearchMode.EXTENDED.value}")
        return SearchMode.EXTENDED


def resolve_destination_directory(selected_path, project_root: Path | str = ".") -> Optional[str]:
    """
    Work out where a new object should be written for the current selection.

    Args:
        selected_path: Project-relative path of the selected asset, or None
        project_root: Directory the asset paths are relative to

    Returns:
        The selection if it is a folder, otherwise its parent folder, as a
        project-relative path with "/" separators. None if neither is a
        folder inside the project.
    """
    if not selected_path:
        return None

    root = Path(project_root)
    relative = Path(selected_path)

    if (root / relative).is_dir():
        return relative.as_posix()

    parent = relative.parent
    if parent != Path(".") and (root / parent).is_dir():
        return parent.as_posix()

    return None
