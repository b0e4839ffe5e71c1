# Object Creator Utilities Package
"""
Shared utility functions and helpers for the creator window.
"""

from .helpers import load_settings, resolve_destination_directory, search_mode_from_settings

__all__ = ["load_settings", "resolve_destination_directory", "search_mode_from_settings"]
