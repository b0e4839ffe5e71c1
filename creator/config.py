"""
Object Creator - Entry point

Wires settings, the shared catalog, the output sink and a creator panel
together. This is what an editor menu item calls.

Usage:
  from creator.config import launch

  panel = launch(selected_path="Assets/Enemies/Goblin.asset")
  panel.set_query("|Enemy |Player")
  result = panel.commit(panel.current_matches()[0])

When the selection is a creatable type itself, launch() creates the object
right away and returns the CommitResult instead of a panel.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from creator.panels.creator import CreatorPanel
from creator.services.catalog import (
    CatalogProvider,
    build_catalog,
    entry_for_type,
    get_catalog_provider,
    make_catalog_filter,
)
from creator.services.sink import AssetSink, CommitResult, TomlAssetSink
from creator.utils.helpers import (
    load_settings,
    resolve_destination_directory,
    search_mode_from_settings,
)


def catalog_builder_from_settings(settings: Dict[str, Any]):
    """Create a build_catalog() callable using the [catalog] denylists."""
    catalog_settings = settings.get("catalog", {})
    predicate = make_catalog_filter(
        exclude_tags=catalog_settings.get("exclude_tags", ()),
        exclude_module_prefixes=catalog_settings.get("exclude_module_prefixes", ()),
    )
    return lambda: build_catalog(predicate=predicate)


def sink_from_settings(settings: Dict[str, Any], project_root: Path | str = ".") -> TomlAssetSink:
    output = settings.get("output", {})
    return TomlAssetSink(
        project_root=project_root,
        root_directory=output.get("root_directory", "Assets"),
        extension=output.get("extension", ".asset"),
    )


def launch(
    selected_path: Optional[str] = None,
    selected_type: Optional[type] = None,
    project_root: Path | str = ".",
    settings: Optional[Dict[str, Any]] = None,
    provider: Optional[CatalogProvider] = None,
    sink: Optional[AssetSink] = None,
) -> CreatorPanel | CommitResult:
    """
    Open the creator for the current selection.

    Args:
        selected_path: Project-relative path of the selected asset or folder
        selected_type: Selected creatable class, created without a panel
        project_root: Directory asset paths are relative to
        settings: Settings dict (loaded from settings.toml if omitted)
        provider: Catalog provider (process-wide provider if omitted)
        sink: Output sink (TomlAssetSink from settings if omitted)

    Returns:
        CommitResult if selected_type was given, otherwise an open CreatorPanel
    """
    if settings is None:
        settings = load_settings()
    if sink is None:
        sink = sink_from_settings(settings, project_root)

    destination_directory = resolve_destination_directory(selected_path, project_root)

    if selected_type is not None:
        entry = entry_for_type(selected_type)
        logger.debug(f"Creating {entry.full_name} directly from selection")
        return sink.create_and_persist(entry, destination_directory)

    if provider is None:
        provider = get_catalog_provider(catalog_builder_from_settings(settings))

    search_settings = settings.get("search", {})
    return CreatorPanel(
        provider.get(),
        sink,
        destination_directory=destination_directory,
        mode=search_mode_from_settings(settings),
        match_display_label=bool(search_settings.get("match_display_label", False)),
    )
