# Object Creator Services Package
"""
Backend services for the creator window.

Services own the type catalog and the creation of new objects on disk.
"""

from .catalog import (
    CatalogEntry,
    CatalogProvider,
    build_catalog,
    creatable,
    get_catalog_provider,
)
from .sink import AssetSink, CommitResult, TomlAssetSink

__all__ = [
    "AssetSink",
    "CatalogEntry",
    "CatalogProvider",
    "CommitResult",
    "TomlAssetSink",
    "build_catalog",
    "creatable",
    "get_catalog_provider",
]
