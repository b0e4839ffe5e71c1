"""
Asset Sink - Instantiate a catalog entry and write it into the project.

The creator panel calls create_and_persist() exactly once per commit and
hands the CommitResult back to the presentation layer untouched. Failures
are reported in the result rather than raised; nothing here retries.

TomlAssetSink writes a small TOML document per object:

    type = "game.configs.EnemyConfig"

    [fields]
    health = 100
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import toml
from loguru import logger

from .catalog import CatalogEntry

DEFAULT_ROOT_DIRECTORY = "Assets"
DEFAULT_EXTENSION = ".asset"


@dataclass
class CommitResult:
    """Outcome of creating and persisting one object."""
    entry: CatalogEntry
    success: bool
    path: Optional[Path] = None
    instance: Any = None
    error: str = ""


class AssetSink(ABC):
    """Base class for instantiation/output sinks."""

    @abstractmethod
    def create_and_persist(self, entry: CatalogEntry, destination_directory: Optional[str] = None) -> CommitResult:
        """Create an instance of entry and store it under destination_directory."""
        ...


class TomlAssetSink(AssetSink):
    """Write created objects as TOML files inside a project directory."""

    def __init__(
        self,
        project_root: Path | str = ".",
        root_directory: str = DEFAULT_ROOT_DIRECTORY,
        extension: str = DEFAULT_EXTENSION,
    ):
        self.project_root = Path(project_root)
        self.root_directory = root_directory
        self.extension = extension

    def create_and_persist(self, entry: CatalogEntry, destination_directory: Optional[str] = None) -> CommitResult:
        """
        Instantiate entry and write it to the destination directory.

        Args:
            entry: Catalog entry to instantiate
            destination_directory: Project-relative directory; defaults to
                                   the root directory when empty

        Returns:
            CommitResult with the written path, or the error message
        """
        if not destination_directory:
            destination_directory = self.root_directory

        directory = self.project_root / destination_directory
        if not directory.is_dir():
            logger.warning(f"Cannot create {entry.full_name}: {directory} is not a directory")
            return CommitResult(entry=entry, success=False, error=f"Invalid destination: {destination_directory}")

        try:
            instance = entry.factory()
        except Exception as e:
            logger.exception(f"Failed to instantiate {entry.full_name}")
            return CommitResult(entry=entry, success=False, error=f"Instantiation failed: {e}")

        path = self._unique_path(directory, entry.file_stem)
        document = {
            "type": entry.full_name,
            "fields": _public_fields(instance),
        }

        try:
            path.write_text(toml.dumps(document))
        except (OSError, TypeError, ValueError) as e:
            logger.exception(f"Failed to write {path}")
            return CommitResult(entry=entry, success=False, instance=instance, error=f"Write failed: {e}")

        logger.debug(f"Created {entry.full_name} at {path}")
        return CommitResult(entry=entry, success=True, path=path, instance=instance)

    def _unique_path(self, directory: Path, stem: str) -> Path:
        """Pick '<stem><ext>', or '<stem> N<ext>' if that already exists."""
        path = directory / f"{stem}{self.extension}"
        counter = 1
        while path.exists():
            path = directory / f"{stem} {counter}{self.extension}"
            counter += 1
        return path


def _public_fields(instance) -> dict:
    """Collect an instance's public, non-None attributes."""
    values = getattr(instance, "__dict__", {})
    return {
        name: value
        for name, value in values.items()
        if not name.startswith("_") and value is not None
    }
