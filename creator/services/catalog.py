"""
Catalog Service - Registry of creatable types and the lazily built catalog.

Types opt in with the @creatable decorator:

    @creatable(display_label="Game/Enemy Config", file_name="EnemyConfig")
    class EnemyConfig:
        ...

build_catalog() filters the registered types through a candidate predicate
and sorts them by display name. CatalogProvider builds the catalog once and
hands the same tuple to every reader afterwards.
"""

import inspect
import threading
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from loguru import logger

# Class attribute holding the @creatable options
CREATABLE_ATTR = "__creatable__"

_registry: list[type] = []


@dataclass(frozen=True)
class CatalogEntry:
    """One creatable type offered by the creator window."""
    full_name: str
    display_label: Optional[str] = None
    file_stem: str = ""
    factory: Optional[Callable] = field(default=None, compare=False)
    tags: frozenset = frozenset()

    @property
    def display_name(self) -> str:
        return self.display_label if self.display_label else self.full_name


def creatable(display_label: str = None, file_name: str = None, tags: Iterable[str] = ()):
    """
    Class decorator registering a type for the creator catalog.

    Args:
        display_label: Human-facing label shown instead of the full name
        file_name: Output file name stem (defaults to the class name)
        tags: Capability markers, matched against the catalog denylist
    """
    def decorator(cls):
        setattr(cls, CREATABLE_ATTR, {
            "display_label": display_label or None,
            "file_name": file_name or None,
            "tags": frozenset(tags),
        })
        if cls not in _registry:
            _registry.append(cls)
        return cls
    return decorator


def registered_types() -> list[type]:
    """Get all @creatable classes in registration order."""
    return list(_registry)


def entry_for_type(cls: type) -> CatalogEntry:
    """Build a CatalogEntry from a class and its @creatable options."""
    options = cls.__dict__.get(CREATABLE_ATTR, {})
    file_stem = cls.__name__
    if options.get("file_name"):
        file_stem = options["file_name"].replace("/", "_")

    return CatalogEntry(
        full_name=f"{cls.__module__}.{cls.__qualname__}",
        display_label=options.get("display_label"),
        file_stem=file_stem,
        factory=cls,
        tags=options.get("tags", frozenset()),
    )


def make_catalog_filter(
    exclude_tags: Iterable[str] = (),
    exclude_module_prefixes: Iterable[str] = (),
) -> Callable[[type], bool]:
    """
    Create the predicate deciding which types become catalog entries.

    Rejected: abstract, non-public, function-local and unbound generic
    classes, classes from excluded module prefixes, and classes carrying
    an excluded tag.
    """
    excluded_tags = frozenset(exclude_tags)
    excluded_prefixes = tuple(exclude_module_prefixes)

    def is_candidate(cls: type) -> bool:
        if inspect.isabstract(cls):
            return False

        qualname_parts = cls.__qualname__.split(".")
        if "<locals>" in qualname_parts or any(p.startswith("_") for p in qualname_parts):
            return False

        if getattr(cls, "__parameters__", ()):
            return False

        if excluded_prefixes and cls.__module__.startswith(excluded_prefixes):
            return False

        tags = cls.__dict__.get(CREATABLE_ATTR, {}).get("tags", frozenset())
        if tags & excluded_tags:
            return False

        return True

    return is_candidate


def build_catalog(
    types: Optional[Iterable[type]] = None,
    predicate: Optional[Callable[[type], bool]] = None,
) -> tuple[CatalogEntry, ...]:
    """
    Build the sorted catalog.

    Args:
        types: Candidate classes (defaults to registered_types())
        predicate: Candidate filter (defaults to make_catalog_filter())

    Returns:
        Tuple of entries sorted by display name (ordinal, case-sensitive)
    """
    if types is None:
        types = registered_types()
    if predicate is None:
        predicate = make_catalog_filter()

    entries = [entry_for_type(cls) for cls in types if predicate(cls)]
    entries.sort(key=lambda e: e.display_name)
    return tuple(entries)


class CatalogProvider:
    """
    Build-once holder for the catalog.

    The builder runs at most once; concurrent first readers wait on the
    build lock and then all see the same tuple. Once built, get() reads
    the cached catalog without locking.
    """

    def __init__(self, builder: Callable[[], Iterable[CatalogEntry]]):
        self._builder = builder
        self._catalog: Optional[tuple[CatalogEntry, ...]] = None
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._catalog is not None

    def get(self) -> tuple[CatalogEntry, ...]:
        catalog = self._catalog
        if catalog is not None:
            return catalog

        with self._lock:
            if self._catalog is None:
                self._catalog = tuple(self._builder())
                logger.debug(f"Catalog built with {len(self._catalog)} entries")
            return self._catalog


# Singleton accessor
_catalog_provider_instance = None
_catalog_provider_lock = threading.Lock()


def get_catalog_provider(builder: Optional[Callable[[], Iterable[CatalogEntry]]] = None) -> CatalogProvider:
    """
    Get the process-wide CatalogProvider.

    Args:
        builder: Catalog builder used if the provider does not exist yet
                 (defaults to build_catalog over the registry)

    Returns:
        CatalogProvider: The global instance
    """
    global _catalog_provider_instance
    if _catalog_provider_instance is None:
        with _catalog_provider_lock:
            if _catalog_provider_instance is None:
                _catalog_provider_instance = CatalogProvider(builder or build_catalog)
    return _catalog_provider_instance
