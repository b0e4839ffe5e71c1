"""
Shared test fixtures for the creator test suite.

Provides a static fixture catalog, a counting catalog builder, a settings
file and a project directory that use real file I/O (no mocking of the
filesystem).
"""

import pytest
import toml

from creator.services.catalog import CatalogEntry


class EnemyConfig:
    def __init__(self):
        self.health = 100
        self.name = "goblin"


class PlayerConfig:
    def __init__(self):
        self.speed = 4.5


class BrokenConfig:
    def __init__(self):
        raise RuntimeError("constructor exploded")


def _entries():
    """Fixture catalog, already sorted by display name."""
    entries = [
        CatalogEntry(full_name="Foo.Bar.Baz", file_stem="Baz"),
        CatalogEntry(full_name="Foo.Qux", file_stem="Qux"),
        CatalogEntry(full_name="FooData", file_stem="FooData"),
        CatalogEntry(full_name="game.BrokenConfig", file_stem="BrokenConfig", factory=BrokenConfig),
        CatalogEntry(full_name="game.EnemyConfig", file_stem="EnemyConfig", factory=EnemyConfig),
        CatalogEntry(full_name="game.PlayerConfig", file_stem="PlayerConfig", factory=PlayerConfig),
        CatalogEntry(full_name="game.WeaponTable", display_label="Items/Weapons", file_stem="Weapons"),
    ]
    return tuple(sorted(entries, key=lambda e: e.display_name))


@pytest.fixture
def catalog():
    return _entries()


class CountingBuilder:
    """Catalog builder that records how often it runs."""

    def __init__(self, entries=None):
        self.calls = 0
        self.entries = entries if entries is not None else _entries()

    def __call__(self):
        self.calls += 1
        return self.entries


@pytest.fixture
def counting_builder():
    return CountingBuilder()


@pytest.fixture
def tmp_project(tmp_path):
    """Create a project directory with an Assets tree."""
    (tmp_path / "Assets" / "Enemies").mkdir(parents=True)
    (tmp_path / "Assets" / "Enemies" / "Goblin.asset").write_text('type = "game.EnemyConfig"\n')
    return tmp_path


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "search": {"mode": "simple", "match_display_label": True},
        "output": {"root_directory": "Assets", "extension": ".data"},
        "catalog": {"exclude_tags": ["editor"], "exclude_module_prefixes": ["vendor."]},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
