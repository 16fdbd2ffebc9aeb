"""Shared fixtures for tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from manhwa.config import AppConfig
from manhwa.library.preferences import PreferenceStore
from manhwa.provider.catalog import Catalog

SHUT_IN = "the-ultimate-shut-in"


@pytest.fixture
def store(tmp_path: Path) -> PreferenceStore:
    db_path = tmp_path / "test.db"
    prefs = PreferenceStore(db_path)
    yield prefs
    prefs.close()


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        data_dir=tmp_path / "data",
        config_dir=tmp_path / "config",
    )


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()
