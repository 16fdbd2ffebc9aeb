"""Tests for the preference store."""

from __future__ import annotations

from pathlib import Path

import pytest

from manhwa.library.preferences import THEME_KEY, PreferenceStore


class TestKeyValue:
    def test_get_missing_returns_default(self, store: PreferenceStore):
        assert store.get("nope") is None
        assert store.get("nope", "fallback") == "fallback"

    def test_set_and_get(self, store: PreferenceStore):
        store.set("reader.width", "72")
        assert store.get("reader.width") == "72"

    def test_set_overwrites(self, store: PreferenceStore):
        store.set("k", "a")
        store.set("k", "b")
        assert store.get("k") == "b"

    def test_persists_across_connections(self, tmp_path: Path):
        db_path = tmp_path / "prefs.db"
        first = PreferenceStore(db_path)
        first.set("k", "v")
        first.close()

        second = PreferenceStore(db_path)
        assert second.get("k") == "v"
        second.close()


class TestTheme:
    def test_default_when_unset(self, store: PreferenceStore):
        assert store.get_theme() == "dark"
        assert store.get_theme(default="light") == "light"

    def test_set_theme(self, store: PreferenceStore):
        store.set_theme("light")
        assert store.get_theme() == "light"
        assert store.get(THEME_KEY) == "light"

    def test_set_unknown_theme_raises(self, store: PreferenceStore):
        with pytest.raises(ValueError):
            store.set_theme("sepia")

    def test_corrupt_stored_theme_uses_default(self, store: PreferenceStore):
        store.set(THEME_KEY, "purple")
        assert store.get_theme(default="light") == "light"
