"""Tests for the content provider API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from manhwa.library.models import Chapter, Series
from manhwa.provider.api import create_app
from manhwa.provider.catalog import DEFAULT_SERIES, Catalog

from conftest import SHUT_IN


@pytest.fixture
def api() -> TestClient:
    return TestClient(create_app())


class TestListSeries:
    def test_returns_array_of_every_series(self, api: TestClient):
        resp = api.get("/series")
        assert resp.status_code == 200
        series = resp.json()["series"]
        assert isinstance(series, list)
        assert [s["id"] for s in series] == [s.id for s in DEFAULT_SERIES]

    def test_each_series_once(self, api: TestClient):
        ids = [s["id"] for s in api.get("/series").json()["series"]]
        assert len(ids) == len(set(ids))

    def test_insertion_order_preserved(self):
        catalog = Catalog(
            [Series(id="zeta", title="Z"), Series(id="alpha", title="A")]
        )
        api = TestClient(create_app(catalog))
        ids = [s["id"] for s in api.get("/series").json()["series"]]
        assert ids == ["zeta", "alpha"]

    def test_empty_id_lists_everything(self, api: TestClient):
        body = api.get("/series", params={"id": ""}).json()
        assert isinstance(body["series"], list)

    def test_legacy_path(self, api: TestClient):
        assert api.get("/api/get-series").json() == api.get("/series").json()


class TestGetSeries:
    @pytest.mark.parametrize("series_id", [s.id for s in DEFAULT_SERIES])
    def test_returns_single_object(self, api: TestClient, series_id: str):
        resp = api.get("/series", params={"id": series_id})
        assert resp.status_code == 200
        series = resp.json()["series"]
        assert isinstance(series, dict)
        assert series["id"] == series_id

    def test_wire_shape(self, api: TestClient):
        series = api.get("/series", params={"id": SHUT_IN}).json()["series"]
        assert set(series) == {"id", "title", "coverUrl", "chapters"}
        assert len(series["chapters"]) == 52
        assert series["chapters"][0]["number"] == 1
        assert len(series["chapters"][0]["pages"]) == 3

    def test_unknown_id_is_404(self, api: TestClient):
        resp = api.get("/series", params={"id": "no-such-series"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "Series not found"}

    def test_legacy_path_unknown_id(self, api: TestClient):
        resp = api.get("/api/get-series", params={"id": "missing"})
        assert resp.status_code == 404


class TestCatalog:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            Catalog([Series(id="x", title="A"), Series(id="x", title="B")])

    def test_default_fixture(self, catalog: Catalog):
        assert len(catalog) == 2
        shut_in = catalog.get_series(SHUT_IN)
        assert shut_in is not None
        assert [c.number for c in shut_in.chapters] == list(range(1, 53))
        assert catalog.get_series("missing") is None

    def test_custom_chapters(self):
        catalog = Catalog(
            [Series(id="s", title="S", chapters=(Chapter(number=1, pages=("a",)),))]
        )
        assert catalog.get_series("s").chapters[0].pages == ("a",)


def test_health(api: TestClient):
    assert api.get("/health").json() == {"status": "healthy"}
