"""Tests for data models."""

import pytest

from manhwa.library.models import Chapter, Series


def _series_dict() -> dict:
    return {
        "id": "s1",
        "title": "Series One",
        "coverUrl": "https://example.test/cover.png",
        "chapters": [
            {"number": 1, "pages": ["p1", "p2"]},
            {"number": 2, "pages": ["p1"]},
            {"number": 3, "pages": []},
        ],
    }


class TestChapter:
    def test_from_dict(self):
        ch = Chapter.from_dict({"number": 4, "pages": ["a", "b"]})
        assert ch.number == 4
        assert ch.pages == ("a", "b")

    def test_pages_default_empty(self):
        assert Chapter.from_dict({"number": 1}).pages == ()

    def test_rejects_non_integer_number(self):
        with pytest.raises(TypeError):
            Chapter.from_dict({"number": "1", "pages": []})

    def test_rejects_bool_number(self):
        with pytest.raises(TypeError):
            Chapter.from_dict({"number": True, "pages": []})

    def test_rejects_non_string_pages(self):
        with pytest.raises(TypeError):
            Chapter.from_dict({"number": 1, "pages": [1, 2]})


class TestSeries:
    def test_from_dict_reads_cover_url(self):
        series = Series.from_dict(_series_dict())
        assert series.id == "s1"
        assert series.cover_url == "https://example.test/cover.png"
        assert [c.number for c in series.chapters] == [1, 2, 3]

    def test_to_dict_uses_wire_names(self):
        data = Series.from_dict(_series_dict()).to_dict()
        assert data == _series_dict()

    def test_display_chapters_newest_first(self):
        series = Series.from_dict(_series_dict())
        assert [c.number for c in series.display_chapters()] == [3, 2, 1]

    def test_display_does_not_reorder_storage(self):
        series = Series.from_dict(_series_dict())
        series.display_chapters()
        assert [c.number for c in series.chapters] == [1, 2, 3]

    def test_chapter_count(self):
        assert Series.from_dict(_series_dict()).chapter_count == 3

    def test_missing_title_raises(self):
        data = _series_dict()
        del data["title"]
        with pytest.raises(KeyError):
            Series.from_dict(data)
