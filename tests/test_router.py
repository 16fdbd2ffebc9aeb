"""Tests for the view router."""

from __future__ import annotations

import pytest

from manhwa.ui.router import InvalidTransition, View, ViewRouter, ViewState

from conftest import SHUT_IN


@pytest.fixture
def router() -> ViewRouter:
    return ViewRouter()


class TestInitialState:
    def test_starts_home(self, router: ViewRouter):
        assert router.state == ViewState(view=View.HOME)
        assert router.state.series_id is None
        assert router.state.chapter_number is None

    def test_deep_link(self):
        router = ViewRouter(ViewState(View.CHAPTER, SHUT_IN, "53"))
        assert router.view is View.CHAPTER
        assert router.state.chapter_number == "53"

    def test_invalid_deep_link(self):
        with pytest.raises(InvalidTransition):
            ViewRouter(ViewState(View.CHAPTER, SHUT_IN, None))
        with pytest.raises(InvalidTransition):
            ViewRouter(ViewState(View.SERIES))


class TestTransitions:
    def test_home_to_series(self, router: ViewRouter):
        router.open_series(SHUT_IN)
        assert router.state == ViewState(View.SERIES, SHUT_IN, None)

    def test_library_to_series(self, router: ViewRouter):
        router.navigate(View.LIBRARY)
        router.open_series(SHUT_IN)
        assert router.view is View.SERIES

    def test_series_to_chapter(self, router: ViewRouter):
        router.open_series(SHUT_IN)
        router.open_chapter(3)
        assert router.state == ViewState(View.CHAPTER, SHUT_IN, 3)

    def test_chapter_to_chapter_only_changes_number(self, router: ViewRouter):
        router.open_series(SHUT_IN)
        router.open_chapter(3)
        router.go_to_chapter(4)
        assert router.state == ViewState(View.CHAPTER, SHUT_IN, 4)

    def test_back_from_chapter_keeps_series(self, router: ViewRouter):
        router.open_series(SHUT_IN)
        router.open_chapter(3)
        assert router.back() is True
        assert router.state == ViewState(View.SERIES, SHUT_IN, None)

    def test_back_from_series_clears_series(self, router: ViewRouter):
        router.open_series(SHUT_IN)
        assert router.back() is True
        assert router.state == ViewState(View.HOME)

    def test_back_from_home_is_noop(self, router: ViewRouter):
        assert router.back() is False
        assert router.view is View.HOME

    def test_navigate_clears_identifiers(self, router: ViewRouter):
        router.open_series(SHUT_IN)
        router.open_chapter(2)
        router.navigate(View.LIBRARY)
        assert router.state == ViewState(View.LIBRARY)


class TestInvalidTransitions:
    def test_open_chapter_from_home(self, router: ViewRouter):
        with pytest.raises(InvalidTransition):
            router.open_chapter(1)

    def test_go_to_chapter_from_series(self, router: ViewRouter):
        router.open_series(SHUT_IN)
        with pytest.raises(InvalidTransition):
            router.go_to_chapter(2)

    def test_open_series_from_chapter(self, router: ViewRouter):
        router.open_series(SHUT_IN)
        router.open_chapter(1)
        with pytest.raises(InvalidTransition):
            router.open_series("another-series")

    def test_empty_series_id(self, router: ViewRouter):
        with pytest.raises(InvalidTransition):
            router.open_series("")

    def test_navigate_to_series(self, router: ViewRouter):
        with pytest.raises(InvalidTransition):
            router.navigate(View.SERIES)

    def test_failed_transition_keeps_state(self, router: ViewRouter):
        with pytest.raises(InvalidTransition):
            router.open_chapter(1)
        assert router.state == ViewState(View.HOME)


class TestListeners:
    def test_notified_with_new_state(self, router: ViewRouter):
        seen: list[ViewState] = []
        router.subscribe(seen.append)
        router.open_series(SHUT_IN)
        router.open_chapter(1)
        assert [s.view for s in seen] == [View.SERIES, View.CHAPTER]

    def test_unsubscribe(self, router: ViewRouter):
        seen: list[ViewState] = []
        unsubscribe = router.subscribe(seen.append)
        unsubscribe()
        router.open_series(SHUT_IN)
        assert seen == []
