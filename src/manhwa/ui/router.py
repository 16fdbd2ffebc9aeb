"""In-memory view router: which screen is active and with what parameters."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Union

log = logging.getLogger(__name__)

ChapterNumber = Union[int, str]


class View(str, Enum):
    HOME = "home"
    LIBRARY = "library"
    SERIES = "series"
    CHAPTER = "chapter"


class InvalidTransition(Exception):
    """A navigation that the current view does not allow."""


@dataclass(frozen=True)
class ViewState:
    view: View = View.HOME
    series_id: Optional[str] = None
    chapter_number: Optional[ChapterNumber] = None

    def validate(self) -> None:
        if self.view in (View.SERIES, View.CHAPTER) and not self.series_id:
            raise InvalidTransition(f"{self.view.value} view needs a series id")
        if self.view is View.CHAPTER and self.chapter_number is None:
            raise InvalidTransition("chapter view needs a chapter number")


Listener = Callable[[ViewState], None]


class ViewRouter:
    def __init__(self, initial: Optional[ViewState] = None) -> None:
        state = initial or ViewState()
        state.validate()
        self._state = state
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def view(self) -> View:
        return self._state.view

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every transition. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Transitions ────────────────────────────────

    def navigate(self, view: View) -> None:
        """Top-level navigation to Home or Library from anywhere."""
        if view not in (View.HOME, View.LIBRARY):
            raise InvalidTransition(f"cannot navigate directly to {view.value}")
        self._set(ViewState(view=view))

    def open_series(self, series_id: str) -> None:
        self._require(View.HOME, View.LIBRARY, action="open a series")
        if not series_id:
            raise InvalidTransition("series id is required")
        self._set(ViewState(view=View.SERIES, series_id=series_id))

    def open_chapter(self, number: ChapterNumber) -> None:
        self._require(View.SERIES, action="open a chapter")
        if number is None:
            raise InvalidTransition("chapter number is required")
        self._set(replace(self._state, view=View.CHAPTER, chapter_number=number))

    def go_to_chapter(self, number: ChapterNumber) -> None:
        self._require(View.CHAPTER, action="change chapter")
        if number is None:
            raise InvalidTransition("chapter number is required")
        self._set(replace(self._state, chapter_number=number))

    def back(self) -> bool:
        """Step back one level. Returns False when there is nowhere to go."""
        if self._state.view is View.CHAPTER:
            self._set(replace(self._state, view=View.SERIES, chapter_number=None))
            return True
        if self._state.view is View.SERIES:
            self._set(ViewState(view=View.HOME))
            return True
        return False

    # ── Internals ──────────────────────────────────

    def _require(self, *views: View, action: str) -> None:
        if self._state.view not in views:
            raise InvalidTransition(
                f"cannot {action} from the {self._state.view.value} view"
            )

    def _set(self, state: ViewState) -> None:
        state.validate()
        log.debug("Route %s -> %s", self._state, state)
        self._state = state
        for listener in list(self._listeners):
            listener(state)
