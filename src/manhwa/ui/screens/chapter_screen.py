from __future__ import annotations

from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, ListItem, ListView, Static

from manhwa.library.models import SeriesDetail, SeriesResult
from manhwa.library.navigation import ChapterNav, resolve_chapter
from manhwa.provider.client import series_key
from manhwa.ui.router import ChapterNumber
from manhwa.ui.screens.base import FetchScreen


class ChapterScreen(FetchScreen):
    """Pages of one chapter with previous/next chapter controls.

    The request is keyed on the series, so moving between chapters of the
    same series re-renders from the resolved payload without a new request.
    """

    BINDINGS = [
        Binding("left", "prev_chapter", "←Ch", priority=True),
        Binding("right", "next_chapter", "Ch→", priority=True),
        Binding("comma", "prev_chapter", "<Ch", show=False),
        Binding("full_stop", "next_chapter", "Ch>", show=False),
    ]

    ERROR_FALLBACK = "Failed to load chapter"

    def __init__(
        self, series_id: str, chapter_number: Optional[ChapterNumber]
    ) -> None:
        super().__init__()
        self.series_id = series_id
        self.chapter_number = chapter_number
        self.nav: Optional[ChapterNav] = None

    def request_key(self) -> str:
        return series_key(self.series_id)

    def compose_content(self) -> ComposeResult:
        with Vertical(id="chapter-body"):
            with Horizontal(id="chapter-nav"):
                yield Button("◀ Prev", id="prev-chapter", disabled=True)
                yield Static("", id="chapter-title")
                yield Button("Next ▶", id="next-chapter", disabled=True)
            yield ListView(id="page-list")
        with Vertical(id="chapter-missing"):
            yield Static("Chapter not found.", id="chapter-missing-message")
            yield Button("Back to Series", variant="primary", id="back-to-series")

    def show_chapter(self, chapter_number: Optional[ChapterNumber]) -> None:
        self.chapter_number = chapter_number
        state = self.hook.state
        if state.has_data and state.data is not None:
            self.render_data(state.data)
        self.hook.set_key(self.request_key())

    def render_data(self, data: SeriesResult) -> None:
        if not isinstance(data, SeriesDetail):
            return
        self.nav = resolve_chapter(data.series, self.chapter_number)
        found = self.nav.found
        self.query_one("#chapter-body").display = found
        self.query_one("#chapter-missing").display = not found
        if not found:
            self.query_one("#back-to-series", Button).focus()
            return

        chapter = self.nav.chapter
        assert chapter is not None
        self.query_one("#chapter-title", Static).update(
            f"{data.series.title} │ Chapter {chapter.number}/{self.nav.total}"
        )
        self.query_one("#prev-chapter", Button).disabled = not self.nav.has_prev
        self.query_one("#next-chapter", Button).disabled = not self.nav.has_next

        page_list = self.query_one("#page-list", ListView)
        page_list.clear()
        for i, url in enumerate(chapter.pages, start=1):
            page_list.append(ListItem(Static(f"Page {i}: {url}"), classes="page-item"))
        page_list.focus()

    # ── Navigation ─────────────────────────────────

    def action_prev_chapter(self) -> None:
        if self.nav and self.nav.found and self.nav.prev_number is not None:
            self._go_to(self.nav.prev_number)

    def action_next_chapter(self) -> None:
        if self.nav and self.nav.found and self.nav.next_number is not None:
            self._go_to(self.nav.next_number)

    def _go_to(self, number: int) -> None:
        if self.nav and self.nav.can_go_to(number):
            self.mw.router.go_to_chapter(number)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "prev-chapter":
            self.action_prev_chapter()
        elif event.button.id == "next-chapter":
            self.action_next_chapter()
        elif event.button.id == "back-to-series":
            self.mw.router.back()
