from __future__ import annotations

from typing import Optional

from textual import on
from textual.app import ComposeResult
from textual.widgets import ListItem, ListView, Static

from manhwa.library.models import Series, SeriesDetail, SeriesResult
from manhwa.provider.client import series_key
from manhwa.ui.screens.base import FetchScreen


class SeriesScreen(FetchScreen):
    ERROR_FALLBACK = "Failed to load series"

    def __init__(self, series_id: str) -> None:
        super().__init__()
        self.series_id = series_id
        self.series: Optional[Series] = None

    def request_key(self) -> str:
        return series_key(self.series_id)

    def compose_content(self) -> ComposeResult:
        yield Static("", id="series-title")
        yield Static("", id="series-cover")
        yield Static("Chapters", id="chapters-heading")
        yield ListView(id="chapter-list")

    def render_data(self, data: SeriesResult) -> None:
        if not isinstance(data, SeriesDetail):
            return
        self.series = data.series
        self.query_one("#series-title", Static).update(f" {self.series.title}")
        self.query_one("#series-cover", Static).update(
            f"Cover: {self.series.cover_url}"
        )
        self.query_one("#chapters-heading", Static).update(
            f"Chapters ({self.series.chapter_count})"
        )

        chapter_list = self.query_one("#chapter-list", ListView)
        chapter_list.clear()
        for chapter in self.series.display_chapters():
            item = ListItem(Static(f"Chapter {chapter.number}"), classes="chapter-item")
            item.data = chapter.number  # type: ignore[attr-defined]
            chapter_list.append(item)
        chapter_list.focus()

    @on(ListView.Selected, "#chapter-list")
    def on_chapter_selected(self, event: ListView.Selected) -> None:
        number = getattr(event.item, "data", None)
        if number is not None:
            self.mw.router.open_chapter(number)
