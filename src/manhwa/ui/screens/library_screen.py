from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.widgets import DataTable, Static

from manhwa.library.models import Series, SeriesListing, SeriesResult
from manhwa.provider.client import series_key
from manhwa.ui.screens.base import FetchScreen


def latest_label(series: Series) -> str:
    return f"Chapter {series.chapter_count}"


class SeriesListScreen(FetchScreen):
    """Every series from the provider, in provider order."""

    HEADING = ""

    def __init__(self) -> None:
        super().__init__()
        self.series: list[Series] = []

    def request_key(self) -> str:
        return series_key()

    def compose_content(self) -> ComposeResult:
        yield Static(self.HEADING, id="list-heading", classes="screen-heading")
        yield DataTable(id="series-table")

    def prepare(self) -> None:
        table = self.query_one("#series-table", DataTable)
        table.cursor_type = "row"
        table.add_columns("Title", "Latest", "ID")

    def render_data(self, data: SeriesResult) -> None:
        if not isinstance(data, SeriesListing):
            return
        self.series = list(data.series)
        table = self.query_one("#series-table", DataTable)
        table.clear()
        for s in self.series:
            table.add_row(s.title, latest_label(s), s.id, key=s.id)

        count = len(self.series)
        self.query_one("#list-heading", Static).update(
            f" {self.HEADING}  ({count} series)"
        )
        table.focus()

    @on(DataTable.RowSelected, "#series-table")
    def on_row_selected(self, event: DataTable.RowSelected) -> None:
        series_id = event.row_key.value
        if series_id:
            self.mw.router.open_series(str(series_id))


class LibraryScreen(SeriesListScreen):
    # Same source as Home until favourites exist
    HEADING = "My Library"
