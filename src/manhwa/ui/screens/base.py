from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, LoadingIndicator, Static

from manhwa.library.models import SeriesResult
from manhwa.ui.fetch import FetchHook, FetchState

if TYPE_CHECKING:
    from manhwa.app import ManhwaApp


class FetchScreen(Screen):
    """A screen whose content comes from one content provider request.

    Subclasses supply the request key and render the data; this class shows
    the loading indicator and the error panel.
    """

    BINDINGS = [
        Binding("escape", "go_back", "Back"),
        Binding("r", "reload", "Reload"),
    ]

    ERROR_FALLBACK = "Failed to load data"

    def __init__(self) -> None:
        super().__init__()
        self.hook: FetchHook[SeriesResult] = FetchHook(
            self._fetch, on_change=self._on_fetch_state
        )

    @property
    def mw(self) -> ManhwaApp:
        return self.app  # type: ignore[return-value]

    def request_key(self) -> str:
        raise NotImplementedError

    def compose_content(self) -> ComposeResult:
        raise NotImplementedError

    def render_data(self, data: SeriesResult) -> None:
        raise NotImplementedError

    def compose(self) -> ComposeResult:
        yield Header()
        yield LoadingIndicator(id="loading")
        with Vertical(id="error-panel"):
            yield Static("Error", id="error-title")
            yield Static("", id="error-message")
        with Vertical(id="content"):
            yield from self.compose_content()
        yield Footer()

    def prepare(self) -> None:
        """Set up widgets before the first request is issued."""

    def on_mount(self) -> None:
        self.prepare()
        self.hook.set_key(self.request_key())

    def on_unmount(self) -> None:
        self.hook.close()

    async def _fetch(self, key: str) -> SeriesResult:
        return await self.mw.client.fetch(key)

    def _on_fetch_state(self, state: FetchState[SeriesResult]) -> None:
        self.query_one("#loading").display = state.is_loading
        self.query_one("#error-panel").display = state.is_error
        self.query_one("#content").display = state.has_data
        if state.is_error:
            self.query_one("#error-message", Static).update(
                state.error or self.ERROR_FALLBACK
            )
        elif state.has_data and state.data is not None:
            self.render_data(state.data)

    def action_reload(self) -> None:
        self.mw.client.clear_cache()
        self.hook.reload()

    def action_go_back(self) -> None:
        self.mw.router.back()
