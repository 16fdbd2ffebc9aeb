"""Manhwa - terminal manhwa/manga reader."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import httpx
from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from manhwa.config import AppConfig, load_config
from manhwa.library.preferences import PreferenceStore
from manhwa.provider.client import ContentClient
from manhwa.ui.router import View, ViewRouter, ViewState
from manhwa.ui.screens.chapter_screen import ChapterScreen
from manhwa.ui.screens.home_screen import HomeScreen
from manhwa.ui.screens.library_screen import LibraryScreen
from manhwa.ui.screens.series_screen import SeriesScreen
from manhwa.ui.themes import APP_CSS, textual_theme, toggled

log = logging.getLogger(__name__)


class ManhwaApp(App):
    """A terminal reader for manhwa series served by the content provider."""

    TITLE = "Manhwa"
    CSS = APP_CSS
    BINDINGS = [
        Binding("h", "go_home", "Home"),
        Binding("l", "go_library", "Library"),
        Binding("d", "toggle_theme", "Theme"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: AppConfig | None = None,
        start: ViewState | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__()
        self.config = config or load_config()
        self.prefs = PreferenceStore(self.config.db_path)
        self.client = ContentClient(self.config, transport=transport)
        self.router = ViewRouter(start)
        self.reader_theme = self.prefs.get_theme(default=self.config.default_theme)
        self.router.subscribe(self._on_route)

    def on_mount(self) -> None:
        self.theme = textual_theme(self.reader_theme)
        self.sub_title = self.router.view.value.title()
        self.push_screen(self._screen_for(self.router.state))

    def _screen_for(self, state: ViewState) -> Screen:
        if state.view is View.SERIES:
            return SeriesScreen(state.series_id or "")
        if state.view is View.CHAPTER:
            return ChapterScreen(state.series_id or "", state.chapter_number)
        if state.view is View.LIBRARY:
            return LibraryScreen()
        return HomeScreen()

    def _on_route(self, state: ViewState) -> None:
        self.sub_title = state.view.value.title()
        screen = self.screen
        if (
            state.view is View.CHAPTER
            and isinstance(screen, ChapterScreen)
            and screen.series_id == state.series_id
            and state.chapter_number is not None
        ):
            screen.show_chapter(state.chapter_number)
            return
        self.switch_screen(self._screen_for(state))

    # ── Actions ────────────────────────────────────

    def action_go_home(self) -> None:
        self.router.navigate(View.HOME)

    def action_go_library(self) -> None:
        self.router.navigate(View.LIBRARY)

    def action_toggle_theme(self) -> None:
        self.reader_theme = toggled(self.reader_theme)
        self.prefs.set_theme(self.reader_theme)
        self.theme = textual_theme(self.reader_theme)
        log.info("Theme set to %s", self.reader_theme)

    async def action_quit(self) -> None:
        await self.client.close()
        self.prefs.close()
        self.exit()


def _setup_logging(config: AppConfig) -> None:
    handler = logging.FileHandler(config.log_path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root = logging.getLogger("manhwa")
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)


def parse_start(args: list[str]) -> Optional[ViewState]:
    """Deep link from the command line: ``<series-id> [chapter]``.

    A blank series id starts at Home.
    """
    if not args or not args[0].strip():
        return None
    series_id = args[0].strip()
    if len(args) == 1:
        return ViewState(view=View.SERIES, series_id=series_id)
    return ViewState(view=View.CHAPTER, series_id=series_id, chapter_number=args[1])


def _serve(config: AppConfig) -> None:
    import uvicorn

    from manhwa.provider.api import create_app

    log.info("Serving content API on %s:%d", config.serve_host, config.serve_port)
    uvicorn.run(create_app(), host=config.serve_host, port=config.serve_port)


def main() -> None:
    config = load_config()
    _setup_logging(config)

    args = sys.argv[1:]
    if args and args[0] == "serve":
        _serve(config)
        return

    app = ManhwaApp(config=config, start=parse_start(args))
    app.run()


if __name__ == "__main__":
    main()
