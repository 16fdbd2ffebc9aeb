from __future__ import annotations

from manhwa.ui.screens.library_screen import SeriesListScreen


class HomeScreen(SeriesListScreen):
    HEADING = "New Chapters"
