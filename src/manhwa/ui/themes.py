"""Textual CSS and theme names for the reader."""

TEXTUAL_THEMES = {
    "dark": "textual-dark",
    "light": "textual-light",
}


def textual_theme(name: str) -> str:
    return TEXTUAL_THEMES.get(name, TEXTUAL_THEMES["dark"])


def toggled(name: str) -> str:
    return "light" if name == "dark" else "dark"


APP_CSS = """
/* ── Global ────────────────────────────────── */
Screen {
    background: $surface;
}

.screen-heading {
    dock: top;
    height: 3;
    padding: 1 2;
    background: $primary;
    color: $text;
    text-style: bold;
}

#content {
    height: 1fr;
}

/* ── Loading / Error ───────────────────────── */
#loading {
    height: 1fr;
}

#error-panel {
    height: 1fr;
    align: center middle;
    display: none;
}

#error-title {
    color: $error;
    text-style: bold;
    text-align: center;
    width: 100%;
}

#error-message {
    text-align: center;
    width: 100%;
    margin: 1 0;
}

/* ── Series lists (Home / Library) ─────────── */
#series-table {
    height: 1fr;
}

/* ── Series Screen ─────────────────────────── */
#series-title {
    padding: 1 2;
    text-style: bold;
    background: $primary-darken-1;
    color: $text;
}

#series-cover {
    padding: 0 2;
    color: $text-muted;
}

#chapters-heading {
    padding: 1 2 0 2;
    text-style: bold;
}

#chapter-list {
    height: 1fr;
}

.chapter-item {
    padding: 0 1;
    height: 1;
}

.chapter-item:hover {
    background: $primary-darken-1;
}

/* ── Chapter Screen ────────────────────────── */
#chapter-body {
    height: 1fr;
}

#chapter-nav {
    height: 3;
    background: $surface-darken-1;
}

#chapter-nav Button {
    margin: 0 1;
}

#chapter-title {
    width: 1fr;
    height: 3;
    content-align: center middle;
    text-style: bold;
}

#page-list {
    height: 1fr;
}

.page-item {
    padding: 0 2;
    height: 1;
}

#chapter-missing {
    height: 1fr;
    align: center middle;
    display: none;
}

#chapter-missing Static {
    text-align: center;
    width: 100%;
    margin: 1 0;
}
"""
