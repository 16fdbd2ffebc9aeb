"""Static series catalog served by the content provider."""

from __future__ import annotations

from typing import Iterable, Optional

from manhwa.library.models import Chapter, Series

PLACEHOLDER_PAGE = "https://placehold.co/800x1200/000000/ffffff?text=Page+{page}"


def _shut_in_chapters(count: int = 52) -> tuple[Chapter, ...]:
    return tuple(
        Chapter(
            number=i,
            pages=tuple(
                PLACEHOLDER_PAGE.format(page=f"{p}+(Chapter+{i})") for p in (1, 2, 3)
            ),
        )
        for i in range(1, count + 1)
    )


DEFAULT_SERIES: tuple[Series, ...] = (
    Series(
        id="the-ultimate-shut-in",
        title="The Ultimate Shut-In",
        cover_url=(
            "https://asuracomic.net/wp-content/uploads/2024/04/"
            "The-Ultimate-Shut-In-Cover-1.png"
        ),
        chapters=_shut_in_chapters(),
    ),
    Series(
        id="another-series",
        title="Another Cool Manhwa",
        cover_url="https://placehold.co/400x600/222222/888888?text=Sample+Cover",
        chapters=(
            Chapter(number=1, pages=(PLACEHOLDER_PAGE.format(page=1),)),
            Chapter(number=2, pages=(PLACEHOLDER_PAGE.format(page=1),)),
        ),
    ),
)


class Catalog:
    """Read-only, insertion-ordered collection of series."""

    def __init__(self, series: Optional[Iterable[Series]] = None) -> None:
        items = tuple(DEFAULT_SERIES if series is None else series)
        self._series: dict[str, Series] = {}
        for s in items:
            if s.id in self._series:
                raise ValueError(f"Duplicate series id: {s.id}")
            self._series[s.id] = s

    def __len__(self) -> int:
        return len(self._series)

    def list_series(self) -> list[Series]:
        return list(self._series.values())

    def get_series(self, series_id: str) -> Optional[Series]:
        return self._series.get(series_id)
