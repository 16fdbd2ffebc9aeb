"""Chapter lookup and previous/next navigation within a series."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from manhwa.library.models import Chapter, Series
from manhwa.provider.exceptions import ChapterNotFound

ChapterRef = Union[int, str, float]


def parse_chapter_number(value: Optional[ChapterRef]) -> Optional[float]:
    """Numeric value of a chapter reference, or None if it has none.

    Routing state may carry the number as text, so ``"3"`` and ``3`` both
    parse to ``3.0``. Non-finite values such as ``"inf"`` have none.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def find_chapter(series: Series, number: Optional[ChapterRef]) -> Optional[Chapter]:
    wanted = parse_chapter_number(number)
    if wanted is None:
        return None
    for chapter in series.chapters:
        if chapter.number == wanted:
            return chapter
    return None


@dataclass(frozen=True)
class ChapterNav:
    series: Series
    requested: Optional[float]
    chapter: Optional[Chapter]

    @property
    def total(self) -> int:
        return self.series.chapter_count

    @property
    def found(self) -> bool:
        return self.chapter is not None

    @property
    def has_prev(self) -> bool:
        return self.requested is not None and self.requested > 1

    @property
    def has_next(self) -> bool:
        return self.requested is not None and self.requested < self.total

    @property
    def prev_number(self) -> Optional[int]:
        return int(self.requested) - 1 if self.has_prev else None

    @property
    def next_number(self) -> Optional[int]:
        return int(self.requested) + 1 if self.has_next else None

    def can_go_to(self, number: int) -> bool:
        return 0 < number <= self.total


def resolve_chapter(
    series: Series, number: Optional[ChapterRef], strict: bool = False
) -> ChapterNav:
    """Locate ``number`` in ``series`` and work out which neighbours are reachable.

    With ``strict`` a missing chapter raises ChapterNotFound instead of
    returning a nav whose ``chapter`` is None.
    """
    nav = ChapterNav(
        series=series,
        requested=parse_chapter_number(number),
        chapter=find_chapter(series, number),
    )
    if strict and not nav.found:
        raise ChapterNotFound(series.id, number)
    return nav
