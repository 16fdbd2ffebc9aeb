"""Data models for series and chapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Chapter:
    number: int
    pages: tuple[str, ...] = ()  # reading order

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chapter:
        number = data["number"]
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"chapter number must be an integer, got {number!r}")
        pages = data.get("pages", [])
        if not isinstance(pages, list) or not all(isinstance(p, str) for p in pages):
            raise TypeError("chapter pages must be a list of strings")
        return cls(number=number, pages=tuple(pages))

    def to_dict(self) -> dict[str, Any]:
        return {"number": self.number, "pages": list(self.pages)}


@dataclass(frozen=True)
class Series:
    id: str
    title: str
    cover_url: str = ""
    chapters: tuple[Chapter, ...] = ()  # insertion order, as served

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Series:
        chapters = data.get("chapters", [])
        if not isinstance(chapters, list):
            raise TypeError("series chapters must be a list")
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            cover_url=str(data.get("coverUrl", "")),
            chapters=tuple(Chapter.from_dict(c) for c in chapters),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "coverUrl": self.cover_url,
            "chapters": [c.to_dict() for c in self.chapters],
        }

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    def display_chapters(self) -> list[Chapter]:
        """Chapters newest first. The stored order is left untouched."""
        return list(reversed(self.chapters))


@dataclass(frozen=True)
class SeriesListing:
    """Response of ``GET /series`` with no id."""

    series: tuple[Series, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SeriesDetail:
    """Response of ``GET /series?id=...``."""

    series: Series


SeriesResult = Union[SeriesListing, SeriesDetail]
