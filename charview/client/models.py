"""Domain models for character pages and display preferences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ThemeMode(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> ThemeMode:
        return ThemeMode.DARK if self is ThemeMode.LIGHT else ThemeMode.LIGHT


@dataclass(frozen=True)
class CharacterRecord:
    id: int
    name: str
    status: str
    species: str
    gender: str
    location_name: str
    image_url: str


@dataclass(frozen=True)
class PageResult:
    items: tuple[CharacterRecord, ...]
    total_pages: int
