"""Persistence interfaces and implementations for display preferences."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from charview.client.logging import get_logger

logger = get_logger(__name__)


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None:
        """Return the stored value for key, or None on first run."""

    def set(self, key: str, value: str) -> None:
        """Store value under key so it survives the session."""


@dataclass
class InMemoryPreferenceStore:
    def __post_init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


@dataclass
class JsonFilePreferenceStore:
    path: Path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("preferences_unreadable", path=str(self.path), error=str(exc))
            return {}
        if not isinstance(data, dict):
            logger.warning("preferences_unreadable", path=str(self.path), error="not a JSON object")
            return {}
        return {str(key): str(value) for key, value in data.items()}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def create_preference_store(path: str | Path | None) -> PreferenceStore:
    if path:
        return JsonFilePreferenceStore(path=Path(path))
    return InMemoryPreferenceStore()
