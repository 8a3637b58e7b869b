"""Configuration helpers for the character browser runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_BASE_URL = "https://rickandmortyapi.com/api/character"
DEFAULT_PREFERENCES_PATH = os.path.join("~", ".charview", "preferences.json")


@dataclass(frozen=True)
class ClientSettings:
    api_base_url: str
    request_timeout: float
    preferences_path: str | None
    system_prefers_dark: bool | None
    log_level: str
    log_json: bool


def _parse_system_theme(raw: str | None) -> bool | None:
    if raw is None or raw.strip() == "":
        return None
    value = raw.strip().lower()
    if value == "dark":
        return True
    if value == "light":
        return False
    raise ValueError(f"CHARVIEW_SYSTEM_THEME must be 'dark' or 'light', got {raw!r}")


def load_settings() -> ClientSettings:
    timeout_raw = os.getenv("CHARVIEW_REQUEST_TIMEOUT", "10")
    preferences_raw = os.getenv("CHARVIEW_PREFERENCES_PATH", DEFAULT_PREFERENCES_PATH)
    return ClientSettings(
        api_base_url=os.getenv("CHARVIEW_API_BASE_URL", DEFAULT_API_BASE_URL),
        request_timeout=float(timeout_raw),
        preferences_path=os.path.expanduser(preferences_raw) if preferences_raw else None,
        system_prefers_dark=_parse_system_theme(os.getenv("CHARVIEW_SYSTEM_THEME")),
        log_level=os.getenv("CHARVIEW_LOG_LEVEL", "INFO").upper(),
        log_json=os.getenv("CHARVIEW_LOG_JSON", "0") == "1",
    )
