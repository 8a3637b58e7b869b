"""Light/dark theme selection, applied to the surface and persisted."""

from __future__ import annotations

from charview.client.logging import get_logger
from charview.client.models import ThemeMode
from charview.client.prefstore import PreferenceStore
from charview.client.surface import ElementId, UISurface

logger = get_logger(__name__)

THEME_STORAGE_KEY = "rick-morty-theme"
LIGHT_MODE_CLASS = "light-mode"
THEME_ICONS = {
    ThemeMode.LIGHT: "☀️",
    ThemeMode.DARK: "🌙",
}


class ThemeController:
    """Apply and persist the display theme.

    ``system_prefers_dark`` mirrors the system color-scheme query: ``True``
    or ``None`` (no answer) keep the default dark surface, ``False`` selects
    light on a first run.
    """

    def __init__(
        self,
        surface: UISurface,
        store: PreferenceStore,
        system_prefers_dark: bool | None = None,
    ) -> None:
        self._surface = surface
        self._store = store
        self._system_prefers_dark = system_prefers_dark

    @property
    def current_mode(self) -> ThemeMode:
        body = self._surface.get(ElementId.BODY)
        return ThemeMode.LIGHT if LIGHT_MODE_CLASS in body.classes else ThemeMode.DARK

    def load_theme(self) -> ThemeMode:
        saved = self._saved_mode()
        if saved is not None:
            self.apply_theme(saved)
        elif self._system_prefers_dark is False:
            self.apply_theme(ThemeMode.LIGHT)
        else:
            self._paint(ThemeMode.DARK)
        return self.current_mode

    def apply_theme(self, mode: ThemeMode | str) -> None:
        mode = ThemeMode(mode)
        self._paint(mode)
        self._store.set(THEME_STORAGE_KEY, mode.value)
        logger.info("theme_applied", theme=mode.value)

    def toggle_theme(self) -> ThemeMode:
        new_mode = self.current_mode.opposite
        self.apply_theme(new_mode)
        return new_mode

    def _saved_mode(self) -> ThemeMode | None:
        raw = self._store.get(THEME_STORAGE_KEY)
        if raw is None:
            return None
        try:
            return ThemeMode(raw)
        except ValueError:
            logger.warning("stored_theme_ignored", value=raw)
            return None

    def _paint(self, mode: ThemeMode) -> None:
        body = self._surface.get(ElementId.BODY)
        if mode is ThemeMode.LIGHT:
            body.classes.add(LIGHT_MODE_CLASS)
        else:
            body.classes.discard(LIGHT_MODE_CLASS)
        self._surface.get(ElementId.THEME_ICON).text = THEME_ICONS[mode]
