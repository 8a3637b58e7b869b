"""Client package for the character browser."""

from .config import ClientSettings, load_settings
from .controller import CharacterBrowser, create_browser
from .datasource import CharacterSource, HttpCharacterSource
from .errors import CharviewError, FetchFailure
from .filters import filter_by_status
from .models import CharacterRecord, PageResult, ThemeMode
from .prefstore import InMemoryPreferenceStore, JsonFilePreferenceStore, PreferenceStore, create_preference_store
from .state import LoadPhase, ViewState, build_initial_view_state
from .surface import Element, ElementId, HeadlessSurface, UISurface
from .theme import ThemeController

__all__ = [
    "build_initial_view_state",
    "CharacterBrowser",
    "CharacterRecord",
    "CharacterSource",
    "CharviewError",
    "ClientSettings",
    "create_browser",
    "create_preference_store",
    "Element",
    "ElementId",
    "FetchFailure",
    "filter_by_status",
    "HeadlessSurface",
    "HttpCharacterSource",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "LoadPhase",
    "load_settings",
    "PageResult",
    "PreferenceStore",
    "ThemeController",
    "ThemeMode",
    "UISurface",
    "ViewState",
]
