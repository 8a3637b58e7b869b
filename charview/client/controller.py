"""Character browser controller: wires user actions to view state and redraws."""

from __future__ import annotations

from charview.client.config import ClientSettings, load_settings
from charview.client.datasource import CharacterSource, HttpCharacterSource, validate_page_number
from charview.client.errors import FetchFailure
from charview.client.logging import configure_logging, get_logger
from charview.client.models import PageResult, ThemeMode
from charview.client.prefstore import PreferenceStore, create_preference_store
from charview.client.render import (
    CardFactory,
    build_character_card,
    hide_error,
    render_characters,
    show_error,
    show_loading,
    update_pagination,
)
from charview.client.state import (
    ViewState,
    build_initial_view_state,
    with_filter,
    with_load_failed,
    with_loading,
    with_page_loaded,
)
from charview.client.surface import ElementId, HeadlessSurface, UISurface
from charview.client.theme import ThemeController

logger = get_logger(__name__)

ERROR_BANNER_PREFIX = "Erro ao carregar personagens: "


class CharacterBrowser:
    """Single owner of the view state.

    Page loads are numbered; when loads overlap, only the most recently
    requested one may write the state; earlier results are dropped.
    """

    def __init__(
        self,
        source: CharacterSource,
        surface: UISurface,
        theme: ThemeController,
        *,
        card_factory: CardFactory = build_character_card,
    ) -> None:
        self._source = source
        self._surface = surface
        self._theme = theme
        self._card_factory = card_factory
        self._state = build_initial_view_state()
        self._load_seq = 0
        self._actions_bound = False

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def surface(self) -> UISurface:
        return self._surface

    async def init(self) -> None:
        logger.info("browser_starting")
        self._theme.load_theme()
        await self.load_page(1)
        self._bind_actions()

    async def aclose(self) -> None:
        close = getattr(self._source, "aclose", None)
        if close is not None:
            await close()

    async def load_page(self, page_number: int) -> bool:
        """Fetch a page and adopt it; return False when nothing was applied."""
        validate_page_number(page_number)
        self._load_seq += 1
        request_id = self._load_seq
        previous = self._state
        self._state = with_loading(previous)

        try:
            result = await self._fetch(page_number, request_id)
        except FetchFailure as exc:
            if self._is_latest(request_id):
                self._state = with_load_failed(self._state, exc.message)
            logger.error("page_load_failed", page=page_number, error=exc.message)
            return False
        except Exception:
            if self._is_latest(request_id):
                self._state = previous
            raise

        if not self._is_latest(request_id):
            logger.info("stale_page_discarded", page=page_number, request_id=request_id, latest=self._load_seq)
            return False

        self._state = with_page_loaded(self._state, page_number, result)
        self._redraw()
        self._surface.scroll_to_top()
        logger.info(
            "page_loaded",
            page=self._state.current_page,
            total_pages=self._state.total_pages,
            shown=len(self._state.filtered_characters),
        )
        return True

    def apply_filter(self, status: str | None) -> None:
        self._state = with_filter(self._state, status)
        self._redraw()
        logger.info(
            "filter_applied",
            status=self._state.selected_status,
            shown=len(self._state.filtered_characters),
        )

    def reset_filters(self) -> None:
        self._surface.get(ElementId.STATUS_FILTER).value = ""
        self.apply_filter("")

    async def next_page(self) -> bool:
        if not self._state.has_next:
            return False
        return await self.load_page(self._state.current_page + 1)

    async def prev_page(self) -> bool:
        if not self._state.has_previous:
            return False
        return await self.load_page(self._state.current_page - 1)

    def toggle_theme(self) -> ThemeMode:
        return self._theme.toggle_theme()

    def _is_latest(self, request_id: int) -> bool:
        return request_id == self._load_seq

    async def _fetch(self, page_number: int, request_id: int) -> PageResult:
        show_loading(self._surface, True)
        hide_error(self._surface)
        try:
            return await self._source.fetch_page(page_number)
        except FetchFailure as exc:
            logger.error("fetch_failed", page=page_number, error=exc.message, status_code=exc.status_code)
            if self._is_latest(request_id):
                show_error(self._surface, f"{ERROR_BANNER_PREFIX}{exc.message}")
            raise
        finally:
            if self._is_latest(request_id):
                show_loading(self._surface, False)

    def _redraw(self) -> None:
        render_characters(self._surface, self._state.filtered_characters, self._card_factory)
        update_pagination(self._surface, self._state)

    def _on_status_change(self) -> None:
        self.apply_filter(self._surface.get(ElementId.STATUS_FILTER).value)

    def _on_theme_toggle(self) -> None:
        self.toggle_theme()

    def _bind_actions(self) -> None:
        if self._actions_bound:
            return
        self._surface.bind(ElementId.PREV_BUTTON, self.prev_page)
        self._surface.bind(ElementId.NEXT_BUTTON, self.next_page)
        self._surface.bind(ElementId.STATUS_FILTER, self._on_status_change)
        self._surface.bind(ElementId.RESET_FILTERS, self.reset_filters)
        self._surface.bind(ElementId.THEME_TOGGLE, self._on_theme_toggle)
        self._actions_bound = True


def create_browser(
    settings: ClientSettings | None = None,
    *,
    source: CharacterSource | None = None,
    surface: UISurface | None = None,
    store: PreferenceStore | None = None,
    card_factory: CardFactory = build_character_card,
) -> CharacterBrowser:
    local_settings = settings if settings is not None else load_settings()
    configure_logging(level=local_settings.log_level, json_format=local_settings.log_json)

    local_surface = surface if surface is not None else HeadlessSurface()
    local_source = (
        source
        if source is not None
        else HttpCharacterSource(local_settings.api_base_url, timeout=local_settings.request_timeout)
    )
    local_store = store if store is not None else create_preference_store(local_settings.preferences_path)
    theme = ThemeController(
        surface=local_surface,
        store=local_store,
        system_prefers_dark=local_settings.system_prefers_dark,
    )
    return CharacterBrowser(
        source=local_source,
        surface=local_surface,
        theme=theme,
        card_factory=card_factory,
    )
