"""View state snapshots and the transitions that produce them.

Each transition returns a new :class:`ViewState`; the filtered view is always
recomputed from ``all_characters`` and ``selected_status`` here and nowhere
else.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from charview.client.filters import filter_by_status
from charview.client.models import CharacterRecord, PageResult


class LoadPhase(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    current_page: int = 1
    total_pages: int = 1
    all_characters: tuple[CharacterRecord, ...] = ()
    filtered_characters: tuple[CharacterRecord, ...] = ()
    selected_status: str = ""
    phase: LoadPhase = LoadPhase.IDLE
    error_message: str | None = None

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


def build_initial_view_state() -> ViewState:
    return ViewState()


def with_loading(state: ViewState) -> ViewState:
    return replace(state, phase=LoadPhase.LOADING)


def with_page_loaded(state: ViewState, page_number: int, result: PageResult) -> ViewState:
    """Adopt a fetched page, keeping the selected status filter."""
    items = tuple(result.items)
    return replace(
        state,
        current_page=page_number,
        total_pages=result.total_pages,
        all_characters=items,
        filtered_characters=tuple(filter_by_status(items, state.selected_status)),
        phase=LoadPhase.LOADED,
        error_message=None,
    )


def with_load_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, phase=LoadPhase.ERROR, error_message=message)


def with_filter(state: ViewState, status: str | None) -> ViewState:
    """Select a status filter over the loaded page and go back to page 1."""
    selected = status or ""
    return replace(
        state,
        selected_status=selected,
        current_page=1,
        filtered_characters=tuple(filter_by_status(state.all_characters, selected)),
    )
