"""Draw characters, pagination and status banners onto a UI surface."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from charview.client.logging import get_logger
from charview.client.models import CharacterRecord
from charview.client.state import ViewState
from charview.client.surface import Element, ElementId, UISurface

logger = get_logger(__name__)

EMPTY_MESSAGE = "Nenhum personagem encontrado com os filtros selecionados."
PAGE_INFO_TEMPLATE = "Página {current} de {total}"

CardFactory = Callable[[CharacterRecord], Element]


def build_character_card(character: CharacterRecord) -> Element:
    """Build a card: image, then name, status, species and location."""
    card = Element(tag="div", classes={"character-card"})
    card.append(
        Element(
            tag="img",
            classes={"character-image"},
            attributes={"src": character.image_url, "alt": character.name, "loading": "lazy"},
        )
    )

    info = card.append(Element(tag="div", classes={"character-info"}))
    info.append(Element(tag="h3", classes={"character-name"}, text=character.name))

    status = info.append(Element(tag="div", classes={"character-status"}))
    status.append(Element(tag="span", classes={"status-indicator", f"status-{character.status.lower()}"}))
    status.append(Element(tag="span", text=f"{character.status} - {character.gender}"))

    info.append(Element(tag="p", classes={"character-species"}, text=f"Espécie: {character.species}"))
    info.append(Element(tag="p", classes={"character-location"}, text=f"Localização: {character.location_name}"))
    return card


def build_empty_placeholder() -> Element:
    return Element(
        tag="p",
        classes={"empty-state"},
        text=EMPTY_MESSAGE,
        styles={"grid-column": "1 / -1", "text-align": "center", "padding": "2rem"},
    )


def render_characters(
    surface: UISurface,
    characters: Sequence[CharacterRecord],
    card_factory: CardFactory = build_character_card,
) -> None:
    grid = surface.get(ElementId.RESULTS)
    grid.clear()

    if not characters:
        grid.append(build_empty_placeholder())
        logger.debug("empty_state_rendered")
        return

    for character in characters:
        grid.append(card_factory(character))
    logger.debug("characters_rendered", count=len(characters))


def update_pagination(surface: UISurface, state: ViewState) -> None:
    surface.get(ElementId.PAGE_INFO).text = PAGE_INFO_TEMPLATE.format(
        current=state.current_page,
        total=state.total_pages,
    )
    surface.get(ElementId.PREV_BUTTON).disabled = state.current_page == 1
    surface.get(ElementId.NEXT_BUTTON).disabled = state.current_page == state.total_pages


def show_loading(surface: UISurface, show: bool) -> None:
    surface.get(ElementId.LOADING).visible = show


def show_error(surface: UISurface, message: str) -> None:
    surface.get(ElementId.ERROR_MESSAGE).text = message
    surface.get(ElementId.ERROR).visible = True


def hide_error(surface: UISurface) -> None:
    surface.get(ElementId.ERROR).visible = False
