"""UI surface contract and an in-memory implementation.

The controller addresses the surface only through the stable identifiers in
:class:`ElementId`. :class:`HeadlessSurface` keeps the element tree in memory
so the whole browser can run and be inspected without a display.
"""

from __future__ import annotations

import inspect
from collections import defaultdict
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

from charview.client.filters import STATUS_OPTIONS

Handler = Callable[[], Awaitable[None] | None]


class ElementId(StrEnum):
    BODY = "body"
    RESULTS = "characters-grid"
    LOADING = "loading"
    ERROR = "error"
    ERROR_MESSAGE = "error-message"
    PAGE_INFO = "page-info"
    PREV_BUTTON = "prev-btn"
    NEXT_BUTTON = "next-btn"
    STATUS_FILTER = "status-filter"
    RESET_FILTERS = "reset-filters"
    THEME_TOGGLE = "theme-toggle"
    THEME_ICON = "theme-icon"


@dataclass(eq=False)
class Element:
    tag: str
    element_id: str | None = None
    text: str = ""
    classes: set[str] = field(default_factory=set)
    attributes: dict[str, str] = field(default_factory=dict)
    styles: dict[str, str] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    disabled: bool = False
    visible: bool = True
    value: str = ""

    def append(self, child: Element) -> Element:
        self.children.append(child)
        return child

    def clear(self) -> None:
        self.children = []

    def walk(self) -> Iterator[Element]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find_by_class(self, class_name: str) -> list[Element]:
        return [element for element in self.walk() if class_name in element.classes]


class UISurface(Protocol):
    def get(self, element_id: ElementId) -> Element:
        """Return the element registered under a stable identifier."""

    def bind(self, element_id: ElementId, handler: Handler) -> None:
        """Run ``handler`` whenever the element is activated."""

    def scroll_to_top(self) -> None:
        """Bring the top of the page into view."""


STATUS_ALL_LABEL = "Todos"


def _build_default_elements() -> dict[str, Element]:
    elements = {element_id.value: Element(tag="div", element_id=element_id.value) for element_id in ElementId}
    elements[ElementId.BODY].tag = "body"
    elements[ElementId.LOADING].visible = False
    elements[ElementId.ERROR].visible = False
    elements[ElementId.ERROR_MESSAGE].tag = "p"
    elements[ElementId.PAGE_INFO].tag = "span"
    elements[ElementId.THEME_ICON].tag = "span"
    status_filter = elements[ElementId.STATUS_FILTER]
    status_filter.tag = "select"
    for option in STATUS_OPTIONS:
        status_filter.append(Element(tag="option", value=option, text=option or STATUS_ALL_LABEL))
    for element_id in (
        ElementId.PREV_BUTTON,
        ElementId.NEXT_BUTTON,
        ElementId.RESET_FILTERS,
        ElementId.THEME_TOGGLE,
    ):
        elements[element_id].tag = "button"
    return elements


class HeadlessSurface:
    """In-memory surface.

    ``dispatch`` and ``select`` stand in for user events. ``is_bound`` and
    ``scroll_count`` exist for inspection in tests; the controller never reads
    them.
    """

    def __init__(self) -> None:
        self._elements = _build_default_elements()
        self._handlers: dict[str, list[Handler]] = defaultdict(list)
        self.scroll_count = 0

    def get(self, element_id: ElementId) -> Element:
        return self._elements[element_id]

    def bind(self, element_id: ElementId, handler: Handler) -> None:
        self._handlers[element_id].append(handler)

    def is_bound(self, element_id: ElementId) -> bool:
        return bool(self._handlers.get(element_id))

    async def dispatch(self, element_id: ElementId) -> None:
        """Activate an element the way a click or change event would."""
        for handler in list(self._handlers.get(element_id, [])):
            result = handler()
            if inspect.isawaitable(result):
                await result

    async def select(self, element_id: ElementId, value: str) -> None:
        element = self.get(element_id)
        options = [child.value for child in element.children if child.tag == "option"]
        if options and value not in options:
            raise ValueError(f"{value!r} is not an option of {element_id}")
        element.value = value
        await self.dispatch(element_id)

    def scroll_to_top(self) -> None:
        self.scroll_count += 1
