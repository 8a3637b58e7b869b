"""Status filtering over the characters of the loaded page."""

from __future__ import annotations

from collections.abc import Sequence

from charview.client.models import CharacterRecord

STATUS_OPTIONS = ("", "Alive", "Dead", "unknown")


def filter_by_status(
    items: Sequence[CharacterRecord], status: str | None
) -> Sequence[CharacterRecord]:
    """Return the characters whose status matches ``status`` case-insensitively.

    An empty or missing status returns ``items`` itself. Order is preserved
    and the input is never mutated.
    """
    if not status:
        return items
    wanted = status.lower()
    return tuple(item for item in items if item.status.lower() == wanted)
