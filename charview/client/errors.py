"""Exception types raised by the character browser."""

from __future__ import annotations

from typing import Any


class CharviewError(Exception):
    """Base exception for all character browser errors.

    Attributes:
        message: Human-readable error description.
        details: Additional error context, rendered after the message.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class FetchFailure(CharviewError):
    """A page fetch failed: network error, non-2xx status or unusable payload.

    ``message`` is the text shown to the user; ``str()`` of the exception
    also lists the status code and URL when they are known.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        details = {key: value for key, value in (("status_code", status_code), ("url", url)) if value is not None}
        super().__init__(message, details=details)
