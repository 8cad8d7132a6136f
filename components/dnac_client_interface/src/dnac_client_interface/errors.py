"""Error envelope and exceptions shared by every service of the client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["DnacApiError", "DnacError", "DnacTransportError", "Error"]

#keys the platform uses for a human readable explanation, most specific first
_MESSAGE_KEYS = ("message", "error", "detail", "description")


@dataclass(frozen=True)
class Error:
    """Generic error body decoded from a non-2xx response.

    The platform does not use one fixed error shape, so the decoded payload is kept
    as-is: a dict when the body was a JSON object, otherwise the body text.
    """

    payload: dict[str, Any] | str | None = None

    @property
    def message(self) -> str:
        """Best-effort human readable explanation of the failure."""
        if isinstance(self.payload, dict):
            found = _find_message(self.payload)
            if found:
                return found
            return str(self.payload) if self.payload else ""
        return self.payload or ""


def _find_message(payload: dict) -> str:
    """Return the first non-empty explanation under a known key, or an empty string."""
    for key in _MESSAGE_KEYS:
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
        # some endpoints nest the explanation one level down
        if isinstance(value, dict):
            nested = _find_message(value)
            if nested:
                return nested
    return ""


class DnacError(Exception):
    """Base exception for everything raised by the client."""


class DnacTransportError(DnacError):
    """Raised when no usable response arrived: connection, timeout or a malformed body."""


class DnacApiError(DnacError):
    """Raised on request, when the platform answered with a non-2xx status."""

    def __init__(self, status_code: int, error: Error, url: str = "") -> None:
        self.status_code = status_code
        self.error = error
        self.url = url
        super().__init__(f"API error {status_code} for {url or 'request'}: {error.message}")
