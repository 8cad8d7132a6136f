"""Raw response contract - transport detail returned next to every decoded record."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from dnac_client_interface.errors import DnacApiError, Error

__all__ = ["ApiResponse"]


class ApiResponse(ABC):
    """Abstract view of one HTTP exchange."""

    @property
    @abstractmethod
    def status_code(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def headers(self) -> Mapping[str, str]:
        raise NotImplementedError

    @property
    @abstractmethod
    def url(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def body(self) -> bytes:
        """Return the undecoded response body."""
        raise NotImplementedError

    @property
    @abstractmethod
    def error(self) -> Error | None:
        """Return the decoded error envelope for non-2xx responses, otherwise None."""
        raise NotImplementedError

    @abstractmethod
    def json(self) -> Any:
        """Decode the body as JSON. Raises ValueError when it is not JSON."""
        raise NotImplementedError

    @property
    def ok(self) -> bool:
        """True for 2xx statuses only."""
        return 200 <= self.status_code < 300

    def raise_for_status(self) -> None:
        """Raise DnacApiError when the platform answered with a non-2xx status."""
        if self.error is not None:
            raise DnacApiError(self.status_code, self.error, self.url)

    def __repr__(self) -> str:
        return f"<ApiResponse status={self.status_code} url={self.url!r}>"
