"""requests-backed raw response returned next to every decoded record."""

from __future__ import annotations

from typing import Any

import requests
from requests.structures import CaseInsensitiveDict

from dnac_client_interface.errors import Error
from dnac_client_interface.response import ApiResponse as BaseApiResponse


class ApiResponse(BaseApiResponse):
    """Transport-level view of one HTTP exchange.

    Args:
        response: The ``requests.Response`` the call produced.

    """

    def __init__(self, response: requests.Response) -> None:
        self._response = response
        self._error: Error | None = None
        if not self.ok:
            self._error = _decode_error(response)

    @property
    def raw(self) -> requests.Response:
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> CaseInsensitiveDict:
        return self._response.headers

    @property
    def url(self) -> str:
        return self._response.url or ""

    @property
    def body(self) -> bytes:
        return self._response.content or b""

    @property
    def text(self) -> str:
        return self._response.text

    @property
    def error(self) -> Error | None:
        return self._error

    def json(self) -> Any:
        return self._response.json()


def _decode_error(response: requests.Response) -> Error:
    #error bodies are not guaranteed to be JSON, fall back to the text
    try:
        payload = response.json()
    except ValueError:
        return Error(response.text or None)
    if isinstance(payload, dict):
        return Error(payload)
    return Error(response.text or None)
