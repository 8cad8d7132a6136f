"""
Configuration
-------------
The client supports two configuration modes:

1. When get_client(interactive = True)
    User is prompted for the base URL and token at runtime if any are missing from the environment.
2. When get_client(interactive = False) - Default
        DNAC_BASE_URL    https://dnac.example.com
        DNAC_AUTH_TOKEN  <X-Auth-Token obtained from /dna/system/api/v1/auth/token>
        DNAC_VERIFY_SSL  true | false   (optional, default true)
        DNAC_TIMEOUT     seconds        (optional, default none)

The token is only attached to requests. Obtaining and refreshing it is the caller's job.

Dependencies:
    uv add requests

"""
#to avoid having to consider forward declarations, the below line must be first line in the file
from __future__ import annotations

import logging
import os
from getpass import getpass

import requests

from dnac_client_impl.dnac_issues import IssuesService
from dnac_client_impl.response import ApiResponse
from dnac_client_interface.errors import DnacTransportError

logger = logging.getLogger(__name__)

_FALSE_VALUES = {"0", "false", "no", "off"}

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------

class DnacClient:
    """
    Shared HTTP client every service object of the platform API goes through.

    Args:
        base_url:   Platform root URL (e.g. 'https://dnac.example.com')
        auth_token: Value for the X-Auth-Token header, if any
        verify:     True/False or a CA bundle path, passed to requests. None leaves the session's setting alone
        timeout:    Seconds before a request is abandoned, None waits forever
        session:    A pre-configured requests.Session to share, one is created if omitted
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        *,
        verify: bool | str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
        ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()
        if verify is not None:
            self._session.verify = verify
        self._session.headers.update({"Accept": "application/json", "Content-Type": "application/json"})
        if auth_token:
            self._session.headers["X-Auth-Token"] = auth_token

        self.issues = IssuesService(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _get(self, path: str, params: dict | None = None) -> ApiResponse:
        """Issue one GET. Raises DnacTransportError when no response arrived."""
        logger.debug("GET %s params=%s", path, params)
        try:
            response = self._session.get(self._url(path), params=params or None, timeout=self._timeout)
        except requests.RequestException as exc:
            raise DnacTransportError(f"GET {path} failed: {exc}") from exc
        logger.debug("GET %s -> %s", path, response.status_code)
        return ApiResponse(response)


# ---------------------------------------------------------------------------
# Get client
# ---------------------------------------------------------------------------

def _parse_timeout(value: str) -> float | None:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"DNAC_TIMEOUT must be a number of seconds, got {value!r}") from None


def get_client(*, interactive: bool = False) -> DnacClient:
    """Return a configured DnacClient.

    Reads settings from environment variables. If "interactive = True" and
    a required variable is missing, the user will be prompted.

    Environment variables:
        DNAC_BASE_URL:    Base URL of the platform.
        DNAC_AUTH_TOKEN:  Token sent as the X-Auth-Token header.
        DNAC_VERIFY_SSL:  Set to false to skip TLS verification.
        DNAC_TIMEOUT:     Request timeout in seconds.
    """
    base_url = os.environ.get("DNAC_BASE_URL", "")
    auth_token = os.environ.get("DNAC_AUTH_TOKEN", "")
    verify = os.environ.get("DNAC_VERIFY_SSL", "true").strip().lower() not in _FALSE_VALUES
    timeout = _parse_timeout(os.environ.get("DNAC_TIMEOUT", "").strip())

    if interactive:
        if not base_url:
            base_url = input("Platform base URL (e.g. https://dnac.example.com): ").strip()
        if not auth_token:
            auth_token = getpass("X-Auth-Token: ")
    else:
        #collects the missing fields and raises an error alerting to the missing values
        missing = [name for name, val in [
            ("DNAC_BASE_URL", base_url),
            ("DNAC_AUTH_TOKEN", auth_token),
        ] if not val]
        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set them or call get_client(interactive=True)."
            )

    if not verify:
        logger.warning("TLS certificate verification is disabled for %s", base_url)

    return DnacClient(base_url, auth_token, verify=verify, timeout=timeout)
