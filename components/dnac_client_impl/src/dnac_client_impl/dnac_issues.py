"""Issues endpoint family of the platform intent API."""
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from dnac_client_interface.client import IssuesService as BaseIssuesService
from dnac_client_interface.errors import DnacTransportError
from dnac_client_interface.issue import (
    EntityType,
    IssueEnrichmentDetailsResponse,
    IssuesQueryParams,
    IssuesResponse,
)

if TYPE_CHECKING:
    from dnac_client_impl.dnac_impl import DnacClient
    from dnac_client_impl.response import ApiResponse

T = TypeVar("T")

ISSUE_ENRICHMENT_PATH = "/dna/intent/api/v1/issue-enrichment-details"
ISSUES_PATH = "/dna/intent/api/v1/issues"


class IssuesService(BaseIssuesService):
    """Service object bound to a shared DnacClient.

    Holds no state of its own, so one instance can serve concurrent callers as
    long as the underlying requests.Session does.
    """

    def __init__(self, client: DnacClient) -> None:
        self._client = client

    def get_issue_enrichment_details(
        self,
        *,
        entity_type: EntityType | str | None = None,
        entity_value: str | None = None,
        ) -> tuple[IssueEnrichmentDetailsResponse, ApiResponse]:
        """
        GET /dna/intent/api/v1/issue-enrichment-details

        entity_type and entity_value are sent as query parameters when given;
        with neither, the request carries no query string.
        """
        params: dict[str, str] = {}
        if entity_type:
            params["entity_type"] = entity_type.value if isinstance(entity_type, EntityType) else str(entity_type)
        if entity_value:
            params["entity_value"] = entity_value

        response = self._client._get(ISSUE_ENRICHMENT_PATH, params=params or None) # noqa: SLF001
        return _decode(response, IssueEnrichmentDetailsResponse, IssueEnrichmentDetailsResponse.from_dict), response

    def issues(
        self,
        query_params: IssuesQueryParams | None = None,
        ) -> tuple[IssuesResponse, ApiResponse]:
        """
        GET /dna/intent/api/v1/issues

        Only the fields set on query_params are sent, no local validation is applied.
        """
        params = query_params.to_query() if query_params is not None else None
        response = self._client._get(ISSUES_PATH, params=params or None) # noqa: SLF001
        return _decode(response, IssuesResponse, IssuesResponse.from_dict), response


# ---------------------------------------------------------------------------
# Body decoding
# ---------------------------------------------------------------------------

def _decode(response: ApiResponse, empty: Callable[[], T], build: Callable[[Any], T]) -> T:
    """Return the decoded record, or an empty one when the status is not 2xx."""
    if not response.ok:
        return empty()
    if not response.body.strip():
        return empty()
    try:
        payload = response.json()
    except ValueError as exc:
        raise DnacTransportError(f"Malformed response body from {response.url}: {exc}") from exc
    if not isinstance(payload, dict):
        raise DnacTransportError(f"Expected a JSON object from {response.url}, got {type(payload).__name__}")
    return build(payload)
