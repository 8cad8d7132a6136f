"""Core service contract definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from dnac_client_interface.issue import (
    EntityType,
    IssueEnrichmentDetailsResponse,
    IssuesQueryParams,
    IssuesResponse,
)
from dnac_client_interface.response import ApiResponse

__all__ = ["IssuesService"]


class IssuesService(ABC):
    """Access to the assurance Issues endpoints.

    Every method issues exactly one GET and returns a pair: the decoded record and
    the raw response. On a non-2xx status the record is empty and the raw response
    carries the decoded error envelope; nothing is raised for the status itself.
    """

    @abstractmethod
    def get_issue_enrichment_details(
        self,
        *,
        entity_type: EntityType | str | None = None,
        entity_value: str | None = None,
        ) -> tuple[IssueEnrichmentDetailsResponse, ApiResponse]:
        """Enrich an issue context with details, impacted hosts and suggested actions.

        Args:
            entity_type:  Either issue_id or mac_address.
            entity_value: The issue id or the end user's MAC address.

        Returns:
            The decoded enrichment body and the raw response.

        Raises:
            DnacTransportError: If no usable response was received.

        """
        raise NotImplementedError

    @abstractmethod
    def issues(
        self,
        query_params: IssuesQueryParams | None = None,
        ) -> tuple[IssuesResponse, ApiResponse]:
        """List global issues, issues of one device, or issues of one client MAC address.

        Args:
            query_params: Optional filters. Fields left as None are not sent.

        Returns:
            The decoded issue list and the raw response.

        Raises:
            DnacTransportError: If no usable response was received.

        """
        raise NotImplementedError
