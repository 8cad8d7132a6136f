"""Contracts and records for the assurance Issues API."""

from dnac_client_interface.client import IssuesService
from dnac_client_interface.errors import DnacApiError, DnacError, DnacTransportError, Error
from dnac_client_interface.response import ApiResponse
from dnac_client_interface.issue import (
    AiDriven,
    EntityType,
    Issue,
    IssueDetails,
    IssueEnrichmentDetailsResponse,
    IssueStatus,
    IssueSummary,
    IssuesQueryParams,
    IssuesResponse,
    Priority,
    SuggestedAction,
)

__all__ = [
    "AiDriven",
    "ApiResponse",
    "DnacApiError",
    "DnacError",
    "DnacTransportError",
    "EntityType",
    "Error",
    "Issue",
    "IssueDetails",
    "IssueEnrichmentDetailsResponse",
    "IssueStatus",
    "IssueSummary",
    "IssuesQueryParams",
    "IssuesResponse",
    "IssuesService",
    "Priority",
    "SuggestedAction",
]
