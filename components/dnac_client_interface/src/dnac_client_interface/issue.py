"""Issue contract - records returned by the assurance Issues API."""

from __future__ import annotations

from dataclasses import dataclass, fields as dataclass_fields
from enum import Enum
from typing import Any
from urllib.parse import urlencode

__all__ = [
    "AiDriven",
    "EntityType",
    "Issue",
    "IssueDetails",
    "IssueEnrichmentDetailsResponse",
    "IssueStatus",
    "IssueSummary",
    "IssuesQueryParams",
    "IssuesResponse",
    "Priority",
    "SuggestedAction",
]


class Priority(str, Enum):
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"


class AiDriven(str, Enum):
    YES = "Yes"
    NO = "No"


class IssueStatus(str, Enum):
    ACTIVE = "ACTIVE"
    IGNORED = "IGNORED"
    RESOLVED = "RESOLVED"


class EntityType(str, Enum):
    """Lookup key discriminator for issue enrichment."""

    ISSUE_ID = "issue_id"
    MAC_ADDRESS = "mac_address"


# ---------------------------------------------------------------------------
# Decoding helpers
# ---------------------------------------------------------------------------

def _as_dict(raw: Any) -> dict:
    return raw if isinstance(raw, dict) else {}


def _str_tuple(value: Any) -> tuple[str, ...] | None:
    if not isinstance(value, list):
        return None
    return tuple(value)


def _prune(data: dict) -> dict:
    #wire format omits absent fields entirely
    return {key: value for key, value in data.items() if value is not None}


def _wire_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


# ---------------------------------------------------------------------------
# Enrichment records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SuggestedAction:
    """A remediation hint: a message plus ordered steps."""

    message: str | None = None
    steps: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> SuggestedAction:
        data = _as_dict(raw)
        return cls(message=data.get("message"), steps=_str_tuple(data.get("steps")))

    def to_dict(self) -> dict:
        return _prune({
            "message": self.message,
            "steps": list(self.steps) if self.steps is not None else None,
        })


@dataclass(frozen=True)
class Issue:
    """A fully enriched issue, with impacted hosts and suggested actions.

    issue_entity tells whether issue_entity_value is an issue id or a client
    MAC address.
    """

    impacted_hosts: tuple[str, ...] | None = None
    issue_category: str | None = None
    issue_description: str | None = None
    issue_entity: str | None = None
    issue_entity_value: str | None = None
    issue_id: str | None = None
    issue_name: str | None = None
    issue_priority: str | None = None
    issue_severity: str | None = None
    issue_source: str | None = None
    issue_summary: str | None = None
    issue_timestamp: int | None = None
    suggested_actions: tuple[SuggestedAction, ...] | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> Issue:
        data = _as_dict(raw)
        actions = data.get("suggestedActions")
        return cls(
            impacted_hosts=_str_tuple(data.get("impactedHosts")),
            issue_category=data.get("issueCategory"),
            issue_description=data.get("issueDescription"),
            issue_entity=data.get("issueEntity"),
            issue_entity_value=data.get("issueEntityValue"),
            issue_id=data.get("issueId"),
            issue_name=data.get("issueName"),
            issue_priority=data.get("issuePriority"),
            issue_severity=data.get("issueSeverity"),
            issue_source=data.get("issueSource"),
            issue_summary=data.get("issueSummary"),
            issue_timestamp=data.get("issueTimestamp"),
            suggested_actions=(
                tuple(SuggestedAction.from_dict(a) for a in actions) if isinstance(actions, list) else None
            ),
        )

    def to_dict(self) -> dict:
        return _prune({
            "impactedHosts": list(self.impacted_hosts) if self.impacted_hosts is not None else None,
            "issueCategory": self.issue_category,
            "issueDescription": self.issue_description,
            "issueEntity": self.issue_entity,
            "issueEntityValue": self.issue_entity_value,
            "issueId": self.issue_id,
            "issueName": self.issue_name,
            "issuePriority": self.issue_priority,
            "issueSeverity": self.issue_severity,
            "issueSource": self.issue_source,
            "issueSummary": self.issue_summary,
            "issueTimestamp": self.issue_timestamp,
            "suggestedActions": (
                [a.to_dict() for a in self.suggested_actions] if self.suggested_actions is not None else None
            ),
        })

    def __repr__(self) -> str:
        return f"<Issue id={self.issue_id!r} name={self.issue_name!r} priority={self.issue_priority}>"


@dataclass(frozen=True)
class IssueDetails:
    issue: tuple[Issue, ...] | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> IssueDetails:
        issues = _as_dict(raw).get("issue")
        if not isinstance(issues, list):
            return cls()
        return cls(issue=tuple(Issue.from_dict(i) for i in issues))

    def to_dict(self) -> dict:
        return _prune({"issue": [i.to_dict() for i in self.issue] if self.issue is not None else None})


@dataclass(frozen=True)
class IssueEnrichmentDetailsResponse:
    """Body of GET /dna/intent/api/v1/issue-enrichment-details."""

    issue_details: IssueDetails | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> IssueEnrichmentDetailsResponse:
        details = _as_dict(raw).get("issueDetails")
        if not isinstance(details, dict):
            return cls()
        return cls(issue_details=IssueDetails.from_dict(details))

    def to_dict(self) -> dict:
        return _prune({"issueDetails": self.issue_details.to_dict() if self.issue_details is not None else None})

    @property
    def issues(self) -> tuple[Issue, ...]:
        """Return the enriched issues, or an empty tuple when none were reported."""
        if self.issue_details is None or self.issue_details.issue is None:
            return ()
        return self.issue_details.issue


# ---------------------------------------------------------------------------
# Issue list records
# ---------------------------------------------------------------------------

#maps dataclass attribute -> wire key, the platform mixes camelCase and snake_case here
_SUMMARY_KEYS: dict[str, str] = {
    "ai_driven":             "aiDriven",
    "category":              "category",
    "client_mac":            "clientMac",
    "device_id":             "deviceId",
    "device_role":           "deviceRole",
    "issue_id":              "issueId",
    "issue_occurence_count": "issue_occurence_count",
    "last_occurence_time":   "last_occurence_time",
    "name":                  "name",
    "priority":              "priority",
    "site_id":               "siteId",
    "status":                "status",
}


@dataclass(frozen=True)
class IssueSummary:
    """Condensed issue as returned by the issue list query.

    device_id and site_id are opaque identifiers resolved only by the platform.
    """

    ai_driven: bool | None = None
    category: str | None = None
    client_mac: str | None = None
    device_id: str | None = None
    device_role: str | None = None
    issue_id: str | None = None
    issue_occurence_count: int | None = None
    last_occurence_time: int | None = None
    name: str | None = None
    priority: str | None = None
    site_id: str | None = None
    status: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> IssueSummary:
        data = _as_dict(raw)
        return cls(**{attr: data.get(key) for attr, key in _SUMMARY_KEYS.items()})

    def to_dict(self) -> dict:
        return _prune({key: getattr(self, attr) for attr, key in _SUMMARY_KEYS.items()})


@dataclass(frozen=True)
class IssuesResponse:
    """Body of GET /dna/intent/api/v1/issues."""

    response: tuple[IssueSummary, ...] | None = None
    total_count: int | None = None
    version: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> IssuesResponse:
        data = _as_dict(raw)
        items = data.get("response")
        return cls(
            response=tuple(IssueSummary.from_dict(i) for i in items) if isinstance(items, list) else None,
            total_count=data.get("totalCount"),
            version=data.get("version"),
        )

    def to_dict(self) -> dict:
        return _prune({
            "response": [i.to_dict() for i in self.response] if self.response is not None else None,
            "totalCount": self.total_count,
            "version": self.version,
        })


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------

_QUERY_KEYS: dict[str, str] = {
    "start_time":   "startTime",
    "end_time":     "endTime",
    "site_id":      "siteId",
    "device_id":    "deviceId",
    "mac_address":  "macAddress",
    "priority":     "priority",
    "ai_driven":    "aiDriven",
    "issue_status": "issueStatus",
}


@dataclass
class IssuesQueryParams:
    """
    Filters for the issue list query. All fields default to None and only the fields
    explicitly set are sent.

    priority, ai_driven and issue_status are ignored by the platform when mac_address
    or device_id is given. Nothing is enforced here, every set value is passed through.
    """

    start_time: int | None = None    #epoch milliseconds
    end_time: int | None = None      #epoch milliseconds
    site_id: str | None = None
    device_id: str | None = None
    mac_address: str | None = None   #xx:xx:xx:xx:xx:xx
    priority: Priority | str | None = None
    ai_driven: AiDriven | bool | str | None = None
    issue_status: IssueStatus | str | None = None

    def set_fields(self) -> dict:
        """Return a dict containing only the fields set to a non-None, non-empty value."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclass_fields(self)
            if getattr(self, f.name) is not None and getattr(self, f.name) != ""
        }

    def to_query(self) -> dict[str, str]:
        """Return the set fields keyed by their wire names, in declaration order."""
        query: dict[str, str] = {}
        for name, value in self.set_fields().items():
            if name == "ai_driven" and isinstance(value, bool):
                value = AiDriven.YES if value else AiDriven.NO
            query[_QUERY_KEYS[name]] = str(_wire_value(value))
        return query

    def encode(self) -> str:
        """Return the URL-escaped query string, e.g. 'priority=P1&issueStatus=ACTIVE'."""
        return urlencode(self.to_query())
