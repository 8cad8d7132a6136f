"""Unit tests for the Issues records and query parameters.

No HTTP is involved here, these cover decoding, re-encoding and query string building.
"""

#Run with "python -m pytest components/dnac_client_interface/tests -v"

import typing
from dataclasses import FrozenInstanceError
from urllib.parse import parse_qsl

import pytest

from dnac_client_interface.client import IssuesService
from dnac_client_interface.errors import DnacApiError, Error
from dnac_client_interface.issue import (
    AiDriven,
    Issue,
    IssueEnrichmentDetailsResponse,
    IssueStatus,
    IssueSummary,
    IssuesQueryParams,
    IssuesResponse,
    Priority,
    SuggestedAction,
)
from dnac_client_interface.response import ApiResponse

ENRICHMENT_BODY = {
    "issueDetails": {
        "issue": [
            {
                "issueId": "a9a3f3c2-0d5e-4b4b-9f0a-1c2d3e4f5a6b",
                "issueSource": "Cisco DNA",
                "issueCategory": "Onboarding",
                "issueName": "global_wireless_client_onboarding_slow",
                "issueDescription": "Clients took longer than expected to onboard",
                "issueEntity": "Client",
                "issueEntityValue": "aa:bb:cc:dd:ee:ff",
                "issueSeverity": "HIGH",
                "issuePriority": "P2",
                "issueSummary": "Slow onboarding on SSID corp",
                "issueTimestamp": 1700000000000,
                "suggestedActions": [
                    {"message": "Check the AAA server", "steps": ["Open AAA dashboard", "Verify latency"]},
                    {"message": "Check DHCP scope"},
                ],
                "impactedHosts": ["host-1", "host-2"],
            }
        ]
    }
}

ISSUES_BODY = {
    "version": "1.0",
    "totalCount": 2,
    "response": [
        {
            "issueId": "issue-1",
            "name": "Switch unreachable",
            "siteId": "site-1",
            "deviceId": "device-1",
            "deviceRole": "ACCESS",
            "aiDriven": False,
            "clientMac": None,
            "issue_occurence_count": 3,
            "status": "active",
            "priority": "P1",
            "category": "Availability",
            "last_occurence_time": 1700000000000,
        },
        {"issueId": "issue-2", "aiDriven": True},
    ],
}

#--------------------------- decoding --------------------------

def test_enrichment_response_decodes_nested_records():
    result = IssueEnrichmentDetailsResponse.from_dict(ENRICHMENT_BODY)

    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.issue_entity_value == "aa:bb:cc:dd:ee:ff"
    assert issue.impacted_hosts == ("host-1", "host-2")
    assert issue.suggested_actions[0] == SuggestedAction("Check the AAA server", ("Open AAA dashboard", "Verify latency"))
    # absent steps stay absent, not an empty tuple
    assert issue.suggested_actions[1].steps is None


def test_enrichment_response_with_empty_issue_list():
    result = IssueEnrichmentDetailsResponse.from_dict({"issueDetails": {"issue": []}})

    assert result.issue_details is not None
    assert result.issue_details.issue == ()
    assert result.issues == ()


def test_enrichment_response_missing_details_is_empty():
    result = IssueEnrichmentDetailsResponse.from_dict({})

    assert result.issue_details is None
    assert result.issues == ()


def test_issues_response_decodes_mixed_case_keys():
    result = IssuesResponse.from_dict(ISSUES_BODY)

    assert result.total_count == 2
    assert result.version == "1.0"
    first = result.response[0]
    assert first.issue_occurence_count == 3
    assert first.last_occurence_time == 1700000000000
    assert first.ai_driven is False
    assert first.client_mac is None
    assert result.response[1] == IssueSummary(issue_id="issue-2", ai_driven=True)


def test_unknown_keys_are_ignored():
    summary = IssueSummary.from_dict({"issueId": "x", "somethingNew": 42})

    assert summary == IssueSummary(issue_id="x")


def test_non_dict_input_decodes_to_empty_record():
    assert Issue.from_dict(None) == Issue()
    assert IssuesResponse.from_dict([]) == IssuesResponse()


def test_records_are_immutable():
    summary = IssueSummary(issue_id="x")

    with pytest.raises(FrozenInstanceError):
        summary.issue_id = "y"

#--------------------------- re-encoding --------------------------

def test_enrichment_round_trip_preserves_populated_fields():
    result = IssueEnrichmentDetailsResponse.from_dict(ENRICHMENT_BODY)

    assert result.to_dict() == ENRICHMENT_BODY


def test_issues_round_trip_drops_only_null_fields():
    result = IssuesResponse.from_dict(ISSUES_BODY)
    encoded = result.to_dict()

    # clientMac was null in the source, so it is not present after re-encoding
    assert "clientMac" not in encoded["response"][0]
    expected_first = {k: v for k, v in ISSUES_BODY["response"][0].items() if v is not None}
    assert encoded["response"][0] == expected_first
    assert encoded["response"][1] == ISSUES_BODY["response"][1]
    assert encoded["totalCount"] == 2


def test_issue_repr_shows_identity():
    assert repr(Issue(issue_id="i-1", issue_name="n", issue_priority="P3")) == "<Issue id='i-1' name='n' priority=P3>"

#--------------------------- query parameters --------------------------

def test_empty_query_params_encode_to_nothing():
    params = IssuesQueryParams()

    assert params.set_fields() == {}
    assert params.to_query() == {}
    assert params.encode() == ""


def test_unset_and_empty_fields_are_omitted():
    params = IssuesQueryParams(site_id="", device_id=None, priority=Priority.P1)

    assert params.encode() == "priority=P1"
    assert "siteId" not in params.encode()


def test_priority_and_status_encode_in_declared_order():
    params = IssuesQueryParams(priority="P1", issue_status="ACTIVE")

    assert params.encode() == "priority=P1&issueStatus=ACTIVE"


def test_every_field_appears_exactly_once():
    params = IssuesQueryParams(
        start_time=1699990000000,
        end_time=1700000000000,
        site_id="site 1",
        device_id="device-1",
        mac_address="aa:bb:cc:dd:ee:ff",
        priority=Priority.P4,
        ai_driven=AiDriven.YES,
        issue_status=IssueStatus.RESOLVED,
    )
    pairs = parse_qsl(params.encode())
    keys = [k for k, _ in pairs]

    assert keys == ["startTime", "endTime", "siteId", "deviceId", "macAddress", "priority", "aiDriven", "issueStatus"]
    assert dict(pairs)["macAddress"] == "aa:bb:cc:dd:ee:ff"
    assert dict(pairs)["aiDriven"] == "Yes"


def test_values_are_url_escaped():
    encoded = IssuesQueryParams(mac_address="aa:bb:cc:dd:ee:ff", site_id="a b&c").encode()

    assert encoded == "siteId=a+b%26c&macAddress=aa%3Abb%3Acc%3Add%3Aee%3Aff"


def test_ai_driven_accepts_bool():
    assert IssuesQueryParams(ai_driven=False).to_query() == {"aiDriven": "No"}
    assert IssuesQueryParams(ai_driven=True).to_query() == {"aiDriven": "Yes"}


def test_zero_epoch_is_a_value_not_an_absence():
    assert IssuesQueryParams(start_time=0).to_query() == {"startTime": "0"}


def test_device_filters_do_not_suppress_priority():
    # the platform ignores priority when a MAC address is given, the client still sends it
    params = IssuesQueryParams(mac_address="aa:bb:cc:dd:ee:ff", priority=Priority.P2)

    assert params.to_query() == {"macAddress": "aa:bb:cc:dd:ee:ff", "priority": "P2"}

#--------------------------- error envelope --------------------------

@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"message": "Token expired"}, "Token expired"),
        ({"error": "Unauthorized"}, "Unauthorized"),
        ({"response": {"detail": "x"}, "error": {"message": "nested"}}, "nested"),
        # an empty or unhelpful nested dict must not hide a later key
        ({"error": {}, "detail": "real reason"}, "real reason"),
        ({"error": {"code": 17}, "detail": "real reason"}, "real reason"),
        ({"error": {"code": 17}}, "{'error': {'code': 17}}"),
        ("<html>Bad Gateway</html>", "<html>Bad Gateway</html>"),
        (None, ""),
    ],
)
def test_error_message_extraction(payload, expected):
    assert Error(payload).message == expected


def test_api_error_carries_status_and_envelope():
    exc = DnacApiError(401, Error({"message": "Token expired"}), "https://dnac/x")

    assert exc.status_code == 401
    assert exc.error.message == "Token expired"
    assert "401" in str(exc)
    assert "Token expired" in str(exc)

#--------------------------- service contract --------------------------

def test_service_contract_resolves_its_own_type_hints():
    # the contract only references types defined in this package
    hints = typing.get_type_hints(IssuesService.issues)

    assert hints["return"] == tuple[IssuesResponse, ApiResponse]
    assert typing.get_type_hints(IssuesService.get_issue_enrichment_details)["return"] == (
        tuple[IssueEnrichmentDetailsResponse, ApiResponse]
    )


def test_api_response_contract_derives_ok_and_raise_for_status():
    class StubResponse(ApiResponse):
        def __init__(self, status_code, error=None):
            self._status_code = status_code
            self._error = error

        status_code = property(lambda self: self._status_code)
        headers = property(lambda self: {})
        url = property(lambda self: "https://dnac/x")
        body = property(lambda self: b"")
        error = property(lambda self: self._error)

        def json(self):
            return {}

    assert StubResponse(204).ok
    StubResponse(204).raise_for_status()

    failed = StubResponse(404, Error({"message": "missing"}))
    assert not failed.ok
    with pytest.raises(DnacApiError) as exc_info:
        failed.raise_for_status()
    assert exc_info.value.status_code == 404
