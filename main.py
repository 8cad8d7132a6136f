#This file is for development purposes only

import logging

from dnac_client_impl import get_client
from dnac_client_interface import DnacError, IssuesQueryParams, IssueStatus, Priority


def main():
    logging.basicConfig(level=logging.DEBUG)
    client = get_client(interactive=True)

    print("\nFetching active P1 issues...")
    try:
        result, response = client.issues.issues(
            IssuesQueryParams(priority=Priority.P1, issue_status=IssueStatus.ACTIVE)
        )
        if response.error is not None:
            print(f"Platform answered {response.status_code}: {response.error.message}")
        for summary in result.response or ():
            print(f"- {summary.issue_id} {summary.name} ({summary.priority}, {summary.status})")
        print(f"Total: {result.total_count}")
    except DnacError as e:
        print(f"Error connecting to the platform: {e}")

    try:
        enrichment, response = client.issues.get_issue_enrichment_details()
        for issue in enrichment.issues:
            print(f"- {issue}")
    except DnacError as e:
        print(f"Error connecting to the platform: {e}")

if __name__ == "__main__":
    main()
