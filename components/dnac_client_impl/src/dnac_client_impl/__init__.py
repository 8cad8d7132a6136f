"""requests-backed implementation of the assurance Issues client."""

from dnac_client_impl.dnac_impl import DnacClient, get_client
from dnac_client_impl.dnac_issues import IssuesService
from dnac_client_impl.response import ApiResponse

__all__ = ["ApiResponse", "DnacClient", "IssuesService", "get_client"]
