"""URL-related utility functions for jira-cli."""

import ipaddress
from urllib.parse import urlparse

CLOUD_HOST_SUFFIXES = (
    ".atlassian.net",
    ".jira.com",
    ".jira-dev.com",
    ".atlassian-us-gov-mod.net",  # US Gov Moderate (FedRAMP)
    ".atlassian-us-gov.net",  # US Gov (FedRAMP)
)
CLOUD_API_HOST = "api.atlassian.com"


def _is_local_host(hostname: str) -> bool:
    if hostname == "localhost":
        return True
    try:
        address = ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return address.is_private or address.is_loopback


def is_atlassian_cloud_url(url: str) -> bool:
    """Tell whether ``url`` points to Jira Cloud rather than Server/Data Center.

    Local and private network hosts are always Server/Data Center.
    """
    if not url:
        return False

    hostname = (urlparse(url).hostname or "").lower()
    if _is_local_host(hostname):
        return False

    return hostname == CLOUD_API_HOST or hostname.endswith(CLOUD_HOST_SUFFIXES)
