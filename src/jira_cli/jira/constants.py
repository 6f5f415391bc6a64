"""Constants for the Jira client."""

CUSTOM_FIELD_PREFIX = "customfield_"

DEFAULT_READ_JIRA_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "issuetype",
    "issuelinks",
)

# Server/DC caps a search page at 50 issues, Cloud at 100
SERVER_MAX_RESULTS = 50
CLOUD_MAX_RESULTS = 100
