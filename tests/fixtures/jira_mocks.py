"""Static Jira API payloads shared by the unit tests."""

MOCK_JIRA_FIELD_DEFINITIONS = [
    {"id": "summary", "name": "Summary", "custom": False},
    {"id": "status", "name": "Status", "custom": False},
    {"id": "issuelinks", "name": "Linked Issues", "custom": False},
    {"id": "components", "name": "Component/s", "custom": False},
    {
        "id": "customfield_10042",
        "name": "Change Log Group",
        "custom": True,
        "schema": {"type": "option"},
    },
    {
        "id": "customfield_10043",
        "name": "Change Log Message",
        "custom": True,
        "schema": {"type": "string"},
    },
    {
        "id": "customfield_10010",
        "name": "Story Points",
        "custom": True,
        "schema": {"type": "number"},
    },
]

MOCK_JIRA_ISSUE_TYPES = [
    {"id": "1", "name": "Bug", "subtask": False},
    {"id": "3", "name": "Task", "subtask": False},
    {"id": "7", "name": "Changelog Entry", "subtask": False},
]

MOCK_JIRA_PROJECTS = [
    {"id": "10000", "key": "XYZ", "name": "Release Branch"},
    {"id": "10001", "key": "ABC", "name": "Main Line"},
]

MOCK_JIRA_LINK_TYPES = {
    "issueLinkTypes": [
        {
            "id": "10010",
            "name": "Backports",
            "inward": "is backported by",
            "outward": "backports",
            "self": "https://test.atlassian.net/rest/api/2/issueLinkType/10010",
        },
        {
            "id": "10000",
            "name": "Blocks",
            "inward": "is blocked by",
            "outward": "blocks",
        },
    ]
}
