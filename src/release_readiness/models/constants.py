"""
Constants shared by the API models.
"""

EMPTY_STRING = ""
UNKNOWN = "Unknown"
NONE_VALUE = "NONE"

DEFAULT_SPRINT_ID = 0

# Jira Server returns sprints as "com.atlassian.greenhopper.service.sprint.Sprint@1a2b[...]"
SPRINT_DESCRIPTOR_WRAPPER = r"^[\w.$]+@[0-9a-fA-F]+\[(?P<body>.*)\]$"
