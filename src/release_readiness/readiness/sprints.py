"""
Parsing of Jira sprint field values and selection of the active sprint.

Jira Server stores sprint memberships as stringified objects such as
``com.atlassian.greenhopper.service.sprint.Sprint@1a2b[id=42,rapidViewId=3,
state=ACTIVE,name=Sprint 7,...]``. The format is not a contract, so parsing is
lenient: every missing or malformed field falls back to its default and
nothing is raised.
"""

import re
from collections.abc import Iterable
from typing import Any

from ..logging_config import get_logger
from ..models.constants import DEFAULT_SPRINT_ID, EMPTY_STRING, SPRINT_DESCRIPTOR_WRAPPER
from ..models.jira import JiraSprint, SprintState

logger = get_logger("sprints")

_WRAPPER_RE = re.compile(SPRINT_DESCRIPTOR_WRAPPER, re.DOTALL)
_SPRINT_ID_RE = re.compile(r"[0-9]+")

REQUIRED_KEYS = ("id", "name", "state")


def scan_descriptor(raw: str) -> dict[str, str]:
    """
    Split a ``key=value,key=value`` descriptor into a dictionary.

    Segments without ``=`` are ignored; when a key repeats, the first
    occurrence is kept.

    Args:
        raw: The descriptor, with or without the ``Class@hash[...]`` wrapper

    Returns:
        The key/value pairs found
    """
    body = raw.strip()
    if match := _WRAPPER_RE.match(body):
        body = match.group("body")

    values: dict[str, str] = {}
    for segment in body.split(","):
        key, sep, value = segment.partition("=")
        if not sep:
            continue
        key = key.strip()
        if key and key not in values:
            values[key] = value
    return values


def parse_sprint_descriptor(raw: Any) -> JiraSprint:
    """
    Parse one raw sprint descriptor into a JiraSprint.

    Args:
        raw: The descriptor string from the sprint custom field

    Returns:
        A best-effort JiraSprint: id 0, empty name and UNKNOWN state stand in
        for whatever could not be read
    """
    if not isinstance(raw, str):
        logger.debug(f"Ignoring non-string sprint descriptor: {raw!r}")
        return JiraSprint()

    values = scan_descriptor(raw)

    missing = [key for key in REQUIRED_KEYS if key not in values]
    if missing:
        logger.debug(f"Sprint descriptor missing {', '.join(missing)}: {raw!r}")

    raw_id = values.get("id", EMPTY_STRING).strip()
    if _SPRINT_ID_RE.fullmatch(raw_id):
        sprint_id = int(raw_id)
    else:
        sprint_id = DEFAULT_SPRINT_ID

    return JiraSprint(
        id=sprint_id,
        name=values.get("name", EMPTY_STRING),
        state=SprintState.from_token(values.get("state")),
    )


def parse_sprint_value(value: Any) -> JiraSprint:
    """
    Parse one element of the sprint custom field, whatever its shape.

    Args:
        value: A descriptor string (Jira Server) or a sprint object (Jira Cloud)

    Returns:
        The parsed JiraSprint
    """
    if isinstance(value, dict):
        return JiraSprint.from_api_response(value)
    return parse_sprint_descriptor(value)


def select_current_sprint(sprints: Iterable[JiraSprint]) -> JiraSprint | None:
    """
    Pick the active sprint among a ticket's sprint memberships.

    Should more than one be active, the last one in input order is returned.

    Args:
        sprints: The ticket's sprints, in the order Jira reports them

    Returns:
        The active sprint, or None when no sprint is active
    """
    current = None
    for sprint in sprints:
        if sprint.state is SprintState.ACTIVE:
            current = sprint
    return current
