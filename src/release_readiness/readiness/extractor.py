"""Extraction of Jira ticket identifiers from pull request titles."""

import re

# Three or four upper case letters, a hyphen or a single space, then digits
TICKET_ID_PATTERN = re.compile(r"[A-Z]{3,4}[- ][0-9]+")


def extract_ticket_ids(title: str | None) -> list[str]:
    """
    Find every ticket identifier mentioned in a title.

    Matches are returned in order of occurrence, duplicates included, with a
    space separator normalized to a hyphen (``"ABCD 456"`` -> ``"ABCD-456"``).

    Args:
        title: Free text, usually a pull request title

    Returns:
        The normalized ticket identifiers; empty when nothing matches
    """
    if not title:
        return []
    return [match.replace(" ", "-") for match in TICKET_ID_PATTERN.findall(title)]
