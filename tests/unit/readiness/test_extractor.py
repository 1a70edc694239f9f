"""Tests for ticket identifier extraction."""

import pytest

from release_readiness.readiness.extractor import extract_ticket_ids


class TestExtractTicketIds:
    """Tests for extract_ticket_ids."""

    def test_hyphen_and_space_separators(self):
        """Both separators match and the space is normalized to a hyphen."""
        assert extract_ticket_ids("Fix BUG-123 and ABCD 456") == ["BUG-123", "ABCD-456"]

    def test_no_tickets(self):
        """A title without references yields an empty list."""
        assert extract_ticket_ids("no tickets here") == []

    @pytest.mark.parametrize("title", [None, ""], ids=["none", "empty"])
    def test_missing_title(self, title):
        assert extract_ticket_ids(title) == []

    def test_duplicates_are_kept_in_order(self):
        title = "FOO-2 follow-up to FOO-1, reverts FOO-2"
        assert extract_ticket_ids(title) == ["FOO-2", "FOO-1", "FOO-2"]

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("AB-12 too short a key", []),
            ("foo-12 lower case", []),
            ("FOO-12", ["FOO-12"]),
            ("[ABCD-7] bracketed", ["ABCD-7"]),
            ("FOO  12 two spaces", []),
            ("FOO-", []),
            ("Release 2024 WEB 9", ["WEB-9"]),
        ],
        ids=[
            "two-letter-key",
            "lower-case-key",
            "bare-id",
            "bracketed-id",
            "double-space",
            "missing-number",
            "space-separated-in-sentence",
        ],
    )
    def test_matching_rules(self, title, expected):
        assert extract_ticket_ids(title) == expected

    def test_longer_key_matches_its_last_four_letters(self):
        """Keys are not anchored, so ABCDE-1 yields its trailing four letters."""
        assert extract_ticket_ids("ABCDE-1") == ["BCDE-1"]
