"""
Test fixtures for Jira unit tests.
"""

from unittest.mock import MagicMock, patch

import pytest

from release_readiness.jira import JiraFetcher
from release_readiness.jira.config import JiraConfig


@pytest.fixture
def jira_config():
    """Basic-auth Jira Cloud configuration."""
    return JiraConfig(
        url="https://test.atlassian.net",
        auth_type="basic",
        username="test@example.com",
        api_token="test-api-token",
        sprint_field="customfield_10006",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Patches the atlassian Jira class used by JiraClient."""
    with patch("release_readiness.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = MagicMock()
        yield mock_jira_class


@pytest.fixture
def jira_fetcher(jira_config, mock_atlassian_jira):
    """A JiraFetcher backed by a mocked atlassian client."""
    return JiraFetcher(config=jira_config)
