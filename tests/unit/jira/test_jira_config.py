"""Tests for the Jira configuration."""

import os
from unittest.mock import patch

import pytest

from release_readiness.exceptions import ConfigurationError
from release_readiness.jira.config import JiraConfig


class TestJiraConfig:
    """Tests for JiraConfig.from_env."""

    @patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net/",
            "JIRA_USERNAME": "user@example.com",
            "JIRA_API_TOKEN": "token",
        },
        clear=True,
    )
    def test_cloud_basic_auth(self):
        config = JiraConfig.from_env()

        assert config.url == "https://test.atlassian.net"
        assert config.auth_type == "basic"
        assert config.is_cloud
        assert config.ssl_verify
        assert config.sprint_field == "customfield_10006"

    @patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://jira.example.com",
            "JIRA_PERSONAL_TOKEN": "pat",
            "JIRA_SSL_VERIFY": "false",
            "JIRA_SPRINT_FIELD": "customfield_10020",
        },
        clear=True,
    )
    def test_server_token_auth(self):
        config = JiraConfig.from_env()

        assert config.auth_type == "token"
        assert not config.is_cloud
        assert not config.ssl_verify
        assert config.sprint_field == "customfield_10020"

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_url(self):
        with pytest.raises(ConfigurationError) as excinfo:
            JiraConfig.from_env()

        assert "JIRA_URL" in str(excinfo.value)

    @patch.dict(
        os.environ, {"JIRA_URL": "https://test.atlassian.net"}, clear=True
    )
    def test_cloud_without_credentials(self):
        with pytest.raises(ConfigurationError, match="JIRA_USERNAME"):
            JiraConfig.from_env()

    @patch.dict(os.environ, {"JIRA_URL": "https://jira.example.com"}, clear=True)
    def test_server_without_credentials(self):
        with pytest.raises(ValueError, match="JIRA_PERSONAL_TOKEN"):
            JiraConfig.from_env()
