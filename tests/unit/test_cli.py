"""Tests for the release-readiness command line."""

import os
from unittest.mock import MagicMock, patch

import click
import pytest
from click.testing import CliRunner

from release_readiness import main
from release_readiness.exceptions import TicketLookupError
from release_readiness.models.change_request import ChangeRequest
from release_readiness.models.jira import TicketPayload

GITHUB_ENV = {
    "AUDIT_REPOS": "api",
    "AUDIT_CLOSED_LIMIT": "0",
    "GITHUB_TOKEN": "ghp_secret",
    "GITHUB_ORGANIZATION": "acme",
    "JIRA_URL": "https://test.atlassian.net",
    "JIRA_USERNAME": "user@example.com",
    "JIRA_API_TOKEN": "token",
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch("release_readiness.load_dotenv"):
        yield


@pytest.fixture
def fetchers():
    """Patches the service clients the command builds."""
    source = MagicMock()
    source.list_open.return_value = [
        ChangeRequest(number=1, title="Implement export FOO-100")
    ]
    tickets = MagicMock()
    tickets.get_ticket_payload.return_value = TicketPayload(
        summary="Implement export",
        fix_versions=["2.0.0"],
        sprint_values=["id=2,name=Sprint 2,state=ACTIVE,"],
    )
    with (
        patch("release_readiness.GitHubFetcher", return_value=source) as github,
        patch("release_readiness.BitbucketFetcher", return_value=source) as bitbucket,
        patch("release_readiness.JiraFetcher", return_value=tickets),
    ):
        yield {"source": source, "tickets": tickets, "github": github, "bitbucket": bitbucket}


class TestMain:
    """Tests for the main command."""

    @patch.dict(os.environ, {}, clear=True)
    def test_configuration_error(self, runner):
        result = runner.invoke(main, [])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    @patch.dict(os.environ, GITHUB_ENV, clear=True)
    def test_ready_pull_request(self, runner, fetchers):
        result = runner.invoke(main, [])

        assert result.exit_code == 0, result.output
        assert "✔✔ #1 Implement export FOO-100" in click.unstyle(result.output)
        fetchers["github"].assert_called_once_with()
        fetchers["source"].list_closed.assert_not_called()

    @patch.dict(os.environ, GITHUB_ENV, clear=True)
    def test_options_override_environment(self, runner, fetchers):
        result = runner.invoke(
            main,
            ["--repo", "web", "--repo", "docs", "--closed-limit", "3", "--details"],
        )

        assert result.exit_code == 0, result.output
        listed = [c.args[0] for c in fetchers["source"].list_open.call_args_list]
        assert listed == ["web", "docs"]
        fetchers["source"].list_closed.assert_called_with("docs", 3)
        assert "Current Sprint: Sprint 2" in click.unstyle(result.output)

    @patch.dict(
        os.environ,
        {
            **GITHUB_ENV,
            "BITBUCKET_URL": "https://api.bitbucket.org",
            "BITBUCKET_PERSONAL_TOKEN": "pat",
            "BITBUCKET_WORKSPACE": "acme",
        },
        clear=True,
    )
    def test_bitbucket_provider(self, runner, fetchers):
        result = runner.invoke(main, ["--provider", "bitbucket"])

        assert result.exit_code == 0, result.output
        fetchers["bitbucket"].assert_called_once_with()
        fetchers["github"].assert_not_called()

    @patch.dict(os.environ, GITHUB_ENV, clear=True)
    def test_repository_failure_exit_code(self, runner, fetchers):
        fetchers["tickets"].get_ticket_payload.side_effect = TicketLookupError(
            "FOO-100", "404 Not Found"
        )

        result = runner.invoke(main, [])

        assert result.exit_code == 2
        assert "Couldn't audit api" in result.output
