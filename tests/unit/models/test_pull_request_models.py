"""Tests for the GitHub and Bitbucket pull request models."""

from release_readiness.models import (
    BitbucketPullRequest,
    ChangeRequest,
    GitHubPullRequest,
)
from tests.utils.factories import BitbucketPullRequestFactory, GitHubPullRequestFactory


class TestGitHubPullRequest:
    """Tests for GitHubPullRequest.from_api_response."""

    def test_from_api_response(self):
        pr = GitHubPullRequest.from_api_response(GitHubPullRequestFactory.create(5))

        assert isinstance(pr, ChangeRequest)
        assert pr.number == 5
        assert pr.title == "Implement export FOO-100"
        assert pr.state == "open"
        assert pr.author == "octocat"
        assert pr.url == "https://github.com/acme/api/pull/5"
        assert pr.head_branch == "feature/export"
        assert pr.base_branch == "main"
        assert not pr.is_merged

    def test_merged(self):
        data = GitHubPullRequestFactory.create(
            state="closed", merged_at="2024-01-02T03:04:05Z"
        )
        assert GitHubPullRequest.from_api_response(data).is_merged

    def test_empty_data(self):
        pr = GitHubPullRequest.from_api_response({})
        assert pr.number == 0
        assert pr.title == "Unknown"

    def test_null_title(self):
        pr = GitHubPullRequest.from_api_response({"number": 3, "title": None})
        assert pr.title == "Unknown"


class TestBitbucketPullRequest:
    """Tests for BitbucketPullRequest.from_api_response."""

    def test_cloud(self):
        data = BitbucketPullRequestFactory.create_cloud(7)
        pr = BitbucketPullRequest.from_api_response(data, is_cloud=True)

        assert pr.number == 7
        assert pr.title == "FOO-100 Export"
        assert pr.state == "OPEN"
        assert pr.source_branch == "feature/export"
        assert pr.destination_branch == "main"
        assert pr.author == "Ada Lovelace"
        assert pr.url == "https://bitbucket.org/acme/api/pull-requests/7"

    def test_server(self):
        data = BitbucketPullRequestFactory.create_server(8)
        pr = BitbucketPullRequest.from_api_response(data, is_cloud=False)

        assert pr.number == 8
        assert pr.source_branch == "feature/export"
        assert pr.destination_branch == "main"
        assert pr.author == "Ada Lovelace"
        assert pr.url.endswith("/pull-requests/8")

    def test_non_dict(self):
        assert BitbucketPullRequest.from_api_response("oops") == BitbucketPullRequest()

    def test_to_simplified_dict(self):
        pr = BitbucketPullRequest.from_api_response(
            BitbucketPullRequestFactory.create_cloud(7)
        )
        result = pr.to_simplified_dict()
        assert result["number"] == 7
        assert result["author"] == "Ada Lovelace"
