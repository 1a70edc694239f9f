"""Tests for the Bitbucket pull request source."""

from unittest.mock import MagicMock

import pytest
import requests

from release_readiness.bitbucket import BitbucketFetcher
from release_readiness.bitbucket.config import BitbucketConfig
from release_readiness.exceptions import AuthenticationError, TransportError
from tests.utils.factories import BitbucketPullRequestFactory


def make_response(json_data, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


@pytest.fixture
def cloud_config():
    return BitbucketConfig(
        url="https://api.bitbucket.org",
        auth_type="basic",
        username="ada",
        password="app-password",
        workspace="acme",
    )


@pytest.fixture
def server_config():
    return BitbucketConfig(
        url="https://bitbucket.example.com",
        auth_type="pat",
        personal_token="pat",
        project_key="PROJ",
        is_cloud=False,
    )


def make_fetcher(config):
    fetcher = BitbucketFetcher(config)
    fetcher.session = MagicMock()
    return fetcher


class TestBitbucketClient:
    """Tests for the client construction."""

    def test_basic_auth(self, cloud_config):
        fetcher = BitbucketFetcher(cloud_config)
        assert fetcher.session.auth == ("ada", "app-password")

    def test_cloud_pat(self, cloud_config):
        cloud_config.auth_type = "pat"
        cloud_config.personal_token = "secret"

        fetcher = BitbucketFetcher(cloud_config)

        assert fetcher.session.headers["Authorization"] == "Bearer secret"

    def test_server_pat(self, server_config):
        fetcher = BitbucketFetcher(server_config)
        assert fetcher.session.auth == ("x-token-auth", "pat")

    def test_custom_headers(self, cloud_config):
        cloud_config.custom_headers = {"X-Trace": "1"}
        fetcher = BitbucketFetcher(cloud_config)
        assert fetcher.session.headers["X-Trace"] == "1"


class TestListPullRequests:
    """Tests for list_open and list_closed."""

    def test_cloud_open(self, cloud_config):
        fetcher = make_fetcher(cloud_config)
        fetcher.session.get.return_value = make_response(
            {"values": [BitbucketPullRequestFactory.create_cloud(7)]}
        )

        prs = fetcher.list_open("api")

        fetcher.session.get.assert_called_once_with(
            "https://api.bitbucket.org/2.0/repositories/acme/api/pullrequests",
            params={"pagelen": 100, "state": "OPEN"},
        )
        assert [pr.number for pr in prs] == [7]
        assert prs[0].title == "FOO-100 Export"

    def test_server_closed(self, server_config):
        fetcher = make_fetcher(server_config)
        fetcher.session.get.return_value = make_response(
            {
                "values": [
                    BitbucketPullRequestFactory.create_server(i, state="MERGED")
                    for i in range(4)
                ],
                "isLastPage": False,
            }
        )

        prs = fetcher.list_closed("api", 2)

        fetcher.session.get.assert_called_once_with(
            "https://bitbucket.example.com/rest/api/1.0/projects/PROJ/repos/api/pull-requests",
            params={"limit": 2, "state": "MERGED"},
        )
        assert [pr.number for pr in prs] == [0, 1]

    def test_rejected_credentials(self, cloud_config):
        fetcher = make_fetcher(cloud_config)
        fetcher.session.get.return_value = make_response({}, 401)

        with pytest.raises(AuthenticationError):
            fetcher.list_open("api")

    def test_server_error(self, cloud_config):
        fetcher = make_fetcher(cloud_config)
        fetcher.session.get.return_value = make_response({}, 500)

        with pytest.raises(TransportError):
            fetcher.list_open("api")

    def test_unexpected_response(self, cloud_config):
        fetcher = make_fetcher(cloud_config)
        fetcher.session.get.return_value = make_response(["not", "a", "page"])

        with pytest.raises(TransportError):
            fetcher.list_open("api")
