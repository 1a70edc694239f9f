"""Tests for the audit configuration."""

import os
from unittest.mock import patch

import pytest

from release_readiness.config import DEFAULT_CLOSED_LIMIT, AuditConfig
from release_readiness.exceptions import ConfigurationError


class TestAuditConfig:
    """Tests for AuditConfig."""

    @patch.dict(os.environ, {"AUDIT_REPOS": "api, web,,docs"}, clear=True)
    def test_from_env_defaults(self):
        config = AuditConfig.from_env()

        assert config.repositories == ["api", "web", "docs"]
        assert config.provider == "github"
        assert config.closed_limit == DEFAULT_CLOSED_LIMIT
        assert not config.details

    @patch.dict(
        os.environ,
        {
            "AUDIT_REPOS": "api",
            "AUDIT_PROVIDER": "Bitbucket",
            "AUDIT_CLOSED_LIMIT": "0",
            "AUDIT_DETAILS": "yes",
        },
        clear=True,
    )
    def test_from_env(self):
        config = AuditConfig.from_env()

        assert config.provider == "bitbucket"
        assert config.closed_limit == 0
        assert config.details

    @patch.dict(os.environ, {}, clear=True)
    def test_repositories_required(self):
        with pytest.raises(ConfigurationError, match="AUDIT_REPOS"):
            AuditConfig.from_env()

    @patch.dict(
        os.environ, {"AUDIT_REPOS": "api", "AUDIT_CLOSED_LIMIT": "many"}, clear=True
    )
    def test_closed_limit_must_be_integer(self):
        with pytest.raises(ConfigurationError, match="AUDIT_CLOSED_LIMIT"):
            AuditConfig.from_env()

    def test_unknown_provider(self):
        with pytest.raises(ConfigurationError, match="gitlab"):
            AuditConfig(repositories=["api"], provider="gitlab")

    def test_negative_closed_limit(self):
        with pytest.raises(ConfigurationError):
            AuditConfig(repositories=["api"], closed_limit=-1)

    def test_closed_limit_is_capped(self):
        assert AuditConfig(repositories=["api"], closed_limit=1000).closed_limit == 100
