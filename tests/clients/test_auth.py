"""Tests for access token resolution."""

import json
from pathlib import Path

import pytest

from rhoas_kafka.clients.auth import (
    build_auth_headers,
    resolve_access_token,
    resolve_cluster_mgmt_token,
)
from rhoas_kafka.config import RHOASConfig
from rhoas_kafka.utils.errors import AuthenticationError


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path for a CLI configuration file (not created)."""
    return tmp_path / "config.json"


def _config(config_file: Path, **kwargs: object) -> RHOASConfig:
    return RHOASConfig(config_file=config_file, context_file=config_file.parent / "ctx.json", **kwargs)


class TestResolveAccessToken:
    """Tests for resolve_access_token."""

    def test_explicit_token_wins(self, config_file: Path) -> None:
        """A configured token is used even when one is stored."""
        config_file.write_text(json.dumps({"access_token": "stored"}))

        assert resolve_access_token(_config(config_file, access_token="explicit")) == "explicit"

    def test_stored_token(self, config_file: Path) -> None:
        """The token saved by login is used when none is configured."""
        config_file.write_text(json.dumps({"access_token": "stored", "refresh_token": "r"}))

        assert resolve_access_token(_config(config_file)) == "stored"

    def test_no_token(self, config_file: Path) -> None:
        """Without any token the user is told to log in."""
        with pytest.raises(AuthenticationError) as exc_info:
            resolve_access_token(_config(config_file))

        assert "rhoas login" in str(exc_info.value)

    @pytest.mark.parametrize("content", ["not json", "[]", '{"access_token": ""}'])
    def test_unusable_config_file(self, config_file: Path, content: str) -> None:
        """An unreadable or empty stored token counts as not logged in."""
        config_file.write_text(content)

        with pytest.raises(AuthenticationError):
            resolve_access_token(_config(config_file))


class TestResolveClusterMgmtToken:
    """Tests for resolve_cluster_mgmt_token."""

    def test_dedicated_token(self, config_file: Path) -> None:
        """A cluster management token overrides the Kafka API token."""
        config = _config(config_file, access_token="kafka", cluster_mgmt_access_token="ocm")

        assert resolve_cluster_mgmt_token(config) == "ocm"

    def test_falls_back_to_access_token(self, config_file: Path) -> None:
        """Without a dedicated token the Kafka API token is reused."""
        assert resolve_cluster_mgmt_token(_config(config_file, access_token="kafka")) == "kafka"


def test_build_auth_headers() -> None:
    """Tokens are sent as bearer credentials."""
    assert build_auth_headers("abc") == {"Authorization": "Bearer abc"}
