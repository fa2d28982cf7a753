"""Tests for RHOASConfig."""

import pytest
from pydantic import ValidationError

from rhoas_kafka.config import LogLevel, RHOASConfig, load_config
from rhoas_kafka.utils.errors import ConfigurationError


def test_defaults() -> None:
    """Defaults target the production API with the standard page size."""
    config = RHOASConfig()

    assert config.api_url == "https://api.openshift.com"
    assert config.effective_cluster_mgmt_api_url == "https://api.openshift.com"
    assert config.default_page_number == 1
    assert config.default_page_size == 10
    assert config.log_level == LogLevel.INFO


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """RHOAS_ prefixed variables configure the CLI."""
    monkeypatch.setenv("RHOAS_API_URL", "https://api.stage.example.com")
    monkeypatch.setenv("RHOAS_CLUSTER_MGMT_API_URL", "https://ocm.example.com")
    monkeypatch.setenv("RHOAS_DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("RHOAS_LOG_LEVEL", "DEBUG")

    config = RHOASConfig()

    assert config.api_url == "https://api.stage.example.com"
    assert config.effective_cluster_mgmt_api_url == "https://ocm.example.com"
    assert config.default_page_size == 25
    assert config.log_level == LogLevel.DEBUG


@pytest.mark.parametrize(
    "kwargs",
    [{"default_page_size": 0}, {"default_page_number": -1}, {"request_timeout": 0}],
)
def test_invalid_values(kwargs: dict[str, int]) -> None:
    """Page defaults must be positive and the timeout non-zero."""
    with pytest.raises(ValidationError):
        RHOASConfig(**kwargs)


def test_load_config_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Explicit overrides take precedence over the environment."""
    monkeypatch.setenv("RHOAS_CLUSTER_MGMT_API_URL", "https://env.example.com")

    config = load_config(cluster_mgmt_api_url="https://ocm.example.com")

    assert config.effective_cluster_mgmt_api_url == "https://ocm.example.com"


def test_load_config_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    """Invalid settings surface as ConfigurationError."""
    monkeypatch.setenv("RHOAS_DEFAULT_PAGE_SIZE", "0")

    with pytest.raises(ConfigurationError, match="default_page_size"):
        load_config()
