"""Configuration for the rhoas-kafka CLI.

Settings are read from environment variables with the ``RHOAS_`` prefix
or from a ``.env`` file in the working directory. Command line options
override them in ``__main__``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from rhoas_kafka.utils.errors import ConfigurationError

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "rhoas"


class LogLevel(str, Enum):
    """Logging verbosity."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class RHOASConfig(BaseSettings):
    """Settings for the managed services APIs and local state."""

    model_config = SettingsConfigDict(
        env_prefix="RHOAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API endpoints
    api_url: str = Field(
        default="https://api.openshift.com",
        description="Base URL of the Kafka management API",
    )
    cluster_mgmt_api_url: str | None = Field(
        default=None,
        description="Base URL of the cluster management API (defaults to api_url)",
    )

    # Credentials
    access_token: str | None = Field(
        default=None,
        description="Bearer token for the Kafka management API",
    )
    cluster_mgmt_access_token: str | None = Field(
        default=None,
        description="Bearer token for the cluster management API (defaults to access_token)",
    )

    # Local state written by the login and context commands
    config_file: Path = Field(
        default=DEFAULT_CONFIG_DIR / "config.json",
        description="CLI configuration file holding the stored access token",
    )
    context_file: Path = Field(
        default=DEFAULT_CONFIG_DIR / "contexts.json",
        description="Service context file holding the current Kafka selection",
    )

    # Pagination defaults
    default_page_number: int = Field(default=1, ge=1)
    default_page_size: int = Field(default=10, ge=1)

    # Transport
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )
    verify_ssl: bool = Field(default=True)

    log_level: LogLevel = Field(default=LogLevel.INFO)

    @property
    def effective_cluster_mgmt_api_url(self) -> str:
        """Cluster management API URL, falling back to the main API URL."""
        return self.cluster_mgmt_api_url or self.api_url


def load_config(**overrides: Any) -> RHOASConfig:
    """Build the configuration from the environment plus explicit overrides.

    Raises:
        ConfigurationError: If a setting is invalid.
    """
    try:
        return RHOASConfig(**overrides)
    except PydanticValidationError as e:
        raise ConfigurationError(str(e)) from e
