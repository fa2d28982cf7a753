"""Bearer token resolution for the managed services APIs.

The token is taken from configuration (``RHOAS_ACCESS_TOKEN`` or the
``--access-token`` option) when set, otherwise from the CLI configuration
file written by ``rhoas login``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rhoas_kafka.utils.errors import AuthenticationError

if TYPE_CHECKING:
    from rhoas_kafka.config import RHOASConfig

logger = logging.getLogger(__name__)


def _read_stored_token(config_file: Path) -> str | None:
    """Read the access token saved in the CLI configuration file.

    Returns:
        The stored token, or None if the file is absent or has no token.
    """
    if not config_file.exists():
        logger.debug(f"No CLI configuration found at {config_file}")
        return None

    try:
        data = json.loads(config_file.read_text())
    except (OSError, json.JSONDecodeError) as e:
        logger.debug(f"Error reading CLI configuration {config_file}: {e}")
        return None

    if not isinstance(data, dict):
        return None
    token = data.get("access_token")
    return token or None


def resolve_access_token(config: RHOASConfig) -> str:
    """Resolve the bearer token for the Kafka management API.

    Raises:
        AuthenticationError: If no token is configured or stored.
    """
    if config.access_token:
        return config.access_token

    token = _read_stored_token(config.config_file)
    if token:
        logger.debug(f"Using access token stored in {config.config_file}")
        return token

    raise AuthenticationError(
        "Not logged in. Run 'rhoas login' or set RHOAS_ACCESS_TOKEN."
    )


def resolve_cluster_mgmt_token(config: RHOASConfig) -> str:
    """Resolve the bearer token for the cluster management API.

    Falls back to the Kafka management API token.
    """
    if config.cluster_mgmt_access_token:
        return config.cluster_mgmt_access_token
    return resolve_access_token(config)


def build_auth_headers(token: str) -> dict[str, str]:
    """Build the Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}
