"""HTTP client for the managed services APIs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from rhoas_kafka import __version__
from rhoas_kafka.clients.auth import build_auth_headers
from rhoas_kafka.utils.errors import APIError, AuthenticationError, NotFoundError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

KAFKAS_PATH = "/api/kafkas_mgmt/v1/kafkas"
CLUSTERS_PATH = "/api/clusters_mgmt/v1/clusters"


class APIClient:
    """Client for the Kafka and cluster management REST APIs.

    Exposes only the two list operations the CLI needs. The same class
    serves both APIs; when the cluster management API lives on another
    host or needs another token, a second instance is created for it.

    Usage:
        with APIClient(url, token, timeout=30.0) as api:
            data = api.list_kafkas({"page": "1", "size": "10"})
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        verify: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = build_auth_headers(token)
        headers["User-Agent"] = f"rhoas-kafka/{__version__}"
        self._base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self._base_url,
            headers=headers,
            timeout=timeout,
            verify=verify,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Base URL requests are sent to."""
        return self._base_url

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def __enter__(self) -> APIClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def list_kafkas(self, params: dict[str, str]) -> dict[str, Any]:
        """GET the Kafka request list with the given query parameters."""
        return self._get(KAFKAS_PATH, params, resource="Kafka instances")

    def list_clusters(self, params: dict[str, str]) -> dict[str, Any]:
        """GET the OpenShift cluster list with the given query parameters."""
        return self._get(CLUSTERS_PATH, params, resource="OpenShift clusters")

    def _get(self, path: str, params: dict[str, str], resource: str) -> dict[str, Any]:
        logger.debug(f"GET {self._base_url}{path} params={params}")
        try:
            response = self._http.get(path, params=params)
        except httpx.RequestError as e:
            raise APIError(f"Failed to list {resource}: {e}") from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                raise APIError(
                    f"Invalid response listing {resource}: {e}",
                    status_code=response.status_code,
                ) from e

        reason = _error_reason(response)
        if response.status_code in (401, 403):
            raise AuthenticationError(
                f"Not authorized to list {resource} ({response.status_code}): {reason}"
            )
        if response.status_code == 404:
            raise NotFoundError("API endpoint", f"{self._base_url}{path}")
        raise APIError(
            f"Failed to list {resource} ({response.status_code}): {reason}",
            status_code=response.status_code,
        )


def _error_reason(response: httpx.Response) -> str:
    """Extract a readable reason from an API error body.

    The management APIs return ``{"kind": "Error", "reason": "..."}``.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("reason"):
        return str(body["reason"])
    return response.reason_phrase
