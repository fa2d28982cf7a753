"""Shared pytest fixtures."""

import os
from collections.abc import Callable
from typing import Any

import pytest


def make_kafka(
    kafka_id: str,
    name: str,
    cluster_id: str | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Kafka request object as returned by the Kafka management API."""
    data: dict[str, Any] = {
        "id": kafka_id,
        "kind": "Kafka",
        "href": f"/api/kafkas_mgmt/v1/kafkas/{kafka_id}",
        "name": name,
        "owner": "dev-user",
        "status": "ready",
        "cloud_provider": "aws",
        "region": "us-east-1",
        "multi_az": True,
        "bootstrap_server_host": f"{name}-{kafka_id}.kafka.example.com:443",
        "created_at": "2023-01-10T12:00:00Z",
    }
    if cluster_id is not None:
        data["cluster_id"] = cluster_id
    data.update(extra)
    return data


def make_page(items: list[dict[str, Any]], page: int = 1) -> dict[str, Any]:
    """Kafka request list page."""
    return {
        "kind": "KafkaRequestList",
        "page": page,
        "size": len(items),
        "total": len(items),
        "items": items,
    }


@pytest.fixture
def sample_kafkas() -> list[dict[str, Any]]:
    """Two instances on one dedicated cluster and one hosted instance."""
    return [
        make_kafka("k1", "alpha", cluster_id="c1"),
        make_kafka("k2", "beta", cluster_id="c1"),
        make_kafka("k3", "gamma"),
    ]


@pytest.fixture
def sample_page(sample_kafkas: list[dict[str, Any]]) -> dict[str, Any]:
    """Page holding the sample instances."""
    return make_page(sample_kafkas)


@pytest.fixture
def sample_clusters() -> dict[str, Any]:
    """Cluster list resolving cluster c1."""
    return {
        "kind": "ClusterList",
        "page": 1,
        "size": 1,
        "total": 1,
        "items": [
            {
                "id": "c1",
                "name": "prod-cluster",
                "kind": "Cluster",
                "state": "ready",
            }
        ],
    }


@pytest.fixture
def kafka_factory() -> Callable[..., dict[str, Any]]:
    """Factory for Kafka request objects."""
    return make_kafka


@pytest.fixture
def page_factory() -> Callable[..., dict[str, Any]]:
    """Factory for Kafka request list pages."""
    return make_page


@pytest.fixture(autouse=True)
def clean_rhoas_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RHOAS_* variables of the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("RHOAS_"):
            monkeypatch.delenv(name, raising=False)
