"""OpenShift cluster client operations."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from rhoas_kafka.domains.clusters.models import Cluster, ClusterList
from rhoas_kafka.domains.kafka.query import build_cluster_id_query
from rhoas_kafka.utils.errors import APIError

if TYPE_CHECKING:
    from rhoas_kafka.clients.base import APIClient
    from rhoas_kafka.domains.kafka.models import KafkaRequest

logger = logging.getLogger(__name__)


def referenced_cluster_ids(kafkas: Iterable[KafkaRequest]) -> list[str]:
    """Distinct cluster IDs referenced by the given instances, first seen first."""
    return list(dict.fromkeys(k.cluster_id for k in kafkas if k.cluster_id is not None))


class ClusterClient:
    """Client for OpenShift cluster lookups."""

    def __init__(self, api: APIClient, page: int = 1) -> None:
        self._api = api
        self._page = page

    def get_cluster_index(self, kafkas: Iterable[KafkaRequest]) -> dict[str, Cluster]:
        """Resolve the clusters referenced by a page of Kafka instances.

        All distinct cluster IDs are fetched in a single request. When no
        instance has a dedicated cluster no request is made.

        Returns:
            Mapping of cluster ID to cluster. IDs the API did not return
            are absent from the mapping.
        """
        cluster_ids = referenced_cluster_ids(kafkas)
        if not cluster_ids:
            return {}

        params = {
            "search": build_cluster_id_query(cluster_ids),
            "page": str(self._page),
            "size": str(len(cluster_ids)),
        }
        logger.debug(f"Looking up {len(cluster_ids)} OpenShift cluster(s)")
        try:
            clusters = ClusterList.model_validate(self._api.list_clusters(params))
        except PydanticValidationError as e:
            raise APIError(f"Invalid response listing OpenShift clusters: {e}") from e

        index = {cluster.id: cluster for cluster in clusters.items}
        missing = [cid for cid in cluster_ids if cid not in index]
        if missing:
            logger.debug(f"Clusters not returned by the cluster management API: {missing}")
        return index
