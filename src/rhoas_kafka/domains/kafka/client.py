"""Kafka instance client operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from rhoas_kafka.domains.kafka.models import KafkaRequestList
from rhoas_kafka.domains.kafka.query import build_query
from rhoas_kafka.utils.errors import APIError

if TYPE_CHECKING:
    from rhoas_kafka.clients.base import APIClient

logger = logging.getLogger(__name__)


class KafkaClient:
    """Client for Kafka instance operations."""

    def __init__(self, api: APIClient) -> None:
        self._api = api

    def list_kafkas(self, page: int, size: int, search: str = "") -> KafkaRequestList:
        """List one page of the user's Kafka instances.

        The page is returned as the API sent it; no filtering or sorting
        happens client side.

        Args:
            page: 1-based page number.
            size: Maximum number of instances in the page.
            search: Free-text term matched against name, owner, cloud
                provider, region and status. Empty means no filter.
        """
        params = {"page": str(page), "size": str(size)}

        query = build_query(search)
        if query is not None:
            logger.debug(f"Filtering Kafka instances with the query \"{query}\"")
            params["search"] = query

        data = self._api.list_kafkas(params)
        try:
            return KafkaRequestList.model_validate(data)
        except PydanticValidationError as e:
            raise APIError(f"Invalid response listing Kafka instances: {e}") from e
