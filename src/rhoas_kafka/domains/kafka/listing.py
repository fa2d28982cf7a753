"""The ``kafka list`` command.

Lists one page of the user's Kafka instances and renders it either as a
table, with each instance's OpenShift cluster resolved to its name, or as
the raw API page in JSON or YAML.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Mapping
from contextlib import ExitStack
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from rhoas_kafka.clients.auth import resolve_access_token, resolve_cluster_mgmt_token
from rhoas_kafka.clients.base import APIClient
from rhoas_kafka.context import ServiceContext, get_current_context, load_service_context
from rhoas_kafka.domains.clusters.client import ClusterClient
from rhoas_kafka.domains.kafka.client import KafkaClient
from rhoas_kafka.domains.kafka.models import KafkaRequest, KafkaRow
from rhoas_kafka.domains.kafka.validation import validate_output_format, validate_search_input
from rhoas_kafka.utils.formatting import TABLE_FORMAT, dump_formatted, dump_table, emoji

if TYPE_CHECKING:
    from rhoas_kafka.config import RHOASConfig
    from rhoas_kafka.domains.clusters.models import Cluster

logger = logging.getLogger(__name__)

NO_SELECTION = "-"
HOSTED_CLUSTER_LABEL = "Red Hat Infrastructure"
NO_KAFKA_INSTANCES = "No Kafka instances were found."


@dataclass
class ListOptions:
    """Options of one ``kafka list`` invocation."""

    output_format: str = TABLE_FORMAT
    page: int = 1
    limit: int = 10
    search: str = ""


def _cluster_label(kafka: KafkaRequest, cluster_index: Mapping[str, Cluster]) -> str:
    if kafka.cluster_id is None:
        return HOSTED_CLUSTER_LABEL

    cluster = cluster_index.get(kafka.cluster_id)
    if cluster is None:
        logger.warning(
            f"OpenShift cluster {kafka.cluster_id} of Kafka instance {kafka.name} was not found"
        )
        return f"unknown ({kafka.cluster_id})"
    return cluster.label


def map_kafkas_to_rows(
    kafkas: Iterable[KafkaRequest],
    cluster_index: Mapping[str, Cluster],
    selected_id: str | None = NO_SELECTION,
    stream: TextIO | None = None,
) -> list[KafkaRow]:
    """Project Kafka instances onto table rows, preserving their order.

    Args:
        kafkas: Instances from one fetched page.
        cluster_index: Resolved clusters keyed by ID.
        selected_id: ID of the current Kafka instance. None or NO_SELECTION
            marks no row as current.
        stream: Output stream, used to decide whether the current marker
            can be printed as an emoji.
    """
    marker = emoji("✔", "(current)", stream)
    current = selected_id if selected_id not in (None, NO_SELECTION) else None

    rows = []
    for kafka in kafkas:
        name = kafka.name
        if current is not None and kafka.id == current:
            name = f"{name} {marker}"

        rows.append(
            KafkaRow(
                id=kafka.id,
                name=name,
                owner=kafka.owner,
                status=kafka.status,
                cloud_provider=kafka.cloud_provider,
                region=kafka.region,
                openshift_cluster=_cluster_label(kafka, cluster_index),
            )
        )
    return rows


def run_list(
    options: ListOptions,
    kafka_client: KafkaClient,
    cluster_client: ClusterClient,
    load_context: Callable[[], ServiceContext],
    out: TextIO,
) -> None:
    """Fetch, enrich and render one page of Kafka instances.

    Clusters are resolved and the service context is read only for table
    output; structured output is the raw page, empty or not.
    """
    kafkas = kafka_client.list_kafkas(options.page, options.limit, options.search)

    if options.output_format != TABLE_FORMAT:
        dump_formatted(out, options.output_format, kafkas)
        return

    if not kafkas.items:
        logger.info(NO_KAFKA_INSTANCES)
        return

    current = get_current_context(load_context())
    selected_id = current.kafka_id or NO_SELECTION

    cluster_index = cluster_client.get_cluster_index(kafkas.items)
    rows = map_kafkas_to_rows(kafkas.items, cluster_index, selected_id, stream=out)
    dump_table(out, rows)


def list_command(options: ListOptions, config: RHOASConfig, out: TextIO | None = None) -> None:
    """Validate input, connect to the APIs and run ``kafka list``.

    Raises:
        RHOASError: On invalid input, missing credentials, API failures or
            an unreadable service context.
    """
    validate_output_format(options.output_format)
    validate_search_input(options.search)

    out = out or sys.stdout
    token = resolve_access_token(config)
    cluster_url = config.effective_cluster_mgmt_api_url
    cluster_token = resolve_cluster_mgmt_token(config)

    with ExitStack() as stack:
        api = stack.enter_context(
            APIClient(
                config.api_url,
                token,
                timeout=config.request_timeout,
                verify=config.verify_ssl,
            )
        )
        cluster_api = api
        if cluster_url.rstrip("/") != api.base_url or cluster_token != token:
            cluster_api = stack.enter_context(
                APIClient(
                    cluster_url,
                    cluster_token,
                    timeout=config.request_timeout,
                    verify=config.verify_ssl,
                )
            )

        run_list(
            options,
            KafkaClient(api),
            ClusterClient(cluster_api, page=config.default_page_number),
            lambda: load_service_context(config.context_file),
            out,
        )
