"""Search predicates for the management APIs.

Terms are interpolated without escaping. Search terms reach this module
only after ``validate_search_input``, which admits letters, digits,
``-``, ``_`` and ``%``, so no quote can end up in a predicate. Cluster
IDs come from the Kafka API response.
"""

from collections.abc import Iterable

# Kafka fields matched by a free-text search
SEARCH_FIELDS = ("name", "owner", "cloud_provider", "region", "status")


def build_query(search: str) -> str | None:
    """Build the Kafka list search predicate for a free-text term.

    Returns:
        ``name like %term% or owner like %term% ...`` over SEARCH_FIELDS,
        or None when the term is empty.
    """
    if not search:
        return None
    return " or ".join(f"{field} like %{search}%" for field in SEARCH_FIELDS)


def build_cluster_id_query(cluster_ids: Iterable[str]) -> str:
    """Build ``id = 'a' or id = 'b' ...`` for a set of cluster IDs."""
    return " or ".join(f"id = '{cluster_id}'" for cluster_id in cluster_ids)
