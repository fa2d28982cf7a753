"""Pydantic models for Kafka instances."""

from pydantic import BaseModel, ConfigDict, Field


class KafkaRequest(BaseModel):
    """A Kafka instance as returned by the Kafka management API.

    Only the fields the CLI reads are declared; everything else in the
    response (bootstrap host, timestamps, sizing, ...) is kept as extra
    fields so structured output reproduces the API object.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(..., description="Kafka instance ID")
    name: str = Field(..., description="Kafka instance name")
    owner: str = Field("", description="Username of the owner")
    status: str = Field("", description="Lifecycle status, e.g. provisioning or ready")
    cloud_provider: str = Field("", description="Cloud provider, e.g. aws")
    region: str = Field("", description="Cloud region, e.g. us-east-1")
    cluster_id: str | None = Field(
        None,
        description="ID of the dedicated OpenShift cluster; None when hosted by the service",
    )


class KafkaRequestList(BaseModel):
    """One page of Kafka instances."""

    model_config = ConfigDict(extra="allow", frozen=True)

    kind: str = Field("KafkaRequestList")
    page: int = Field(1, ge=1)
    size: int = Field(0, ge=0, description="Number of items in this page")
    total: int = Field(0, ge=0, description="Total number of matching instances")
    items: list[KafkaRequest] = Field(default_factory=list)


class KafkaRow(BaseModel):
    """Display-ready row of the Kafka list table.

    Field titles are the table headers, in column order.
    """

    id: str = Field(..., title="ID")
    name: str = Field(..., title="Name")
    owner: str = Field(..., title="Owner")
    status: str = Field(..., title="Status")
    cloud_provider: str = Field(..., title="Cloud Provider")
    region: str = Field(..., title="Region")
    openshift_cluster: str = Field(..., title="Openshift Cluster")
