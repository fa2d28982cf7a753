"""Pydantic models for OpenShift clusters."""

from pydantic import BaseModel, ConfigDict, Field


class Cluster(BaseModel):
    """An OpenShift cluster from the cluster management API.

    Only the identity fields are declared; the rest of the cluster
    object is kept as extra fields.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(..., description="Cluster ID")
    name: str = Field(..., description="Cluster display name")

    @property
    def label(self) -> str:
        """Name and ID as shown in the Kafka list table."""
        return f"{self.name} ({self.id})"


class ClusterList(BaseModel):
    """One page of OpenShift clusters."""

    model_config = ConfigDict(extra="allow", frozen=True)

    kind: str = Field("ClusterList")
    page: int = Field(1, ge=1)
    size: int = Field(0, ge=0)
    total: int = Field(0, ge=0)
    items: list[Cluster] = Field(default_factory=list)
