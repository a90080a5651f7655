"""Health check payload."""

from typing import Literal

from pydantic import BaseModel, Field

ProbeState = Literal["healthy", "unhealthy", "unknown"]
OverallState = Literal["healthy", "degraded", "unhealthy"]


class ServiceStatus(BaseModel):
    """Result of probing one collaborator (config, storage, model)."""

    name: str
    status: ProbeState
    message: str = ""


class HealthStatus(BaseModel):
    status: OverallState
    version: str
    # Number of stored items, None when the store could not be read.
    item_count: int | None = Field(default=None, serialization_alias="itemCount")
    services: dict[str, ServiceStatus] = Field(default_factory=dict)
