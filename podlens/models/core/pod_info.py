"""Pod, container and log line models."""

from datetime import datetime

from pydantic import BaseModel, Field

from podlens.models.core.refs import PodRef


class ContainerInfo(BaseModel):
    """Container spec and status merged into one row."""

    name: str
    image: str = ""
    ready: bool = False
    restarts: int = 0
    state: str = "Unknown"
    reason: str = ""
    last_termination_reason: str = ""
    requests: dict[str, str] = Field(default_factory=dict)
    limits: dict[str, str] = Field(default_factory=dict)
    ports: list[int] = Field(default_factory=list)


class PodCondition(BaseModel):
    """One entry of ``status.conditions``."""

    type: str
    status: str
    reason: str = ""
    message: str = ""


class PodInfo(BaseModel):
    """A pod as listed under its workload."""

    name: str
    namespace: str
    node: str = ""
    ip: str = ""
    status: str = "Unknown"
    ready: str = "0/0"
    restarts: int = 0
    age: str = "Unknown"
    labels: dict[str, str] = Field(default_factory=dict)
    containers: list[ContainerInfo] = Field(default_factory=list)
    conditions: list[PodCondition] = Field(default_factory=list)
    owner_kind: str = ""
    owner_name: str = ""

    @property
    def ref(self) -> PodRef:
        return PodRef(namespace=self.namespace, name=self.name)

    @property
    def container_names(self) -> list[str]:
        return [container.name for container in self.containers]


class LogLine(BaseModel):
    """A single log line, optionally timestamped by the API server."""

    timestamp: datetime | None = None
    container: str = ""
    content: str = ""
    is_error: bool = False
