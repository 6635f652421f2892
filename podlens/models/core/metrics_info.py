"""Metrics-server usage models."""

from pydantic import BaseModel, Field


class ContainerMetrics(BaseModel):
    """Point-in-time usage of one container, already formatted."""

    name: str
    cpu: str = "0m"
    memory: str = "0B"
    cpu_millicores: float = 0.0
    memory_bytes: float = 0.0


class PodMetrics(BaseModel):
    """Usage of every container in a pod."""

    name: str
    namespace: str
    containers: list[ContainerMetrics] = Field(default_factory=list)

    def for_container(self, name: str) -> ContainerMetrics | None:
        for container in self.containers:
            if container.name == name:
                return container
        return None
