"""Identity tuples used to correlate async results with the selection."""

from pydantic import BaseModel, ConfigDict


class WorkloadRef(BaseModel):
    """Identity of a workload: namespace, name and kind."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str
    kind: str

    def __str__(self) -> str:
        return f"{self.kind}/{self.namespace}/{self.name}"


class PodRef(BaseModel):
    """Identity of a pod."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"
