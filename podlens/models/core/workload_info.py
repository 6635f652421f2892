"""Workload models."""

from pydantic import BaseModel, Field

from podlens.models.core.refs import WorkloadRef


class WorkloadInfo(BaseModel):
    """A controller-level resource row for the navigator."""

    name: str
    namespace: str
    kind: str
    ready: int = 0
    desired: int = 0
    age: str = "Unknown"
    status: str = "Unknown"
    labels: dict[str, str] = Field(default_factory=dict)
    selector: dict[str, str] = Field(default_factory=dict)

    @property
    def ref(self) -> WorkloadRef:
        return WorkloadRef(namespace=self.namespace, name=self.name, kind=self.kind)

    @property
    def ready_display(self) -> str:
        if self.kind == "cronjobs":
            return f"{self.ready} active"
        return f"{self.ready}/{self.desired}"
