"""Resources related to a pod: services, ingresses, config maps and secrets."""

from pydantic import BaseModel, Field


class ServiceInfo(BaseModel):
    """Service whose selector matches the pod."""

    name: str
    type: str = "ClusterIP"
    cluster_ip: str = ""
    ports: list[str] = Field(default_factory=list)
    endpoints: int = 0


class IngressInfo(BaseModel):
    """Ingress routing to one of the related services."""

    name: str
    hosts: list[str] = Field(default_factory=list)
    paths: list[str] = Field(default_factory=list)


class RelatedResources(BaseModel):
    """Everything the manifest panel lists under "Related"."""

    services: list[ServiceInfo] = Field(default_factory=list)
    ingresses: list[IngressInfo] = Field(default_factory=list)
    config_maps: list[str] = Field(default_factory=list)
    secrets: list[str] = Field(default_factory=list)
    owner: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.services or self.ingresses or self.config_maps or self.secrets)
