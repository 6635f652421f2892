"""Core cluster data models."""

from podlens.models.core.diagnostic_info import DebugHelper
from podlens.models.core.event_info import EventInfo
from podlens.models.core.metrics_info import ContainerMetrics, PodMetrics
from podlens.models.core.pod_info import ContainerInfo, LogLine, PodCondition, PodInfo
from podlens.models.core.refs import PodRef, WorkloadRef
from podlens.models.core.related_info import IngressInfo, RelatedResources, ServiceInfo
from podlens.models.core.workload_info import WorkloadInfo

__all__ = [
    "ContainerInfo",
    "ContainerMetrics",
    "DebugHelper",
    "EventInfo",
    "IngressInfo",
    "LogLine",
    "PodCondition",
    "PodInfo",
    "PodMetrics",
    "PodRef",
    "RelatedResources",
    "ServiceInfo",
    "WorkloadInfo",
    "WorkloadRef",
]
