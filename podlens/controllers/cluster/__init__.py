"""Init file for cluster module."""

from podlens.controllers.cluster.controller import ClusterController
from podlens.controllers.cluster.fetchers import (
    EventFetcher,
    MetricsFetcher,
    PodFetcher,
    RelatedFetcher,
    WorkloadFetcher,
)
from podlens.controllers.cluster.parsers import EventParser, PodParser, WorkloadParser

__all__ = [
    "ClusterController",
    "EventFetcher",
    "EventParser",
    "MetricsFetcher",
    "PodFetcher",
    "PodParser",
    "RelatedFetcher",
    "WorkloadFetcher",
    "WorkloadParser",
]
