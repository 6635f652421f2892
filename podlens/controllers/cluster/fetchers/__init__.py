"""Fetchers wrapping kubectl queries for the cluster controller."""

from podlens.controllers.cluster.fetchers.event_fetcher import EventFetcher
from podlens.controllers.cluster.fetchers.metrics_fetcher import MetricsFetcher
from podlens.controllers.cluster.fetchers.pod_fetcher import PodFetcher
from podlens.controllers.cluster.fetchers.related_fetcher import RelatedFetcher
from podlens.controllers.cluster.fetchers.workload_fetcher import WorkloadFetcher

__all__ = [
    "EventFetcher",
    "MetricsFetcher",
    "PodFetcher",
    "RelatedFetcher",
    "WorkloadFetcher",
]
