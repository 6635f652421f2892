"""Parsers turning kubectl JSON output into models."""

from podlens.controllers.cluster.parsers.event_parser import EventParser
from podlens.controllers.cluster.parsers.pod_parser import PodParser, is_error_line
from podlens.controllers.cluster.parsers.workload_parser import WorkloadParser

__all__ = ["EventParser", "PodParser", "WorkloadParser", "is_error_line"]
