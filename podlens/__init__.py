"""PodLens - terminal dashboard for debugging Kubernetes workloads and pods."""

__version__ = "0.1.0"
