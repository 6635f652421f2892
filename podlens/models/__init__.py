"""Data models for PodLens."""
