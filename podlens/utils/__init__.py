"""Utility helpers for PodLens."""
