"""Event parser for cluster controller - parses event objects."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from podlens.models.core import EventInfo
from podlens.utils.resource_parser import format_age, parse_timestamp

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class EventParser:
    """Parses event data into EventInfo rows, newest first."""

    @staticmethod
    def _last_seen(event: dict[str, Any]) -> datetime | None:
        return parse_timestamp(
            event.get("lastTimestamp")
            or (event.get("series") or {}).get("lastObservedTime")
            or event.get("eventTime")
            or event.get("firstTimestamp")
            or event.get("metadata", {}).get("creationTimestamp")
        )

    def parse_event(self, event: dict[str, Any]) -> EventInfo:
        last_seen = self._last_seen(event)
        source = event.get("source") or {}
        return EventInfo(
            type=event.get("type") or "Normal",
            reason=event.get("reason") or "",
            message=(event.get("message") or "").strip(),
            count=int(event.get("count") or 1),
            age=format_age(last_seen),
            last_seen=last_seen,
            source=source.get("component") or event.get("reportingComponent") or "",
        )

    def parse_events(self, data: dict[str, Any]) -> list[EventInfo]:
        events = [self.parse_event(item) for item in data.get("items", [])]
        events.sort(key=lambda event: event.last_seen or _EPOCH, reverse=True)
        return events
