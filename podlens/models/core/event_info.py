"""Event models."""

from datetime import datetime

from pydantic import BaseModel


class EventInfo(BaseModel):
    """A Kubernetes event involving the selected pod."""

    type: str = "Normal"
    reason: str = ""
    message: str = ""
    count: int = 1
    age: str = "Unknown"
    last_seen: datetime | None = None
    source: str = ""

    @property
    def is_warning(self) -> bool:
        return self.type == "Warning"
