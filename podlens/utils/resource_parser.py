"""Resource parsing and formatting utilities.

Provides functions to parse Kubernetes quantity strings and to format
ages, CPU and memory values for display:
- CPU: parsed to cores (float), formatted as millicores or cores
- Memory: parsed to bytes, formatted with binary suffixes
- Timestamps: RFC 3339 strings to aware datetimes, ages as s/m/h/d
"""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime, timezone

# Suffix multipliers for memory_str_to_bytes(), longest suffixes first.
_MEMORY_BYTES_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("k", 1000),
    ("K", 1000),
    ("M", 1000**2),
    ("G", 1000**3),
    ("T", 1000**4),
)

_KIB = 1024
_MIB = _KIB * 1024
_GIB = _MIB * 1024


def parse_cpu(cpu_str: str) -> float:
    """Parse CPU string to cores (float).

    Handles various CPU resource formats:
    - Nanocores: "500000000n" -> 0.5 cores
    - Microcores: "500000u" -> 0.5 cores
    - Millicores: "100m" -> 0.1 cores
    - Decimal: "1.5" -> 1.5 cores

    Returns 0.0 on parse error or empty string.
    """
    if not cpu_str:
        return 0.0

    cpu_str = str(cpu_str).strip()
    divisor = 1.0
    if cpu_str.endswith("n"):
        cpu_str, divisor = cpu_str[:-1], 1_000_000_000
    elif cpu_str.endswith("u"):
        cpu_str, divisor = cpu_str[:-1], 1_000_000
    elif cpu_str.endswith("m"):
        cpu_str, divisor = cpu_str[:-1], 1000

    try:
        return float(cpu_str) / divisor
    except ValueError:
        return 0.0


def memory_str_to_bytes(memory_str: str) -> float:
    """Convert memory string ("512Mi", "1Gi", "128M", "1048576") to bytes.

    Returns 0.0 on parse error or empty string.
    """
    if not memory_str:
        return 0.0

    memory_str = str(memory_str).strip()

    for suffix, mult in _MEMORY_BYTES_MULTIPLIERS:
        if memory_str.endswith(suffix):
            try:
                return float(memory_str[: -len(suffix)]) * mult
            except ValueError:
                return 0.0

    try:
        return float(memory_str)
    except ValueError:
        return 0.0


def parse_timestamp(value: object) -> datetime | None:
    """Parse a Kubernetes RFC 3339 timestamp into an aware datetime."""
    if not isinstance(value, str) or not value:
        return None
    text = value.strip().replace("Z", "+00:00")
    # Python's fromisoformat before 3.11 rejects more than six fractional digits.
    if "." in text:
        head, _, tail = text.partition(".")
        zone = tail.lstrip("0123456789")
        digits = tail[: len(tail) - len(zone)]
        text = f"{head}.{digits[:6]}{zone}"
    with suppress(ValueError):
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


def format_age(timestamp: datetime | None, now: datetime | None = None) -> str:
    """Render the time since ``timestamp`` as ``Ns``, ``Nm``, ``Nh`` or ``Nd``."""
    if timestamp is None:
        return "Unknown"
    current = now or datetime.now(timezone.utc)
    seconds = max(0, int((current - timestamp).total_seconds()))
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m"
    if seconds < 86400:
        return f"{seconds // 3600}h"
    return f"{seconds // 86400}d"


def format_cpu(millicores: float) -> str:
    """Millicores below one core as ``Nm``, otherwise cores with two decimals."""
    if millicores < 1000:
        return f"{int(millicores)}m"
    return f"{millicores / 1000:.2f}"


def format_memory(num_bytes: float) -> str:
    """Bytes with the largest binary suffix that keeps the value >= 1."""
    if num_bytes >= _GIB:
        return f"{num_bytes / _GIB:.1f}Gi"
    if num_bytes >= _MIB:
        return f"{num_bytes / _MIB:.1f}Mi"
    if num_bytes >= _KIB:
        return f"{num_bytes / _KIB:.1f}Ki"
    return f"{int(num_bytes)}B"
