"""Text helpers shared by the builder and the CLI."""

from __future__ import annotations

from datetime import datetime, timezone


def isoformat_utc(timestamp: float) -> str:
    """Format a POSIX timestamp as UTC ISO-8601 with millisecond precision."""
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> str:
    return isoformat_utc(datetime.now(tz=timezone.utc).timestamp())


def short_hash(value: str, length: int = 16) -> str:
    return f"{value[:length]}..." if len(value) > length else value
