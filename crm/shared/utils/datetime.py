"""UTC timestamps in the format browsers produce with Date.toISOString()."""

from datetime import UTC, datetime


def utc_isoformat(dt: datetime | None = None) -> str:
    """'YYYY-MM-DDTHH:MM:SS.mmmZ' for dt (default now); naive values are taken as UTC."""
    if dt is None:
        dt = datetime.now(UTC)
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
