"""Timestamp helpers shared by the fixture loader and the API envelopes."""

from datetime import datetime, timezone


def iso_now() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix.

    Examples:
        >>> iso_now()  # doctest: +SKIP
        '2025-02-20T09:15:02.417Z'
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
