"""Block timestamp parsing utilities."""

from datetime import datetime, UTC
from dateutil import parser as date_parser

from payerindex.domain.events import MAX_BLOCK_TIMESTAMP


def parse_timestamp(timestamp_str: str) -> int:
    """Parse a timestamp string into seconds since the epoch.

    Supports:
    - Epoch seconds: "1700000000"
    - "now"
    - Anything python-dateutil understands: "2024-01-15", "2024-01-15T12:30:00Z",
      "January 15, 2024 12:30". Naive values are taken as UTC.

    Args:
        timestamp_str: Timestamp string

    Returns:
        Integer seconds since the epoch

    Raises:
        ValueError: If timestamp string cannot be parsed
    """
    timestamp_str = timestamp_str.strip()
    if not timestamp_str:
        raise ValueError("Empty timestamp string")

    if timestamp_str.isdigit():
        timestamp = int(timestamp_str)
    elif timestamp_str.lower() == "now":
        return int(datetime.now(UTC).timestamp())
    else:
        try:
            parsed = date_parser.parse(timestamp_str)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Could not parse timestamp '{timestamp_str}': {e}") from e
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        timestamp = int(parsed.timestamp())

    if not 0 <= timestamp <= MAX_BLOCK_TIMESTAMP:
        raise ValueError(f"Timestamp '{timestamp_str}' is out of range")
    return timestamp
