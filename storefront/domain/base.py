from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form every timestamp is stored in"""
    return datetime.now(UTC).replace(tzinfo=None)
