"""Health-check helper used by the API."""

from datetime import datetime, timezone


def get_health_status() -> dict:
    """Return a static status with the current UTC timestamp."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc)}
