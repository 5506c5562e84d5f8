"""Timezone-aware date/time helpers for the coffee shop application."""

from datetime import datetime
from zoneinfo import ZoneInfo

from flask import current_app

# Storage format for order timestamps
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_timezone() -> ZoneInfo:
    """Get the configured timezone."""
    tz_name = current_app.config.get('TIMEZONE', 'UTC')
    return ZoneInfo(tz_name)


def get_now() -> datetime:
    """Get current datetime in the configured timezone."""
    return datetime.now(get_timezone())


def to_timestamp(value) -> str:
    """
    Normalize a datetime (or timestamp string) to the storage format.

    Aware datetimes are converted to the configured timezone first.
    """
    if value is None:
        value = get_now()

    if isinstance(value, str):
        value = datetime.fromisoformat(value)

    if value.tzinfo is not None:
        value = value.astimezone(get_timezone())

    return value.strftime(TIMESTAMP_FORMAT)
