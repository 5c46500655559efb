"""Timezone-aware date/time helpers for the guest registration backend."""

from datetime import datetime
from zoneinfo import ZoneInfo

from flask import current_app


def get_timezone() -> ZoneInfo:
    """Get the configured timezone."""
    tz_name = current_app.config.get('TIMEZONE', 'Asia/Kolkata')
    return ZoneInfo(tz_name)


def get_now() -> datetime:
    """Get current datetime in the configured timezone."""
    return datetime.now(get_timezone())


def get_now_iso() -> str:
    """Get current datetime as an ISO-8601 string (seconds precision)."""
    return get_now().isoformat(timespec='seconds')
