"""
Miscellaneous utility helper functions.
Provides common functionality used across the application.
"""

from datetime import datetime, date
import os


def generate_grc_no(count: int) -> str:
    """
    Generate the Guest Registration Code for the next booking.

    Args:
        count: Number of bookings already stored

    Returns:
        Code like 'GRC-005' (at least 3 digits, never truncated)
    """
    return f'GRC-{count + 1:03d}'


def parse_datetime_value(value) -> datetime | None:
    """
    Parse a stored date/datetime value.

    Accepts datetime/date objects and ISO-8601 strings, including a
    trailing 'Z' and the 'YYYY-MM-DD HH:MM:SS' form written by SQLite.

    Args:
        value: Value to parse

    Returns:
        datetime or None if the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_datetime(value, format_str: str = '%d/%m/%Y %H:%M:%S') -> str:
    """
    Format a date/datetime value for display.

    Args:
        value: datetime, date or ISO string
        format_str: Output format (default: DD/MM/YYYY HH:MM:SS)

    Returns:
        Formatted string, '' for empty values, or the original if unparsable
    """
    if value is None or value == '':
        return ''

    parsed = parse_datetime_value(value)
    if parsed is None:
        return str(value)
    return parsed.strftime(format_str)


def format_date(value, format_str: str = '%d/%m/%Y') -> str:
    """
    Format a date value for display.

    Args:
        value: date, datetime or ISO string
        format_str: Output format (default: DD/MM/YYYY)

    Returns:
        Formatted date string, '' for empty values, or the original if unparsable
    """
    return format_datetime(value, format_str)


def get_file_extension(filename: str) -> str:
    """
    Get file extension from filename.

    Args:
        filename: Filename

    Returns:
        Extension without dot (lowercase)
    """
    if not filename:
        return ''

    return os.path.splitext(filename)[1][1:].lower()


def allowed_file(filename: str, allowed_extensions: set) -> bool:
    """
    Check if file extension is allowed.

    Args:
        filename: Filename to check
        allowed_extensions: Set of allowed extensions

    Returns:
        True if extension is allowed
    """
    return get_file_extension(filename) in allowed_extensions
