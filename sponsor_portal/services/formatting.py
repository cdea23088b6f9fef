"""
Display helpers used as template filters.
"""

from datetime import datetime

STATUS_COLORS = {
    'Pending Review': 'warning',
    'Approved': 'success',
    'Rejected': 'danger',
    'Active': 'success',
    'Paused': 'warning',
    'Cancelled': 'danger',
}


def _clock(value):
    hour = value.hour % 12 or 12
    suffix = 'AM' if value.hour < 12 else 'PM'
    return f'{hour}:{value.minute:02d} {suffix}'


def format_date(value, style='long'):
    """Format a date or datetime for display.

    Styles:
        long: June 15, 2024
        short: Jun 15, 2024
        datetime: Jun 15, 2024, 3:05 PM
        short_datetime: Jun 15, 3:05 PM
    """
    if value is None:
        return ''
    if isinstance(value, str):
        value = datetime.fromisoformat(value)

    if style == 'long':
        return f'{value:%B} {value.day}, {value.year}'
    if style == 'short':
        return f'{value:%b} {value.day}, {value.year}'

    if not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())
    if style == 'datetime':
        return f'{value:%b} {value.day}, {value.year}, {_clock(value)}'
    if style == 'short_datetime':
        return f'{value:%b} {value.day}, {_clock(value)}'
    raise ValueError(f'Unknown date style: {style}')


def status_badge(status):
    """Bootstrap color for a sponsorship or message status."""
    return STATUS_COLORS.get(status, 'secondary')
