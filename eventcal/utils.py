# eventcal/utils.py - small date helpers
from datetime import date, datetime, timedelta

DATE_FORMATS = ('%Y-%m-%d %H:%M:%S', '%Y-%m-%dT%H:%M:%S', '%Y-%m-%d')


def parse_yyyy_mm_dd(text: str):
    try:
        return datetime.strptime(text.strip(), '%Y-%m-%d').date()
    except (AttributeError, ValueError):
        return None


def parse_timestamp(text: str):
    """Parse 'YYYY-MM-DD', 'YYYY-MM-DD HH:MM:SS' or the ISO 'T' form, else None."""
    if not isinstance(text, str):
        return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text.strip(), fmt)
        except ValueError:
            continue
    return None


def shift_month(year: int, month: int, delta: int):
    """Return (year, month) moved by delta months."""
    if delta < 0:
        d = date(year, month, 1)
        for _ in range(-delta):
            d = (d - timedelta(days=1)).replace(day=1)
    else:
        d = date(year, month, 1)
        for _ in range(delta):
            d = (d.replace(day=28) + timedelta(days=8)).replace(day=1)
    return d.year, d.month
