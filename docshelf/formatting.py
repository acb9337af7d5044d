"""Display helpers for byte counts and dates."""

from datetime import date

_KB = 1024
_MB = 1024 * 1024

# fixed English names; strftime("%b") follows the process locale
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_file_size(size: int) -> str:
    """``512`` → ``"512 B"``, ``1536`` → ``"1.5 KB"``, ``3145728`` → ``"3.0 MB"``."""
    if size < _KB:
        return f"{size} B"
    if size < _MB:
        return f"{size / _KB:.1f} KB"
    return f"{size / _MB:.1f} MB"


def format_date(value: date) -> str:
    """US short form, e.g. ``"Jan 5, 2026"``.  Accepts dates and datetimes."""
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"
