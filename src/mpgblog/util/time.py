"""
Time helpers for page stamps and sitemap dates.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(timezone.utc)


def format_month_year(value: date) -> str:
    """Render a date as "June 2025" for "Last Updated" stamps."""
    return value.strftime("%B %Y")
