"""
Shared utility helpers for filesystem, strings, HTTP errors and time.
"""

from .filesystem import file_lock, write_text_file
from .http import format_request_exception
from .text import is_external_link, slugify
from .time import format_month_year, utc_now

__all__ = [
    "file_lock",
    "write_text_file",
    "format_request_exception",
    "is_external_link",
    "slugify",
    "format_month_year",
    "utc_now",
]
