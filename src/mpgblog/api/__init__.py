"""
External API clients used when publishing the blog.
"""

from .indexnow import INDEXNOW_ENDPOINT, IndexNowError, IndexNowResult, filter_urls_for_host, submit_urls

__all__ = ["INDEXNOW_ENDPOINT", "IndexNowError", "IndexNowResult", "filter_urls_for_host", "submit_urls"]
