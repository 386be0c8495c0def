"""
Core components: classification, fetching and cross-post resolution.
"""

from .classifier import is_short_link, scan_for_media, strip_query_params
from .fetcher import RedditFetcher, make_url_json
from .resolver import MediaResolver, fetch_url_through_cross_posts, resolve
from .fixtures import FixtureReport, check_saved_responses

__all__ = [
    "is_short_link",
    "scan_for_media",
    "strip_query_params",
    "RedditFetcher",
    "make_url_json",
    "MediaResolver",
    "fetch_url_through_cross_posts",
    "resolve",
    "FixtureReport",
    "check_saved_responses",
]
