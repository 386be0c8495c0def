"""
Models package: Reddit API payloads and resolved media values.
"""

from .api import (
    ApiResponse,
    PostInfo,
    RedditMedia,
    RedditVideo,
    decode_api_response,
    get_post_from_response,
)
from .media import CrossPost, Media, MediaSource, PostMediaSource

__all__ = [
    "ApiResponse",
    "PostInfo",
    "RedditMedia",
    "RedditVideo",
    "decode_api_response",
    "get_post_from_response",
    "CrossPost",
    "Media",
    "MediaSource",
    "PostMediaSource",
]
