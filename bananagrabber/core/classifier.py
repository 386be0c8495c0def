"""Decide what kind of media a Reddit post carries."""

import logging
import re
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from bananagrabber.models.api import PostInfo
from bananagrabber.models.media import CrossPost, Media, MediaSource, PostMediaSource

logger = logging.getLogger(__name__)

SELF_POST_DOMAIN_PREFIX = "self."

# Whole-URL match; any id length.
SHORT_LINK_PATTERN = re.compile(r"https://v\.redd\.it/[a-zA-Z0-9]+")


def is_short_link(url: str) -> bool:
    """Return True for a bare ``https://v.redd.it/<id>`` link."""
    return SHORT_LINK_PATTERN.fullmatch(url) is not None


def strip_query_params(url: str) -> str:
    """
    Remove the query string from a URL.

    Reddit video fallback URLs carry a signed, expiring ``source`` tag that
    says nothing about the asset itself.
    """
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", parts.fragment))


def scan_for_media(post: PostInfo) -> Optional[PostMediaSource]:
    """
    Classify a post.

    Args:
        post: Decoded post payload

    Returns:
        ``MediaSource`` when the post's media is known, ``CrossPost`` when the
        post links to a short-link that must be resolved again, or None for
        text posts.
    """
    if post.media is not None and post.media.reddit_video is not None:
        url = strip_query_params(post.media.reddit_video.fallback_url)
        logger.debug(f"r/{post.subreddit}: reddit video {url}")
        return MediaSource(media=Media(url=url))

    if post.domain.startswith(SELF_POST_DOMAIN_PREFIX):
        logger.debug(f"r/{post.subreddit}: self post on {post.domain}")
        return None

    if is_short_link(post.url):
        logger.debug(f"r/{post.subreddit}: cross-post to {post.url}")
        return CrossPost(url=post.url)

    return MediaSource(media=Media(url=post.url))
