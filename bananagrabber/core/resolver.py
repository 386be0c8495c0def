"""
Resolve a post reference to a direct media URL.

A post may be a repost whose link is a ``v.redd.it`` short-link to another
post. Each such hop is fetched and classified again, up to
``cross_post_retries`` hops. Redirects inside one fetch are bounded
separately by the fetcher.
"""

import logging
from typing import Optional

from bananagrabber.config import Config
from bananagrabber.core.classifier import scan_for_media
from bananagrabber.core.fetcher import RedditFetcher
from bananagrabber.errors import CrossPostLimitExceeded
from bananagrabber.models.api import get_post_from_response
from bananagrabber.models.media import CrossPost, MediaSource

logger = logging.getLogger(__name__)


async def fetch_url_through_cross_posts(
    url: str,
    fetcher: RedditFetcher,
    max_hops: Optional[int] = None,
) -> Optional[str]:
    """
    Follow cross-posts from ``url`` until a post with media (or without any) is found.

    Args:
        url: Post URL or short-link
        fetcher: Fetcher used for every hop
        max_hops: Hop limit, defaults to the fetcher's ``cross_post_retries``

    Returns:
        The media URL, or None when the post is a text post

    Raises:
        CrossPostLimitExceeded: If every hop within the limit was another cross-post
        ResolutionError: Any fetch, decode or shape failure of a hop
    """
    hops = max_hops if max_hops is not None else fetcher.config.cross_post_retries
    current = url

    for hop in range(hops):
        resp = await fetcher.get_info(current)
        post = get_post_from_response(resp)
        logger.debug(f"hop {hop}: r/{post.subreddit} {post.title!r} ({post.domain})")

        source = scan_for_media(post)
        if source is None:
            logger.info(f"{current} has no media")
            return None
        if isinstance(source, MediaSource):
            return source.media.url
        if isinstance(source, CrossPost):
            logger.info(f"{current} is a cross-post of {source.url}")
            current = source.url

    raise CrossPostLimitExceeded(hops=hops)


class MediaResolver:
    """Entry point for callers: owns one fetcher and resolves references with it."""

    def __init__(self, config: Optional[Config] = None, fetcher: Optional[RedditFetcher] = None):
        """
        Args:
            config: Application configuration, used to build the fetcher
            fetcher: Pre-built fetcher; both loop bounds then come from its config
        """
        self.config = config or (fetcher.config if fetcher is not None else Config())
        self.fetcher = fetcher or RedditFetcher(self.config)

    async def __aenter__(self) -> "MediaResolver":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.fetcher.close()

    async def resolve(self, reference: str) -> Optional[str]:
        """Resolve a post URL or short-link; see ``fetch_url_through_cross_posts``."""
        reference = reference.strip()
        logger.info(f"Resolving {reference}")
        return await fetch_url_through_cross_posts(reference, self.fetcher)


async def resolve(reference: str, config: Optional[Config] = None) -> Optional[str]:
    """
    Resolve a single reference with a short-lived resolver.

    Args:
        reference: Reddit post URL or ``v.redd.it`` short-link
        config: Explicit configuration; defaults apply when omitted

    Returns:
        The direct media URL, or None if the post has no media

    Raises:
        ResolutionError: On any failure; nothing partial is returned
    """
    async with MediaResolver(config) as resolver:
        return await resolver.resolve(reference)
