"""
Fetch Reddit post payloads.

Post permalinks are fetched through Reddit's JSON representation (the
permalink with ``/.json`` appended). ``v.redd.it`` short-links do not accept
that suffix; they answer with a redirect to the canonical permalink, which is
intercepted here and re-normalized instead of being followed to an HTML page.
"""

import logging
from typing import Callable, Optional, TypeVar

import httpx

from bananagrabber.config import Config
from bananagrabber.core.classifier import is_short_link
from bananagrabber.errors import RedirectWithoutLocation, TooManyRedirects, TransportError
from bananagrabber.models.api import ApiResponse, decode_api_response

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_SUFFIX = "/.json"


def make_url_json(url: str) -> str:
    """Point a post URL at its JSON representation; short-links are left alone."""
    if is_short_link(url):
        return url
    return url + JSON_SUFFIX


class RedditFetcher:
    """
    Async HTTP client for Reddit post payloads.

    Owns an ``httpx.AsyncClient`` unless one is passed in. Use as an async
    context manager or call ``close()`` when done.
    """

    def __init__(self, config: Optional[Config] = None, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the fetcher.

        Args:
            config: Application configuration (defaults are used when omitted)
            client: Optional pre-built HTTP client, closed by its owner
        """
        self.config = config or Config()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            timeout=httpx.Timeout(self.config.request_timeout_sec),
            max_redirects=self.config.max_redirects,
        )

    async def __aenter__(self) -> "RedditFetcher":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            await self.client.aclose()

    async def get_info(self, url: str) -> ApiResponse:
        """
        Fetch and decode the permalink payload for a post URL or short-link.

        Raises:
            TransportError: On network failure
            RedirectWithoutLocation: If a redirect has no destination
            TooManyRedirects: If no final answer arrives within ``max_redirects`` requests
            DecodeError: If the final body is not a permalink payload
        """
        return await self.get_url_as(url, decode_api_response)

    async def get_url_as(self, url: str, decode: Callable[[bytes], T]) -> T:
        """
        Fetch ``url`` following redirects by hand, then decode the final body.

        Args:
            url: Post URL or short-link
            decode: Turns the response body into the payload type

        Returns:
            The decoded payload
        """
        next_url = make_url_json(url)

        for attempt in range(1, self.config.max_redirects + 1):
            follow = next_url.endswith(".json")
            logger.debug(f"GET {next_url} (attempt {attempt}/{self.config.max_redirects}, follow_redirects={follow})")

            try:
                response = await self.client.get(next_url, follow_redirects=follow)
            except httpx.TooManyRedirects as e:
                # httpx follows .json redirects itself and gives up at its own max_redirects
                raise TooManyRedirects(count=self.client.max_redirects) from e
            except (httpx.RequestError, httpx.InvalidURL) as e:
                raise TransportError(next_url, str(e) or type(e).__name__) from e

            if 300 <= response.status_code < 400:
                location = response.headers.get("location")
                if not location:
                    raise RedirectWithoutLocation(next_url, response.status_code)

                target = str(response.url.join(location))
                logger.info(f"{next_url} redirected ({response.status_code}) to {target}")
                next_url = make_url_json(target)
                continue

            if response.is_error:
                logger.warning(f"{next_url} answered {response.status_code}")

            return decode(response.content)

        raise TooManyRedirects(count=self.config.max_redirects)
