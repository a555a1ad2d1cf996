"""
HTTP transport for product pages.
Includes politeness delay, timeout, retry and error translation.
All network logic is isolated here; the extraction core never does I/O.
"""
import asyncio
from typing import Dict, Optional

import aiohttp

from catalog_scraper.config import config
from catalog_scraper.errors import (
    TransportError,
    UpstreamBlockedError,
    UpstreamRateLimitedError,
    UpstreamResponseError,
    UpstreamUnreachableError,
)
from catalog_scraper.logger import logger
from catalog_scraper.utils.retry import async_retry

MAX_REDIRECTS = 5


def browser_headers(user_agent: str) -> Dict[str, str]:
    """Headers that make the request look like a regular browser visit."""
    return {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
        "DNT": "1",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
        "Cache-Control": "max-age=0",
        "Referer": "https://www.flipkart.com/"
    }


class PageFetcher:
    """
    Fetches raw product page HTML.
    Returns HTML or raises a TransportError subclass, nothing in between.
    """

    def __init__(self):
        self.session: Optional[aiohttp.ClientSession] = None
        self.delay = config.FETCH_DELAY
        self._session_lock: Optional[asyncio.Lock] = None

    @property
    def is_available(self) -> bool:
        return self.session is not None and not self.session.closed

    async def initialize(self):
        """Open the HTTP session (called at startup)."""
        self.session = aiohttp.ClientSession(
            headers=browser_headers(config.USER_AGENT),
            timeout=aiohttp.ClientTimeout(total=config.REQUEST_TIMEOUT)
        )
        logger.info("Page fetcher initialized")

    async def close(self):
        """Close HTTP session."""
        if self.session:
            await self.session.close()
            self.session = None

    async def _ensure_session(self):
        """Open the session once, even when first calls arrive together."""
        if self._session_lock is None:
            self._session_lock = asyncio.Lock()
        async with self._session_lock:
            if self.session is None:
                await self.initialize()

    async def fetch_html(self, url: str) -> str:
        """
        Fetch one product page.

        Raises:
            UpstreamBlockedError: store answered 403
            UpstreamRateLimitedError: store answered 429
            UpstreamResponseError: any other non-2xx answer
            RetryExhaustedError: connection kept failing
        """
        await self._ensure_session()

        if self.delay > 0:
            await asyncio.sleep(self.delay)

        logger.info(f"Fetching product page: {url}")
        return await self._get(url)

    @async_retry(exceptions=(UpstreamUnreachableError,))
    async def _get(self, url: str) -> str:
        try:
            async with self.session.get(url, max_redirects=MAX_REDIRECTS) as response:
                if response.status == 403:
                    raise UpstreamBlockedError("Access denied by the store", url=url)
                if response.status == 429:
                    raise UpstreamRateLimitedError("Rate limited by the store", url=url)
                if response.status >= 400:
                    raise UpstreamResponseError(
                        f"Store returned HTTP {response.status}",
                        url=url,
                        upstream_status=response.status
                    )
                return await response.text()

        except TransportError:
            raise
        except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as e:
            raise UpstreamUnreachableError(f"Unable to reach {url}: {e}", url=url) from e
        except aiohttp.ClientError as e:
            raise UpstreamResponseError(f"Request to {url} failed: {e}", url=url) from e


# Global fetcher instance
page_fetcher = PageFetcher()
