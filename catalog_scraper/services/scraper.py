"""
Scrape orchestration: validate URL, fetch page, run the pure pipeline.
"""
from typing import List, Optional
from urllib.parse import urlparse

from catalog_scraper.catalog import CATEGORIES
from catalog_scraper.config import config
from catalog_scraper.errors import InvalidProductURLError, TransportError
from catalog_scraper.logger import logger
from catalog_scraper.models.product import CatalogDraft, NormalizedProduct
from catalog_scraper.normalizers.images import validate_resolution
from catalog_scraper.pipeline import build_draft, build_product
from catalog_scraper.sentry import capture_transport_error
from catalog_scraper.services.fetcher import PageFetcher, page_fetcher


def validate_product_url(url: Optional[str], allowed_hosts: List[str]) -> str:
    """Return the stripped URL or raise InvalidProductURLError."""
    url = url.strip() if isinstance(url, str) else ""
    if not url:
        raise InvalidProductURLError("URL is required")

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise InvalidProductURLError("URL must be an absolute http(s) address")

    host = parsed.hostname.lower()
    if not any(host == allowed or host.endswith("." + allowed) for allowed in allowed_hosts):
        supported = ", ".join(allowed_hosts)
        raise InvalidProductURLError(f"Only product URLs from {supported} are supported")

    return url


class ScrapeService:
    """One stateless scrape per call; only the HTTP session is shared."""

    def __init__(self, fetcher: Optional[PageFetcher] = None):
        self.fetcher = fetcher or page_fetcher

    async def _fetch(self, url: str) -> str:
        url = validate_product_url(url, config.ALLOWED_HOSTS)
        try:
            return await self.fetcher.fetch_html(url)
        except TransportError as e:
            logger.error(f"Scraping error for {url}: {e}")
            capture_transport_error(url, e)
            raise

    async def scrape_product(self, url: str, resolution: Optional[str] = None) -> NormalizedProduct:
        resolution = validate_resolution(resolution or config.IMAGE_RESOLUTION)
        html = await self._fetch(url)
        product = build_product(html, resolution)
        logger.info(
            "Scraping completed",
            extra={"url": url, "product": product.name, "images": len(product.images)}
        )
        return product

    async def scrape_catalog_draft(self, url: str, category: str,
                                   resolution: Optional[str] = None) -> CatalogDraft:
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category {category!r}")
        resolution = validate_resolution(resolution or config.IMAGE_RESOLUTION)
        html = await self._fetch(url)
        return build_draft(html, category, resolution)


scrape_service = ScrapeService()
