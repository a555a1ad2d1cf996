"""
Catalog Scraper - product page extraction and normalization for the catalog.
"""

__version__ = "1.0.0"
__author__ = "Engineering Team"

# Export main components for easy import
from catalog_scraper.config import config
from catalog_scraper.logger import logger
from catalog_scraper.errors import (
    ConfigError,
    InvalidProductURLError,
    InvalidResolutionError,
    TransportError,
    UpstreamUnreachableError,
    UpstreamBlockedError,
    UpstreamRateLimitedError,
    UpstreamResponseError,
    RetryExhaustedError
)

__all__ = [
    'config',
    'logger',
    'ConfigError',
    'InvalidProductURLError',
    'InvalidResolutionError',
    'TransportError',
    'UpstreamUnreachableError',
    'UpstreamBlockedError',
    'UpstreamRateLimitedError',
    'UpstreamResponseError',
    'RetryExhaustedError'
]
