"""
Services package initialization.
Centralizes service imports.
"""

from catalog_scraper.services.fetcher import page_fetcher
from catalog_scraper.services.scraper import scrape_service

__all__ = [
    'page_fetcher',
    'scrape_service'
]
