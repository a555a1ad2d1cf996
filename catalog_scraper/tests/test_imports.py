"""
Test that all modules import correctly.
Catches circular imports early.
"""
import importlib

import pytest

MODULES = [
    "catalog_scraper",
    "catalog_scraper.config",
    "catalog_scraper.errors",
    "catalog_scraper.logger",
    "catalog_scraper.sentry",
    "catalog_scraper.models.product",
    "catalog_scraper.extraction.strategies",
    "catalog_scraper.extraction.extractor",
    "catalog_scraper.normalizers.text",
    "catalog_scraper.normalizers.images",
    "catalog_scraper.normalizers.pricing",
    "catalog_scraper.normalizers.variants",
    "catalog_scraper.normalizers.product",
    "catalog_scraper.catalog",
    "catalog_scraper.pipeline",
    "catalog_scraper.utils.retry",
    "catalog_scraper.services",
    "catalog_scraper.services.fetcher",
    "catalog_scraper.services.scraper",
    "catalog_scraper.health",
    "catalog_scraper.main",
]


@pytest.mark.parametrize("module_name", MODULES)
def test_imports(module_name):
    """Test importing all application modules."""
    assert importlib.import_module(module_name) is not None
