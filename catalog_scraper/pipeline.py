"""
Pure HTML -> product pipeline. No I/O; the fetcher lives in services.
"""
from catalog_scraper.catalog import build_catalog_draft
from catalog_scraper.extraction.extractor import Document, extract_product
from catalog_scraper.models.product import CatalogDraft, NormalizedProduct
from catalog_scraper.normalizers.images import DEFAULT_RESOLUTION
from catalog_scraper.normalizers.product import ProductNormalizer


def build_product(document: Document, resolution: str = DEFAULT_RESOLUTION) -> NormalizedProduct:
    extraction = extract_product(document, resolution)
    return ProductNormalizer.normalize_product(extraction, resolution)


def build_draft(document: Document, category: str, resolution: str = DEFAULT_RESOLUTION) -> CatalogDraft:
    return build_catalog_draft(build_product(document, resolution), category)
