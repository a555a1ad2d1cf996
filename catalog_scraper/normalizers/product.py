"""
Explicit normalization layer.
Converts an ExtractionResult into the typed NormalizedProduct model.
"""
from typing import Iterable, List

from catalog_scraper.logger import logger
from catalog_scraper.models.product import NOT_FOUND, ExtractionResult, NormalizedProduct
from catalog_scraper.normalizers.images import DEFAULT_RESOLUTION, normalize_image_urls
from catalog_scraper.normalizers.pricing import resolve_sale_price
from catalog_scraper.normalizers.text import (
    extract_brand,
    parse_price,
    parse_rating,
    parse_reviews_count,
)


class ProductNormalizer:
    """
    Normalizes raw extracted text into the internal product model.
    Never raises: unparseable fields fall back to their documented defaults.
    """

    @staticmethod
    def normalize_product(extraction: ExtractionResult,
                          resolution: str = DEFAULT_RESOLUTION) -> NormalizedProduct:
        """
        Convert one ExtractionResult to a NormalizedProduct.

        Sale price comes from the price slabs when the MRP falls inside
        them, otherwise from the flat 85% rule. Images are normalized again,
        which is a no-op for extractor output but cleans hand-built results.
        """
        name = extraction.product_name.strip() if extraction.product_name else NOT_FOUND
        mrp = parse_price(extraction.price_text)
        sale_price, slab_resolved = resolve_sale_price(mrp)

        product = NormalizedProduct(
            name=name,
            brand=extract_brand(name),
            mrp=mrp,
            sale_price=sale_price,
            average_rating=parse_rating(extraction.rating_text),
            total_reviews=parse_reviews_count(extraction.reviews_count_text),
            images=normalize_image_urls(extraction.images, resolution)
        )

        logger.debug(
            "Normalized product",
            extra={"product": name, "mrp": mrp, "slab_resolved": slab_resolved}
        )
        return product

    @staticmethod
    def normalize_batch(extractions: Iterable[ExtractionResult],
                        resolution: str = DEFAULT_RESOLUTION) -> List[NormalizedProduct]:
        return [ProductNormalizer.normalize_product(extraction, resolution) for extraction in extractions]
