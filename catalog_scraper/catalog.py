"""
Catalog-side pricing and variant model for scraped products.
"""
from decimal import Decimal

from catalog_scraper.models.product import CatalogDraft, NormalizedProduct
from catalog_scraper.normalizers.pricing import resolve_slab_price, round_half_up
from catalog_scraper.normalizers.variants import extract_variants

CATEGORIES = ("mobile", "cloth", "shoes", "others")

# Only phones carry color/storage variants in the catalog.
VARIANT_CATEGORIES = ("mobile",)


def discount_percentage(mrp: int, sale_price: int) -> int:
    if mrp <= 0:
        return 0
    return round_half_up(Decimal(mrp - sale_price) / Decimal(mrp) * 100)


def restore_mrp(base_price: int, discount: int) -> int:
    """MRP of a stored record that kept only its base price and discount."""
    return round_half_up(Decimal(base_price) * (100 + discount) / 100)


def build_catalog_draft(product: NormalizedProduct, category: str) -> CatalogDraft:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category {category!r}, expected one of {', '.join(CATEGORIES)}")

    slab_price = resolve_slab_price(product.mrp) if product.mrp > 0 else None
    sale_price = slab_price if slab_price is not None else product.sale_price

    variants = None
    if category in VARIANT_CATEGORIES:
        variants = extract_variants(product.name).to_attributes() or None

    return CatalogDraft(
        name=product.name,
        brand=product.brand.strip(),
        category=category,
        mrp=product.mrp,
        sale_price=sale_price,
        discount_percentage=discount_percentage(product.mrp, sale_price),
        average_rating=product.average_rating,
        total_reviews=product.total_reviews,
        images=product.images,
        variants=variants,
        slab_resolved=slab_price is not None
    )
