"""
Test normalization behavior.
Ensures extracted text is safely normalized into typed products.
"""
from catalog_scraper.models.product import ExtractionResult
from catalog_scraper.normalizers.product import ProductNormalizer
from catalog_scraper.pipeline import build_draft, build_product


def test_normalize_end_to_end_example():
    """Sentinel rating, separators in counts, and query-only image duplicates."""
    extraction = ExtractionResult(
        price_text="₹24,999",
        rating_text="Not found",
        reviews_count_text="12,345",
        images=("https://x/img?v=1", "https://x/img?v=2")
    )

    product = ProductNormalizer.normalize_product(extraction)

    assert product.mrp == 24999
    assert product.average_rating == 4.0
    assert product.total_reviews == 12345
    assert product.images == ("https://x/img",)
    assert product.is_valid


def test_sale_price_from_slab():
    product = ProductNormalizer.normalize_product(ExtractionResult(price_text="₹24,900"))
    assert product.sale_price == 249


def test_sale_price_falls_back_above_slabs():
    product = ProductNormalizer.normalize_product(ExtractionResult(price_text="₹1,49,999"))
    assert product.mrp == 149999
    assert product.sale_price == 127499


def test_normalize_empty_extraction():
    product = ProductNormalizer.normalize_product(ExtractionResult())

    assert product.name == "Not found"
    assert product.brand == "Unknown"
    assert product.mrp == 0
    assert product.sale_price == 0
    assert product.average_rating == 4.0
    assert product.total_reviews == 1000
    assert product.images == ()
    assert not product.has_price
    assert product.cover_image is None


def test_explicit_zero_rating_survives():
    product = ProductNormalizer.normalize_product(ExtractionResult(rating_text="0"))
    assert product.average_rating == 0.0


def test_normalize_batch():
    products = ProductNormalizer.normalize_batch([
        ExtractionResult(product_name="Apple iPhone 15", price_text="₹69,900"),
        ExtractionResult(product_name="Nike Air Max", price_text="₹8,995"),
    ])

    assert [product.brand for product in products] == ["Apple", "Nike"]
    assert [product.sale_price for product in products] == [459, 199]


def test_normalize_batch_uses_requested_resolution():
    products = ProductNormalizer.normalize_batch(
        [ExtractionResult(product_name="Nike Air Max", images=("https://x/image/128/128/a.jpeg",))],
        resolution="416/416"
    )

    assert products[0].images == ("https://x/image/416/416/a.jpeg",)


def test_build_product_from_page(product_page):
    product = build_product(product_page)

    assert product.name == "Samsung Galaxy S21 Ultra (Phantom Black, 128 GB)"
    assert product.brand == "Samsung"
    assert product.mrp == 24999
    assert product.sale_price == 249
    assert product.average_rating == 4.3
    assert product.total_reviews == 12345
    assert len(product.images) == 2
    assert product.cover_image.endswith("/832/832/xif0q/mobile/a.jpeg")


def test_build_product_to_dict(product_page):
    data = build_product(product_page).to_dict()
    assert set(data) == {"name", "brand", "mrp", "salePrice", "images", "averageRating", "totalReviews"}
    assert data["salePrice"] == 249


def test_build_draft_from_page(product_page):
    draft = build_draft(product_page, "mobile")
    assert draft.category == "mobile"
    assert [variant.to_dict() for variant in draft.variants] == [
        {"type": "color", "name": "Black"},
        {"type": "storage", "name": "128 GB"},
    ]


def test_build_product_from_blank_page():
    product = build_product("<html></html>")
    assert product.mrp == 0
    assert product.average_rating == 4.0
    assert product.total_reviews == 1000
