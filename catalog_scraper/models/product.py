"""
Canonical internal data contract.
Extractor, normalizers, catalog drafts and the API all depend on this shape.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple, List, Dict

NOT_FOUND = "Not found"

VARIANT_KINDS = ("color", "storage")


@dataclass(frozen=True)
class RawFieldMatch:
    """Outcome of one extraction strategy attempt."""
    found: bool
    text: str = ""

    @classmethod
    def miss(cls) -> "RawFieldMatch":
        return cls(found=False, text=NOT_FOUND)


@dataclass(frozen=True)
class ExtractionResult:
    """
    Raw text bag pulled out of one product page.
    Every field is always populated: misses carry the NOT_FOUND sentinel and
    images default to an empty tuple.
    """
    product_name: str = NOT_FOUND
    price_text: str = NOT_FOUND
    rating_text: str = NOT_FOUND
    ratings_count_text: str = NOT_FOUND
    reviews_count_text: str = NOT_FOUND
    images: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {
            "product_name": self.product_name,
            "price": self.price_text,
            "rating": self.rating_text,
            "ratings_count": self.ratings_count_text,
            "reviews_count": self.reviews_count_text,
            "images": list(self.images)
        }


@dataclass(frozen=True)
class NormalizedProduct:
    """Typed product record derived from an ExtractionResult."""
    name: str
    brand: str
    mrp: int
    sale_price: int
    average_rating: float
    total_reviews: int
    images: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Basic validation rules."""
        if self.mrp < 0 or self.sale_price < 0:
            return False
        if self.average_rating < 0 or self.average_rating > 5:
            return False
        if self.total_reviews < 0:
            return False
        return True

    @property
    def has_price(self) -> bool:
        return self.mrp > 0

    @property
    def cover_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    def to_dict(self) -> Dict:
        """Convert to the camelCase shape the catalog importer expects."""
        return {
            "name": self.name,
            "brand": self.brand,
            "mrp": self.mrp,
            "salePrice": self.sale_price,
            "images": list(self.images),
            "averageRating": self.average_rating,
            "totalReviews": self.total_reviews
        }


@dataclass(frozen=True)
class VariantAttribute:
    kind: str
    value: str

    def __post_init__(self):
        if self.kind not in VARIANT_KINDS:
            raise ValueError(f"Unknown variant kind: {self.kind!r}")

    def to_dict(self) -> Dict:
        return {"type": self.kind, "name": self.value}


@dataclass(frozen=True)
class ProductVariants:
    """Color and storage inferred from a product name; either may be empty."""
    color: str = ""
    storage: str = ""

    def to_attributes(self) -> Tuple[VariantAttribute, ...]:
        attributes = []
        if self.color:
            attributes.append(VariantAttribute("color", self.color))
        if self.storage:
            attributes.append(VariantAttribute("storage", self.storage))
        return tuple(attributes)

    def to_dict(self) -> Dict:
        return {"color": self.color, "storage": self.storage}


@dataclass(frozen=True)
class PriceSlab:
    """Products priced up to `ceiling` are listed at `sale_price`."""
    ceiling: int
    sale_price: int


@dataclass(frozen=True)
class CatalogDraft:
    """
    Catalog-side view of a scraped product: slab pricing, discount and the
    variant list the catalog stores for mobile listings.
    """
    name: str
    brand: str
    category: str
    mrp: int
    sale_price: int
    discount_percentage: int
    average_rating: float
    total_reviews: int
    images: Tuple[str, ...] = ()
    variants: Optional[Tuple[VariantAttribute, ...]] = None
    slab_resolved: bool = False

    def to_dict(self) -> Dict:
        variants: Optional[List[Dict]] = None
        if self.variants:
            variants = [variant.to_dict() for variant in self.variants]
        return {
            "name": self.name,
            "brand": self.brand,
            "category": self.category,
            "mrp": self.mrp,
            "salePrice": self.sale_price,
            "discountPercentage": self.discount_percentage,
            "images": list(self.images),
            "averageRating": self.average_rating,
            "totalReviews": self.total_reviews,
            "variants": variants
        }
