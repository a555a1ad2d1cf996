"""
Price-slab lookup used to recompute catalog sale prices.

Listing prices are banded, not computed: an MRP maps to the sale price of the
first slab whose ceiling covers it. Edit PRICE_SLABS to change the bands.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple

from catalog_scraper.models.product import PriceSlab

PRICE_SLABS: Tuple[PriceSlab, ...] = (
    PriceSlab(20000, 199),
    PriceSlab(25000, 249),
    PriceSlab(30000, 299),
    PriceSlab(35000, 319),
    PriceSlab(40000, 339),
    PriceSlab(45000, 359),
    PriceSlab(50000, 379),
    PriceSlab(55000, 399),
    PriceSlab(60000, 419),
    PriceSlab(65000, 439),
    PriceSlab(70000, 459),
    PriceSlab(75000, 479),
    PriceSlab(80000, 499),
    PriceSlab(85000, 519),
    PriceSlab(90000, 539),
    PriceSlab(95000, 559),
    PriceSlab(100000, 579),
    PriceSlab(105000, 599),
    PriceSlab(110000, 619),
    PriceSlab(115000, 639),
    PriceSlab(120000, 659),
    PriceSlab(125000, 679),
    PriceSlab(130000, 699),
)

FALLBACK_SALE_RATIO = Decimal("0.85")


def round_half_up(value) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def resolve_slab_price(mrp: int, table: Tuple[PriceSlab, ...] = PRICE_SLABS) -> Optional[int]:
    """
    Return the slab sale price for `mrp`, or None when it is above the last
    ceiling (unsupported range).
    """
    for slab in table:
        if mrp <= slab.ceiling:
            return slab.sale_price
    return None


def fallback_sale_price(mrp: int, ratio: Decimal = FALLBACK_SALE_RATIO) -> int:
    """Flat-percentage sale price for MRPs no slab covers."""
    return round_half_up(Decimal(mrp) * ratio)


def resolve_sale_price(mrp: int, table: Tuple[PriceSlab, ...] = PRICE_SLABS) -> Tuple[int, bool]:
    """
    Sale price for `mrp` plus whether a slab produced it.

    A zero MRP means the price was never found; nothing is resolved for it.
    """
    if mrp <= 0:
        return 0, False

    slab_price = resolve_slab_price(mrp, table)
    if slab_price is None:
        return fallback_sale_price(mrp), False
    return slab_price, True


def validate_slab_table(table: Tuple[PriceSlab, ...]) -> None:
    """Raise ValueError unless ceilings are strictly increasing."""
    ceilings = [slab.ceiling for slab in table]
    for previous, current in zip(ceilings, ceilings[1:]):
        if current <= previous:
            raise ValueError(
                f"Slab ceilings must be strictly increasing: {previous} then {current}"
            )


validate_slab_table(PRICE_SLABS)
