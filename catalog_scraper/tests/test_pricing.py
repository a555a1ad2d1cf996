"""
Test price-slab resolution and the flat-percentage fallback.
"""
import dataclasses

import pytest

from catalog_scraper.models.product import PriceSlab
from catalog_scraper.normalizers.pricing import (
    PRICE_SLABS,
    fallback_sale_price,
    resolve_sale_price,
    resolve_slab_price,
    round_half_up,
    validate_slab_table,
)


def test_resolves_smallest_covering_slab():
    assert resolve_slab_price(24900) == 249
    assert resolve_slab_price(20001) == 249
    assert resolve_slab_price(100) == 199


def test_ceilings_are_inclusive():
    assert resolve_slab_price(20000) == 199
    assert resolve_slab_price(25000) == 249
    assert resolve_slab_price(130000) == 699


def test_above_last_ceiling_is_unsupported():
    assert resolve_slab_price(130001) is None
    assert resolve_slab_price(250000) is None


def test_custom_table():
    table = (PriceSlab(100, 10), PriceSlab(200, 20))
    assert resolve_slab_price(150, table) == 20
    assert resolve_slab_price(201, table) is None


def test_fallback_sale_price_rounds_half_up():
    assert fallback_sale_price(150000) == 127500
    assert fallback_sale_price(149999) == 127499
    assert fallback_sale_price(10) == 9
    assert round_half_up(2.5) == 3


def test_resolve_sale_price():
    assert resolve_sale_price(24999) == (249, True)
    assert resolve_sale_price(149999) == (127499, False)


def test_missing_price_resolves_nothing():
    assert resolve_sale_price(0) == (0, False)


def test_table_is_strictly_increasing():
    validate_slab_table(PRICE_SLABS)
    ceilings = [slab.ceiling for slab in PRICE_SLABS]
    assert ceilings == sorted(set(ceilings))


def test_validate_rejects_unordered_table():
    with pytest.raises(ValueError):
        validate_slab_table((PriceSlab(200, 20), PriceSlab(100, 10)))
    with pytest.raises(ValueError):
        validate_slab_table((PriceSlab(100, 10), PriceSlab(100, 20)))


def test_table_is_read_only():
    assert isinstance(PRICE_SLABS, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        PRICE_SLABS[0].sale_price = 1
