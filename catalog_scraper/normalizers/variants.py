"""
Color and storage inference from free-text product names.

Both tables are tried strictly in order and the first match wins; there is
no scoring. Put broader patterns after the narrower ones they would shadow.
"""
import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple

from catalog_scraper.models.product import ProductVariants

# Storage pattern kinds
COMBINED = "combined"
GIGABYTES = "GB"
TERABYTES = "TB"


@dataclass(frozen=True)
class VariantPattern:
    pattern: Pattern
    kind: str = ""


def _compile(expression: str, kind: str = "") -> VariantPattern:
    return VariantPattern(re.compile(expression, re.IGNORECASE), kind)


COLOR_PATTERNS: Tuple[VariantPattern, ...] = (
    _compile(r"\b(Black|White|Blue|Red|Green|Yellow|Orange|Purple|Pink|Gray|Grey|Silver|Gold"
             r"|Rose Gold|Space Gray|Space Grey)\b"),
    _compile(r"\b(Natural Titanium|White Titanium|Black Titanium|Blue Titanium|Titanium Black"
             r"|Titanium Gray|Titanium Grey|Titanium White|Titanium Whitesilver)\b"),
    _compile(r"\b(Mecha Orange|Lavender Frost|Pantone Shadow|Porcelain|Obsidian|Hazel Beige"
             r"|Misty Lavender|Sonic Black|Eclipse Black)\b"),
    _compile(r"\b(Starlight|Midnight|Product Red|Deep Purple|Alpine Green|Sierra Blue|Graphite"
             r"|Pacific Blue)\b"),
    _compile(r"\b(Dazzle Steel|Cosmic Black|Phantom Black|Phantom Silver|Phantom Violet"
             r"|Mystic Bronze)\b"),
)

STORAGE_PATTERNS: Tuple[VariantPattern, ...] = (
    # "(8 GB RAM, 128 GB Storage)"
    _compile(r"\((\d+)\s*GB\s*RAM,?\s*(\d+)\s*GB\s*Storage?\)", COMBINED),
    # "(8GB + 128GB)"
    _compile(r"\((\d+)\s*GB\s*\+\s*(\d+)\s*GB\)", COMBINED),
    # "8 GB RAM, 128 GB"
    _compile(r"(\d+)\s*GB\s*RAM,?\s*(\d+)\s*GB", COMBINED),
    _compile(r"\((\d+)\s*GB\)", GIGABYTES),
    _compile(r"(\d+)\s*GB(?!\s*RAM)", GIGABYTES),
    _compile(r"\((\d+)\s*TB\)", TERABYTES),
    _compile(r"(\d+)\s*TB", TERABYTES),
)

RAM_ONLY_PATTERN = re.compile(r"\((\d+)\s*GB\s*RAM\)", re.IGNORECASE)


def match_color(name: str, patterns: Tuple[VariantPattern, ...] = COLOR_PATTERNS) -> str:
    for entry in patterns:
        match = entry.pattern.search(name)
        if match:
            return (match.group(1) or match.group(0)).strip()
    return ""


def match_storage(name: str, patterns: Tuple[VariantPattern, ...] = STORAGE_PATTERNS) -> Tuple[str, Optional[str]]:
    """Return the formatted storage string and the kind of pattern that produced it."""
    for entry in patterns:
        match = entry.pattern.search(name)
        if not match:
            continue
        if entry.kind == COMBINED:
            return f"{match.group(1)}GB + {match.group(2)}GB", COMBINED
        return f"{match.group(1)} {entry.kind}", entry.kind
    return "", None


def extract_variants(name: Optional[str]) -> ProductVariants:
    """
    Infer color and storage from a product name.

    >>> extract_variants("iPhone 15 (128 GB) - Blue")
    ProductVariants(color='Blue', storage='128 GB')
    """
    if not name:
        return ProductVariants()

    color = match_color(name)
    storage, kind = match_storage(name)

    # A trailing "(8 GB RAM)" still belongs in the storage label when the
    # storage match itself carried no RAM figure.
    if storage and kind != COMBINED:
        ram_only = RAM_ONLY_PATTERN.search(name)
        if ram_only:
            storage = f"{ram_only.group(1)}GB + {storage}"

    return ProductVariants(color=color, storage=storage.strip())
