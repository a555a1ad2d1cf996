"""
Text-to-value normalizers for scraped product fields.

Every function here is total: missing or garbled text maps to a documented
default instead of raising, so one bad field never blocks a catalog record.
"""
import re
from typing import Any, Optional, Tuple

from catalog_scraper.models.product import NOT_FOUND

DEFAULT_PRICE = 0
DEFAULT_RATING = 4.0
DEFAULT_REVIEWS_COUNT = 1000
UNKNOWN_BRAND = "Unknown"

# Multi-word brands come first so "New Balance" is never reported as
# something shorter it happens to contain.
KNOWN_BRANDS: Tuple[str, ...] = (
    "New Balance", "Calvin Klein", "Forever 21", "Levi's",
    "Apple", "Samsung", "OnePlus", "Xiaomi", "Realme", "Oppo", "Vivo",
    "Google", "Motorola", "Nokia", "Huawei", "Honor", "POCO", "Redmi",
    "Nothing", "Asus", "Sony", "LG",
    "Nike", "Adidas", "Puma", "Reebok", "Converse", "Vans",
    "Zara", "H&M", "Uniqlo", "Gap",
    "Canon", "Nikon", "Panasonic", "Fujifilm", "Olympus",
    "Dell", "HP", "Lenovo", "Acer", "MSI", "MacBook", "iMac", "boAt",
    "JBL", "Bose", "Sennheiser", "Skullcandy", "Marshall",
)

_PRICE_NOISE = re.compile(r"[,\s]")
_DIGITS = re.compile(r"\d+")
_DECIMAL = re.compile(r"(\d+(?:\.\d+)?)")


def _usable(text: Any) -> Optional[str]:
    if text is None:
        return None
    text = str(text).strip()
    if not text or text == NOT_FOUND:
        return None
    return text


def parse_price(text: Any) -> int:
    """
    "₹24,999" -> 24999.

    Separators and whitespace are dropped, then the first digit run is taken,
    so a second price after a currency symbol ("₹24,999 ₹29,999") is ignored.
    Returns 0 when no digits are present.
    """
    usable = _usable(text)
    if usable is None:
        return DEFAULT_PRICE

    match = _DIGITS.search(_PRICE_NOISE.sub("", usable))
    return int(match.group(0)) if match else DEFAULT_PRICE


def parse_rating(text: Any) -> float:
    """
    "4.3 out of 5" -> 4.3. Unknown ratings default to 4.0, never 0.0: an
    explicit "0" is a real rating.
    """
    usable = _usable(text)
    if usable is None:
        return DEFAULT_RATING

    match = _DECIMAL.search(usable)
    return float(match.group(1)) if match else DEFAULT_RATING


def parse_reviews_count(text: Any) -> int:
    """"12,345 Reviews" -> 12345; 1000 when no count is present."""
    usable = _usable(text)
    if usable is None:
        return DEFAULT_REVIEWS_COUNT

    match = _DIGITS.search(usable.replace(",", ""))
    return int(match.group(0)) if match else DEFAULT_REVIEWS_COUNT


def extract_brand(name: Any, brands: Tuple[str, ...] = KNOWN_BRANDS) -> str:
    """Return the first known brand contained in the name, else its first word."""
    usable = _usable(name)
    if usable is None:
        return UNKNOWN_BRAND

    upper_name = usable.upper()
    for brand in brands:
        if brand.upper() in upper_name:
            return brand

    return usable.split()[0]
