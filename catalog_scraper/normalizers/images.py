"""
Gallery image URL normalization.
"""
import re
from typing import Iterable, Optional, Tuple

from catalog_scraper.errors import InvalidResolutionError

DEFAULT_RESOLUTION = "832/832"
PLACEHOLDER_TOKEN = "placeholder"

_DIMENSIONS = re.compile(r"/\d+/\d+/")
_RESOLUTION = re.compile(r"^\d+/\d+$")


def is_placeholder(url: str) -> bool:
    return PLACEHOLDER_TOKEN in url


def validate_resolution(resolution) -> str:
    """
    Return the token as "<w>/<h>" or raise InvalidResolutionError.
    Any other token would break idempotent re-normalization.
    """
    token = resolution.strip().strip("/") if isinstance(resolution, str) else ""
    if not _RESOLUTION.match(token):
        raise InvalidResolutionError(f"Resolution must look like 832/832, got {resolution!r}")
    return token


def normalize_image_url(url: Optional[str], resolution: str = DEFAULT_RESOLUTION) -> Optional[str]:
    """
    Strip the query string and swap the first /<w>/<h>/ segment for the
    requested resolution. Returns None for blanks and placeholders.
    Raises InvalidResolutionError for a resolution that is not a <w>/<h> pair.
    """
    if not url:
        return None

    token = validate_resolution(resolution)
    cleaned = url.strip().split("?", 1)[0]
    if not cleaned:
        return None

    cleaned = _DIMENSIONS.sub(f"/{token}/", cleaned, count=1)
    if is_placeholder(cleaned):
        return None
    return cleaned


def normalize_image_urls(urls: Iterable[Optional[str]], resolution: str = DEFAULT_RESOLUTION) -> Tuple[str, ...]:
    """
    Normalize every URL and drop repeats, keeping first-seen order.
    The first entry is the product's cover image.
    """
    seen = set()
    normalized = []

    for url in urls:
        cleaned = normalize_image_url(url, resolution)
        if cleaned is None or cleaned in seen:
            continue
        seen.add(cleaned)
        normalized.append(cleaned)

    return tuple(normalized)
