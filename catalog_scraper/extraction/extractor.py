"""
Field extraction from fetched product pages.

Read-only traversal over a parsed document. A field that no strategy finds
comes back as the "Not found" sentinel; nothing in here raises because the
markup is missing or odd.
"""
import re
from typing import List, Optional, Sequence, Tuple, Union

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from catalog_scraper.extraction.strategies import (
    ALTERNATE_IMAGE_STRATEGIES,
    NAME_STRATEGIES,
    PRICE_STRATEGIES,
    PRIMARY_IMAGE_STRATEGY,
    RATING_STRATEGIES,
    RATING_SUMMARY_PATTERN,
    RATING_SUMMARY_STRATEGIES,
    ImageStrategy,
    SelectorStrategy,
)
from catalog_scraper.logger import logger
from catalog_scraper.models.product import NOT_FOUND, ExtractionResult, RawFieldMatch
from catalog_scraper.normalizers.images import DEFAULT_RESOLUTION, is_placeholder, normalize_image_urls

Document = Union[str, bytes, BeautifulSoup, None]

_SUMMARY = re.compile(RATING_SUMMARY_PATTERN, re.IGNORECASE)


def parse_document(document: Document) -> BeautifulSoup:
    if isinstance(document, BeautifulSoup):
        return document
    return BeautifulSoup(document or "", "lxml")


def _norm_space(text: str) -> str:
    return " ".join(text.split())


def _select_one(root: Tag, selector: str) -> Optional[Tag]:
    try:
        return root.select_one(selector)
    except SelectorSyntaxError:
        logger.warning(f"Invalid selector skipped: {selector!r}")
        return None


def _select(root: Tag, selector: str) -> List[Tag]:
    try:
        return root.select(selector)
    except SelectorSyntaxError:
        logger.warning(f"Invalid selector skipped: {selector!r}")
        return []


def try_strategy(soup: BeautifulSoup, strategy: SelectorStrategy) -> RawFieldMatch:
    root = soup
    if strategy.scope:
        root = _select_one(soup, strategy.scope)
        if root is None:
            return RawFieldMatch.miss()

    node = _select_one(root, strategy.selector)
    if node is None:
        return RawFieldMatch.miss()

    text = _norm_space(node.get_text(" ", strip=True))
    if not text:
        return RawFieldMatch.miss()
    return RawFieldMatch(found=True, text=text)


def first_match(soup: BeautifulSoup, strategies: Sequence[SelectorStrategy]) -> RawFieldMatch:
    """Run `strategies` in order; the first non-empty hit wins."""
    for strategy in strategies:
        result = try_strategy(soup, strategy)
        if result.found:
            return result
    return RawFieldMatch.miss()


def extract_rating_counts(soup: BeautifulSoup) -> Tuple[str, str]:
    """Split "N Ratings & M Reviews" into its two counts."""
    summary = first_match(soup, RATING_SUMMARY_STRATEGIES)
    if not summary.found:
        return NOT_FOUND, NOT_FOUND

    match = _SUMMARY.search(summary.text)
    if not match:
        return NOT_FOUND, NOT_FOUND
    return match.group(1), match.group(2)


def collect_image_sources(soup: BeautifulSoup, strategy: ImageStrategy) -> List[str]:
    """Raw image sources for one strategy, placeholders already dropped."""
    containers = _select(soup, strategy.container)
    if strategy.first_container_only:
        containers = containers[:1]

    sources = []
    for container in containers:
        for img in _select(container, strategy.image):
            source = next(
                (img.get(attribute) for attribute in strategy.attributes if img.get(attribute)),
                None
            )
            if source and not is_placeholder(source):
                sources.append(source)
    return sources


def extract_images(soup: BeautifulSoup, resolution: str = DEFAULT_RESOLUTION) -> Tuple[str, ...]:
    """
    Gallery images, primary gallery first.

    When the primary gallery yields nothing, the first alternate strategy
    that yields at least one usable image is taken.
    """
    images = normalize_image_urls(collect_image_sources(soup, PRIMARY_IMAGE_STRATEGY), resolution)
    if images:
        return images

    for strategy in ALTERNATE_IMAGE_STRATEGIES:
        images = normalize_image_urls(collect_image_sources(soup, strategy), resolution)
        if images:
            logger.debug(f"Images taken from alternate gallery {strategy.container!r}")
            return images

    return ()


def extract_product(document: Document, resolution: str = DEFAULT_RESOLUTION) -> ExtractionResult:
    """Pull every product field out of one page."""
    soup = parse_document(document)

    name = first_match(soup, NAME_STRATEGIES)
    price = first_match(soup, PRICE_STRATEGIES)
    rating = first_match(soup, RATING_STRATEGIES)
    ratings_count, reviews_count = extract_rating_counts(soup)

    return ExtractionResult(
        product_name=name.text,
        price_text=price.text,
        rating_text=rating.text,
        ratings_count_text=ratings_count,
        reviews_count_text=reviews_count,
        images=extract_images(soup, resolution)
    )
