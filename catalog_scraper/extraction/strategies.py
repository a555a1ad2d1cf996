"""
Selector fallback chains for Flipkart product pages.

Store markup changes often; when it does, add a selector here. The extractor
walks each chain in order and never needs to change.
"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SelectorStrategy:
    """One attempt at a text field: `selector`, optionally inside `scope`."""
    selector: str
    scope: Optional[str] = None


@dataclass(frozen=True)
class ImageStrategy:
    """Gallery container plus the image tags inside it, read from `attributes` in order."""
    container: str
    image: str
    attributes: Tuple[str, ...] = ("src",)
    first_container_only: bool = False


RATING_BLOCK = "div._5OesEi.HDvrBb"

NAME_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy("span.VU-ZEz"),
    SelectorStrategy('h1[class*="x2Jnf"]'),
    SelectorStrategy('span[class*="B_NuCI"]'),
    SelectorStrategy("h1.yhB1nd"),
    SelectorStrategy(".B_NuCI"),
)

PRICE_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy(r"div.yRaY8j.A6\+E6v"),
    SelectorStrategy("._30jeq3._16Jk6d"),
    SelectorStrategy("._1_WHN1"),
    SelectorStrategy(".CEmiEU .srp-price"),
    SelectorStrategy("._3I9_wc._27UcVY"),
)

RATING_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy("div.XQDdHH", scope=RATING_BLOCK),
    SelectorStrategy("._3LWZlK"),
    SelectorStrategy(".hGSR34"),
    SelectorStrategy("._2_R_DZ span"),
)

# "1,23,456 Ratings & 7,890 Reviews"
RATING_SUMMARY_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy("span.Wphh3N", scope=RATING_BLOCK),
    SelectorStrategy("span._2_R_DZ"),
)

RATING_SUMMARY_PATTERN = r"([\d,]+)\s+Ratings\s*&?\s*([\d,]+)\s+Reviews"

PRIMARY_IMAGE_STRATEGY = ImageStrategy(r"div.\+P14Qy", "img._0DkuPH", first_container_only=True)

ALTERNATE_IMAGE_STRATEGIES: Tuple[ImageStrategy, ...] = (
    ImageStrategy("._2r_T1I", "img", ("src", "data-src")),
    ImageStrategy("._396cs4", "img", ("src", "data-src")),
    ImageStrategy(".q6DClP", "img", ("src", "data-src")),
    ImageStrategy("._1AtVbE", "img", ("src", "data-src")),
)
