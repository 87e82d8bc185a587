"""
Answer normalization for fuzzy short answer comparison.

Turns a raw answer into either a number or a lowercase string:
"8", "08", "8.0" and "Eight" all become 8, "twenty-one" becomes 21,
"one hundred and five" becomes 105. Anything that is not entirely a
number phrase ("twenty dollars", "Paris") stays text; there is no
partial parsing.
"""
import math
import re
import logging
from typing import Any, Optional, Union
from quiz_insights.config.settings import NUMBER_WORDS, NUMBER_WORD_FILLERS

logger = logging.getLogger(__name__)

NormalizedValue = Union[int, float, str]
Number = Union[int, float]

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?$", re.ASCII)
TOKEN_SPLIT_PATTERN = re.compile(r"[\s-]+")


def parse_decimal(text: str) -> Optional[Number]:
    """Parse a lowercase decimal literal; integral values come back as int"""
    if INTEGER_PATTERN.match(text):
        try:
            return int(text)
        except ValueError:
            # past the int digit limit; float() below turns it into inf
            pass
    if not DECIMAL_PATTERN.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def parse_number_words(text: str) -> Optional[int]:
    """Parse a phrase made only of number words, None on any unknown token"""
    total = 0
    subtotal = 0

    for token in TOKEN_SPLIT_PATTERN.split(text):
        if token in NUMBER_WORD_FILLERS:
            continue
        value = NUMBER_WORDS.get(token)
        if value is None:
            return None
        if value >= 100:
            total += (subtotal or 1) * value
            subtotal = 0
        else:
            subtotal += value

    return total + subtotal


def normalize(raw: Any) -> NormalizedValue:
    """Canonical comparable value for a raw answer token; never raises"""
    if raw is None:
        return ""

    text = str(raw).strip().lower()
    if not text:
        return text

    number = parse_decimal(text)
    if number is not None:
        return number

    number = parse_number_words(text)
    if number is not None:
        logger.debug("Parsed number words %r as %s", text, number)
        return number

    return text


def values_equal(left: NormalizedValue, right: NormalizedValue) -> bool:
    """Type-aware equality: numbers only equal numbers, text only text"""
    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right
    return left == right


def display_key(value: NormalizedValue) -> str:
    return str(value)
