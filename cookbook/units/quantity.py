"""Rescale the leading quantity of an ingredient line.

Only a quantity at the very start of the line is recognised: an integer, a
decimal written with the configured decimal separator ("1.5", or "1,5"
when the separator is ","), a fraction ("1/2") or a mixed fraction
("1 1/2"). The other mark is read as digit grouping ("1,000"). Everything
after the quantity is left untouched. Lines without such a quantity are
returned unchanged so callers can flag them.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple

from cookbook.settings import settings

logger = logging.getLogger(__name__)

_LEADING_QUANTITY_RE = re.compile(
    r"^(?P<indent>\s*)(?:"
    r"(?P<whole>\d+)\s+(?P<mixed_num>\d+)/(?P<mixed_den>[1-9]\d*)"
    r"|(?P<num>\d+)/(?P<den>[1-9]\d*)"
    r"|(?P<number>\d+(?:[.,]\d+)*)"
    r")"
)

# Results within this distance of a known fraction are written as that fraction.
FRACTION_TOLERANCE = 0.05
KNOWN_FRACTIONS: List[Tuple[str, float]] = [
    ("1/8", 0.125),
    ("1/6", 0.167),
    ("1/4", 0.25),
    ("1/3", 0.33),
    ("1/2", 0.5),
    ("2/3", 0.66),
    ("3/4", 0.75),
]


def _separator(decimal_separator: Optional[str]) -> str:
    if decimal_separator is None:
        return settings.DECIMAL_SEPARATOR
    return decimal_separator


def parse_number(token: str, decimal_separator: str) -> Optional[float]:
    """Read "1,000.5" style numbers; None when the marks don't fit the locale.

    Grouping marks must be followed by exactly three digits and may not
    appear after the decimal separator.
    """
    grouping = "," if decimal_separator == "." else "."
    head, _, fraction = token.partition(decimal_separator)
    if decimal_separator in fraction or grouping in fraction:
        return None
    groups = head.split(grouping)
    if any(len(group) != 3 for group in groups[1:]):
        return None
    digits = "".join(groups)
    if fraction:
        digits += "." + fraction
    return float(digits)


def _match_value(match: re.Match, decimal_separator: str) -> Optional[float]:
    if match.group("whole") is not None:
        return int(match.group("whole")) + int(match.group("mixed_num")) / int(
            match.group("mixed_den")
        )
    if match.group("num") is not None:
        return int(match.group("num")) / int(match.group("den"))
    return parse_number(match.group("number"), decimal_separator)


def _is_decimal(match: re.Match, decimal_separator: str) -> bool:
    number = match.group("number")
    return number is not None and decimal_separator in number


def leading_quantity(text: str, decimal_separator: Optional[str] = None) -> Optional[float]:
    """Numeric value of the quantity that starts `text`, or None."""
    match = _LEADING_QUANTITY_RE.match(text)
    if match is None:
        return None
    return _match_value(match, _separator(decimal_separator))


def format_quantity(
    value: float, decimal_separator: Optional[str] = None, fractions: bool = True
) -> str:
    """Format a quantity for display.

    With `fractions`, values close to a common kitchen fraction are written
    as one ("1/2", "1 1/3"). Otherwise, and when no fraction is close, the
    value gets at most two fraction digits and no trailing zeros.
    """
    decimal_separator = _separator(decimal_separator)
    if value <= 0.0001:
        return "0"
    whole = int(value)
    rest = value - whole
    if whole >= 1 and rest < 0.0001:
        return str(whole)
    if fractions:
        label, approx = min(KNOWN_FRACTIONS, key=lambda known: abs(known[1] - rest))
        if abs(approx - rest) <= FRACTION_TOLERANCE:
            return label if whole == 0 else f"{whole} {label}"
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text.replace(".", decimal_separator)


def rescale(
    ingredient: str, factor: float, decimal_separator: Optional[str] = None
) -> str:
    """Multiply the leading quantity of `ingredient` by `factor`.

    Whole numbers and fractions come back in fraction style, decimals stay
    decimals.

    >>> rescale("2 cups flour", 1.5)
    '3 cups flour'
    """
    if factor == 0:
        return ingredient
    decimal_separator = _separator(decimal_separator)
    match = _LEADING_QUANTITY_RE.match(ingredient)
    if match is None:
        logger.debug("No leading quantity in %r", ingredient)
        return ingredient
    value = _match_value(match, decimal_separator)
    if value is None:
        logger.debug("Ambiguous number format in %r", ingredient)
        return ingredient
    scaled = format_quantity(
        value * factor,
        decimal_separator,
        fractions=not _is_decimal(match, decimal_separator),
    )
    return match.group("indent") + scaled + ingredient[match.end():]


def rescale_lines(
    ingredients: Iterable[str], factor: float, decimal_separator: Optional[str] = None
) -> List[Tuple[str, bool]]:
    """Rescale every line; the flag is False for lines that could not be scaled."""
    decimal_separator = _separator(decimal_separator)
    result = []
    for line in ingredients:
        scaled = leading_quantity(line, decimal_separator) is not None and factor != 0
        result.append((rescale(line, factor, decimal_separator), scaled))
    return result


def serving_factor(recipe_yield: int, servings: float) -> float:
    """Factor turning a recipe for `recipe_yield` servings into `servings`."""
    base = recipe_yield if recipe_yield > 0 else 1
    return servings / base
