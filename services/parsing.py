"""
Parsing Service

Functions for parsing ingredient text and fractions from recipe data.
"""

import logging
import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from constants import AMOUNT_PRECISION, FRACTION_VALUES, UNICODE_FRACTIONS, UNIT_MAPPINGS
from models import ParsedIngredient
from utils.sanitizer import clean_ingredient_text

logger = logging.getLogger(__name__)

_GLYPHS = ''.join(UNICODE_FRACTIONS)

# One amount: mixed with glyph ("2¾", "2 ¾"), glyph, mixed ("2 1/2"),
# fraction ("1/2"), then integer or decimal ("2", "1.5", ".5")
AMOUNT_PATTERN = (
    rf'\d+\s*[{_GLYPHS}]|[{_GLYPHS}]|\d+\s+\d+/\d+|\d+/\d+|\d*\.?\d+'
)
RANGE_SEPARATOR = r'[-–—]|to'

RANGE_RE = re.compile(
    rf'^({AMOUNT_PATTERN})\s*(?:{RANGE_SEPARATOR})\s*({AMOUNT_PATTERN})\s+(.+)$',
    re.IGNORECASE,
)
SINGLE_RE = re.compile(rf'^({AMOUNT_PATTERN})\s+(.+)$')

_MIXED_RE = re.compile(rf'^(\d+)(?:\s*([{_GLYPHS}])|\s+(\d+\s*/\s*\d+))$')
_FRACTION_RE = re.compile(r'^(\d+)\s*/\s*(\d+)$')
_SPACE_BEFORE_PUNCT_RE = re.compile(r'\s+([,;.])')


def _build_unit_pattern(units):
    # Longest first so "fl oz" wins over "oz" and "cups" over "cup"
    alternatives = sorted(units, key=len, reverse=True)
    escaped = (re.escape(unit).replace(r'\ ', r'\s+') for unit in alternatives)
    return re.compile(r'\b(?:' + '|'.join(escaped) + r')\b', re.IGNORECASE)


UNIT_RE = _build_unit_pattern(UNIT_MAPPINGS)


def round_amount(value, places=AMOUNT_PRECISION):
    """Round half-up to a fixed number of decimal places.

    Works on the decimal text of the value, so 0.125 becomes 0.13 and
    2.675 becomes 2.68 regardless of their binary representation.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    try:
        return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return float(value)


def parse_fraction(token):
    """
    Convert a fraction token to a decimal.

    Known tokens ('1/2', '½', ...) come from the fraction table; any other
    '<int>/<int>' is divided out and rounded. Returns 0.0 for anything
    else, including a zero denominator.
    """
    if not token:
        return 0.0
    token = token.strip()

    if token in FRACTION_VALUES:
        return FRACTION_VALUES[token]

    frac_match = _FRACTION_RE.match(token)
    if frac_match:
        numerator = int(frac_match.group(1))
        denominator = int(frac_match.group(2))
        if denominator != 0:
            try:
                value = numerator / denominator
            except OverflowError:
                return 0.0
            return round_amount(value)

    return 0.0


def parse_number(text):
    """
    Parse a number that may include fractions: '2 1/2', '1/4', '3.5', '¾', '2¾'.

    Returns the value rounded to AMOUNT_PRECISION, or 0.0 when the text is
    not a number.
    """
    if not text:
        return 0.0
    text = text.strip()

    # Mixed number like "2 1/2" or "2¾"
    mixed_match = _MIXED_RE.match(text)
    if mixed_match:
        fraction = parse_fraction(mixed_match.group(2) or mixed_match.group(3))
        if fraction <= 0:
            return 0.0
        try:
            value = float(int(mixed_match.group(1))) + fraction
        except OverflowError:
            return 0.0
        if not math.isfinite(value):
            return 0.0
        return round_amount(value)

    # Pure fraction like "1/2" or "¾"
    if '/' in text or any(glyph in text for glyph in _GLYPHS):
        return parse_fraction(text)

    # Integer or decimal
    try:
        value = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return round_amount(value)


def split_unit(remainder):
    """Split '<unit> <ingredient>' text into (unit, ingredient).

    The leftmost known unit is taken as written; unknown units leave unit
    empty and the text untouched.
    """
    unit_match = UNIT_RE.search(remainder)
    if not unit_match:
        return '', ' '.join(remainder.split())
    ingredient = remainder[:unit_match.start()] + ' ' + remainder[unit_match.end():]
    ingredient = _SPACE_BEFORE_PUNCT_RE.sub(r'\1', ' '.join(ingredient.split()))
    # Drop the period of an abbreviation ("tbsp.") left in front of the name
    return ' '.join(unit_match.group(0).split()), ingredient.lstrip(' .,;')


def parse_ingredient(text):
    """Parse ingredient text like '1-2 tbsp olive oil' into a ParsedIngredient."""
    original = clean_ingredient_text(text)

    range_match = RANGE_RE.match(original)
    if range_match:
        low = parse_number(range_match.group(1))
        high = parse_number(range_match.group(2))
        if low > 0 and high > 0:
            unit, ingredient = split_unit(range_match.group(3))
            return ParsedIngredient(
                original=original,
                amounts=(low, high),
                unit=unit,
                ingredient=ingredient,
                parseable=True,
            )
        logger.debug("Rejected range in %r (%s, %s)", original, low, high)

    single_match = SINGLE_RE.match(original)
    if single_match:
        amount = parse_number(single_match.group(1))
        if amount > 0:
            unit, ingredient = split_unit(single_match.group(2))
            return ParsedIngredient(
                original=original,
                amounts=(amount,),
                unit=unit,
                ingredient=ingredient,
                parseable=True,
            )

    logger.debug("Unparseable ingredient line: %r", original)
    return ParsedIngredient.unparseable(original)


def parse_ingredients(lines):
    """Parse a list of ingredient lines, skipping blank ones."""
    if not lines:
        return []
    return [parse_ingredient(line) for line in lines if clean_ingredient_text(line)]
