"""
Scaling Service

Functions for scaling ingredient amounts by a serving-size multiplier.
Parsed text lines come back as display strings; structured entries come
back as new entries with a numeric amount, formatted later at render time.
"""

import logging
import math
import numbers

from constants import MAX_SCALE, MIN_SCALE
from .formatting import format_amount
from .parsing import parse_ingredient, round_amount

logger = logging.getLogger(__name__)


class ScaleFactorError(ValueError):
    """Raised when a scale factor from the host application is unusable."""
    pass


def validate_scale_factor(value, min_scale=MIN_SCALE, max_scale=MAX_SCALE):
    """
    Check a scale factor received from a request.

    Args:
        value: Number or numeric string
        min_scale: Smallest accepted factor
        max_scale: Largest accepted factor

    Returns:
        The factor as a float

    Raises:
        ScaleFactorError: If the value is not a finite number within bounds
    """
    if isinstance(value, bool) or value is None:
        raise ScaleFactorError(f"Scale factor must be a number, got {value!r}")
    if not isinstance(value, numbers.Real):
        try:
            value = float(str(value).strip())
        except ValueError:
            raise ScaleFactorError(f"Scale factor must be a number, got {value!r}") from None

    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ScaleFactorError(f"Scale factor must be a positive number, got {value}")
    if value < min_scale or value > max_scale:
        raise ScaleFactorError(
            f"Scale factor {value} is outside the allowed range {min_scale}-{max_scale}"
        )
    return value


def _scale_amounts(parsed, multiplier):
    """Multiplied amounts, or None when any of them overflows to inf/nan."""
    products = [amount * multiplier for amount in parsed.amounts]
    if not all(math.isfinite(product) for product in products):
        logger.debug("Scaling %r by %r is out of range", parsed.original, multiplier)
        return None
    return products


def scaled_amounts(parsed, multiplier):
    """Scaled numeric amounts of a parsed line; empty when unparseable."""
    if not parsed.parseable:
        return ()
    products = _scale_amounts(parsed, multiplier)
    if products is None:
        return ()
    return tuple(round_amount(product) for product in products)


def scale_ingredient(parsed, multiplier, style='unicode'):
    """Scale a parsed ingredient and rebuild its text: '4 cups flour', '2-4 tbsp olive oil'."""
    if not parsed.parseable or not parsed.amounts:
        # Unparseable lines are shown as written
        return parsed.original

    products = _scale_amounts(parsed, multiplier)
    if products is None:
        return parsed.original

    amounts = [format_amount(product, style) for product in products]
    parts = ['-'.join(amounts)]
    if parsed.unit:
        parts.append(parsed.unit)
    if parsed.ingredient:
        parts.append(parsed.ingredient)
    return ' '.join(parts)


def scale_line(text, multiplier, style='unicode'):
    """Parse and scale a single free-text ingredient line."""
    parsed = parse_ingredient(text)
    if not parsed.parseable:
        logger.debug("Leaving %r unscaled", parsed.original)
    return scale_ingredient(parsed, multiplier, style)


def scale_ingredient_entry(entry, multiplier):
    """Scale a structured entry. An absent amount stays absent."""
    if entry.amount is None:
        return entry
    amount = entry.amount * multiplier
    if not math.isfinite(amount):
        logger.debug("Leaving %r unscaled, amount out of range", entry.ingredient)
        return entry
    return entry.with_amount(amount)


def scale_ingredients(entries, multiplier):
    """Scale all structured entries of a recipe."""
    if not entries:
        return []
    return [scale_ingredient_entry(entry, multiplier) for entry in entries]


def format_ingredient_entry(entry, style='unicode'):
    """Display line for a structured entry, e.g. '1½ cups milk' or 'salt to taste'."""
    parts = []
    if entry.amount is not None and entry.amount > 0:
        parts.append(format_amount(entry.amount, style))
    if entry.unit:
        parts.append(entry.unit)
    if entry.ingredient:
        parts.append(entry.ingredient)
    return ' '.join(parts)
