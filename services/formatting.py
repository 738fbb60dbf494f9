"""
Formatting Service

Functions for rendering amounts as display strings.
"""

import math

from constants import (
    AMOUNT_PRECISION,
    COMMON_FRACTIONS,
    LEGACY_PRECISION,
    LEGACY_TOLERANCE,
    UNICODE_DISPLAY,
)
from .parsing import round_amount


def _decimal_string(value, places):
    return f"{value:.{places}f}".rstrip('0').rstrip('.')


def format_as_fraction(value):
    """
    Format a decimal for display, preferring Unicode fractions.

    3 -> '3', 0.5 -> '½', 2.5 -> '2½', 1.1 -> '1.1'
    """
    if not math.isfinite(value):
        return ''
    value = round_amount(value)
    if value < 0:
        return '-' + format_as_fraction(-value)

    # Whole number
    if value == int(value):
        return str(int(value))

    whole = math.floor(value)
    fraction = round_amount(value - whole)
    glyph = UNICODE_DISPLAY.get(fraction)
    if glyph:
        return f"{whole}{glyph}" if whole > 0 else glyph

    return _decimal_string(value, AMOUNT_PRECISION)


def float_to_fraction(value):
    """Convert float to an ASCII fraction string ('2 1/2') for display.

    Older display format, kept for pages that cannot render the Unicode
    glyphs. Compares against precise fraction values within a tolerance.
    """
    if value is None or value == 0:
        return '0'
    if not math.isfinite(value):
        return ''
    value = round_amount(value, LEGACY_PRECISION)
    # Check if it's a whole number
    if value == int(value):
        return str(int(value))
    # Split into whole and decimal parts
    whole = int(value)
    decimal = value - whole
    # Check common fractions (with tolerance)
    for dec, frac in COMMON_FRACTIONS.items():
        if abs(decimal - dec) < LEGACY_TOLERANCE:
            if whole > 0:
                return f"{whole} {frac}"
            return frac
    # Fall back to decimal
    return _decimal_string(value, LEGACY_PRECISION)


FRACTION_STYLES = {
    'unicode': format_as_fraction,
    'ascii': float_to_fraction,
}


def format_amount(value, style='unicode'):
    """Format an amount in the configured style; None renders as ''."""
    if value is None:
        return ''
    try:
        formatter = FRACTION_STYLES[style]
    except KeyError:
        raise ValueError(f"Unknown fraction style: {style!r}") from None
    return formatter(value)


def get_scale_label(scale):
    """Display label for a scale factor: '1x (Original)', '½x', '2x', '1.5x'."""
    if scale == 1:
        return '1x (Original)'
    if scale < 1:
        return f"{format_as_fraction(scale)}x"
    if scale == int(scale):
        return f"{int(scale)}x"
    return f"{scale:.1f}x"
