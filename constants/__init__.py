"""
Constants Package

Static lookup tables shared by the parsing and formatting services.
"""

from .fractions import (
    AMOUNT_PRECISION,
    ASCII_FRACTIONS,
    COMMON_FRACTIONS,
    FRACTION_VALUES,
    LEGACY_PRECISION,
    LEGACY_TOLERANCE,
    UNICODE_DISPLAY,
    UNICODE_FRACTIONS,
)
from .units import UNIT_MAPPINGS
from .validation import MAX_LENGTHS, MAX_SCALE, MIN_SCALE, SCALE_PRESETS
