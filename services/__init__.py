"""
Services Package

Ingredient parsing, formatting and scaling for the recipe application.
"""

from .parsing import (
    parse_fraction,
    parse_ingredient,
    parse_ingredients,
    parse_number,
    round_amount,
    split_unit,
)

from .formatting import (
    FRACTION_STYLES,
    float_to_fraction,
    format_amount,
    format_as_fraction,
    get_scale_label,
)

from .scaling import (
    ScaleFactorError,
    format_ingredient_entry,
    scale_ingredient,
    scale_ingredient_entry,
    scale_ingredients,
    scale_line,
    scaled_amounts,
    validate_scale_factor,
)

__all__ = [
    # Parsing
    'parse_fraction',
    'parse_ingredient',
    'parse_ingredients',
    'parse_number',
    'round_amount',
    'split_unit',
    # Formatting
    'FRACTION_STYLES',
    'float_to_fraction',
    'format_amount',
    'format_as_fraction',
    'get_scale_label',
    # Scaling
    'ScaleFactorError',
    'format_ingredient_entry',
    'scale_ingredient',
    'scale_ingredient_entry',
    'scale_ingredients',
    'scale_line',
    'scaled_amounts',
    'validate_scale_factor',
]
