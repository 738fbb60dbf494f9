"""
Tests for scaling parsed lines and structured ingredient entries.
Run with: pytest tests/test_scaling.py
"""

import math

import pytest

from models import IngredientEntry
from services import (
    ScaleFactorError,
    format_ingredient_entry,
    parse_ingredient,
    scale_ingredient,
    scale_ingredient_entry,
    scale_ingredients,
    scale_line,
    scaled_amounts,
    validate_scale_factor,
)

SAMPLE_LINES = [
    '2 cups flour',
    '2 1/2 cups flour',
    '¾ cup sugar',
    '1-2 tbsp olive oil',
    '1/3 cup milk',
    '3 large eggs',
    '1.5 lb ground beef',
]


def test_scale_single_amount():
    assert scale_ingredient(parse_ingredient('2 cups flour'), 2) == '4 cups flour'
    assert scale_line('¾ cup sugar', 2) == '1½ cup sugar'
    assert scale_line('2 1/2 cups flour', 0.5) == '1¼ cups flour'
    assert scale_line('3 eggs', 0.5) == '1½ eggs'


def test_scale_range_formats_each_end():
    assert scale_ingredient(parse_ingredient('1-2 tbsp olive oil'), 2) == '2-4 tbsp olive oil'
    assert scale_line('1 to 2 cups milk', 1.5) == '1½-3 cups milk'


def test_scale_out_of_order_range_keeps_order():
    assert scale_line('2-1 cups flour', 2) == '4-2 cups flour'


def test_unparseable_line_is_scale_invariant():
    parsed = parse_ingredient('a pinch of salt')
    for multiplier in (0.25, 1, 5, 10):
        assert scale_ingredient(parsed, multiplier) == 'a pinch of salt'
    assert scaled_amounts(parsed, 5) == ()


def test_scale_without_unit_omits_it():
    assert scale_line('3 eggs', 2) == '6 eggs'


def test_scale_ascii_style():
    assert scale_line('1 cup milk', 1.5, style='ascii') == '1 1/2 cup milk'


def test_multiplier_one_reproduces_amounts():
    for line in SAMPLE_LINES:
        parsed = parse_ingredient(line)
        assert parsed.parseable, line
        assert scaled_amounts(parsed, 1) == parsed.amounts


def test_scaling_is_monotonic():
    multipliers = [0.25, 0.5, 1, 1.5, 2, 3, 10]
    for line in SAMPLE_LINES:
        parsed = parse_ingredient(line)
        if parsed.is_range:
            continue
        values = [scaled_amounts(parsed, m)[0] for m in multipliers]
        assert values == sorted(values), line
        assert len(set(values)) == len(values), line


def test_entry_without_amount_is_unchanged():
    entry = IngredientEntry(ingredient='salt to taste')
    for multiplier in (0.5, 2, 3):
        scaled = scale_ingredient_entry(entry, multiplier)
        assert scaled.amount is None
        assert scaled == entry


def test_entry_amount_is_multiplied():
    entry = IngredientEntry(ingredient='flour', amount=2, unit='cups')
    scaled = scale_ingredient_entry(entry, 1.5)
    assert scaled.amount == 3.0
    assert scaled.unit == 'cups'
    assert scaled.ingredient == 'flour'
    # Original entry is untouched
    assert entry.amount == 2


def test_scale_ingredients_list():
    entries = [
        IngredientEntry(ingredient='milk', amount=1.5, unit='cups'),
        IngredientEntry(ingredient='salt to taste'),
    ]
    scaled = scale_ingredients(entries, 2)
    assert [e.amount for e in scaled] == [3.0, None]
    assert scale_ingredients(None, 2) == []
    assert scale_ingredients([], 2) == []


def test_format_ingredient_entry():
    assert format_ingredient_entry(IngredientEntry('milk', 1.5, 'cups')) == '1½ cups milk'
    assert format_ingredient_entry(IngredientEntry('salt to taste')) == 'salt to taste'
    assert format_ingredient_entry(IngredientEntry('eggs', 3)) == '3 eggs'
    assert format_ingredient_entry(IngredientEntry('pepper', 0, 'pinch')) == 'pinch pepper'
    assert format_ingredient_entry(IngredientEntry('milk', 1.5, 'cups'), 'ascii') == '1 1/2 cups milk'


def test_entry_from_dict():
    entry = IngredientEntry.from_dict({'amount': '2', 'unit': 'cups', 'ingredient': 'flour'})
    assert entry == IngredientEntry('flour', 2.0, 'cups')
    assert IngredientEntry.from_dict({'ingredient': 'salt'}).amount is None


def test_validate_scale_factor_accepts_numbers():
    assert validate_scale_factor(2) == 2.0
    assert validate_scale_factor('1.5') == 1.5
    assert validate_scale_factor(0.25) == 0.25
    assert validate_scale_factor(10) == 10.0


def test_validate_scale_factor_rejects_bad_values():
    for value in (0, -1, 'abc', None, True, math.nan, math.inf, 11, 0.1):
        with pytest.raises(ScaleFactorError):
            validate_scale_factor(value)
    # ScaleFactorError is a ValueError
    with pytest.raises(ValueError):
        validate_scale_factor('')


def test_overflowing_line_is_left_as_written():
    text = '1' + '0' * 308 + ' cups flour'
    parsed = parse_ingredient(text)
    assert parsed.parseable
    assert scale_line(text, 10) == text
    assert scaled_amounts(parsed, 10) == ()
    assert scale_line('2 cups flour', math.nan) == '2 cups flour'


def test_overflowing_entry_is_unchanged():
    entry = IngredientEntry('flour', 1e308, 'cups')
    assert scale_ingredient_entry(entry, 10) is entry
    assert scale_ingredients([entry], 10) == [entry]


def test_entry_from_dict_rejects_unusable_amounts():
    for amount in ('nan', 'inf', '-inf', -1, 10 ** 400):
        with pytest.raises(ValueError):
            IngredientEntry.from_dict({'amount': amount, 'ingredient': 'flour'})
    assert IngredientEntry.from_dict({'amount': 0, 'ingredient': 'salt'}).amount == 0.0
