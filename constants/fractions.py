"""
Fraction Constants

Lookup tables between fraction tokens and their decimal values. Parsing
accepts both ASCII ("1/2") and Unicode ("½") tokens; display prefers the
Unicode glyphs.
"""

from types import MappingProxyType

# Decimal places every computed amount is rounded to
AMOUNT_PRECISION = 2

# Unicode vulgar fraction glyphs (glyph -> decimal, rounded to AMOUNT_PRECISION)
UNICODE_FRACTIONS = MappingProxyType({
    '½': 0.5,
    '⅓': 0.33,
    '⅔': 0.67,
    '¼': 0.25,
    '¾': 0.75,
    '⅕': 0.2,
    '⅖': 0.4,
    '⅗': 0.6,
    '⅘': 0.8,
    '⅙': 0.17,
    '⅚': 0.83,
    '⅐': 0.14,
    '⅛': 0.13,
    '⅑': 0.11,
    '⅒': 0.1,
    '⅜': 0.38,
    '⅝': 0.63,
    '⅞': 0.88,
})

# ASCII fractions common in recipes (token -> decimal, rounded to AMOUNT_PRECISION)
ASCII_FRACTIONS = MappingProxyType({
    '1/8': 0.13, '1/4': 0.25, '1/3': 0.33, '1/2': 0.5,
    '2/3': 0.67, '3/4': 0.75, '1/6': 0.17, '5/6': 0.83,
    '1/16': 0.06, '3/8': 0.38, '5/8': 0.63, '7/8': 0.88,
    '1/5': 0.2, '2/5': 0.4, '3/5': 0.6, '4/5': 0.8,
    '1/10': 0.1, '3/10': 0.3, '7/10': 0.7, '9/10': 0.9,
})

# Every token the number parser resolves by exact lookup
FRACTION_VALUES = MappingProxyType({**ASCII_FRACTIONS, **UNICODE_FRACTIONS})

# Decimal -> preferred display glyph. Only fractions a cook would
# recognise; sevenths, ninths and tenths render as decimals.
UNICODE_DISPLAY = MappingProxyType({
    0.5: '½',
    0.33: '⅓',
    0.67: '⅔',
    0.25: '¼',
    0.75: '¾',
    0.2: '⅕',
    0.4: '⅖',
    0.6: '⅗',
    0.8: '⅘',
    0.17: '⅙',
    0.83: '⅚',
    0.13: '⅛',
    0.38: '⅜',
    0.63: '⅝',
    0.88: '⅞',
})

# Legacy ASCII display (precise values, matched within LEGACY_TOLERANCE)
LEGACY_PRECISION = 3
LEGACY_TOLERANCE = 0.01
COMMON_FRACTIONS = MappingProxyType({
    0.125: '1/8', 0.25: '1/4', 0.333: '1/3', 0.375: '3/8',
    0.5: '1/2', 0.625: '5/8', 0.667: '2/3', 0.75: '3/4', 0.875: '7/8'
})
