"""
Validation Constants

Bounds for values accepted from the host application.
"""

# Scale factor bounds offered by the recipe scale slider
MIN_SCALE = 0.25
MAX_SCALE = 10

# Quick-select multipliers shown next to the slider
SCALE_PRESETS = (0.25, 0.5, 1, 1.5, 2, 3, 4, 5, 8, 10)

# Maximum field lengths for security
MAX_LENGTHS = {
    'ingredient_text': 500,
    'ingredient_lines': 200,
}
