"""
Unit Constants

Unit vocabulary recognised by the ingredient parser. Adding a unit only
requires a new entry here; the parser builds its pattern from these keys.
"""

# Unit mappings for ingredient parsing (lowercase input -> canonical unit)
UNIT_MAPPINGS = {
    # Volume
    'cup': 'cup', 'cups': 'cup',
    'teaspoon': 'tsp', 'teaspoons': 'tsp', 'tsp': 'tsp',
    'tablespoon': 'tbsp', 'tablespoons': 'tbsp', 'tbsp': 'tbsp',
    'fluid ounce': 'fl oz', 'fluid ounces': 'fl oz', 'fl oz': 'fl oz',
    'milliliter': 'ml', 'milliliters': 'ml', 'ml': 'ml',
    'liter': 'l', 'liters': 'l', 'l': 'l',
    'quart': 'qt', 'quarts': 'qt', 'qt': 'qt',
    'pint': 'pt', 'pints': 'pt', 'pt': 'pt',
    'gallon': 'gal', 'gallons': 'gal', 'gal': 'gal',
    # Mass
    'ounce': 'oz', 'ounces': 'oz', 'oz': 'oz',
    'pound': 'lb', 'pounds': 'lb', 'lb': 'lb', 'lbs': 'lb',
    'gram': 'g', 'grams': 'g', 'g': 'g',
    'kilogram': 'kg', 'kilograms': 'kg', 'kg': 'kg',
    # Count / shape
    'clove': 'clove', 'cloves': 'clove',
    'slice': 'slice', 'slices': 'slice',
    'piece': 'piece', 'pieces': 'piece',
    'can': 'can', 'cans': 'can',
    'package': 'package', 'packages': 'package',
    'box': 'box', 'boxes': 'box',
    'pinch': 'pinch', 'pinches': 'pinch',
    'dash': 'dash', 'dashes': 'dash',
    'inch': 'inch', 'inches': 'inch',
    'centimeter': 'cm', 'centimeters': 'cm', 'cm': 'cm',
    'large': 'large', 'medium': 'medium', 'small': 'small', 'whole': 'whole',
}
