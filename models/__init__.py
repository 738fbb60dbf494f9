"""
Models Package

Exports the ingredient value objects used throughout the application.
"""

from .ingredient import IngredientEntry, ParsedIngredient
