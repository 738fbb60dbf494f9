# Utility modules for Recipe Scaling
from .sanitizer import clean_ingredient_text
