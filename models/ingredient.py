"""
Ingredient Models

Value objects passed between the parser, the scaler and the host
application. Neither is persisted by this package.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from constants import UNIT_MAPPINGS


@dataclass(frozen=True)
class ParsedIngredient:
    """
    One line of free-text ingredient data split into amount, unit and name.

    amounts holds one value for a single quantity or two for a range
    (low, high as written). When parseable is False, amounts is empty and
    ingredient is the original text verbatim.
    """
    original: str
    amounts: Tuple[float, ...] = field(default_factory=tuple)
    unit: str = ''
    ingredient: str = ''
    parseable: bool = False

    @classmethod
    def unparseable(cls, original):
        return cls(original=original, amounts=(), unit='', ingredient=original, parseable=False)

    @property
    def is_range(self):
        return len(self.amounts) == 2

    @property
    def canonical_unit(self):
        """Unit as listed in UNIT_MAPPINGS ('Tablespoons' -> 'tbsp'), or ''."""
        return UNIT_MAPPINGS.get(self.unit.lower(), '')

    def to_dict(self):
        return {
            'original': self.original,
            'amounts': list(self.amounts),
            'unit': self.unit,
            'ingredient': self.ingredient,
            'parseable': self.parseable,
        }


@dataclass(frozen=True)
class IngredientEntry:
    """Structured amount/unit/ingredient record stored by the recipe app.

    amount is None for ingredients without a quantity ("salt to taste").
    """
    ingredient: str
    amount: Optional[float] = None
    unit: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        amount = data.get('amount')
        if amount is not None:
            try:
                amount = float(amount)
            except OverflowError:
                raise ValueError('Ingredient amount is too large') from None
            if not math.isfinite(amount) or amount < 0:
                raise ValueError(f"Ingredient amount must be a finite, non-negative number, got {amount}")
        return cls(
            ingredient=str(data.get('ingredient') or ''),
            amount=amount,
            unit=data.get('unit') or None,
        )

    def with_amount(self, amount):
        return replace(self, amount=amount)

    def to_dict(self):
        return {'amount': self.amount, 'unit': self.unit, 'ingredient': self.ingredient}
