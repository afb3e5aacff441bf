"""Actions — действия промо-акций.

- unit_fixed_discount: фиксированная скидка на каждую единицу товара
"""

from .unit_fixed_discount import UnitFixedDiscountAction

__all__ = [
    "UnitFixedDiscountAction",
]
