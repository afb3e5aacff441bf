"""Построение корректировок промо-акций для единиц товара.

AdjustmentBuilder — единственный capability: create(unit, amount, promotion).
Созданная корректировка прикрепляется к единице как побочный эффект.
"""

from typing import Protocol, runtime_checkable

from src.core.domain.adjustment import Adjustment, AdjustmentType
from src.core.domain.order import OrderItemUnit
from src.core.domain.promotion import Promotion


@runtime_checkable
class AdjustmentBuilder(Protocol):
    """Capability построения корректировки единицы."""

    def create(
        self, unit: OrderItemUnit, amount: int, promotion: Promotion
    ) -> Adjustment:
        ...


class UnitPromotionAdjustmentBuilder:
    """
    Builder корректировок типа ORDER_UNIT_PROMOTION.

    amount передаётся положительным (величина скидки) и сохраняется
    в корректировке со знаком минус. Источник — код промо-акции,
    подпись — её имя.
    """

    def __init__(self, adjustment_type: AdjustmentType = AdjustmentType.ORDER_UNIT_PROMOTION):
        self.adjustment_type = adjustment_type

    def create(
        self, unit: OrderItemUnit, amount: int, promotion: Promotion
    ) -> Adjustment:
        """
        Создание корректировки и прикрепление её к единице.

        Args:
            unit: единица товара
            amount: величина скидки (центы, >= 0)
            promotion: промо-акция-источник

        Returns:
            Созданная корректировка

        Raises:
            ValueError: если amount < 0
        """
        if amount < 0:
            raise ValueError(f"discount amount must be non-negative, got {amount}")

        adjustment = Adjustment(
            type=self.adjustment_type,
            amount=-amount,
            label=promotion.name,
            origin_code=promotion.code,
        )
        unit.add_adjustment(adjustment)
        return adjustment
