"""
Adjustment — Модель денежной корректировки

Корректировка привязывается к единице товара (OrderItemUnit) и хранит
знаковый денежный эффект: скидки промо-акций хранятся отрицательными.
Все суммы — целые числа в минимальных единицах валюты (центы).
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class AdjustmentType(str, Enum):
    """Тип корректировки"""

    ORDER_PROMOTION = "order_promotion"
    ORDER_ITEM_PROMOTION = "order_item_promotion"
    ORDER_UNIT_PROMOTION = "order_unit_promotion"
    SHIPPING = "shipping"
    TAX = "tax"


# =============================================================================
# ADJUSTMENT MODEL
# =============================================================================


class Adjustment(BaseModel):
    """
    Модель корректировки цены единицы товара.

    Immutable модель (frozen=True). Создаётся один раз и после прикрепления
    к единице не изменяется и не удаляется evaluator'ом.
    """

    type: AdjustmentType = Field(..., description="Тип корректировки")
    amount: int = Field(
        ..., description="Знаковая сумма (центы); скидки отрицательны"
    )
    label: str | None = Field(None, description="Подпись (обычно имя промо-акции)")
    origin_code: str | None = Field(
        None, description="Код источника (код промо-акции)"
    )
    neutral: bool = Field(
        default=False, description="Нейтральная корректировка не меняет total"
    )

    model_config = {"frozen": True}

    @property
    def discount(self) -> int:
        """
        Абсолютная величина скидки.

        Returns:
            -amount для отрицательных корректировок, иначе 0
        """
        return max(0, -self.amount)
