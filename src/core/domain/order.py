"""
Order — Модели заказа, позиции заказа и единицы товара

Структура: Order → OrderItem → OrderItemUnit → Adjustment.

Evaluator промо-акций читает заказ и только добавляет корректировки
к единицам; существующие корректировки никогда не изменяются.
Все суммы — целые неотрицательные числа в центах.
"""

from pydantic import BaseModel, Field

from .adjustment import Adjustment
from .channel import Channel
from .promotion import Promotion


# =============================================================================
# ORDER ITEM UNIT
# =============================================================================


class OrderItemUnit(BaseModel):
    """
    Единица товара — минимальная сущность с ценой.

    total = max(0, base_total + сумма корректировок (кроме neutral)).
    Отрицательный total невозможен: единица не может стоить меньше нуля.
    """

    base_total: int = Field(..., ge=0, description="Цена единицы до корректировок (центы)")
    adjustments: list[Adjustment] = Field(
        default_factory=list, description="Корректировки, прикреплённые к единице"
    )

    @property
    def adjustments_total(self) -> int:
        """Сумма всех не-нейтральных корректировок (центы)."""
        return sum(a.amount for a in self.adjustments if not a.neutral)

    @property
    def total(self) -> int:
        """
        Итоговая стоимость единицы.

        Returns:
            max(0, base_total + adjustments_total)
        """
        return max(0, self.base_total + self.adjustments_total)

    def add_adjustment(self, adjustment: Adjustment) -> None:
        """Прикрепить корректировку к единице (append-only)."""
        self.adjustments.append(adjustment)


# =============================================================================
# ORDER ITEM
# =============================================================================


class OrderItem(BaseModel):
    """
    Позиция заказа (line item), группирующая одну или несколько единиц.

    Фильтры промо-акций оперируют позициями целиком: позиция либо
    проходит фильтр со всеми своими единицами, либо исключается.
    """

    product_code: str = Field(..., min_length=1, description="Код продукта")
    variant_code: str | None = Field(None, description="Код варианта продукта")
    taxon_codes: list[str] = Field(
        default_factory=list, description="Коды таксонов (категорий) продукта"
    )
    unit_price: int = Field(..., ge=0, description="Цена одной единицы (центы)")
    units: list[OrderItemUnit] = Field(
        default_factory=list, description="Единицы товара позиции"
    )

    @classmethod
    def with_quantity(
        cls,
        product_code: str,
        unit_price: int,
        quantity: int,
        **kwargs,
    ) -> "OrderItem":
        """
        Создание позиции с quantity единицами по цене unit_price.

        Args:
            product_code: код продукта
            unit_price: цена единицы (центы)
            quantity: количество единиц (>= 1)
            **kwargs: прочие поля OrderItem (variant_code, taxon_codes)

        Returns:
            OrderItem с quantity свежими единицами

        Raises:
            ValueError: если quantity < 1
        """
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        return cls(
            product_code=product_code,
            unit_price=unit_price,
            units=[OrderItemUnit(base_total=unit_price) for _ in range(quantity)],
            **kwargs,
        )

    @property
    def quantity(self) -> int:
        """Количество единиц в позиции."""
        return len(self.units)

    @property
    def total(self) -> int:
        """Сумма total всех единиц позиции (центы)."""
        return sum(unit.total for unit in self.units)


# =============================================================================
# ORDER
# =============================================================================


class Order(BaseModel):
    """
    Заказ — subject для промо-акций.

    Содержит канал продаж и упорядоченный список позиций. Список
    применённых промо-акций пополняет PromotionApplicator.
    """

    number: str | None = Field(None, description="Номер заказа")
    channel: Channel = Field(..., description="Канал продаж заказа")
    items: list[OrderItem] = Field(default_factory=list, description="Позиции заказа")
    promotions: list[Promotion] = Field(
        default_factory=list, description="Применённые промо-акции"
    )

    @property
    def units(self) -> list[OrderItemUnit]:
        """Все единицы всех позиций заказа в порядке позиций."""
        return [unit for item in self.items for unit in item.units]

    @property
    def total(self) -> int:
        """Сумма total всех позиций (центы)."""
        return sum(item.total for item in self.items)

    def has_promotion(self, promotion: Promotion) -> bool:
        """Проверка, применена ли промо-акция (по коду)."""
        return any(p.code == promotion.code for p in self.promotions)

    def add_promotion(self, promotion: Promotion) -> None:
        """Зафиксировать применённую промо-акцию (без дубликатов)."""
        if not self.has_promotion(promotion):
            self.promotions.append(promotion)
