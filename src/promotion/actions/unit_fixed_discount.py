"""Действие промо-акции: фиксированная скидка на каждую единицу товара

Порядок работы:
1. Канал заказа → конфигурация канала (нет конфигурации → не применяется)
2. amount == 0 → скидка отключена для канала (не применяется)
3. Конвейер фильтров: price range → taxon → product → дополнительные фильтры
4. Пустой результат → не применяется
5. Каждой единице каждой оставшейся позиции — корректировка
   на min(unit.total, amount)

Фильтрация не имеет побочных эффектов; корректировки создаются строго
после завершения фильтрации. Повторный вызов создаёт корректировки повторно.
"""

import logging
from typing import Any, Iterable, Mapping

from src.core.domain.order import Order, OrderItem
from src.promotion.adjustments import AdjustmentBuilder
from src.promotion.errors import TypeMismatch
from src.promotion.filters import ItemFilter, apply_filters, ensure_item_filter

logger = logging.getLogger(__name__)


class UnitFixedDiscountAction:
    """Фиксированная скидка на единицу товара (per-channel amount).

    Stateless: все зависимости внедряются при создании и только вызываются.
    Безопасно для конкурентного вызова на независимых заказах при условии,
    что фильтры и builder сами потокобезопасны.
    """

    configuration_schema = "unit_fixed_discount_configuration"

    def __init__(
        self,
        adjustment_builder: AdjustmentBuilder,
        price_range_filter: ItemFilter,
        taxon_filter: ItemFilter,
        product_filter: ItemFilter,
        additional_item_filters: Iterable[ItemFilter] = (),
    ):
        """
        Args:
            adjustment_builder: builder корректировок единиц
            price_range_filter: первый фильтр (получает канал в параметрах)
            taxon_filter: фильтр по таксонам
            product_filter: фильтр по продуктам
            additional_item_filters: дополнительные фильтры в порядке применения

        Raises:
            TypeMismatch: если builder или любой фильтр не реализует capability
        """
        if not callable(getattr(adjustment_builder, "create", None)):
            raise TypeMismatch(adjustment_builder, "AdjustmentBuilder")

        self._adjustment_builder = adjustment_builder
        self._price_range_filter = ensure_item_filter(price_range_filter)
        self._taxon_filter = ensure_item_filter(taxon_filter)
        self._product_filter = ensure_item_filter(product_filter)
        self._additional_item_filters = tuple(
            ensure_item_filter(f) for f in additional_item_filters
        )

    @property
    def additional_item_filters(self) -> tuple[ItemFilter, ...]:
        return self._additional_item_filters

    def evaluate(
        self,
        subject: Any,
        configuration: Mapping[str, Mapping[str, Any]],
        promotion: Any,
    ) -> bool:
        """Применение фиксированной скидки к заказу.

        Args:
            subject: заказ (должен быть Order)
            configuration: {channel_code: {"amount": int, ...filter_params}}
            promotion: промо-акция (opaque), передаётся в builder как есть

        Returns:
            True если создана хотя бы одна корректировка, иначе False

        Raises:
            TypeMismatch: если subject не Order
        """
        if not isinstance(subject, Order):
            raise TypeMismatch(subject, "Order")

        channel = subject.channel
        channel_code = channel.code
        if channel_code not in configuration:
            logger.debug("Unit fixed discount: channel %s is not configured", channel_code)
            return False

        channel_configuration = configuration[channel_code]
        amount = channel_configuration["amount"]
        if amount == 0:
            logger.debug("Unit fixed discount: disabled for channel %s", channel_code)
            return False

        filtered_items = self._filter_items(subject, channel_configuration)
        if not filtered_items:
            logger.debug(
                "Unit fixed discount: no items left after filtering (channel %s)", channel_code
            )
            return False

        adjusted_units = 0
        for item in filtered_items:
            adjusted_units += self._set_units_adjustments(item, amount, promotion)

        logger.info(
            "Unit fixed discount applied on channel %s: %d unit adjustment(s) of up to %d",
            channel_code,
            adjusted_units,
            amount,
        )
        return True

    # Имя, под которым действие вызывает PromotionApplicator
    execute = evaluate

    def _filter_items(
        self, subject: Order, channel_configuration: Mapping[str, Any]
    ) -> list[OrderItem]:
        # Канал получает только первый фильтр
        filtered_items = self._price_range_filter.filter(
            list(subject.items),
            {"channel": subject.channel, **channel_configuration},
        )
        filtered_items = self._taxon_filter.filter(filtered_items, channel_configuration)
        filtered_items = self._product_filter.filter(filtered_items, channel_configuration)
        return apply_filters(
            filtered_items, self._additional_item_filters, channel_configuration
        )

    def _set_units_adjustments(
        self, item: OrderItem, amount: int, promotion: Any
    ) -> int:
        for unit in item.units:
            self._adjustment_builder.create(unit, min(unit.total, amount), promotion)
        return len(item.units)
