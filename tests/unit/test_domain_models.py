"""
Тесты для доменных моделей: Channel, Order, OrderItem, OrderItemUnit,
Adjustment, Promotion, конфигурация фиксированной скидки

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Корректность расчёта total (корректировки, clamp к нулю)
3. Immutability (frozen=True) там, где модель неизменяема
4. Сериализацию/десериализацию JSON
5. Граничные случаи и невалидные данные
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Adjustment,
    AdjustmentType,
    Channel,
    ChannelDiscountConfiguration,
    Order,
    OrderItem,
    OrderItemUnit,
    Promotion,
    PromotionActionSpec,
    parse_unit_fixed_discount_configuration,
)


# =============================================================================
# CHANNEL / ADJUSTMENT
# =============================================================================


class TestChannel:
    """Тесты для модели Channel"""

    def test_create(self):
        channel = Channel(code="WEB", name="Web store")
        assert channel.code == "WEB"

    def test_empty_code_rejected(self):
        with pytest.raises(ValidationError):
            Channel(code="")

    def test_immutable(self):
        channel = Channel(code="WEB")
        with pytest.raises(ValidationError):
            channel.code = "APP"


class TestAdjustment:
    """Тесты для модели Adjustment"""

    def test_discount_of_negative_amount(self):
        adjustment = Adjustment(type=AdjustmentType.ORDER_UNIT_PROMOTION, amount=-250)
        assert adjustment.discount == 250

    def test_discount_of_positive_amount_is_zero(self):
        adjustment = Adjustment(type=AdjustmentType.SHIPPING, amount=250)
        assert adjustment.discount == 0

    def test_immutable(self):
        adjustment = Adjustment(type=AdjustmentType.TAX, amount=10)
        with pytest.raises(ValidationError):
            adjustment.amount = 20

    def test_json_roundtrip(self):
        adjustment = Adjustment(
            type=AdjustmentType.ORDER_UNIT_PROMOTION,
            amount=-100,
            label="Winter sale",
            origin_code="WINTER",
        )
        restored = Adjustment.model_validate_json(adjustment.model_dump_json())
        assert restored == adjustment
        assert '"order_unit_promotion"' in adjustment.model_dump_json()


# =============================================================================
# ORDER ITEM UNIT
# =============================================================================


class TestOrderItemUnit:
    """Тесты для модели OrderItemUnit"""

    def test_total_without_adjustments(self):
        assert OrderItemUnit(base_total=1000).total == 1000

    def test_total_with_adjustments(self):
        unit = OrderItemUnit(base_total=1000)
        unit.add_adjustment(Adjustment(type=AdjustmentType.ORDER_UNIT_PROMOTION, amount=-300))
        unit.add_adjustment(Adjustment(type=AdjustmentType.TAX, amount=50))

        assert unit.adjustments_total == -250
        assert unit.total == 750

    def test_total_never_negative(self):
        unit = OrderItemUnit(base_total=100)
        unit.add_adjustment(Adjustment(type=AdjustmentType.ORDER_PROMOTION, amount=-500))

        assert unit.total == 0

    def test_neutral_adjustment_ignored(self):
        unit = OrderItemUnit(base_total=1000)
        unit.add_adjustment(Adjustment(type=AdjustmentType.TAX, amount=200, neutral=True))

        assert unit.total == 1000

    def test_negative_base_total_rejected(self):
        with pytest.raises(ValidationError):
            OrderItemUnit(base_total=-1)


# =============================================================================
# ORDER ITEM / ORDER
# =============================================================================


class TestOrder:
    """Тесты для моделей OrderItem и Order"""

    def test_with_quantity(self):
        item = OrderItem.with_quantity("MUG", unit_price=900, quantity=3, taxon_codes=["mugs"])

        assert item.quantity == 3
        assert [unit.base_total for unit in item.units] == [900, 900, 900]
        assert item.taxon_codes == ["mugs"]
        assert item.total == 2700

    def test_with_quantity_units_are_distinct(self):
        item = OrderItem.with_quantity("MUG", unit_price=900, quantity=2)
        item.units[0].add_adjustment(Adjustment(type=AdjustmentType.TAX, amount=1))

        assert item.units[1].adjustments == []

    def test_with_zero_quantity_rejected(self):
        with pytest.raises(ValueError, match="quantity must be >= 1"):
            OrderItem.with_quantity("MUG", unit_price=900, quantity=0)

    def test_order_units_and_total(self):
        order = Order(
            channel=Channel(code="WEB"),
            items=[
                OrderItem.with_quantity("A", unit_price=100, quantity=2),
                OrderItem.with_quantity("B", unit_price=250, quantity=1),
            ],
        )

        assert len(order.units) == 3
        assert order.total == 450

    def test_order_keeps_item_instances(self):
        item = OrderItem.with_quantity("A", unit_price=100, quantity=1)
        order = Order(channel=Channel(code="WEB"), items=[item])

        assert order.items[0] is item

    def test_order_requires_channel(self):
        with pytest.raises(ValidationError):
            Order(items=[])

    def test_add_promotion_once(self):
        order = Order(channel=Channel(code="WEB"))
        promotion = Promotion(code="P1", name="Promo")

        order.add_promotion(promotion)
        order.add_promotion(Promotion(code="P1", name="Renamed"))

        assert order.has_promotion(promotion) is True
        assert order.promotions == [promotion]


# =============================================================================
# PROMOTION / CONFIGURATION
# =============================================================================


class TestPromotion:
    """Тесты для моделей Promotion и PromotionActionSpec"""

    def test_defaults(self):
        promotion = Promotion(code="P1", name="Promo")

        assert promotion.priority == 0
        assert promotion.exclusive is False
        assert promotion.actions == []

    def test_from_json(self):
        promotion = Promotion.model_validate_json(
            '{"code": "P1", "name": "Promo", "actions": '
            '[{"type": "unit_fixed_discount", "configuration": {"WEB": {"amount": 5}}}]}'
        )

        assert promotion.actions == [
            PromotionActionSpec(type="unit_fixed_discount", configuration={"WEB": {"amount": 5}})
        ]

    def test_action_type_required(self):
        with pytest.raises(ValidationError):
            PromotionActionSpec(type="")


class TestChannelDiscountConfiguration:
    """Тесты для конфигурации фиксированной скидки"""

    def test_extra_params_kept(self):
        config = ChannelDiscountConfiguration(amount=500, filters={"products_filter": {}})

        assert config.is_enabled is True
        assert config.to_mapping() == {"amount": 500, "filters": {"products_filter": {}}}

    def test_zero_amount_disabled(self):
        assert ChannelDiscountConfiguration(amount=0).is_enabled is False

    @pytest.mark.parametrize("amount", ["500", 5.0, True, None])
    def test_non_integer_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            ChannelDiscountConfiguration(amount=amount)

    def test_parse_whole_configuration(self):
        parsed = parse_unit_fixed_discount_configuration(
            {"WEB": {"amount": 500}, "APP": {"amount": 0}}
        )

        assert parsed.channel_codes() == ["WEB", "APP"]
        assert parsed.root["WEB"].amount == 500
        assert parsed.to_mapping() == {"WEB": {"amount": 500}, "APP": {"amount": 0}}

    def test_parse_rejects_missing_amount(self):
        with pytest.raises(ValidationError):
            parse_unit_fixed_discount_configuration({"WEB": {}})
