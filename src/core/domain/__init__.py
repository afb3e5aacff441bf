"""
Domain models and value objects.

Contains fundamental domain entities like Order, OrderItem, OrderItemUnit,
Adjustment, Channel and Promotion.
"""

from src.core.domain.adjustment import Adjustment, AdjustmentType
from src.core.domain.channel import Channel
from src.core.domain.order import Order, OrderItem, OrderItemUnit
from src.core.domain.promotion import (
    ChannelDiscountConfiguration,
    Promotion,
    PromotionActionSpec,
    UnitFixedDiscountConfiguration,
    parse_unit_fixed_discount_configuration,
)

__all__ = [
    # Adjustment model
    "Adjustment",
    "AdjustmentType",
    # Channel model
    "Channel",
    # Order models
    "Order",
    "OrderItem",
    "OrderItemUnit",
    # Promotion models
    "Promotion",
    "PromotionActionSpec",
    "ChannelDiscountConfiguration",
    "UnitFixedDiscountConfiguration",
    "parse_unit_fixed_discount_configuration",
]
