"""Promotion — применение промо-акций к заказам.

- actions: действия промо-акций (фиксированная скидка на единицу)
- filters: контракт фильтров позиций и их свёртка
- adjustments: построение корректировок единиц
- registry: реестр действий по типу
- applicator: применение всех действий промо-акции к заказу
"""

from .actions import UnitFixedDiscountAction
from .adjustments import AdjustmentBuilder, UnitPromotionAdjustmentBuilder
from .applicator import ApplicatorConfig, PromotionApplicator
from .errors import (
    ExistingPromotionActionError,
    NonExistingPromotionActionError,
    PromotionRegistryError,
    TypeMismatch,
)
from .filters import ItemFilter, PassThroughFilter, apply_filters
from .registry import (
    UNIT_FIXED_DISCOUNT,
    PromotionAction,
    PromotionActionRegistry,
    build_default_registry,
)

__all__ = [
    # Actions
    "UnitFixedDiscountAction",
    # Adjustments
    "AdjustmentBuilder",
    "UnitPromotionAdjustmentBuilder",
    # Applicator
    "ApplicatorConfig",
    "PromotionApplicator",
    # Errors
    "TypeMismatch",
    "PromotionRegistryError",
    "ExistingPromotionActionError",
    "NonExistingPromotionActionError",
    # Filters
    "ItemFilter",
    "PassThroughFilter",
    "apply_filters",
    # Registry
    "UNIT_FIXED_DISCOUNT",
    "PromotionAction",
    "PromotionActionRegistry",
    "build_default_registry",
]
