"""Реестр действий промо-акций.

Тип действия — ключ регистрации в реестре, а не константа самого действия.
Реестр наполняется при сборке приложения и далее только читается.
"""

import logging
from typing import Any, Iterable, Protocol, runtime_checkable

from src.core.domain.promotion import Promotion
from src.promotion.actions.unit_fixed_discount import UnitFixedDiscountAction
from src.promotion.adjustments import AdjustmentBuilder, UnitPromotionAdjustmentBuilder
from src.promotion.errors import (
    ExistingPromotionActionError,
    NonExistingPromotionActionError,
    TypeMismatch,
)
from src.promotion.filters import ItemFilter, PassThroughFilter

logger = logging.getLogger(__name__)


# Ключ регистрации фиксированной скидки на единицу товара
UNIT_FIXED_DISCOUNT = "unit_fixed_discount"


@runtime_checkable
class PromotionAction(Protocol):
    """Capability действия промо-акции."""

    def execute(
        self, subject: Any, configuration: dict[str, Any], promotion: Promotion
    ) -> bool:
        ...


class PromotionActionRegistry:
    """Реестр действий: type → PromotionAction."""

    def __init__(self):
        self._actions: dict[str, PromotionAction] = {}

    def register(self, action_type: str, action: PromotionAction) -> None:
        """
        Регистрация действия.

        Raises:
            ExistingPromotionActionError: если тип уже зарегистрирован
            TypeMismatch: если у действия нет вызываемого execute()
        """
        if self.has(action_type):
            raise ExistingPromotionActionError(action_type)
        if not callable(getattr(action, "execute", None)):
            raise TypeMismatch(action, "PromotionAction")

        self._actions[action_type] = action
        logger.debug("Registered promotion action %s (%s)", action_type, type(action).__name__)

    def unregister(self, action_type: str) -> None:
        """
        Удаление действия из реестра.

        Raises:
            NonExistingPromotionActionError: если тип не зарегистрирован
        """
        if not self.has(action_type):
            raise NonExistingPromotionActionError(action_type, list(self._actions))
        del self._actions[action_type]

    def has(self, action_type: str) -> bool:
        return action_type in self._actions

    def get(self, action_type: str) -> PromotionAction:
        """
        Получение действия по типу.

        Raises:
            NonExistingPromotionActionError: если тип не зарегистрирован
        """
        if not self.has(action_type):
            raise NonExistingPromotionActionError(action_type, list(self._actions))
        return self._actions[action_type]

    def all(self) -> dict[str, PromotionAction]:
        """Копия всех зарегистрированных действий в порядке регистрации."""
        return dict(self._actions)


def build_default_registry(
    adjustment_builder: AdjustmentBuilder | None = None,
    price_range_filter: ItemFilter | None = None,
    taxon_filter: ItemFilter | None = None,
    product_filter: ItemFilter | None = None,
    additional_item_filters: Iterable[ItemFilter] = (),
) -> PromotionActionRegistry:
    """
    Реестр с зарегистрированным действием UNIT_FIXED_DISCOUNT.

    Незаданные фильтры заменяются PassThroughFilter, незаданный builder —
    UnitPromotionAdjustmentBuilder.
    """
    registry = PromotionActionRegistry()
    registry.register(
        UNIT_FIXED_DISCOUNT,
        UnitFixedDiscountAction(
            adjustment_builder if adjustment_builder is not None else UnitPromotionAdjustmentBuilder(),
            price_range_filter if price_range_filter is not None else PassThroughFilter(),
            taxon_filter if taxon_filter is not None else PassThroughFilter(),
            product_filter if product_filter is not None else PassThroughFilter(),
            additional_item_filters,
        ),
    )
    return registry
