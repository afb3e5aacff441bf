"""PromotionApplicator — применение действий промо-акции к заказу.

Для каждого действия промо-акции (в порядке объявления):
1. Поиск действия в реестре по type
2. Валидация конфигурации по JSON Schema контракту действия (если объявлен)
3. execute(order, configuration, promotion)

Промо-акция считается применённой, если применилось хотя бы одно действие;
в этом случае она фиксируется в заказе.
"""

import logging
from dataclasses import dataclass

from src.core.contracts import ContractValidator
from src.core.domain.order import Order
from src.core.domain.promotion import Promotion
from src.promotion.registry import PromotionActionRegistry

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ApplicatorConfig:
    """Конфигурация PromotionApplicator."""

    # Проверять конфигурацию действий по JSON Schema перед execute
    validate_configuration: bool = True


# =============================================================================
# APPLICATOR
# =============================================================================


class PromotionApplicator:
    """Применение всех действий промо-акции к заказу."""

    def __init__(
        self,
        registry: PromotionActionRegistry,
        config: ApplicatorConfig | None = None,
    ):
        self.registry = registry
        self.config = config or ApplicatorConfig()
        self._validators: dict[str, ContractValidator] = {}

    def apply(self, order: Order, promotion: Promotion) -> bool:
        """
        Применение промо-акции к заказу.

        Args:
            order: заказ
            promotion: промо-акция с действиями

        Returns:
            True если применилось хотя бы одно действие

        Raises:
            NonExistingPromotionActionError: если тип действия не зарегистрирован
            jsonschema.ValidationError: если конфигурация действия невалидна
        """
        applied = False
        for spec in promotion.actions:
            action = self.registry.get(spec.type)

            schema_name = getattr(action, "configuration_schema", None)
            if self.config.validate_configuration and schema_name:
                self._validator(schema_name).validate(spec.configuration)

            # Все действия выполняются, даже если одно уже применилось
            applied = action.execute(order, spec.configuration, promotion) or applied

        if applied:
            order.add_promotion(promotion)
            logger.info("Promotion %s applied to order %s", promotion.code, order.number)
        else:
            logger.debug("Promotion %s not applicable to order %s", promotion.code, order.number)

        return applied

    def _validator(self, schema_name: str) -> ContractValidator:
        if schema_name not in self._validators:
            self._validators[schema_name] = ContractValidator(schema_name)
        return self._validators[schema_name]
