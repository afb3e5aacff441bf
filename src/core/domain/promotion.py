"""
Promotion — Модель промо-акции и конфигурации её действий

Evaluator не инспектирует промо-акцию: она передаётся в каждую созданную
корректировку как источник (origin). Структура действий используется только
PromotionApplicator.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


# =============================================================================
# PROMOTION ACTION
# =============================================================================


class PromotionActionSpec(BaseModel):
    """
    Конфигурация одного действия промо-акции.

    type — ключ регистрации действия в PromotionActionRegistry,
    configuration — параметры, передаваемые действию без изменений.
    """

    type: str = Field(..., min_length=1, description="Ключ типа действия в реестре")
    configuration: dict[str, Any] = Field(
        default_factory=dict, description="Конфигурация действия"
    )

    model_config = {"frozen": True}


# =============================================================================
# PROMOTION
# =============================================================================


class Promotion(BaseModel):
    """
    Модель промо-акции.

    Immutable модель (frozen=True).
    """

    code: str = Field(..., min_length=1, description="Уникальный код промо-акции")
    name: str = Field(..., min_length=1, description="Имя (подпись корректировок)")
    priority: int = Field(default=0, description="Приоритет применения")
    exclusive: bool = Field(
        default=False, description="Эксклюзивная акция не комбинируется с другими"
    )
    actions: list[PromotionActionSpec] = Field(
        default_factory=list, description="Действия промо-акции в порядке применения"
    )

    model_config = {"frozen": True}


# =============================================================================
# UNIT FIXED DISCOUNT CONFIGURATION
# =============================================================================


class ChannelDiscountConfiguration(BaseModel):
    """
    Конфигурация фиксированной скидки для одного канала.

    amount == 0 означает "скидка отключена для канала". Дополнительные
    ключи (границы цены, коды таксонов, коды продуктов) — параметры
    фильтров, хранятся как есть (extra="allow").
    """

    amount: int = Field(..., description="Фиксированная скидка на единицу (центы)")

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount_is_int(cls, v: Any) -> Any:
        """Только int: bool, float и строки отклоняются."""
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"amount must be an integer, got {v!r}")
        return v

    @property
    def is_enabled(self) -> bool:
        """Скидка включена (amount != 0)."""
        return self.amount != 0

    def to_mapping(self) -> dict[str, Any]:
        """Плоский dict: amount + параметры фильтров."""
        return self.model_dump()


class UnitFixedDiscountConfiguration(RootModel[dict[str, ChannelDiscountConfiguration]]):
    """Конфигурация фиксированной скидки: channel code → ChannelDiscountConfiguration."""

    def channel_codes(self) -> list[str]:
        """Коды каналов, для которых есть конфигурация."""
        return list(self.root)

    def to_mapping(self) -> dict[str, dict[str, Any]]:
        """Mapping в формате, который принимает UnitFixedDiscountAction."""
        return {code: channel.to_mapping() for code, channel in self.root.items()}


def parse_unit_fixed_discount_configuration(
    data: dict[str, Any],
) -> UnitFixedDiscountConfiguration:
    """
    Разбор и валидация конфигурации фиксированной скидки.

    Args:
        data: {channel_code: {"amount": int, ...filter_params}}

    Returns:
        UnitFixedDiscountConfiguration

    Raises:
        pydantic.ValidationError: если конфигурация некорректна
    """
    return UnitFixedDiscountConfiguration.model_validate(data)
