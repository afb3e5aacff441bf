"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигураций промо-акций.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    UnitFixedDiscountConfigurationValidator,
    validate_unit_fixed_discount_configuration,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UnitFixedDiscountConfigurationValidator",
    # Functions
    "validate_unit_fixed_discount_configuration",
]
