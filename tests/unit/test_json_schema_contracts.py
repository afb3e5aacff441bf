"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных конфигураций
- Детекция нарушений required полей и типов
- Согласованность с Pydantic моделью конфигурации
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    ContractValidator,
    SchemaLoader,
    UnitFixedDiscountConfigurationValidator,
    validate_unit_fixed_discount_configuration,
)
from src.core.domain import parse_unit_fixed_discount_configuration


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_configuration():
    """Валидная конфигурация фиксированной скидки для двух каналов."""
    return {
        "WEB": {
            "amount": 500,
            "filters": {
                "price_range_filter": {"min": 1000, "max": 50000},
                "taxons_filter": {"taxons": ["mugs", "t_shirts"]},
                "products_filter": {"products": ["MUG_SW"]},
            },
        },
        "APP": {"amount": 0},
    }


@pytest.fixture
def validator():
    return UnitFixedDiscountConfigurationValidator()


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_loads_and_caches_schema(self):
        loader = SchemaLoader()

        first = loader.load_schema("unit_fixed_discount_configuration")
        second = loader.load_schema("unit_fixed_discount_configuration")

        assert first is second
        assert first["type"] == "object"

    def test_missing_schema_raises(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_loader_for_validator(self, tmp_path):
        (tmp_path / "flag.json").write_text(
            json.dumps({"type": "object", "required": ["flag"]}), encoding="utf-8"
        )

        validator = ContractValidator("flag", loader=SchemaLoader(tmp_path))

        assert validator.is_valid({"flag": True}) is True
        assert validator.is_valid({}) is False


# =============================================================================
# UNIT FIXED DISCOUNT CONFIGURATION
# =============================================================================


class TestUnitFixedDiscountConfiguration:
    """Тесты контракта unit_fixed_discount_configuration"""

    def test_valid_configuration(self, validator, valid_configuration):
        validator.validate(valid_configuration)
        validate_unit_fixed_discount_configuration(valid_configuration)

    def test_empty_configuration_is_valid(self, validator):
        assert validator.is_valid({}) is True

    def test_extra_filter_params_allowed(self, validator):
        assert validator.is_valid({"WEB": {"amount": 100, "custom_param": [1, 2]}}) is True

    def test_negative_amount_is_valid(self, validator):
        assert validator.is_valid({"WEB": {"amount": -100}}) is True

    def test_missing_amount(self, validator):
        with pytest.raises(ValidationError, match="'amount' is a required property"):
            validator.validate({"WEB": {}})

    @pytest.mark.parametrize("amount", ["500", 5.5, None, True])
    def test_non_integer_amount(self, validator, amount):
        assert validator.is_valid({"WEB": {"amount": amount}}) is False

    def test_channel_configuration_must_be_object(self, validator):
        assert validator.is_valid({"WEB": 500}) is False

    def test_empty_channel_code_rejected(self, validator):
        assert validator.is_valid({"": {"amount": 100}}) is False

    def test_invalid_price_range(self, validator):
        errors = list(
            validator.iter_errors(
                {"WEB": {"amount": 1, "filters": {"price_range_filter": {"min": -5, "avg": 1}}}}
            )
        )

        assert len(errors) == 2

    def test_taxons_must_be_strings(self, validator):
        assert (
            validator.is_valid({"WEB": {"amount": 1, "filters": {"taxons_filter": {"taxons": [1]}}}})
            is False
        )

    def test_schema_and_pydantic_model_agree(self, validator, valid_configuration):
        """Валидная по схеме конфигурация разбирается моделью без потерь."""
        validator.validate(valid_configuration)

        parsed = parse_unit_fixed_discount_configuration(valid_configuration)

        assert parsed.to_mapping() == valid_configuration
