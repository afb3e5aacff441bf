"""Ошибки промо-движка.

- TypeMismatch: нарушение precondition (значение не того типа / без нужного capability)
- PromotionRegistryError: ошибки реестра действий
"""

from typing import Any


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TypeMismatch(TypeError):
    """
    Аргумент не соответствует ожидаемому типу.

    Фатально для вызова: не перехватывается и не повторяется.
    """

    def __init__(self, value: Any, expected_type: str):
        self.value = value
        self.expected_type = expected_type
        super().__init__(
            f'Expected argument of type "{expected_type}", "{type(value).__name__}" given'
        )


class PromotionRegistryError(Exception):
    """Базовая ошибка реестра действий промо-акций."""
    pass


class ExistingPromotionActionError(PromotionRegistryError, ValueError):
    """Действие с таким типом уже зарегистрировано."""

    def __init__(self, action_type: str):
        self.action_type = action_type
        super().__init__(f'Promotion action of type "{action_type}" already exists')


class NonExistingPromotionActionError(PromotionRegistryError, KeyError):
    """Действие с таким типом не зарегистрировано."""

    def __init__(self, action_type: str, registered: list[str]):
        self.action_type = action_type
        self.registered = registered
        super().__init__(
            f'Promotion action of type "{action_type}" does not exist, '
            f"registered types: {', '.join(registered) or '(none)'}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ оборачивает сообщение в кавычки
        return str(self.args[0])
