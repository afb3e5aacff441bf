"""Фильтры позиций заказа для действий промо-акций.

Фильтр — чистая функция над списком: (items, configuration) -> items.
Фильтр не изменяет позиции и не имеет побочных эффектов; позиции
отбираются или исключаются целиком.

Логика отбора (по цене, таксонам, продуктам) подключается извне через
capability ItemFilter. Здесь определены только контракт, identity-фильтр
и свёртка последовательности фильтров.
"""

from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from src.core.domain.order import OrderItem
from src.promotion.errors import TypeMismatch


# =============================================================================
# CAPABILITY
# =============================================================================


@runtime_checkable
class ItemFilter(Protocol):
    """Capability фильтра позиций."""

    def filter(
        self, items: list[OrderItem], configuration: Mapping[str, Any]
    ) -> list[OrderItem]:
        ...


def ensure_item_filter(candidate: Any) -> ItemFilter:
    """
    Проверка capability фильтра.

    Raises:
        TypeMismatch: если у объекта нет вызываемого filter()
    """
    if not callable(getattr(candidate, "filter", None)):
        raise TypeMismatch(candidate, "ItemFilter")
    return candidate


# =============================================================================
# FILTERS
# =============================================================================


class PassThroughFilter:
    """Identity-фильтр: пропускает все позиции без изменений.

    Используется для слотов конвейера, где отбор не настроен.
    """

    def filter(
        self, items: list[OrderItem], configuration: Mapping[str, Any]
    ) -> list[OrderItem]:
        return list(items)


def apply_filters(
    items: list[OrderItem],
    filters: Iterable[ItemFilter],
    configuration: Mapping[str, Any],
) -> list[OrderItem]:
    """
    Последовательное применение фильтров.

    Каждый фильтр получает результат предыдущего и одну и ту же конфигурацию.

    Args:
        items: исходный список позиций
        filters: фильтры в порядке применения
        configuration: параметры фильтров

    Returns:
        Список позиций после последнего фильтра
    """
    for item_filter in filters:
        items = item_filter.filter(items, configuration)
    return items
