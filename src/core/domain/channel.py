"""
Channel — Модель канала продаж

Канал идентифицируется уникальным кодом и используется только как ключ
для поиска конфигурации промо-акции.
"""

from pydantic import BaseModel, Field


class Channel(BaseModel):
    """
    Канал продаж (WEB, APP, POS, ...).

    Immutable модель (frozen=True).
    """

    code: str = Field(..., min_length=1, description="Уникальный код канала")
    name: str | None = Field(None, description="Отображаемое имя канала")

    model_config = {"frozen": True}
