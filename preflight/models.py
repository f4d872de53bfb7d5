"""Модели данных preflight: ProbeCategory, ProbeResult."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProbeCategory(str, Enum):
    """Итог одного зонда. Присваивается ровно один раз за вызов."""

    PASS = "pass"
    WARNING = "warning"
    REJECTED = "rejected"
    ERROR = "error"

    @property
    def is_failure(self) -> bool:
        """rejected и error проваливают весь отчёт."""
        return self in (ProbeCategory.REJECTED, ProbeCategory.ERROR)


class ProbeResult(BaseModel):
    """Запись результата одного зонда в коллекторе."""

    path: Optional[list[str]] = Field(
        None, serialization_alias="Path", description="Иерархический путь зонда"
    )
    display_name: str = Field(
        ..., serialization_alias="DisplayName", description="Человекочитаемое имя"
    )
    prop: str = Field("", serialization_alias="Prop", description="Измеренное значение")
    message: str = Field("", serialization_alias="Message", description="Пояснение")
    category: ProbeCategory = Field(..., serialization_alias="Category")
    error: Optional[str] = Field(
        None, serialization_alias="Error", description="Текст ошибки зонда"
    )

    model_config = ConfigDict(frozen=True)

    def to_document(self) -> dict:
        """Словарь для JSON/YAML с ключами исходного формата отчёта."""
        return self.model_dump(mode="json", by_alias=True)
