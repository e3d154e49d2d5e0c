"""
DefensiveCollectionHolder — Неизменяемая обёртка над списком строк

Immutable Pydantic модель с защитным копированием:
- при создании входная последовательность копируется поэлементно;
- при каждом чтении возвращается новая независимая копия.

Ни исходная последовательность вызывающего кода, ни любая выданная копия
не разделяют хранилище с внутренним состоянием модели.
"""

from typing import Any, Iterable

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# DEFENSIVE COLLECTION HOLDER
# =============================================================================


class DefensiveCollectionHolder(BaseModel):
    """
    Модель неизменяемой упорядоченной коллекции строк.

    Immutable модель (frozen=True). Внутреннее хранилище — tuple,
    построенный из свежей копии входа, поэтому сам атрибут items
    изменить нельзя, а get_items() выдаёт изменяемый список,
    не связанный с моделью.
    """

    items: tuple[str, ...] = Field(..., description="Элементы коллекции в исходном порядке")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, items: Iterable[str], **data) -> None:
        super().__init__(items=items, **data)

    @field_validator("items", mode="before")
    @classmethod
    def copy_input(cls, v: Any) -> list[Any]:
        """
        Поэлементная копия входной последовательности.

        None и одиночная строка отклоняются: строка не трактуется
        как последовательность символов.
        """
        if v is None:
            raise ValueError("items must be a sequence of strings, got None")
        if isinstance(v, (str, bytes)):
            raise ValueError(f"items must be a sequence of strings, got {type(v).__name__}")
        try:
            return list(v)
        except TypeError:
            raise ValueError(f"items must be iterable, got {type(v).__name__}")

    def get_items(self) -> list[str]:
        """
        Новая копия элементов.

        Returns:
            Список тех же элементов в том же порядке; каждый вызов
            возвращает независимый список.
        """
        return list(self.items)
