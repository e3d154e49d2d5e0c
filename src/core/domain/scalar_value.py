"""
ScalarValueHolder — Неизменяемая обёртка над целочисленным значением

Immutable Pydantic модель: значение задаётся один раз при создании
и не может быть изменено после этого.
"""

from pydantic import BaseModel, Field


# =============================================================================
# SCALAR VALUE HOLDER
# =============================================================================


class ScalarValueHolder(BaseModel):
    """
    Модель неизменяемого целочисленного значения.

    Immutable модель (frozen=True): любая попытка присвоить атрибут
    завершается ValidationError.
    """

    value: int = Field(..., description="Хранимое целое значение")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: int, **data) -> None:
        super().__init__(value=value, **data)

    def get_value(self) -> int:
        """Хранимое значение."""
        return self.value
