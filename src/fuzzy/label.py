"""
Label — лингвистическая метка (имя + функция принадлежности)

Имя метки должно быть стандартизировано: name == name.strip().lower()
и не пустое.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from src.fuzzy.trapezoidal import TrapezoidalMembership


def standardize_name(name: str) -> str:
    """
    Стандартизация имени: strip + lower.

    Examples:
        >>> standardize_name(" NoT oK ")
        'not ok'
    """
    return name.strip().lower()


def is_standardized(name: str) -> bool:
    """True если name уже стандартизировано."""
    return name == standardize_name(name)


class Label(BaseModel):
    """
    Метка qualitative-домена.

    Ошибки валидации (ValidationError, поле "type"):
    - non_standardized_name: имя не стандартизировано
    - empty_name: пустое имя
    """

    name: str = Field(..., description="Стандартизированное имя метки")
    membership: TrapezoidalMembership = Field(..., description="Функция принадлежности")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not is_standardized(v):
            raise PydanticCustomError(
                "non_standardized_name", "Name '{name}' isn't standardized.", {"name": v}
            )
        if not v:
            raise PydanticCustomError("empty_name", "Empty name provided.")
        return v

    def __str__(self) -> str:
        return f"{self.name} => {self.membership}"


def get_labels_names(labels: list[Label] | tuple[Label, ...]) -> list[str]:
    """Имена меток в исходном порядке."""
    return [label.name for label in labels]
