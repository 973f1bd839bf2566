"""
Qualitative — qualitative-домен (упорядоченный набор лингвистических меток)

Структурные предикаты домена:
- is_odd: нечётная кардинальность
- is_triangular: все метки треугольные
- is_fuzzy_partition: сумма функций принадлежности ≡ 1 на [0, 1] (Ruspini)
- is_symmetrical: метки зеркальны относительно центральной оси
- is_uniform: центры меток равноотстоящие
- is_tor: Triangular + Odd + Ruspini
- is_blts: TOR + symmetrical + uniform (Basic Linguistic Term Set)

Порядок меток считается возрастающим вдоль оси оценки; домен его
не пересортировывает.

Immutable Pydantic модель.
"""

import logging
from functools import reduce

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from src.core.math.numerical_safeguards import DOMAIN_COMPARE_DECIMALS, approx_equal
from src.core.math.piecewise_linear_function import PiecewiseLinearFunction
from src.fuzzy.label import Label, get_labels_names

logger = logging.getLogger(__name__)


# =============================================================================
# QUALITATIVE DOMAIN
# =============================================================================


class QualitativeDomain(BaseModel):
    """
    Qualitative-домен.

    Ошибки валидации (ValidationError, поле "type"):
    - duplicate_label_name: две метки с одинаковым именем
    """

    labels: tuple[Label, ...] = Field(default=(), description="Метки в порядке возрастания")

    model_config = {"frozen": True}

    @field_validator("labels")
    @classmethod
    def validate_unique_names(cls, v: tuple[Label, ...]) -> tuple[Label, ...]:
        seen: set[str] = set()
        for name in get_labels_names(v):
            if name in seen:
                raise PydanticCustomError(
                    "duplicate_label_name", "Duplicate label name {name}", {"name": name}
                )
            seen.add(name)
        return v

    def __str__(self) -> str:
        return "[" + ", ".join(str(label) for label in self.labels) + "]"

    # -------------------------------------------------------------------------
    # Доступ к меткам
    # -------------------------------------------------------------------------

    @property
    def cardinality(self) -> int:
        return len(self.labels)

    def labels_names(self) -> list[str]:
        return get_labels_names(self.labels)

    def contains_label(self, name: str) -> bool:
        return name in self.labels_names()

    def label_position(self, name: str) -> int | None:
        """Позиция метки по имени или None."""
        names = self.labels_names()
        return names.index(name) if name in names else None

    def get_label_by_position(self, position: int) -> Label | None:
        if 0 <= position < self.cardinality:
            return self.labels[position]
        return None

    def get_label_by_name(self, name: str) -> Label | None:
        position = self.label_position(name)
        return None if position is None else self.labels[position]

    # -------------------------------------------------------------------------
    # Структурные предикаты
    # -------------------------------------------------------------------------

    def is_odd(self) -> bool:
        return self.cardinality % 2 == 1

    def is_triangular(self) -> bool:
        """Все метки треугольные (пустой домен → True)."""
        return all(label.membership.is_triangular() for label in self.labels)

    def sum_membership(self) -> PiecewiseLinearFunction:
        """Сумма piecewise-представлений всех меток (последовательный merge)."""
        return reduce(
            lambda acc, label: acc.merge(label.membership.to_piecewise()),
            self.labels,
            PiecewiseLinearFunction(),
        )

    def is_fuzzy_partition(self) -> bool:
        """
        Ruspini-разбиение: сумма принадлежностей — ровно y = 1 на [0, 1].

        Пустой домен разбиением не является.
        """
        total = self.sum_membership()
        result = total.is_constant(0.0, 1.0, 1.0)
        logger.debug("is_fuzzy_partition %s: sum=%s -> %s", self.labels_names(), total, result)
        return result

    def is_symmetrical(self) -> bool:
        """
        Зеркальная симметрия меток относительно центральной оси.

        - нечётная кардинальность: средняя метка симметрична относительно
          собственного центроида, ось = этот центроид
        - чётная: ось = среднее центроидов двух средних меток
        Каждая пара (i, n-1-i) должна быть зеркальной относительно оси.
        Пустой домен → True.
        """
        n = self.cardinality
        if n == 0:
            return True

        middle = n // 2
        if self.is_odd():
            central = self.labels[middle].membership
            center = central.centroid()
            if not central.is_symmetrical_respect_center(central, center):
                return False
        else:
            center = (
                self.labels[middle - 1].membership.centroid()
                + self.labels[middle].membership.centroid()
            ) / 2.0

        return all(
            self.labels[i].membership.is_symmetrical_respect_center(
                self.labels[n - 1 - i].membership, center
            )
            for i in range(middle)
        )

    def is_uniform(self) -> bool:
        """
        Центры меток (середины ядра [b, c]) равноотстоящие.

        Сравнение шагов до DOMAIN_COMPARE_DECIMALS знаков.
        Меньше трёх меток → True.
        """
        centers = [sum(label.membership.center()) / 2.0 for label in self.labels]
        steps = [right - left for left, right in zip(centers, centers[1:])]
        if not steps:
            return True
        return all(approx_equal(step, steps[0], DOMAIN_COMPARE_DECIMALS) for step in steps)

    def is_tor(self) -> bool:
        """Triangular, Odd, Ruspini."""
        return self.is_odd() and self.is_triangular() and self.is_fuzzy_partition()

    def is_blts(self) -> bool:
        """Basic Linguistic Term Set: TOR + symmetrical + uniform."""
        return self.is_tor() and self.is_symmetrical() and self.is_uniform()
