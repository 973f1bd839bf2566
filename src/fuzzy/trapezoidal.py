"""
Trapezoidal — трапециевидная функция принадлежности

Определяется четырьмя упорядоченными точками (a, b, c, d):
- [a, d] — носитель (coverage)
- [b, c] — ядро (center), где принадлежность равна 1
- b == c — треугольная функция (3 точки на входе → b == c)

Immutable Pydantic модель. Точки всегда хранятся в нормализованном виде
из 4 значений.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from src.core.math.linear_function import LinearFunction
from src.core.math.numerical_safeguards import (
    DOMAIN_COMPARE_DECIMALS,
    TRAPEZOID_SYMMETRY_TOL,
    approx_equal,
    is_zero,
)
from src.core.math.piecewise_linear_function import PiecewiseLinearFunction


# =============================================================================
# TRAPEZOIDAL MEMBERSHIP
# =============================================================================


class TrapezoidalMembership(BaseModel):
    """
    Трапециевидная функция принадлежности.

    Ошибки валидации (ValidationError, поле "type"):
    - not_enough_values: меньше 3 точек
    - too_many_values: больше 4 точек
    - unordered_values: точки не по возрастанию
    """

    points: tuple[float, ...] = Field(..., description="Точки (a, b, c, d); 3 точки → (a, b, b, c)")

    model_config = {"frozen": True, "allow_inf_nan": False}

    @field_validator("points")
    @classmethod
    def validate_points(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        """Проверка количества и упорядоченности точек, нормализация к 4 точкам."""
        if len(v) < 3:
            raise PydanticCustomError(
                "not_enough_values",
                "Trapezoidal membership function needs at least 3 values, you provided {count}.",
                {"count": len(v)},
            )
        if len(v) > 4:
            raise PydanticCustomError(
                "too_many_values",
                "Trapezoidal membership function needs at most 4 values, you provided {count}.",
                {"count": len(v)},
            )
        if any(left > right for left, right in zip(v, v[1:])):
            raise PydanticCustomError(
                "unordered_values",
                "Trapezoidal membership function needs an ordered array of values.",
            )

        return (v[0], v[1], v[-2], v[-1])

    @classmethod
    def from_points(cls, *points: float) -> TrapezoidalMembership:
        """Сокращение: TrapezoidalMembership.from_points(0.0, 0.5, 1.0)."""
        return cls(points=points)

    # -------------------------------------------------------------------------
    # Геометрия
    # -------------------------------------------------------------------------

    @property
    def a(self) -> float:
        return self.points[0]

    @property
    def b(self) -> float:
        return self.points[1]

    @property
    def c(self) -> float:
        return self.points[2]

    @property
    def d(self) -> float:
        return self.points[3]

    def center(self) -> tuple[float, float]:
        """Ядро (b, c)."""
        return (self.b, self.c)

    def coverage(self) -> tuple[float, float]:
        """Носитель (a, d)."""
        return (self.a, self.d)

    def is_triangular(self) -> bool:
        return self.b == self.c

    def centroid(self) -> float:
        """
        Центроид трапеции.

        Трапеция разбивается на левый треугольник, центральный прямоугольник
        и правый треугольник; центроид — среднее их центроидов, взвешенное
        площадями. Фигура нулевой площади (a == d) → b.

        Returns:
            Абсцисса центроида
        """
        centroid_left = (self.a + 2.0 * self.b) / 3.0
        centroid_center = (self.b + self.c) / 2.0
        centroid_right = (2.0 * self.c + self.d) / 3.0

        area_left = (self.b - self.a) / 2.0
        area_center = self.c - self.b
        area_right = (self.d - self.c) / 2.0
        area_sum = area_left + area_center + area_right

        if is_zero(area_sum):
            return self.b

        return (
            centroid_left * area_left + centroid_center * area_center + centroid_right * area_right
        ) / area_sum

    def is_symmetrical(self) -> bool:
        """Левый и правый скаты равной ширины (толерантность TRAPEZOID_SYMMETRY_TOL)."""
        return abs((self.b - self.a) - (self.d - self.c)) < TRAPEZOID_SYMMETRY_TOL

    def is_symmetrical_respect_center(self, other: TrapezoidalMembership, center: float) -> bool:
        """
        Проверка, что `other` — зеркальное отражение self относительно `center`.

        Args:
            other: Вторая трапеция
            center: Ось отражения

        Returns:
            True если 2·center − (d, c, b, a) ≈ (a', b', c', d') до 5 знаков
        """
        r = 2.0 * center
        return all(
            approx_equal(r - mine, theirs, DOMAIN_COMPARE_DECIMALS)
            for mine, theirs in zip(reversed(self.points), other.points)
        )

    # -------------------------------------------------------------------------
    # Принадлежность
    # -------------------------------------------------------------------------

    def membership_value(self, x: float) -> float:
        """
        Степень принадлежности x.

        Examples:
            >>> t = TrapezoidalMembership(points=(0.0, 0.1, 0.2, 0.5))
            >>> t.membership_value(0.05)
            0.5
            >>> t.membership_value(0.15)
            1.0
        """
        if x <= self.a or x >= self.d:
            return 0.0
        if self.b <= x <= self.c:
            return 1.0
        if x < self.b:
            return (x - self.a) / (self.b - self.a)
        return (x - self.d) / (self.c - self.d)

    def max_min(self, min_value: float, max_value: float) -> float:
        """
        Max-min степень принадлежности интервала [min_value, max_value].

        Правило (сохраняется как есть, для совместимости):
        - 1.0 если интервал задевает ядро [b, c]
        - membership_value(max_value) если интервал левее ядра
        - иначе membership_value(min_value)
        """
        if max_value >= self.b and min_value <= self.c:
            return 1.0
        if max_value < self.b:
            return self.membership_value(max_value)
        return self.membership_value(min_value)

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_piecewise(self) -> PiecewiseLinearFunction:
        """
        Кусочно-линейное представление.

        Куски: левый скат (a→b), правый скат (d→c), плато y = 1 на [b, c].
        Вырожденные куски пропускаются.

        Examples:
            >>> str(TrapezoidalMembership(points=(0.0, 0.1, 0.2)).to_piecewise())
            '([0.00, 0.10] => y = 10.00·x + 0.00); ([0.10, 0.20] => y = -10.00·x + 2.00)'
        """
        result = PiecewiseLinearFunction()

        for f_0, f_1 in ((self.a, self.b), (self.d, self.c)):
            if f_0 == f_1:
                continue
            slope = 1.0 / (f_1 - f_0)
            intercept = -1.0 * slope * f_0
            result.add(min(f_0, f_1), max(f_0, f_1), LinearFunction(slope, intercept))

        if self.b != self.c:
            result.add(self.b, self.c, LinearFunction(0.0, 1.0))

        return result

    def __str__(self) -> str:
        if self.is_triangular():
            return f"({self.a:.2f}, {self.b:.2f}, {self.d:.2f})"
        return f"({self.a:.2f}, {self.b:.2f}, {self.c:.2f}, {self.d:.2f})"
