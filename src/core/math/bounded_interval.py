"""
BoundedInterval — упорядоченный числовой диапазон [inf, sup]

Алгебра интервалов, на которой построена piecewise linear function:
- intersection: пересечение (или None)
- difference: разность self − other (0, 1 или 2 интервала)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. inf <= sup (иначе InvalidRangeError)
2. Вырожденный интервал (inf == sup) валиден, но НЕ пересекается ни с чем,
   включая самого себя
3. Интервалы immutable и hashable (используются как ключи)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.core.math.numerical_safeguards import KEY_DECIMALS, dequantize, quantize

Number = int | float


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRangeError(ValueError):
    """
    Невалидный диапазон: inf > sup (или NaN в границах).

    Атрибуты inf/sup сохраняют исходные значения для диагностики.
    """

    def __init__(self, inf: Number, sup: Number):
        self.inf = inf
        self.sup = sup
        super().__init__(f"Invalid range [{inf}, {sup}]: inf must be <= sup")


# =============================================================================
# BOUNDED INTERVAL
# =============================================================================


@dataclass(frozen=True)
class BoundedInterval:
    """Замкнутый интервал [inf, sup] над int или float."""

    inf: Number
    sup: Number

    def __post_init__(self) -> None:
        if math.isnan(self.inf) or math.isnan(self.sup) or self.inf > self.sup:
            raise InvalidRangeError(self.inf, self.sup)

    def __str__(self) -> str:
        return f"[{self.inf}, {self.sup}]"

    @property
    def is_degenerate(self) -> bool:
        """True если inf == sup."""
        return self.inf == self.sup

    @property
    def length(self) -> Number:
        return self.sup - self.inf

    def contains(self, value: Number) -> bool:
        """Проверка inf <= value <= sup (границы включены)."""
        return self.inf <= value <= self.sup

    def intersection(self, other: BoundedInterval) -> BoundedInterval | None:
        """
        Пересечение с `other`.

        Вырожденные интервалы не пересекаются ни с чем. Касание в одной точке
        пересечением не считается.

        Args:
            other: Второй интервал

        Returns:
            Интервал-пересечение или None

        Examples:
            >>> BoundedInterval(0, 2).intersection(BoundedInterval(1, 3))
            BoundedInterval(inf=1, sup=2)
            >>> BoundedInterval(0, 1).intersection(BoundedInterval(1, 2)) is None
            True
        """
        if self.is_degenerate or other.is_degenerate:
            return None

        if self.inf >= other.inf:
            if self.sup <= other.sup:
                return self
            if self.inf < other.sup:
                return BoundedInterval(self.inf, other.sup)
            return None

        # self.inf < other.inf: роли меняются
        if other.sup <= self.sup:
            return other
        if self.sup > other.inf:
            return BoundedInterval(other.inf, self.sup)
        return None

    def difference(self, other: BoundedInterval) -> list[BoundedInterval]:
        """
        Разность self − other.

        Args:
            other: Вычитаемый интервал

        Returns:
            Список из 0, 1 или 2 интервалов (слева направо)

        Examples:
            >>> BoundedInterval(0, 4).difference(BoundedInterval(1, 2))
            [BoundedInterval(inf=0, sup=1), BoundedInterval(inf=2, sup=4)]
            >>> BoundedInterval(1, 2).difference(BoundedInterval(0, 4))
            []
        """
        if self.inf >= other.inf:
            if self.inf >= other.sup:
                return [self]
            if self.sup > other.sup:
                return [BoundedInterval(other.sup, self.sup)]
            return []

        if self.sup > other.inf:
            result = [BoundedInterval(self.inf, other.inf)]
            if self.sup > other.sup:
                result.append(BoundedInterval(other.sup, self.sup))
            return result

        return [self]

    # -------------------------------------------------------------------------
    # Квантованная форма (ключи piecewise-функции)
    # -------------------------------------------------------------------------

    def quantize(self, decimals: int = KEY_DECIMALS) -> BoundedInterval:
        """Интервал с целочисленными границами round(x * 10**decimals)."""
        return BoundedInterval(quantize(self.inf, decimals), quantize(self.sup, decimals))

    def dequantize(self, decimals: int = KEY_DECIMALS) -> BoundedInterval:
        """Обратное преобразование квантованного интервала во float."""
        return BoundedInterval(dequantize(self.inf, decimals), dequantize(self.sup, decimals))
