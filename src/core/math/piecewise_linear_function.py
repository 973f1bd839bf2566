"""
PiecewiseLinearFunction — кусочно-линейная функция

Отображение непересекающихся интервалов (квантованные ключи) в LinearFunction.

Ключевые операции:
- add: вставка куска с разбиением существующих интервалов; на пересечении
  функции СУММИРУЮТСЯ (линейная суперпозиция), а не перезаписываются
- simplify: слияние соседних кусков с равными функциями (fixed point)
- merge: новая функция = self + все куски other

Суммирование при пересечении позволяет строить сумму функций
принадлежности нескольких меток (проверка Ruspini-разбиения).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ключи — BoundedInterval с int-границами round(x * 10**KEY_DECIMALS)
2. Хранимые интервалы не пересекаются во внутренних точках
3. add перестраивает отображение целиком и вызывает simplify
4. simplify завершается: число кусков строго убывает на каждом проходе
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.core.math.bounded_interval import BoundedInterval, InvalidRangeError
from src.core.math.linear_function import LinearFunction
from src.core.math.numerical_safeguards import (
    DOMAIN_COMPARE_DECIMALS,
    KEY_DECIMALS,
    PIECE_MERGE_DECIMALS,
    approx_equal,
    dequantize,
    is_valid_float,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidPieceRangeError(ValueError):
    """Невалидный диапазон куска: inf > sup."""

    def __init__(self, inf: float, sup: float):
        self.inf = inf
        self.sup = sup
        super().__init__(f"Invalid piece range [{inf:.2f}, {sup:.2f}]")


# =============================================================================
# PIECEWISE LINEAR FUNCTION
# =============================================================================


class PiecewiseLinearFunction:
    """
    Кусочно-линейная функция над непересекающимися интервалами.

    Mutable-by-reconstruction: add перестраивает внутреннее отображение
    целиком; merge возвращает новый экземпляр.
    """

    def __init__(self) -> None:
        self._pieces: dict[BoundedInterval, LinearFunction] = {}

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @staticmethod
    def _key(inf: float, sup: float) -> BoundedInterval:
        if not (is_valid_float(inf) and is_valid_float(sup)):
            raise InvalidPieceRangeError(inf, sup)
        try:
            return BoundedInterval(inf, sup).quantize(KEY_DECIMALS)
        except InvalidRangeError as e:
            raise InvalidPieceRangeError(inf, sup) from e

    def add(self, inf: float, sup: float, piece: LinearFunction) -> None:
        """
        Добавление линейной функции на интервале [inf, sup].

        Алгоритм:
        1. differences = {D} — части D, ещё не покрытые существующими кусками
        2. Для каждого существующего (old, f), пересекающегося с D:
           - из каждого элемента differences вычитается old
           - части old вне пересечения сохраняются с f
           - на пересечении сохраняется f + piece
        3. Оставшиеся differences получают piece без изменений
        4. Отображение заменяется целиком, затем simplify

        Args:
            inf: Левая граница
            sup: Правая граница
            piece: Добавляемая функция

        Raises:
            InvalidPieceRangeError: Если inf > sup или граница NaN/Inf

        Examples:
            >>> plf = PiecewiseLinearFunction()
            >>> plf.add(0.0, 0.2, LinearFunction(1.3, 2.3))
            >>> plf.add(0.1, 0.4, LinearFunction(2.4, 3.3))
            >>> str(plf)
            '([0.00, 0.10] => y = 1.30·x + 2.30); ([0.10, 0.20] => y = 3.70·x + 5.60); ([0.20, 0.40] => y = 2.40·x + 3.30)'
        """
        domain = self._key(inf, sup)
        new_pieces: dict[BoundedInterval, LinearFunction] = {}
        differences = [domain]

        for old_domain, function in self._pieces.items():
            intersection = old_domain.intersection(domain)
            if intersection is None:
                new_pieces[old_domain] = function
                continue

            differences = [
                part for remaining in differences for part in remaining.difference(old_domain)
            ]

            for outside in old_domain.difference(intersection):
                new_pieces[outside] = function

            new_pieces[intersection] = function + piece

        for remaining in differences:
            new_pieces[remaining] = piece

        logger.debug(
            "add [%s, %s] %s: %d -> %d pieces", inf, sup, piece, len(self._pieces), len(new_pieces)
        )

        self._pieces = new_pieces
        self.simplify()

    def simplify(self) -> None:
        """
        Слияние соседних кусков с равными функциями до неподвижной точки.

        Пара (A, B) — кандидат на слияние, если A.inf == B.sup или A
        вырожден (A.inf == A.sup), и функции равны с усечением до
        PIECE_MERGE_DECIMALS знаков. Пара сливается в один кусок
        [min(inf), max(sup)] с функцией A. Ключ в пару с самим собой
        не ставится.
        """
        while True:
            consumed: set[BoundedInterval] = set()
            merged: dict[BoundedInterval, LinearFunction] = {}

            for domain_a, function_a in self._pieces.items():
                if domain_a in consumed:
                    continue
                for domain_b, function_b in self._pieces.items():
                    if domain_b == domain_a or domain_a in consumed or domain_b in consumed:
                        continue
                    if not (domain_a.inf == domain_b.sup or domain_a.sup == domain_a.inf):
                        continue
                    if not function_a.approx_equal(function_b, PIECE_MERGE_DECIMALS):
                        continue

                    consumed.add(domain_a)
                    consumed.add(domain_b)
                    union = BoundedInterval(
                        min(domain_a.inf, domain_b.inf), max(domain_a.sup, domain_b.sup)
                    )
                    merged[union] = function_a

            if not consumed:
                return

            new_pieces = {d: f for d, f in self._pieces.items() if d not in consumed}
            new_pieces.update(merged)
            logger.debug("simplify: %d -> %d pieces", len(self._pieces), len(new_pieces))
            self._pieces = new_pieces

    def merge(self, other: PiecewiseLinearFunction) -> PiecewiseLinearFunction:
        """
        Сумма двух piecewise-функций (новый экземпляр).

        Каждый кусок `other` вставляется в копию self через add.
        Операция коммутативна и ассоциативна.
        """
        result = self.copy()
        for domain, function in other.items():
            result.add(domain.inf, domain.sup, function)
        return result

    def copy(self) -> PiecewiseLinearFunction:
        result = PiecewiseLinearFunction()
        result._pieces = dict(self._pieces)
        return result

    @classmethod
    def from_pieces(
        cls, pieces: Iterable[tuple[float, float, LinearFunction]]
    ) -> PiecewiseLinearFunction:
        """Построение последовательными add из троек (inf, sup, function)."""
        result = cls()
        for inf, sup, function in pieces:
            result.add(inf, sup, function)
        return result

    # -------------------------------------------------------------------------
    # Инспекция
    # -------------------------------------------------------------------------

    def _sorted_items(self) -> list[tuple[BoundedInterval, LinearFunction]]:
        return sorted(self._pieces.items(), key=lambda item: (item[0].inf, item[0].sup))

    def pieces(self) -> list[BoundedInterval]:
        """Интервалы кусков (float-границы), отсортированные по inf."""
        return [domain.dequantize(KEY_DECIMALS) for domain, _ in self._sorted_items()]

    def items(self) -> list[tuple[BoundedInterval, LinearFunction]]:
        """Пары (интервал, функция) с float-границами, отсортированные по inf."""
        return [
            (domain.dequantize(KEY_DECIMALS), function) for domain, function in self._sorted_items()
        ]

    def value_at(self, x: float) -> float:
        """
        Значение функции в точке x.

        Вне всех кусков функция считается равной 0.0. На общей границе
        двух кусков берётся левый кусок.
        """
        for domain, function in self._sorted_items():
            if dequantize(domain.inf) <= x <= dequantize(domain.sup):
                return function.evaluate(x)
        return 0.0

    def is_constant(self, inf: float, sup: float, value: float) -> bool:
        """
        Проверка, что функция — ровно один кусок [inf, sup] с y = 0·x + value.

        Коэффициенты сравниваются с точностью DOMAIN_COMPARE_DECIMALS.
        """
        if len(self._pieces) != 1:
            return False

        domain, function = next(iter(self._pieces.items()))
        return (
            domain == self._key(inf, sup)
            and approx_equal(function.slope, 0.0, DOMAIN_COMPARE_DECIMALS)
            and approx_equal(function.intercept, value, DOMAIN_COMPARE_DECIMALS)
        )

    def __len__(self) -> int:
        return len(self._pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PiecewiseLinearFunction):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        return f"PiecewiseLinearFunction({self})"

    def __str__(self) -> str:
        return "; ".join(
            f"([{dequantize(d.inf):.2f}, {dequantize(d.sup):.2f}] => "
            f"y = {f.slope:.2f}·x + {f.intercept:.2f})"
            for d, f in self._sorted_items()
        )
