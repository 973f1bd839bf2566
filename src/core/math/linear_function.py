"""
LinearFunction — аффинная функция y = slope·x + intercept

Коэффициенты округляются до FUNCTION_DECIMALS знаков при создании, что
исключает дрейф точности после многократных сложений в piecewise-функции.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.math.numerical_safeguards import (
    FUNCTION_DECIMALS,
    PIECE_MERGE_DECIMALS,
    approx_equal_truncated,
    is_valid_float,
    round_to_decimals,
)


@dataclass(frozen=True)
class LinearFunction:
    """
    Линейная функция f(x) = slope·x + intercept.

    Immutable (frozen=True), hashable. Сумма двух функций — новая функция.
    """

    slope: float
    intercept: float

    def __post_init__(self) -> None:
        for name in ("slope", "intercept"):
            value = getattr(self, name)
            if not is_valid_float(value):
                raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

        # frozen dataclass: округление через object.__setattr__
        object.__setattr__(self, "slope", round_to_decimals(self.slope, FUNCTION_DECIMALS))
        object.__setattr__(
            self, "intercept", round_to_decimals(self.intercept, FUNCTION_DECIMALS)
        )

    def __str__(self) -> str:
        return f"y = {self.slope:.2f}·x + {self.intercept:.2f}"

    def __add__(self, other: LinearFunction) -> LinearFunction:
        if not isinstance(other, LinearFunction):
            return NotImplemented
        return self.sum(other)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def sum(self, other: LinearFunction) -> LinearFunction:
        """
        Покомпонентная сумма (коммутативна).

        Examples:
            >>> LinearFunction(2.1, 3.1).sum(LinearFunction(2.3, 3.7))
            LinearFunction(slope=4.4, intercept=6.8)
        """
        return LinearFunction(self.slope + other.slope, self.intercept + other.intercept)

    def evaluate(self, x: float) -> float:
        """Значение функции в точке x."""
        return self.slope * x + self.intercept

    def approx_equal(
        self, other: LinearFunction, decimals: int = PIECE_MERGE_DECIMALS
    ) -> bool:
        """Равенство slope и intercept с усечением до `decimals` знаков."""
        return approx_equal_truncated(
            self.slope, other.slope, decimals
        ) and approx_equal_truncated(self.intercept, other.intercept, decimals)
