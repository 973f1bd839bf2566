"""
Numerical Safeguards — точность, квантование и сравнения float

Модуль собирает все параметры точности библиотеки и примитивы,
которые на них опираются:
- Округление коэффициентов до фиксированного числа знаков
- Квантование границ интервалов в целочисленные ключи (и обратно)
- Сравнения float "до N знаков" (округление и усечение)
- Нормализация значений в [0, 1] для унификации оценок

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ключи piecewise-функции сравниваются только в квантованной (int) форме
2. Сравнение кусков при слиянии: усечение до 3 знаков
3. Сравнения на уровне домена (симметрия, равномерность): округление до 5 знаков
4. Эти толерантности НЕ взаимозаменяемы
"""

import math
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Число знаков при квантовании границ интервалов в ключи (scale = 10**5)
KEY_DECIMALS: Final[int] = 5

# Число знаков, до которого округляются slope/intercept линейной функции
FUNCTION_DECIMALS: Final[int] = 5

# Число знаков (усечение) при сравнении функций соседних кусков в simplify
PIECE_MERGE_DECIMALS: Final[int] = 3

# Число знаков (округление) для сравнений на уровне qualitative-домена
DOMAIN_COMPARE_DECIMALS: Final[int] = 5

# Абсолютная толерантность проверки собственной симметрии трапеции
TRAPEZOID_SYMMETRY_TOL: Final[float] = 0.01


# =============================================================================
# ВАЛИДНОСТЬ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_zero(value: float, tol: float = 1e-12) -> bool:
    """Проверка abs(value) <= tol."""
    return abs(value) <= tol


# =============================================================================
# ОКРУГЛЕНИЕ И КВАНТОВАНИЕ
# =============================================================================


def _round_half_away(value: float) -> int:
    # half away from zero, в отличие от встроенного round()
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


def round_to_decimals(value: float, decimals: int) -> float:
    """
    Округление значения до `decimals` знаков.

    Правила:
    - decimals == 0 → усечение дробной части
    - иначе округление half away from zero
    - результат с abs <= 10**-decimals схлопывается в 0.0
      (в т.ч. нормализует -0.0)

    Args:
        value: Значение для округления
        decimals: Число знаков после запятой (>= 0)

    Returns:
        Округлённое значение

    Examples:
        >>> round_to_decimals(1.1111, 2)
        1.11
        >>> round_to_decimals(1.9, 0)
        1.0
        >>> round_to_decimals(0.00001, 5)
        0.0
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    if decimals == 0:
        return float(math.trunc(value))

    pow_ = 10**decimals
    result = _round_half_away(value * pow_) / pow_
    if abs(result) <= 1.0 / pow_:
        return 0.0
    return result


def quantize(value: float, decimals: int = KEY_DECIMALS) -> int:
    """
    Квантование float в целочисленный ключ: round(value * 10**decimals).

    Examples:
        >>> quantize(0.1)
        10000
        >>> quantize(-0.5)
        -50000
    """
    return int(_round_half_away(value * 10**decimals))


def dequantize(key: int, decimals: int = KEY_DECIMALS) -> float:
    """Обратное преобразование ключа в float: key / 10**decimals."""
    return key / 10**decimals


# =============================================================================
# СРАВНЕНИЯ "ДО N ЗНАКОВ"
# =============================================================================


def approx_equal(a: float, b: float, decimals: int) -> bool:
    """
    Сравнение a и b с округлением до `decimals` знаков.

    Используется для сравнений на уровне домена (DOMAIN_COMPARE_DECIMALS).

    Examples:
        >>> approx_equal(1.0, 1.1, 0)
        True
        >>> approx_equal(1.01, 1.02, 1)
        True
        >>> approx_equal(1.01, 1.02, 2)
        False
    """
    factor = 10**decimals
    return _round_half_away(a * factor) == _round_half_away(b * factor)


def approx_equal_truncated(a: float, b: float, decimals: int) -> bool:
    """
    Сравнение a и b с усечением до `decimals` знаков.

    Используется только при слиянии соседних кусков (PIECE_MERGE_DECIMALS).

    Examples:
        >>> approx_equal_truncated(0.1234, 0.1239, 3)
        True
        >>> approx_equal_truncated(0.1241, 0.1231, 3)
        False
    """
    factor = 10**decimals
    return math.trunc(a * factor) == math.trunc(b * factor)


# =============================================================================
# НОРМАЛИЗАЦИЯ И ВАЛИДАЦИЯ
# =============================================================================


def normalize_to_range(
    value: float,
    old_min: float,
    old_max: float,
    new_min: float = 0.0,
    new_max: float = 1.0,
) -> float:
    """
    Нормализация значения из одного диапазона в другой.

    Вырожденный исходный диапазон (old_min == old_max) отображается в new_min.

    Args:
        value: Исходное значение
        old_min: Минимум исходного диапазона
        old_max: Максимум исходного диапазона
        new_min: Минимум целевого диапазона (default: 0.0)
        new_max: Максимум целевого диапазона (default: 1.0)

    Returns:
        Нормализованное значение

    Examples:
        >>> normalize_to_range(5.0, 0.0, 10.0)
        0.5
        >>> normalize_to_range(2.5, 0.0, 10.0, -1.0, 1.0)
        -0.5
    """
    span = old_max - old_min
    if is_zero(span):
        return new_min

    normalized = (value - old_min) / span
    return new_min + normalized * (new_max - new_min)


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
