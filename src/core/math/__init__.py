"""
Core math modules

Алгебра интервалов и кусочно-линейных функций с фиксированной точностью.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Precision constants
    DOMAIN_COMPARE_DECIMALS,
    FUNCTION_DECIMALS,
    KEY_DECIMALS,
    PIECE_MERGE_DECIMALS,
    TRAPEZOID_SYMMETRY_TOL,
    # Rounding / quantization
    dequantize,
    quantize,
    round_to_decimals,
    # Comparisons
    approx_equal,
    approx_equal_truncated,
    is_valid_float,
    is_zero,
    # Normalization / validation
    normalize_to_range,
    validate_in_range,
)

# Interval algebra
from src.core.math.bounded_interval import BoundedInterval, InvalidRangeError

# Linear functions
from src.core.math.linear_function import LinearFunction
from src.core.math.piecewise_linear_function import (
    InvalidPieceRangeError,
    PiecewiseLinearFunction,
)

__all__ = [
    # Numerical Safeguards: Precision constants
    "DOMAIN_COMPARE_DECIMALS",
    "FUNCTION_DECIMALS",
    "KEY_DECIMALS",
    "PIECE_MERGE_DECIMALS",
    "TRAPEZOID_SYMMETRY_TOL",
    # Numerical Safeguards: Rounding / quantization
    "dequantize",
    "quantize",
    "round_to_decimals",
    # Numerical Safeguards: Comparisons
    "approx_equal",
    "approx_equal_truncated",
    "is_valid_float",
    "is_zero",
    # Numerical Safeguards: Normalization / validation
    "normalize_to_range",
    "validate_in_range",
    # Interval algebra
    "BoundedInterval",
    "InvalidRangeError",
    # Linear functions
    "LinearFunction",
    "PiecewiseLinearFunction",
    "InvalidPieceRangeError",
]
