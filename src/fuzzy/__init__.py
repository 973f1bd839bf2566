"""Fuzzy — функции принадлежности и лингвистические метки.

- TrapezoidalMembership: трапециевидная (и треугольная) функция принадлежности
- Label: стандартизированное имя + функция принадлежности
"""

from .label import Label, get_labels_names, is_standardized, standardize_name
from .trapezoidal import TrapezoidalMembership

__all__ = [
    "TrapezoidalMembership",
    "Label",
    "standardize_name",
    "is_standardized",
    "get_labels_names",
]
