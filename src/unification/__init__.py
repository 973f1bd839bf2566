"""Unification — векторы степеней принадлежности для числовых и интервальных оценок."""

from .degrees import UnifiedAssessment, unify_interval, unify_numeric

__all__ = [
    "UnifiedAssessment",
    "unify_numeric",
    "unify_interval",
]
