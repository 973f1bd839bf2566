"""Unification — перевод числовых и интервальных оценок в векторы степеней

Числовая или интервальная оценка из quantitative-универсума нормализуется
в [0, 1] и переводится в вектор степеней принадлежности меток
qualitative-домена:
- число → membership_value каждой метки
- интервал → max_min каждой метки
"""

from dataclasses import dataclass

from src.core.domain.qualitative import QualitativeDomain
from src.core.math.bounded_interval import BoundedInterval
from src.core.math.numerical_safeguards import normalize_to_range, validate_in_range


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class UnifiedAssessment:
    """Вектор степеней принадлежности по меткам домена."""

    labels: tuple[str, ...]
    degrees: tuple[float, ...]

    def as_dict(self) -> dict[str, float]:
        return dict(zip(self.labels, self.degrees))

    def dominant_label(self) -> str | None:
        """Метка с максимальной степенью (первая при равенстве); None для пустого домена."""
        if not self.degrees:
            return None
        best = max(range(len(self.degrees)), key=lambda i: self.degrees[i])
        return self.labels[best]


# =============================================================================
# UNIFICATION
# =============================================================================


def unify_numeric(
    value: float, universe: BoundedInterval, domain: QualitativeDomain
) -> UnifiedAssessment:
    """Унификация числовой оценки.

    Args:
        value: Оценка (должна лежать в universe, границы включены)
        universe: Quantitative-универсум оценки
        domain: Qualitative-домен

    Returns:
        UnifiedAssessment со степенями membership_value(normalized)

    Raises:
        ValueError: Если value вне universe или NaN/Inf
    """
    validate_in_range(value, "value", universe.inf, universe.sup)
    normalized = normalize_to_range(value, universe.inf, universe.sup)

    return UnifiedAssessment(
        labels=tuple(domain.labels_names()),
        degrees=tuple(label.membership.membership_value(normalized) for label in domain.labels),
    )


def unify_interval(
    inf: float, sup: float, universe: BoundedInterval, domain: QualitativeDomain
) -> UnifiedAssessment:
    """Унификация интервальной оценки [inf, sup].

    Args:
        inf: Нижняя граница оценки
        sup: Верхняя граница оценки
        universe: Quantitative-универсум оценки
        domain: Qualitative-домен

    Returns:
        UnifiedAssessment со степенями max_min(normalized_inf, normalized_sup)

    Raises:
        InvalidRangeError: Если inf > sup
        ValueError: Если интервал выходит за universe
    """
    assessment = BoundedInterval(inf, sup)
    validate_in_range(assessment.inf, "inf", universe.inf, universe.sup)
    validate_in_range(assessment.sup, "sup", universe.inf, universe.sup)

    low = normalize_to_range(assessment.inf, universe.inf, universe.sup)
    high = normalize_to_range(assessment.sup, universe.inf, universe.sup)

    return UnifiedAssessment(
        labels=tuple(domain.labels_names()),
        degrees=tuple(label.membership.max_min(low, high) for label in domain.labels),
    )
