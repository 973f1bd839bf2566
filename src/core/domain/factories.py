"""
Фабрики qualitative-доменов

- qualitative_domain: домен из пар (имя, точки) одним вызовом
- symmetric_domain: симметричный треугольный домен с вершинами i/(n-1) на [0, 1]
"""

from collections.abc import Iterable, Mapping, Sequence

from src.core.domain.qualitative import QualitativeDomain
from src.core.math.numerical_safeguards import KEY_DECIMALS, round_to_decimals
from src.fuzzy.label import Label
from src.fuzzy.trapezoidal import TrapezoidalMembership


def qualitative_domain(
    labels: Mapping[str, Sequence[float]] | Iterable[tuple[str, Sequence[float]]] = (),
) -> QualitativeDomain:
    """
    Построение домена из пар (имя, точки трапеции).

    Ошибки валидации меток и домена пробрасываются как есть
    (pydantic ValidationError с типом ошибки).

    Args:
        labels: dict {имя: точки} или последовательность пар (имя, точки).
            Для dict дубликаты имён невозможны; для пар — ValidationError
            duplicate_label_name.

    Returns:
        QualitativeDomain

    Examples:
        >>> str(qualitative_domain({"a": [0.0, 0.0, 1.0], "b": [0.0, 1.0, 1.0]}))
        '[a => (0.00, 0.00, 1.00), b => (0.00, 1.00, 1.00)]'
    """
    pairs = labels.items() if isinstance(labels, Mapping) else labels
    return QualitativeDomain(
        labels=tuple(
            Label(name=name, membership=TrapezoidalMembership(points=tuple(points)))
            for name, points in pairs
        )
    )


def symmetric_domain(names: Sequence[str]) -> QualitativeDomain:
    """
    Симметричный треугольный домен на [0, 1] с вершинами i/(n-1).

    - 0 имён → пустой домен
    - 1 имя → (0, 0, 1, 1)
    - n >= 2 → вершины i/(n-1); метка l = (v[l], v[l+1], v[l+2]),
      где v = [0] + [i/(n-1)] + [1]

    Вершины округляются до KEY_DECIMALS знаков, поэтому при некоторых n
    (например 4 или 7) соседние шаги расходятся на 1e-5 и is_uniform()
    возвращает False.

    Examples:
        >>> str(symmetric_domain(["a", "b", "c"]))
        '[a => (0.00, 0.00, 0.50), b => (0.00, 0.50, 1.00), c => (0.50, 1.00, 1.00)]'
    """
    n = len(names)
    if n == 0:
        return qualitative_domain()
    if n == 1:
        return qualitative_domain([(names[0], (0.0, 0.0, 1.0, 1.0))])

    denominator = n - 1
    values = [0.0] + [round_to_decimals(i / denominator, KEY_DECIMALS) for i in range(n)] + [1.0]
    return qualitative_domain(
        (name, tuple(values[position : position + 3])) for position, name in enumerate(names)
    )
