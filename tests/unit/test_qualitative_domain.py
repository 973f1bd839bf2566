"""
Тесты для QualitativeDomain

Проверяет:
1. Валидацию (уникальность имён меток)
2. Доступ к меткам по имени и позиции
3. Структурные предикаты: odd, triangular, fuzzy partition, symmetrical,
   uniform, TOR, BLTS
"""

import pytest
from pydantic import ValidationError

from src.core.domain import QualitativeDomain, qualitative_domain, symmetric_domain
from src.core.math.numerical_safeguards import (
    DOMAIN_COMPARE_DECIMALS,
    PIECE_MERGE_DECIMALS,
    approx_equal,
    approx_equal_truncated,
)
from src.fuzzy.label import Label
from src.fuzzy.trapezoidal import TrapezoidalMembership

FIVE_NAMES = ["very low", "low", "medium", "high", "very high"]


# =============================================================================
# ТЕСТЫ СОЗДАНИЯ
# =============================================================================


class TestDomainCreation:
    """Тесты создания домена"""

    def test_empty_domain(self) -> None:
        """Пустой домен"""
        domain = QualitativeDomain()
        assert domain.cardinality == 0
        assert str(domain) == "[]"

    def test_str(self) -> None:
        """Строковое представление"""
        domain = qualitative_domain({"a": [0.0, 0.0, 1.0], "b": [0.0, 1.0, 1.0]})
        assert str(domain) == "[a => (0.00, 0.00, 1.00), b => (0.00, 1.00, 1.00)]"

    def test_duplicate_names_rejected(self) -> None:
        """Дубликаты имён меток"""
        with pytest.raises(ValidationError, match="Duplicate label name a") as exc_info:
            qualitative_domain([("a", [0.0, 0.0, 1.0]), ("a", [0.0, 1.0, 1.0])])

        assert exc_info.value.errors()[0]["type"] == "duplicate_label_name"

    def test_invalid_label_propagates(self) -> None:
        """Ошибка метки пробрасывается с типом"""
        with pytest.raises(ValidationError) as exc_info:
            qualitative_domain({"A": [0.0, 0.0, 1.0]})

        assert exc_info.value.errors()[0]["type"] == "non_standardized_name"

    def test_invalid_points_propagate(self) -> None:
        """Ошибка точек пробрасывается с типом"""
        with pytest.raises(ValidationError) as exc_info:
            qualitative_domain({"a": [0.0, 0.1, 0.2, 0.3, 0.4]})

        assert exc_info.value.errors()[0]["type"] == "too_many_values"

    def test_direct_construction(self) -> None:
        """Создание из готовых меток"""
        label = Label(name="a", membership=TrapezoidalMembership(points=(0.0, 0.5, 1.0)))
        domain = QualitativeDomain(labels=(label,))
        assert domain.labels == (label,)

    def test_immutable(self) -> None:
        """Домен immutable"""
        domain = QualitativeDomain()
        with pytest.raises(ValidationError):
            domain.labels = ()  # type: ignore


# =============================================================================
# ТЕСТЫ ДОСТУПА К МЕТКАМ
# =============================================================================


class TestLabelLookup:
    """Тесты поиска меток"""

    def test_names_and_positions(self) -> None:
        """Имена, позиции и поиск"""
        domain = symmetric_domain(["a", "b", "c"])

        assert domain.labels_names() == ["a", "b", "c"]
        assert domain.contains_label("b")
        assert not domain.contains_label("d")
        assert domain.label_position("c") == 2
        assert domain.label_position("d") is None

    def test_get_label(self) -> None:
        """Метка по позиции и имени"""
        domain = symmetric_domain(["a", "b", "c"])

        assert domain.get_label_by_position(1).name == "b"
        assert domain.get_label_by_position(3) is None
        assert domain.get_label_by_position(-1) is None
        assert domain.get_label_by_name("c").membership.points == (0.5, 1.0, 1.0, 1.0)
        assert domain.get_label_by_name("d") is None


# =============================================================================
# ТЕСТЫ FUZZY PARTITION
# =============================================================================


class TestFuzzyPartition:
    """Тесты Ruspini-разбиения"""

    def test_two_shoulders(self) -> None:
        """Две перекрывающиеся рампы в сумме дают 1"""
        domain = qualitative_domain({"a": [0.0, 0.0, 1.0], "b": [0.0, 1.0, 1.0]})
        assert domain.is_fuzzy_partition()

    def test_gap_between_labels(self) -> None:
        """Метки касаются в точке, но не покрывают друг друга"""
        domain = qualitative_domain({"a": [0.0, 0.0, 0.5], "b": [0.5, 1.0, 1.0]})
        assert not domain.is_fuzzy_partition()

    def test_three_triangles(self) -> None:
        """Три треугольные метки"""
        domain = qualitative_domain(
            {"a": [0.0, 0.0, 0.5], "b": [0.0, 0.5, 1.0], "c": [0.5, 1.0, 1.0]}
        )
        assert domain.is_fuzzy_partition()

    def test_trapezoids(self) -> None:
        """Трапециевидные метки тоже могут образовывать разбиение"""
        domain = qualitative_domain({"a": [0.0, 0.0, 0.4, 0.6], "b": [0.4, 0.6, 1.0, 1.0]})
        assert domain.is_fuzzy_partition()
        assert not domain.is_triangular()

    def test_empty_domain_is_not_partition(self) -> None:
        """Пустой домен не является разбиением"""
        assert not QualitativeDomain().is_fuzzy_partition()

    def test_sum_membership(self) -> None:
        """Сумма принадлежностей — один кусок y = 1"""
        domain = symmetric_domain(FIVE_NAMES)
        assert str(domain.sum_membership()) == "([0.00, 1.00] => y = 0.00·x + 1.00)"


# =============================================================================
# ТЕСТЫ ПРЕДИКАТОВ
# =============================================================================


class TestStructuralPredicates:
    """Тесты odd / triangular / symmetrical / uniform / TOR / BLTS"""

    def test_five_label_blts(self) -> None:
        """5 равномерных симметричных треугольных меток → BLTS"""
        domain = symmetric_domain(FIVE_NAMES)

        assert domain.is_odd()
        assert domain.is_triangular()
        assert domain.is_fuzzy_partition()
        assert domain.is_symmetrical()
        assert domain.is_uniform()
        assert domain.is_tor()
        assert domain.is_blts()

    def test_explicit_five_label_blts(self) -> None:
        """То же, заданное явными точками"""
        domain = qualitative_domain(
            {
                "a": [0.0, 0.0, 0.25],
                "b": [0.0, 0.25, 0.5],
                "c": [0.25, 0.5, 0.75],
                "d": [0.5, 0.75, 1.0],
                "e": [0.75, 1.0, 1.0],
            }
        )
        assert domain.is_blts()

    def test_four_label_not_blts(self) -> None:
        """4 метки — чётная кардинальность"""
        domain = symmetric_domain(["a", "b", "c", "d"])

        assert not domain.is_odd()
        assert domain.is_fuzzy_partition()
        assert domain.is_symmetrical()
        assert not domain.is_tor()
        assert not domain.is_blts()

    def test_tor_but_not_blts(self) -> None:
        """Неравномерный домен: TOR, но не симметричный и не равномерный"""
        domain = qualitative_domain(
            {"a": [0.0, 0.0, 0.3], "b": [0.0, 0.3, 1.0], "c": [0.3, 1.0, 1.0]}
        )

        assert domain.is_tor()
        assert not domain.is_symmetrical()
        assert not domain.is_uniform()
        assert not domain.is_blts()

    def test_even_symmetric_pair(self) -> None:
        """Две зеркальные метки симметричны"""
        domain = symmetric_domain(["a", "b"])
        assert domain.is_symmetrical()
        assert domain.is_uniform()

    def test_asymmetric_middle_label(self) -> None:
        """Асимметричная средняя метка ломает симметрию"""
        domain = qualitative_domain(
            {"a": [0.0, 0.0, 0.5], "b": [0.0, 0.5, 0.6], "c": [0.5, 1.0, 1.0]}
        )
        assert not domain.is_symmetrical()

    def test_seven_label_symmetric_domain_not_uniform(self) -> None:
        """7 меток: вершины округлены до 5 знаков, шаги 0.16667 и 0.16666 различаются"""
        domain = symmetric_domain([f"l{i}" for i in range(7)])

        assert domain.is_tor()
        assert not domain.is_uniform()
        assert not domain.is_blts()

    def test_empty_domain(self) -> None:
        """Пустой домен"""
        domain = QualitativeDomain()

        assert not domain.is_odd()
        assert domain.is_triangular()
        assert domain.is_symmetrical()
        assert domain.is_uniform()
        assert not domain.is_tor()
        assert not domain.is_blts()


# =============================================================================
# ТЕСТЫ ТОЛЕРАНТНОСТИ ДОМЕНА
# =============================================================================


def _five_labels(middle_peak: float = 0.5, last_start: float = 0.75) -> QualitativeDomain:
    return qualitative_domain(
        {
            "a": [0.0, 0.0, 0.25],
            "b": [0.0, 0.25, 0.5],
            "c": [0.25, middle_peak, 0.75],
            "d": [0.5, 0.75, 1.0],
            "e": [last_start, 1.0, 1.0],
        }
    )


class TestDomainTolerance:
    """Сравнения на уровне домена: округление до 5 знаков, не усечение до 3"""

    def test_uniform_absorbs_shift_below_five_decimals(self) -> None:
        """Сдвиг центра на 4e-6 не ломает равномерность"""
        assert _five_labels(middle_peak=0.500004).is_uniform()

    def test_uniform_detects_shift_at_five_decimals(self) -> None:
        """Сдвиг центра на 2e-5 ломает равномерность"""
        assert not _five_labels(middle_peak=0.50002).is_uniform()

    def test_symmetrical_absorbs_shift_below_five_decimals(self) -> None:
        """Сдвиг вершины крайней метки на 4e-6 не ломает симметрию"""
        assert _five_labels(last_start=0.750004).is_symmetrical()

    def test_symmetrical_detects_shift_at_five_decimals(self) -> None:
        """Сдвиг вершины крайней метки на 2e-5 ломает симметрию"""
        assert not _five_labels(last_start=0.75002).is_symmetrical()

    def test_piece_merge_tolerance_is_coarser(self) -> None:
        """Тот же сдвиг 2e-5 неразличим при усечении до PIECE_MERGE_DECIMALS"""
        assert approx_equal_truncated(0.75, 0.75002, PIECE_MERGE_DECIMALS)
        assert not approx_equal(0.75, 0.75002, DOMAIN_COMPARE_DECIMALS)
