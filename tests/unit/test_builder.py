"""
Тесты для Polynomial Builder

Проверяет:
1. Агрегацию коэффициентов по degree bucket
2. Независимость от порядка членов
3. Отбрасывание членов неподдерживаемой степени
4. Полный разбор строки parse_polynomial
"""

import logging

import pytest

from src.core.domain.polynomial import Polynomial
from src.core.domain.term import Term
from src.parser.builder import build, parse_polynomial
from src.parser.tokenizer import PolynomialParseError, strip_whitespace, tokenize

# =============================================================================
# ТЕСТЫ АГРЕГАЦИИ
# =============================================================================


class TestBuild:
    """Тесты для build"""

    def test_empty_terms(self) -> None:
        """Нет членов → нулевой полином"""
        assert build([]) == Polynomial(a=0.0, b=0.0, c=0.0)

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("2.5x^2", Polynomial(a=2.5, b=0.0, c=0.0)),
            ("-3x", Polynomial(a=0.0, b=-3.0, c=0.0)),
            ("0.25", Polynomial(a=0.0, b=0.0, c=0.25)),
        ],
    )
    def test_single_term_lands_in_one_bucket(self, source: str, expected: Polynomial) -> None:
        """Один член Cx^D → ровно один ненулевой коэффициент"""
        assert build(tokenize(source)) == expected

    def test_sums_per_degree(self) -> None:
        """Коэффициенты одной степени суммируются"""
        terms = [
            Term(coefficient=1.0, degree=2),
            Term(coefficient=2.0, degree=2),
            Term(coefficient=-1.5, degree=1),
            Term(coefficient=3.0, degree=1),
            Term(coefficient=10.0, degree=0),
        ]
        assert build(terms) == Polynomial(a=3.0, b=1.5, c=10.0)

    def test_order_independent(self) -> None:
        """Порядок членов не влияет на результат"""
        forward = build(tokenize("x^2+4x+4-2x+3"))
        backward = build(tokenize("3-2x+4+4x+x^2"))

        assert forward.a == pytest.approx(backward.a)
        assert forward.b == pytest.approx(backward.b)
        assert forward.c == pytest.approx(backward.c)

    def test_accepts_any_iterable(self) -> None:
        """build принимает генератор"""
        terms = (Term(coefficient=float(i), degree=0) for i in range(4))
        assert build(terms).c == 6.0


# =============================================================================
# ТЕСТЫ НЕПОДДЕРЖИВАЕМЫХ СТЕПЕНЕЙ
# =============================================================================


class TestUnsupportedDegree:
    """Члены степени вне {0, 1, 2} отбрасываются без ошибки"""

    def test_cubic_term_dropped(self) -> None:
        """x^3 не входит ни в один bucket"""
        assert build(tokenize("x^3+x^2+1")) == Polynomial(a=1.0, b=0.0, c=1.0)

    def test_only_unsupported_terms(self) -> None:
        """Только неподдерживаемые степени → нулевой полином"""
        assert build([Term(coefficient=5.0, degree=7)]) == Polynomial()

    def test_dropped_term_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Отброшенный член пишется в debug-лог"""
        with caplog.at_level(logging.DEBUG, logger="src.parser.builder"):
            build([Term(coefficient=5.0, degree=3)])

        assert "unsupported degree" in caplog.text


# =============================================================================
# ТЕСТЫ ПОЛНОГО РАЗБОРА
# =============================================================================


class TestParsePolynomial:
    """Тесты для parse_polynomial"""

    def test_basic_polynomial(self) -> None:
        """Простой полином с пробелами"""
        assert parse_polynomial("x^2 + 4x + 4") == Polynomial(a=1.0, b=4.0, c=4.0)

    def test_seeded_scenario(self) -> None:
        """Серии знаков и пробелы сводятся к a=1, b=4, c=4"""
        polynomial = parse_polynomial(
            "x^2 + -0.5x + -2.5x + 2.5x + 0.5x + 4x + 8x - 4x -+-4x + 4 + 12 --+-8         -4"
        )

        assert polynomial.a == pytest.approx(1.0)
        assert polynomial.b == pytest.approx(4.0)
        assert polynomial.c == pytest.approx(4.0)

    def test_matches_manual_pipeline(self) -> None:
        """parse_polynomial == build(tokenize(strip_whitespace(s)))"""
        source = "3x^2\t- x + 0.5"
        assert parse_polynomial(source) == build(tokenize(strip_whitespace(source)))

    def test_parse_error_propagates(self) -> None:
        """PolynomialParseError не перехватывается"""
        with pytest.raises(PolynomialParseError):
            parse_polynomial("x^2 + 1.2.3")
