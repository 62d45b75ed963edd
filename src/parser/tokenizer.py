"""
Term Tokenizer — разбиение строки полинома на знаковые члены

Модуль превращает очищенную от пробелов строку вида "x^2+4x-4" в
последовательность Term(coefficient, degree).

АЛГОРИТМ (сканирование слева направо по позициям [0, len]):
1. Символы [0-9a-zA-Z^.] накапливаются в буфере
2. Символ '+'/'-' или конец строки при непустом буфере закрывает член
3. Знак члена — ОДИН символ непосредственно перед первым символом буфера
   (позиция i - len(buffer) - 1), если это '+' или '-'
4. Любые другие символы (включая знаки) в буфер не попадают

ВАЖНО: серии знаков не сворачиваются алгебраически. В "--+-8" знак
члена — последний '-', остальные знаки отбрасываются.
"""

import logging
import re
from typing import Final

from src.core.domain.term import DEGREE_MAX, Term

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Символы-разделители членов, они же знаки коэффициентов
SIGN_CHARACTERS: Final[str] = "+-"

# Пробельные символы, удаляемые до токенизации
STRIPPED_CHARACTERS: Final[str] = " \t"

# Символы буфера помимо alphanumeric
TERM_PUNCTUATION: Final[str] = "^."

VARIABLE: Final[str] = "x"
EXPONENT: Final[str] = "^"

# Степень: беззнаковое целое с необязательным '+'
_DEGREE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PolynomialParseError(ValueError):
    """
    Член полинома не удалось разобрать.

    Возникает, если подстрока коэффициента не является float или
    подстрока степени не является беззнаковым целым в диапазоне u8.
    Частичный результат не возвращается.

    Attributes:
        term: Строка члена (со знаком), на которой произошла ошибка
        component: "coefficient" или "degree"
        value: Подстрока, которую не удалось разобрать
    """

    def __init__(self, term: str, component: str, value: str):
        self.term = term
        self.component = component
        self.value = value
        super().__init__(f"Invalid {component} {value!r} in term {term!r}")


# =============================================================================
# ОЧИСТКА ВХОДА
# =============================================================================


def strip_whitespace(polynomial_str: str) -> str:
    """
    Удаление всех пробелов и табуляций.

    После очистки знак может оказаться вплотную к концу предыдущего
    члена ("4 - -2" → "4--2"), что и обрабатывает look-back токенизатора.

    Args:
        polynomial_str: Исходная строка полинома

    Returns:
        Строка без ' ' и '\\t' (остальные символы не трогаются)
    """
    return "".join(ch for ch in polynomial_str if ch not in STRIPPED_CHARACTERS)


# =============================================================================
# ПАРСИНГ ОДНОГО ЧЛЕНА
# =============================================================================


def _parse_coefficient(term: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise PolynomialParseError(term, "coefficient", value) from e


def _parse_degree(term: str, value: str) -> int:
    if not _DEGREE_PATTERN.fullmatch(value):
        raise PolynomialParseError(term, "degree", value)

    degree = int(value)
    if degree > DEGREE_MAX:
        raise PolynomialParseError(term, "degree", value)

    return degree


def parse_term(term: str) -> Term:
    """
    Разбор одного члена вида [sign][C][x[^D]].

    Правила:
    - Коэффициент — всё до первого 'x' (или вся строка, если 'x' нет)
    - Степень — всё после '^', если '^' есть и не является последним символом
    - Пустой коэффициент, "+" или "-" → неявная 1 с сохранением знака
    - Без явной степени: 0 если 'x' нет, иначе 1

    Args:
        term: Строка члена, например "-4x", "x^2", "+12"

    Returns:
        Term с разобранными coefficient и degree

    Raises:
        PolynomialParseError: Если коэффициент или степень не разбираются

    Examples:
        >>> parse_term("-x")
        Term(coefficient=-1.0, degree=1)
        >>> parse_term("7")
        Term(coefficient=7.0, degree=0)
    """
    coefficient_end = term.find(VARIABLE)
    if coefficient_end == -1:
        coefficient_end = len(term)

    exponent_index = term.find(EXPONENT)
    degree_str: str | None = None
    if exponent_index != -1 and exponent_index + 1 < len(term):
        degree_str = term[exponent_index + 1 :]

    coefficient_str = term[:coefficient_end]
    if coefficient_str in ("", "+", "-"):
        coefficient_str += "1"

    if degree_str is None:
        degree_str = "0" if coefficient_end == len(term) else "1"

    return Term(
        coefficient=_parse_coefficient(term, coefficient_str),
        degree=_parse_degree(term, degree_str),
    )


# =============================================================================
# ТОКЕНИЗАЦИЯ
# =============================================================================


def tokenize(polynomial_str: str) -> list[Term]:
    """
    Разбиение очищенной строки полинома на члены.

    Функция чистая: повторный вызов на той же строке даёт ту же
    последовательность. Пробелы должны быть удалены заранее
    (см. strip_whitespace).

    Args:
        polynomial_str: Строка без пробелов, например "x^2+4x+4"

    Returns:
        Члены в порядке появления в строке

    Raises:
        PolynomialParseError: Если какой-либо член не разбирается
    """
    terms: list[Term] = []
    buffer = ""

    # Позиция len(polynomial_str): виртуальный конец строки для flush буфера
    for i in range(len(polynomial_str) + 1):
        char = polynomial_str[i] if i < len(polynomial_str) else None

        if (char is None or char in SIGN_CHARACTERS) and buffer:
            sign_index = i - len(buffer) - 1
            if sign_index >= 0 and polynomial_str[sign_index] in SIGN_CHARACTERS:
                buffer = polynomial_str[sign_index] + buffer

            terms.append(parse_term(buffer))
            buffer = ""

        if char is not None and (char.isalnum() or char in TERM_PUNCTUATION):
            buffer += char

    logger.debug("Tokenized %r into %d terms", polynomial_str, len(terms))
    return terms
