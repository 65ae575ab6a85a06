"""
ScientificNotation — разложение value = coefficient × 10^exponent

Используется только для выбора начального приближения квадратного корня.
Разложение для корня держит коэффициент в [1, 100), а показатель чётным:
тогда sqrt(10^exponent) = 10^(exponent / 2) — целая степень десяти.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (scientific_notation_for_sqrt):
1. value > 0 → 1 <= coefficient < 100
2. exponent всегда чётный
3. value == 0 → (0, 0)
"""

from decimal import Decimal
from typing import Final

from loguru import logger
from pydantic import BaseModel, Field

from src.numerics.domain.numeric_context import DEFAULT_NUMERIC_CONTEXT, NumericContext
from src.numerics.validation import require_decimal, validate_non_negative

_ONE: Final[Decimal] = Decimal(1)
_HUNDRED: Final[Decimal] = Decimal(100)


# =============================================================================
# SCIENTIFIC NOTATION MODEL
# =============================================================================


class ScientificNotation(BaseModel):
    """
    Пара (coefficient, exponent).

    Immutable модель (frozen=True).
    """

    coefficient: Decimal = Field(..., description="Коэффициент")
    exponent: int = Field(..., description="Показатель степени десяти")

    model_config = {"frozen": True}

    def as_string(self) -> str:
        """
        Человекочитаемая запись.

        Examples:
            >>> ScientificNotation(coefficient=Decimal("1.5"), exponent=4).as_string()
            '1.5 * 10**4'
            >>> ScientificNotation(coefficient=Decimal("2"), exponent=-2).as_string()
            '2 * 10**(-2)'
        """
        if self.coefficient == 0:
            return "0"

        plain = format(self.coefficient, "f")
        if self.exponent < 0:
            return f"{plain} * 10**({self.exponent})"
        if self.exponent == 0:
            return plain
        if self.exponent == 1:
            return f"{plain} * 10"
        return f"{plain} * 10**{self.exponent}"

    def to_decimal(self) -> Decimal:
        """Точное восстановление значения (без округления)."""
        return _shift(self.coefficient, self.exponent)


# =============================================================================
# РАЗЛОЖЕНИЕ ДЛЯ КВАДРАТНОГО КОРНЯ
# =============================================================================


def scientific_notation_for_sqrt(
    value: Decimal,
    numeric_context: NumericContext = DEFAULT_NUMERIC_CONTEXT,
) -> ScientificNotation:
    """
    Разложение неотрицательного Decimal с чётным показателем.

    Алгоритм:
        coefficient >= 100      → coefficient / 100, exponent + 2
        0 < coefficient < 1     → coefficient * 100, exponent - 2

    Деление выполняется в numeric_context. Умножение на 100 точное
    (сдвиг показателя): округление до precision могло бы дать 100.

    Args:
        value: Неотрицательное значение
        numeric_context: Точность и округление промежуточных операций

    Returns:
        ScientificNotation с 1 <= coefficient < 100 (или (0, 0) для нуля)

    Raises:
        NullInputError: Если value is None
        InvalidArgumentError: Если value < 0 или не Decimal

    Examples:
        >>> scientific_notation_for_sqrt(Decimal(12345))
        ScientificNotation(coefficient=Decimal('1.2345'), exponent=4)
        >>> scientific_notation_for_sqrt(Decimal("0.05"))
        ScientificNotation(coefficient=Decimal('5'), exponent=-2)
    """
    require_decimal(value, "decimal")
    validate_non_negative(value, "decimal")

    ctx = numeric_context.to_decimal_context()
    coefficient = value
    exponent = 0

    logger.debug("calculating scientific notation for {}", format(value, "f"))

    while coefficient >= _HUNDRED:
        coefficient = ctx.divide(coefficient, _HUNDRED)
        exponent += 2

    # Ноль не раскладывается: остаётся (0, 0)
    while 0 < coefficient < _ONE:
        coefficient = _shift(coefficient, 2)
        exponent -= 2

    logger.debug("coefficient = {}, exponent = {}", format(coefficient, "f"), exponent)

    return ScientificNotation(coefficient=coefficient, exponent=exponent)


def _shift(value: Decimal, places: int) -> Decimal:
    """value × 10^places без округления."""
    sign, digits, exp = value.as_tuple()
    return Decimal((sign, digits, exp + places))
