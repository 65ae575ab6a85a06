"""
Validation — проверка аргументов и таксономия ошибок

Модуль обеспечивает единообразную проверку входных данных для всех
вычислительных операций:
- Отсутствующие аргументы (None) → NullInputError
- Нарушение числовых предусловий → InvalidArgumentError
- Запрос точного корня для не-квадрата → NotPerfectSquareError
- Неизбежное округление при политике UNNECESSARY → RoundingNecessaryError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка выполняется ДО любых вычислений
2. Ошибки не перехватываются локально, а пропагируют к вызывающему
3. bool не считается целым числом
"""

from decimal import Decimal
from typing import Any

# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """Нарушено числовое предусловие операции."""

    pass


class NotPerfectSquareError(InvalidArgumentError):
    """Точный корень запрошен для числа, не являющегося полным квадратом."""

    pass


class NullInputError(TypeError):
    """Обязательный аргумент отсутствует (None)."""

    pass


class RoundingNecessaryError(ArithmeticError):
    """
    Результат не представим без округления.

    Возникает только при политике округления UNNECESSARY.
    """

    pass


# =============================================================================
# ПРОВЕРКИ ТИПОВ
# =============================================================================


def require_not_none(value: Any, name: str) -> Any:
    """
    Проверка, что аргумент передан.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        NullInputError: Если value is None
    """
    if value is None:
        raise NullInputError(name)
    return value


def is_integer(value: Any) -> bool:
    """True для int, но не для bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def require_integer(value: Any, name: str) -> int:
    """
    Проверка, что аргумент является целым числом.

    Raises:
        NullInputError: Если value is None
        InvalidArgumentError: Если value не int (bool не допускается)
    """
    require_not_none(value, name)
    if not is_integer(value):
        raise InvalidArgumentError(
            f"expected {name} to be an integer but actual {type(value).__name__}"
        )
    return value


def require_decimal(value: Any, name: str) -> Decimal:
    """
    Проверка, что аргумент является конечным Decimal.

    Raises:
        NullInputError: Если value is None
        InvalidArgumentError: Если value не Decimal, NaN или Infinity
    """
    require_not_none(value, name)
    if not isinstance(value, Decimal):
        raise InvalidArgumentError(
            f"expected {name} to be a Decimal but actual {type(value).__name__}"
        )
    if not value.is_finite():
        raise InvalidArgumentError(f"expected {name} to be finite but actual {value}")
    return value


# =============================================================================
# ЧИСЛОВЫЕ ПРЕДУСЛОВИЯ
# =============================================================================


def validate_non_negative(value: int | Decimal, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если value < 0
    """
    if value < 0:
        raise InvalidArgumentError(f"expected {name} >= 0 but actual {value}")


def validate_positive(value: int, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Raises:
        InvalidArgumentError: Если value < 1
    """
    if value < 1:
        raise InvalidArgumentError(f"expected {name} > 0 but actual {value}")


def validate_exclusive_between(
    value: Decimal,
    name: str,
    lower: Decimal,
    upper: Decimal,
) -> None:
    """
    Валидация, что значение лежит в открытом интервале (lower, upper).

    Examples:
        >>> validate_exclusive_between(Decimal("0.5"), "x", Decimal(0), Decimal(1))
        >>> validate_exclusive_between(Decimal(1), "x", Decimal(0), Decimal(1))  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidArgumentError: expected x in (0, 1) but actual 1

    Raises:
        InvalidArgumentError: Если value <= lower или value >= upper
    """
    if not lower < value < upper:
        raise InvalidArgumentError(
            f"expected {name} in ({lower}, {upper}) but actual {value}"
        )
