"""
NumericContext — политика точности и округления

Immutable Pydantic модель: число значащих цифр + политика округления.
Применяется ко всем неточным операциям (деление, квантование) над Decimal.

Глобальный контекст модуля decimal не изменяется: для каждого вычисления
создаётся собственный decimal.Context.
"""

import decimal
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# ENUMS
# =============================================================================


class RoundingPolicy(str, Enum):
    """
    Политика округления.

    UNNECESSARY: округление запрещено, любая потеря цифр → ошибка.
    """

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UNNECESSARY = "UNNECESSARY"

    @property
    def decimal_rounding(self) -> str:
        """Соответствующая константа модуля decimal."""
        return _DECIMAL_ROUNDING[self]


# UNNECESSARY отображается на HALF_EVEN, но с ловушкой decimal.Inexact
_DECIMAL_ROUNDING: Final[dict[RoundingPolicy, str]] = {
    RoundingPolicy.UP: decimal.ROUND_UP,
    RoundingPolicy.DOWN: decimal.ROUND_DOWN,
    RoundingPolicy.CEILING: decimal.ROUND_CEILING,
    RoundingPolicy.FLOOR: decimal.ROUND_FLOOR,
    RoundingPolicy.HALF_UP: decimal.ROUND_HALF_UP,
    RoundingPolicy.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingPolicy.HALF_EVEN: decimal.ROUND_HALF_EVEN,
    RoundingPolicy.UNNECESSARY: decimal.ROUND_HALF_EVEN,
}


# =============================================================================
# DEFAULTS
# =============================================================================

# 128 значащих цифр (аналог DECIMAL128 с запасом)
DEFAULT_PRECISION: Final[int] = 128

DEFAULT_ROUNDING: Final[RoundingPolicy] = RoundingPolicy.HALF_UP


# =============================================================================
# NUMERIC CONTEXT MODEL
# =============================================================================


class NumericContext(BaseModel):
    """
    Пара (precision, rounding) для неточных операций над Decimal.

    Immutable модель (frozen=True), равенство и hash структурные.
    """

    precision: int = Field(DEFAULT_PRECISION, ge=1, description="Число значащих цифр")
    rounding: RoundingPolicy = Field(DEFAULT_ROUNDING, description="Политика округления")

    model_config = {"frozen": True}

    def to_decimal_context(self, precision: int | None = None) -> decimal.Context:
        """
        Новый decimal.Context с этой политикой.

        Args:
            precision: Переопределение числа значащих цифр (optional)

        Returns:
            Свежий decimal.Context; при UNNECESSARY включена ловушка Inexact
        """
        traps = [decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow]
        if self.rounding is RoundingPolicy.UNNECESSARY:
            traps.append(decimal.Inexact)

        return decimal.Context(
            prec=precision if precision is not None else self.precision,
            rounding=self.rounding.decimal_rounding,
            traps=traps,
        )


DEFAULT_NUMERIC_CONTEXT: Final[NumericContext] = NumericContext()
