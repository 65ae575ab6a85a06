"""
SquareRootContext — параметры итерационного вычисления корня

Immutable Pydantic модель с четырьмя параметрами:
- abort_criterion: порог |successor - predecessor| для остановки итераций
- max_iterations: жёсткий лимит числа итераций
- initial_scale: число дробных цифр начального приближения
- numeric_context: точность и округление промежуточных делений

Создаётся через SquareRootContextBuilder, который проверяет каждое значение
сразу при установке. После build() контекст неизменяем и может свободно
разделяться между вызовами и потоками.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 < abort_criterion < 1
2. max_iterations >= 1
3. initial_scale >= 0
4. numeric_context is not None
"""

from decimal import Decimal
from typing import Any, Final

from pydantic import BaseModel, Field

from src.numerics.domain.numeric_context import DEFAULT_NUMERIC_CONTEXT, NumericContext
from src.numerics.validation import (
    InvalidArgumentError,
    is_integer,
    require_decimal,
    require_integer,
    require_not_none,
    validate_exclusive_between,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_ABORT_CRITERION: Final[Decimal] = Decimal("0.0000000001")

DEFAULT_MAX_ITERATIONS: Final[int] = 10

DEFAULT_INITIAL_SCALE: Final[int] = 10


# =============================================================================
# SQUARE ROOT CONTEXT MODEL
# =============================================================================


class SquareRootContext(BaseModel):
    """
    Параметры метода Герона.

    Immutable модель (frozen=True). Равенство, hash и repr структурные.
    Ограничения Field повторяют проверки builder для прямого конструирования.
    """

    abort_criterion: Decimal = Field(
        DEFAULT_ABORT_CRITERION, gt=0, lt=1, description="Критерий остановки итераций"
    )
    max_iterations: int = Field(
        DEFAULT_MAX_ITERATIONS, ge=1, description="Максимальное число итераций"
    )
    initial_scale: int = Field(
        DEFAULT_INITIAL_SCALE, ge=0, description="Масштаб начального приближения"
    )
    numeric_context: NumericContext = Field(
        DEFAULT_NUMERIC_CONTEXT, description="Точность и округление делений"
    )

    model_config = {"frozen": True}

    @staticmethod
    def builder() -> "SquareRootContextBuilder":
        """Builder, заполненный значениями по умолчанию."""
        return SquareRootContextBuilder()

    def to_config(self) -> dict[str, Any]:
        """
        Сериализация в JSON-совместимый dict.

        Формат совпадает с контрактом square_root_context.json.

        Returns:
            {"abort_criterion": "1E-10", "max_iterations": 10, ...}
        """
        return {
            "abort_criterion": str(self.abort_criterion),
            "max_iterations": self.max_iterations,
            "initial_scale": self.initial_scale,
            "numeric_context": {
                "precision": self.numeric_context.precision,
                "rounding": self.numeric_context.rounding.value,
            },
        }


# =============================================================================
# BUILDER
# =============================================================================


class SquareRootContextBuilder:
    """
    Mutable builder для SquareRootContext.

    Каждый setter валидирует значение немедленно и возвращает self:

        context = (
            SquareRootContext.builder()
            .abort_criterion(Decimal("0.001"))
            .max_iterations(20)
            .build()
        )
    """

    def __init__(self):
        self._abort_criterion: Decimal = DEFAULT_ABORT_CRITERION
        self._max_iterations: int = DEFAULT_MAX_ITERATIONS
        self._initial_scale: int = DEFAULT_INITIAL_SCALE
        self._numeric_context: NumericContext = DEFAULT_NUMERIC_CONTEXT

    def abort_criterion(self, abort_criterion: Decimal | int | str) -> "SquareRootContextBuilder":
        """
        Установка критерия остановки.

        Args:
            abort_criterion: Значение в открытом интервале (0, 1)

        Raises:
            NullInputError: Если abort_criterion is None
            InvalidArgumentError: Если abort_criterion <= 0 или >= 1
        """
        require_not_none(abort_criterion, "abortCriterion")
        value = _to_decimal(abort_criterion, "abortCriterion")
        validate_exclusive_between(value, "abortCriterion", Decimal(0), Decimal(1))
        self._abort_criterion = value
        return self

    def max_iterations(self, max_iterations: int) -> "SquareRootContextBuilder":
        """
        Установка лимита итераций.

        Raises:
            InvalidArgumentError: Если max_iterations < 1
        """
        require_integer(max_iterations, "maxIterations")
        validate_positive(max_iterations, "maxIterations")
        self._max_iterations = max_iterations
        return self

    def initial_scale(self, initial_scale: int) -> "SquareRootContextBuilder":
        """
        Установка масштаба начального приближения.

        Raises:
            InvalidArgumentError: Если initial_scale < 0
        """
        require_integer(initial_scale, "initialScale")
        validate_non_negative(initial_scale, "initialScale")
        self._initial_scale = initial_scale
        return self

    def numeric_context(self, numeric_context: NumericContext) -> "SquareRootContextBuilder":
        """
        Установка точности и округления.

        Raises:
            NullInputError: Если numeric_context is None
        """
        self._numeric_context = require_not_none(numeric_context, "numericContext")
        return self

    def build(self) -> SquareRootContext:
        """Immutable контекст из текущего состояния builder."""
        return SquareRootContext(
            abort_criterion=self._abort_criterion,
            max_iterations=self._max_iterations,
            initial_scale=self._initial_scale,
            numeric_context=self._numeric_context,
        )

    def __repr__(self) -> str:
        return (
            f"SquareRootContextBuilder(abort_criterion={self._abort_criterion!r}, "
            f"max_iterations={self._max_iterations}, "
            f"initial_scale={self._initial_scale}, "
            f"numeric_context={self._numeric_context!r})"
        )


def _to_decimal(value: Decimal | int | str, name: str) -> Decimal:
    # float отклоняется: двоичное представление неточно
    if isinstance(value, str) or is_integer(value):
        try:
            value = Decimal(value)
        except ArithmeticError as exc:
            raise InvalidArgumentError(f"expected {name} to be a number but actual {value!r}") from exc
    return require_decimal(value, name)


DEFAULT_SQUARE_ROOT_CONTEXT: Final[SquareRootContext] = SquareRootContext()
