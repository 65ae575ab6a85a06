"""
Square Root — квадратные корни без floating-point

Модуль вычисляет квадратные корни неотрицательных int и Decimal:
- sqrt: метод Герона (Ньютона) над Decimal с начальным приближением
  из научной нотации
- is_perfect_square / sqrt_of_perfect_square: точная целочисленная ветка
  для полных квадратов, без какого-либо округления

Все операции детерминированы и воспроизводимы: точность и округление задаёт
SquareRootContext, глобальный decimal-контекст потока не используется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательный вход → InvalidArgumentError (до любых вычислений)
2. Итерации ограничены max_iterations; достижение лимита не является ошибкой
3. Нулевой делитель никогда не используется (fallback = abort_criterion)
4. Результат sqrt квантуется до scale дробных цифр с политикой контекста

ФОРМУЛЫ:
    successor = (predecessor² + x) / (2 · predecessor)

    seed = 6 · 10^(e/2), если coefficient >= 10
    seed = 2 · 10^(e/2), иначе
    где x = coefficient · 10^e, 1 <= coefficient < 100, e чётный
"""

import decimal
import math
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from loguru import logger

from src.numerics.domain.numeric_context import RoundingPolicy
from src.numerics.domain.scientific_notation import (
    ScientificNotation,
    scientific_notation_for_sqrt,
)
from src.numerics.domain.square_root_context import (
    DEFAULT_SQUARE_ROOT_CONTEXT,
    SquareRootContext,
)
from src.numerics.validation import (
    NotPerfectSquareError,
    RoundingNecessaryError,
    is_integer,
    require_decimal,
    require_integer,
    require_not_none,
    validate_non_negative,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Число дробных цифр результата sqrt по умолчанию
DEFAULT_SCALE: Final[int] = 10

_TWO: Final[Decimal] = Decimal(2)
_TEN: Final[Decimal] = Decimal(10)


# =============================================================================
# ITERATION EVENTS
# =============================================================================


@dataclass(frozen=True)
class HeronIteration:
    """Событие одного шага метода Герона (для наблюдателя on_iteration)."""

    iteration: int
    predecessor: Decimal
    successor: Decimal
    difference: Decimal


IterationObserver = Callable[[HeronIteration], None]


# =============================================================================
# SQUARE ROOT CALCULATOR
# =============================================================================


class SquareRootCalculator:
    """
    Вычислитель квадратных корней.

    Экземпляр не изменяется после создания и может использоваться
    из нескольких потоков одновременно.
    """

    def __init__(
        self,
        context: SquareRootContext | None = None,
        scale: int = DEFAULT_SCALE,
        on_iteration: IterationObserver | None = None,
    ):
        """
        Args:
            context: параметры итераций (default: DEFAULT_SQUARE_ROOT_CONTEXT)
            scale: число дробных цифр результата sqrt (>= 0)
            on_iteration: наблюдатель, вызываемый на каждом шаге итераций

        Raises:
            InvalidArgumentError: если scale < 0
        """
        require_integer(scale, "scale")
        validate_non_negative(scale, "scale")

        self._context = context if context is not None else DEFAULT_SQUARE_ROOT_CONTEXT
        self._scale = scale
        self._on_iteration = on_iteration

    @property
    def context(self) -> SquareRootContext:
        return self._context

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def rounding(self) -> RoundingPolicy:
        return self._context.numeric_context.rounding

    def __repr__(self) -> str:
        return f"SquareRootCalculator(context={self._context!r}, scale={self._scale})"

    # -------------------------------------------------------------------------
    # Decimal-корни
    # -------------------------------------------------------------------------

    def sqrt(self, value: int | Decimal) -> Decimal:
        """
        Квадратный корень неотрицательного int или Decimal.

        int преобразуется в Decimal с нулевым масштабом.

        Args:
            value: Неотрицательное число

        Returns:
            Корень, квантованный до self.scale дробных цифр

        Raises:
            NullInputError: если value is None
            InvalidArgumentError: если value < 0 или не int/Decimal
            RoundingNecessaryError: если политика UNNECESSARY, а результат неточен

        Examples:
            >>> SquareRootCalculator().sqrt(2)
            Decimal('1.4142135624')
            >>> SquareRootCalculator(scale=2).sqrt(Decimal("0.25"))
            Decimal('0.50')
        """
        require_not_none(value, "value")
        if is_integer(value):
            validate_non_negative(value, "integer")
            return self._sqrt_decimal(Decimal(value))

        require_decimal(value, "decimal")
        validate_non_negative(value, "decimal")
        return self._sqrt_decimal(value)

    def scientific_notation_for_sqrt(self, value: Decimal) -> ScientificNotation:
        """Разложение value с чётным показателем в numeric_context калькулятора."""
        return scientific_notation_for_sqrt(value, self._context.numeric_context)

    def seed_value(self, value: Decimal) -> Decimal:
        """
        Начальное приближение для метода Герона.

        Для 1 <= coefficient < 10 корень лежит в [1, 3.17) · 10^(e/2), для
        10 <= coefficient < 100 в [3.16, 10) · 10^(e/2): seed 2 или 6
        отличается от корня не более чем в 2 раза.

        Для нуля (coefficient == 0) seed вырожденный и равен нулю.

        Seed приводится к initial_scale дробных цифр, но не обрезается:
        значения меньше 10^(-initial_scale) сохраняют свои цифры.
        """
        notation = self.scientific_notation_for_sqrt(value)
        logger.debug(
            "scientific notation of {} is {}", format(value, "f"), notation.as_string()
        )

        if notation.coefficient == 0:
            seed = Decimal(0)
        else:
            factor = 6 if notation.coefficient >= _TEN else 2
            seed = Decimal((0, (factor,), notation.exponent // 2))

        scale = max(self._context.initial_scale, -seed.as_tuple().exponent)
        return self._quantize(seed, scale)

    def _sqrt_decimal(self, value: Decimal) -> Decimal:
        try:
            root = self._herons_method(value)
            return self._quantize(root, self._scale)
        except decimal.Inexact as exc:
            raise RoundingNecessaryError(
                f"rounding necessary for sqrt({format(value, 'f')})"
            ) from exc

    def _herons_method(self, value: Decimal) -> Decimal:
        context = self._context
        abort_criterion = context.abort_criterion
        ctx = context.numeric_context.to_decimal_context()

        logger.debug(
            "calculating square root for {} with abort criterion = {}",
            format(value, "f"),
            format(abort_criterion, "f"),
        )

        predecessor = self.seed_value(value)
        logger.debug("seed value = {}", format(predecessor, "f"))

        successor = self._successor(predecessor, value, ctx)
        iterations = 1
        difference = ctx.abs(ctx.subtract(successor, predecessor))
        self._notify(iterations, predecessor, successor, difference)

        while difference >= abort_criterion and iterations < context.max_iterations:
            predecessor = successor
            successor = self._successor(predecessor, value, ctx)
            iterations += 1
            difference = ctx.abs(ctx.subtract(successor, predecessor))
            self._notify(iterations, predecessor, successor, difference)

        logger.debug("terminated after {} iterations", iterations)
        logger.debug("sqrt({}) = {}", format(value, "f"), format(successor, "f"))
        return successor

    def _successor(self, predecessor: Decimal, value: Decimal, ctx: decimal.Context) -> Decimal:
        divisor = ctx.multiply(_TWO, predecessor)
        if divisor == 0:
            # Вырожденный seed: деление на ноль не выполняется
            return self._context.abort_criterion

        numerator = ctx.add(ctx.multiply(predecessor, predecessor), value)
        return ctx.divide(numerator, divisor)

    def _notify(
        self,
        iteration: int,
        predecessor: Decimal,
        successor: Decimal,
        difference: Decimal,
    ) -> None:
        logger.debug("|successor - predecessor| = {}", format(difference, "f"))
        if self._on_iteration is not None:
            self._on_iteration(
                HeronIteration(
                    iteration=iteration,
                    predecessor=predecessor,
                    successor=successor,
                    difference=difference,
                )
            )

    def _quantize(self, value: Decimal, scale: int) -> Decimal:
        # Точность расширяется, чтобы quantize не упирался в precision
        numeric_context = self._context.numeric_context
        precision = max(numeric_context.precision, value.adjusted() + scale + 2)
        ctx = numeric_context.to_decimal_context(precision=precision)
        return value.quantize(Decimal((0, (1,), -scale)), context=ctx)

    # -------------------------------------------------------------------------
    # Полные квадраты
    # -------------------------------------------------------------------------

    def is_perfect_square(self, integer: int) -> bool:
        """
        Является ли integer квадратом целого числа.

        Сумма первых k нечётных чисел 1 + 3 + ... + (2k - 1) равна k².
        Наименьшее k, при котором сумма достигает integer, равно
        ceil(sqrt(integer)); integer — полный квадрат ровно тогда, когда
        сумма совпадает с ним. k находится точным целочисленным math.isqrt.

        Raises:
            NullInputError: если integer is None
            InvalidArgumentError: если integer < 0 или не int
        """
        require_integer(integer, "integer")
        validate_non_negative(integer, "integer")

        root = math.isqrt(integer)
        return root * root == integer

    def sqrt_of_perfect_square(self, integer: int) -> int:
        """
        Точный целый корень полного квадрата.

        Raises:
            NullInputError: если integer is None
            InvalidArgumentError: если integer < 0
            NotPerfectSquareError: если integer не является полным квадратом

        Examples:
            >>> SquareRootCalculator().sqrt_of_perfect_square(81)
            9
        """
        if not self.is_perfect_square(integer):
            raise NotPerfectSquareError(f"expected perfect square but actual {integer}")
        return math.isqrt(integer)


# =============================================================================
# МОДУЛЬНЫЕ ФУНКЦИИ
# =============================================================================

DEFAULT_SQUARE_ROOT_CALCULATOR: Final[SquareRootCalculator] = SquareRootCalculator()


def _calculator(context: SquareRootContext | None) -> SquareRootCalculator:
    if context is None:
        return DEFAULT_SQUARE_ROOT_CALCULATOR
    return SquareRootCalculator(context)


def sqrt(value: int | Decimal, context: SquareRootContext | None = None) -> Decimal:
    """Квадратный корень с контекстом по умолчанию или заданным."""
    return _calculator(context).sqrt(value)


def is_perfect_square(integer: int) -> bool:
    return DEFAULT_SQUARE_ROOT_CALCULATOR.is_perfect_square(integer)


def sqrt_of_perfect_square(integer: int) -> int:
    return DEFAULT_SQUARE_ROOT_CALCULATOR.sqrt_of_perfect_square(integer)
