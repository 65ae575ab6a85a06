"""
Тесты для SquareRootContext и SquareRootContextBuilder

Проверяет:
1. Значения по умолчанию
2. Немедленную валидацию в setters builder
3. Immutability и структурное равенство
4. Сериализацию to_config
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.numerics.domain import (
    DEFAULT_ABORT_CRITERION,
    DEFAULT_INITIAL_SCALE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_NUMERIC_CONTEXT,
    DEFAULT_SQUARE_ROOT_CONTEXT,
    NumericContext,
    RoundingPolicy,
    SquareRootContext,
    SquareRootContextBuilder,
)
from src.numerics.validation import InvalidArgumentError, NullInputError


# =============================================================================
# ТЕСТЫ: Defaults
# =============================================================================


class TestDefaults:
    """Тесты значений по умолчанию."""

    def test_builder_defaults(self) -> None:
        """builder().build() даёт контекст по умолчанию"""
        context = SquareRootContext.builder().build()

        assert context.abort_criterion == Decimal("1E-10")
        assert context.max_iterations == 10
        assert context.initial_scale == 10
        assert context.numeric_context.precision == 128
        assert context.numeric_context.rounding is RoundingPolicy.HALF_UP

    def test_default_constant(self) -> None:
        """DEFAULT_SQUARE_ROOT_CONTEXT совпадает с builder по умолчанию"""
        assert SquareRootContext.builder().build() == DEFAULT_SQUARE_ROOT_CONTEXT
        assert DEFAULT_SQUARE_ROOT_CONTEXT.abort_criterion == DEFAULT_ABORT_CRITERION
        assert DEFAULT_SQUARE_ROOT_CONTEXT.max_iterations == DEFAULT_MAX_ITERATIONS
        assert DEFAULT_SQUARE_ROOT_CONTEXT.initial_scale == DEFAULT_INITIAL_SCALE
        assert DEFAULT_SQUARE_ROOT_CONTEXT.numeric_context == DEFAULT_NUMERIC_CONTEXT

    def test_builder_type(self) -> None:
        """builder() возвращает новый SquareRootContextBuilder"""
        first = SquareRootContext.builder()
        second = SquareRootContext.builder()

        assert isinstance(first, SquareRootContextBuilder)
        assert first is not second


# =============================================================================
# ТЕСТЫ: Builder setters
# =============================================================================


class TestBuilderAbortCriterion:
    """Тесты abort_criterion."""

    @pytest.mark.parametrize("value", [Decimal("0.5"), Decimal("1E-30"), "0.001", Decimal("0.999")])
    def test_valid_values(self, value) -> None:
        """Значения в (0, 1) принимаются"""
        context = SquareRootContext.builder().abort_criterion(value).build()
        assert context.abort_criterion == Decimal(value)

    @pytest.mark.parametrize("value", [Decimal(1), 1, Decimal(0), 0, Decimal("-0.5"), Decimal("1.5")])
    def test_out_of_range_raises(self, value) -> None:
        """abort_criterion вне (0, 1) → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match=r"expected abortCriterion in \(0, 1\)"):
            SquareRootContext.builder().abort_criterion(value)

    def test_exact_message(self) -> None:
        """Сообщение содержит фактическое значение"""
        with pytest.raises(
            InvalidArgumentError, match=r"expected abortCriterion in \(0, 1\) but actual 1$"
        ):
            SquareRootContext.builder().abort_criterion(Decimal(1))

    def test_none_raises(self) -> None:
        """None → NullInputError"""
        with pytest.raises(NullInputError, match="abortCriterion"):
            SquareRootContext.builder().abort_criterion(None)

    @pytest.mark.parametrize("value", [0.1, True, "abc", "NaN", Decimal("Infinity")])
    def test_non_decimal_raises(self, value) -> None:
        """float, bool и нечисловые значения отклоняются"""
        with pytest.raises(InvalidArgumentError):
            SquareRootContext.builder().abort_criterion(value)


class TestBuilderIntegers:
    """Тесты max_iterations и initial_scale."""

    def test_max_iterations_valid(self) -> None:
        """max_iterations >= 1 принимается"""
        assert SquareRootContext.builder().max_iterations(1).build().max_iterations == 1
        assert SquareRootContext.builder().max_iterations(500).build().max_iterations == 500

    @pytest.mark.parametrize("value", [0, -1, -100])
    def test_max_iterations_invalid(self, value: int) -> None:
        """max_iterations < 1 → InvalidArgumentError"""
        with pytest.raises(
            InvalidArgumentError, match=f"expected maxIterations > 0 but actual {value}"
        ):
            SquareRootContext.builder().max_iterations(value)

    def test_initial_scale_valid(self) -> None:
        """initial_scale >= 0 принимается"""
        assert SquareRootContext.builder().initial_scale(0).build().initial_scale == 0
        assert SquareRootContext.builder().initial_scale(50).build().initial_scale == 50

    def test_initial_scale_invalid(self) -> None:
        """initial_scale < 0 → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="expected initialScale >= 0 but actual -1"):
            SquareRootContext.builder().initial_scale(-1)

    @pytest.mark.parametrize("value", [1.5, "10", True])
    def test_non_integer_raises(self, value) -> None:
        """Нецелые значения отклоняются"""
        with pytest.raises(InvalidArgumentError):
            SquareRootContext.builder().max_iterations(value)
        with pytest.raises(InvalidArgumentError):
            SquareRootContext.builder().initial_scale(value)


class TestBuilderNumericContext:
    """Тесты numeric_context."""

    def test_valid(self) -> None:
        """NumericContext принимается"""
        numeric_context = NumericContext(precision=34, rounding=RoundingPolicy.HALF_EVEN)
        context = SquareRootContext.builder().numeric_context(numeric_context).build()
        assert context.numeric_context == numeric_context

    def test_none_raises(self) -> None:
        """None → NullInputError"""
        with pytest.raises(NullInputError, match="numericContext"):
            SquareRootContext.builder().numeric_context(None)


class TestBuilderBehaviour:
    """Тесты поведения builder."""

    def test_fluent_chain(self) -> None:
        """Setters возвращают тот же builder"""
        builder = SquareRootContext.builder()
        assert builder.abort_criterion(Decimal("0.01")) is builder
        assert builder.max_iterations(3) is builder
        assert builder.initial_scale(2) is builder
        assert builder.numeric_context(NumericContext()) is builder

    def test_failed_setter_keeps_state(self) -> None:
        """Отклонённое значение не меняет состояние builder"""
        builder = SquareRootContext.builder().max_iterations(7)
        with pytest.raises(InvalidArgumentError):
            builder.max_iterations(0)

        assert builder.build().max_iterations == 7

    def test_build_is_repeatable(self) -> None:
        """Повторный build() даёт равные, но независимые контексты"""
        builder = SquareRootContext.builder().initial_scale(4)
        first = builder.build()
        builder.initial_scale(5)
        second = builder.build()

        assert first.initial_scale == 4
        assert second.initial_scale == 5

    def test_repr(self) -> None:
        """repr builder содержит все поля"""
        text = repr(SquareRootContext.builder())
        for field in ("abort_criterion", "max_iterations", "initial_scale", "numeric_context"):
            assert field in text


# =============================================================================
# ТЕСТЫ: Value semantics
# =============================================================================


class TestValueSemantics:
    """Тесты immutability, равенства и hash."""

    def test_equal_contexts(self) -> None:
        """Контексты с одинаковыми полями равны и имеют одинаковый hash"""
        a = SquareRootContext.builder().abort_criterion(Decimal("0.001")).build()
        b = SquareRootContext.builder().abort_criterion(Decimal("1E-3")).build()

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_contexts(self) -> None:
        """Различие в любом поле → неравенство"""
        base = SquareRootContext.builder().build()
        variants = [
            SquareRootContext.builder().abort_criterion(Decimal("0.01")).build(),
            SquareRootContext.builder().max_iterations(11).build(),
            SquareRootContext.builder().initial_scale(11).build(),
            SquareRootContext.builder()
            .numeric_context(NumericContext(rounding=RoundingPolicy.DOWN))
            .build(),
        ]
        for variant in variants:
            assert variant != base

    def test_immutable(self) -> None:
        """Контекст immutable (frozen=True)"""
        context = SquareRootContext.builder().build()
        with pytest.raises(ValidationError):
            context.max_iterations = 5

    def test_repr_contains_fields(self) -> None:
        """repr структурный"""
        text = repr(SquareRootContext.builder().max_iterations(3).build())
        assert "max_iterations=3" in text
        assert "abort_criterion" in text

    @pytest.mark.parametrize(
        "field, value",
        [
            ("abort_criterion", Decimal(1)),
            ("abort_criterion", Decimal(0)),
            ("max_iterations", 0),
            ("initial_scale", -1),
        ],
    )
    def test_direct_construction_validated(self, field: str, value) -> None:
        """Прямое конструирование проверяет те же инварианты"""
        with pytest.raises(ValidationError):
            SquareRootContext(**{field: value})


# =============================================================================
# ТЕСТЫ: Serialization
# =============================================================================


class TestToConfig:
    """Тесты to_config."""

    def test_default_config(self) -> None:
        """Сериализация контекста по умолчанию"""
        assert DEFAULT_SQUARE_ROOT_CONTEXT.to_config() == {
            "abort_criterion": "1E-10",
            "max_iterations": 10,
            "initial_scale": 10,
            "numeric_context": {"precision": 128, "rounding": "HALF_UP"},
        }

    def test_custom_config(self) -> None:
        """Сериализация пользовательского контекста"""
        context = (
            SquareRootContext.builder()
            .abort_criterion("0.005")
            .max_iterations(25)
            .initial_scale(0)
            .numeric_context(NumericContext(precision=50, rounding=RoundingPolicy.UNNECESSARY))
            .build()
        )
        config = context.to_config()

        assert config["abort_criterion"] == "0.005"
        assert config["max_iterations"] == 25
        assert config["initial_scale"] == 0
        assert config["numeric_context"] == {"precision": 50, "rounding": "UNNECESSARY"}
