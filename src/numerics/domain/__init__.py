"""
Domain models and value objects.

Contains NumericContext, SquareRootContext (with its builder) and
ScientificNotation.
"""

from src.numerics.domain.numeric_context import (
    DEFAULT_NUMERIC_CONTEXT,
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    NumericContext,
    RoundingPolicy,
)
from src.numerics.domain.scientific_notation import (
    ScientificNotation,
    scientific_notation_for_sqrt,
)
from src.numerics.domain.square_root_context import (
    DEFAULT_ABORT_CRITERION,
    DEFAULT_INITIAL_SCALE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_SQUARE_ROOT_CONTEXT,
    SquareRootContext,
    SquareRootContextBuilder,
)

__all__ = [
    # Numeric context
    "DEFAULT_NUMERIC_CONTEXT",
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "NumericContext",
    "RoundingPolicy",
    # Scientific notation
    "ScientificNotation",
    "scientific_notation_for_sqrt",
    # Square root context
    "DEFAULT_ABORT_CRITERION",
    "DEFAULT_INITIAL_SCALE",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_SQUARE_ROOT_CONTEXT",
    "SquareRootContext",
    "SquareRootContextBuilder",
]
