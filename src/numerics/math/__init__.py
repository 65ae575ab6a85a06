"""
Core math modules

Численные алгоритмы над int и Decimal без floating-point.
"""

# Square Root
from src.numerics.math.square_root import (
    DEFAULT_SCALE,
    DEFAULT_SQUARE_ROOT_CALCULATOR,
    HeronIteration,
    IterationObserver,
    SquareRootCalculator,
    is_perfect_square,
    sqrt,
    sqrt_of_perfect_square,
)

__all__ = [
    # Square Root — Constants
    "DEFAULT_SCALE",
    "DEFAULT_SQUARE_ROOT_CALCULATOR",
    # Square Root — Types
    "HeronIteration",
    "IterationObserver",
    "SquareRootCalculator",
    # Square Root — Functions
    "is_perfect_square",
    "sqrt",
    "sqrt_of_perfect_square",
]
