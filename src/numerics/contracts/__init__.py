"""
Contract Validation Module

Модуль для валидации JSON конфигурации и загрузки SquareRootContext из неё.
"""

from .validators import (
    SchemaLoader,
    SquareRootContextValidator,
    load_square_root_context,
    validate_square_root_context,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "SquareRootContextValidator",
    # Functions
    "validate_square_root_context",
    "load_square_root_context",
]
