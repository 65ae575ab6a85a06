"""
JSON Schema Contract Validators

Модуль для валидации сериализованной конфигурации согласно JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия
данных схемам.

Схемы (поставляются внутри пакета, contracts/schema/):
- square_root_context.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping

import jsonschema
from jsonschema import Draft202012Validator

from src.numerics.domain.numeric_context import NumericContext
from src.numerics.domain.square_root_context import SquareRootContext

# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы ищутся в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'square_root_context')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class SquareRootContextValidator:
    """Валидатор сериализованного SquareRootContext (square_root_context.json)."""

    schema_name = "square_root_context"

    def __init__(self):
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_square_root_context(data: Mapping[str, Any]) -> None:
    """
    Валидация сериализованного SquareRootContext.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    SquareRootContextValidator().validate(data)


def load_square_root_context(config: Mapping[str, Any]) -> SquareRootContext:
    """
    Построение SquareRootContext из конфигурации.

    Сначала проверяется структура (JSON Schema), затем значения проходят
    через SquareRootContextBuilder. Отсутствующие ключи сохраняют значения
    по умолчанию.

    Args:
        config: dict формата SquareRootContext.to_config()

    Returns:
        Immutable SquareRootContext

    Raises:
        jsonschema.ValidationError: Если структура не соответствует схеме
        InvalidArgumentError: Если значение вне допустимого диапазона
    """
    validate_square_root_context(config)

    builder = SquareRootContext.builder()
    if "abort_criterion" in config:
        builder.abort_criterion(config["abort_criterion"])
    if "max_iterations" in config:
        builder.max_iterations(config["max_iterations"])
    if "initial_scale" in config:
        builder.initial_scale(config["initial_scale"])
    if "numeric_context" in config:
        builder.numeric_context(NumericContext(**config["numeric_context"]))
    return builder.build()
