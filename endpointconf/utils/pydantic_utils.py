"""
endpointconf/utils/pydantic_utils.py

Utilities for working with Pydantic models as parameter schemas.

Contains:
- parameter_type_for_annotation: Map a field annotation to a ParameterType (+ enum values)
- schemas_from_model: Derive ParameterSchema objects from a model's fields
- format_default: Compact default value formatting (e.g. "null", "true", "60")
- format_parameter_schemas: Render schemas as markdown lines
"""

import types as types_module
from collections.abc import Iterable
from enum import Enum, StrEnum
from typing import Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel

from endpointconf.data_models.parameter_schema import ParameterSchema
from endpointconf.data_models.parameter_type import ParameterType


def parameter_type_for_annotation(annotation: Any) -> tuple[ParameterType, list[str] | None]:
    """
    Map a Pydantic field type annotation to a parameter type.

    Args:
        annotation: The type annotation to map.

    Returns:
        Tuple of (ParameterType, enum values or None).

    Examples:
        str → STRING
        int | None → INTEGER
        Literal["a", "b"] → ENUM ["a", "b"]
        StrEnum subclass → ENUM [member values]
        anything else → OBJECT
    """
    if annotation is None:
        return ParameterType.OBJECT, None

    origin = get_origin(annotation)
    args = get_args(annotation)

    # Union / Optional: only X | None collapses to X
    if origin is Union or isinstance(annotation, types_module.UnionType):
        non_none = [a for a in args if a is not type(None)]
        if len(non_none) == 1:
            return parameter_type_for_annotation(non_none[0])
        return ParameterType.OBJECT, None

    # Literal of strings
    if origin is Literal:
        if args and all(isinstance(a, str) for a in args):
            return ParameterType.ENUM, list(args)
        return ParameterType.OBJECT, None

    # Other generics (list[str], dict[str, int], ...)
    if origin is not None:
        return ParameterType.OBJECT, None

    # Concrete classes (bool before int: bool is an int subclass)
    if isinstance(annotation, type):
        if issubclass(annotation, StrEnum):
            return ParameterType.ENUM, [m.value for m in annotation]
        if issubclass(annotation, bool):
            return ParameterType.BOOLEAN, None
        if issubclass(annotation, int):
            return ParameterType.INTEGER, None
        if issubclass(annotation, str):
            return ParameterType.STRING, None

    return ParameterType.OBJECT, None


def schemas_from_model(
    model_cls: type[BaseModel],
    skip_fields: set[str] | None = None,
) -> list[ParameterSchema]:
    """
    Derive parameter schemas from a Pydantic model's fields.

    The parameter name is the field alias when one is set, otherwise the field name.

    Args:
        model_cls: The Pydantic model class to derive schemas from.
        skip_fields: Field names to omit.

    Returns:
        List of ParameterSchema, in field declaration order.
    """
    skip = skip_fields or set()
    schemas: list[ParameterSchema] = []
    for name, info in model_cls.model_fields.items():
        if name in skip:
            continue
        param_type, enum_values = parameter_type_for_annotation(info.annotation)
        required = info.is_required()
        default = None if required else info.get_default(call_default_factory=True)
        if isinstance(default, Enum):
            default = default.value
        schemas.append(
            ParameterSchema(
                name=info.alias or name,
                type=param_type,
                required=required,
                default=default,
                description=info.description,
                enum_values=enum_values,
            )
        )
    return schemas


def format_default(default: object) -> str:
    """
    Format a default value compactly for markdown schema output.

    Args:
        default: The default value to format.

    Returns:
        A compact string representation of the default value.
    """
    if default is None:
        return "null"
    if isinstance(default, bool):
        return "true" if default else "false"
    if isinstance(default, (int, float)):
        return str(default)
    if isinstance(default, str):
        return f'"{default}"'
    return repr(default)


def format_parameter_schemas(schemas: Iterable[ParameterSchema]) -> list[str]:
    """
    Format parameter schemas as compact markdown lines.

    Args:
        schemas: The schemas to format, in the order they should appear.

    Returns:
        List of markdown lines like '- consumerKey: string (required)' or '- delay: integer = 60'.
    """
    lines: list[str] = []
    for schema in schemas:
        type_str = str(schema.type)
        if schema.type == ParameterType.ENUM:
            type_str = " | ".join(f'"{v}"' for v in schema.enum_values or [])
        if schema.required:
            line = f"- {schema.name}: {type_str} (required)"
        else:
            line = f"- {schema.name}: {type_str} = {format_default(schema.default)}"
        if schema.description:
            line += f" - {schema.description}"
        lines.append(line)
    return lines
