"""
endpointconf/data_models/parameter_type.py

Shared enum for parameter type tags.
Extracted to avoid circular imports between the schema and pydantic helpers.
"""

from enum import StrEnum


class ParameterType(StrEnum):
    """Semantic type tags a URI parameter can be declared with."""
    # python primitives
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"

    # constrained / opaque
    ENUM = "enum"
    OBJECT = "object"
