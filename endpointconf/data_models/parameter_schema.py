"""
endpointconf/data_models/parameter_schema.py

Declared shape of a single URI parameter.

Contains:
- ParameterSchema: name, type, required flag, default, enum values
- convert(): coerce a raw (usually textual) value into the declared type
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from endpointconf.data_models.parameter_type import ParameterType
from endpointconf.utils.exceptions import TypeMismatchError


# decimal ASCII digits with an optional minus sign, as rendered by str(int)
_INTEGER_RE = re.compile(r"-?[0-9]+")

_BOOLEAN_STRINGS = {"true": True, "false": False}


class ParameterSchema(BaseModel):
    """
    Describes one named parameter of a component configuration.

    Immutable once built. Conversion is strict for typed parameters: the only
    textual forms accepted are the ones `format_parameter_value` produces,
    so decoding an encoded URI always yields the original typed value.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Parameter name, unique within its configuration")
    type: ParameterType = Field(default=ParameterType.STRING, description="Declared type of the parameter")
    required: bool = Field(default=False, description="Whether the parameter must be set")
    default: Any | None = Field(default=None, description="Value used when the parameter is not set")
    description: str | None = Field(default=None, description="Human readable description")
    enum_values: list[str] | None = Field(
        default=None,
        description="Allowed values when type is 'enum'"
    )

    @model_validator(mode="after")
    def validate_schema(self) -> "ParameterSchema":
        """
        Validates:
        - A required parameter has no default
        - An enum parameter lists its allowed values, other types do not
        - The default converts to the declared type

        Raises ValueError with all errors collected together.
        """
        errors: list[str] = []

        if self.required and self.default is not None:
            errors.append("required parameter must not declare a default")

        if self.type == ParameterType.ENUM:
            if not self.enum_values:
                errors.append("enum parameter must declare enum_values")
        elif self.enum_values is not None:
            errors.append(f"enum_values is only allowed for enum parameters, not '{self.type}'")

        if self.default is not None and not errors:
            try:
                self.convert(self.default)
            except TypeMismatchError as e:
                errors.append(f"default is invalid: {e}")

        if errors:
            raise ValueError(f"Parameter schema '{self.name}' is invalid:\n- " + "\n- ".join(errors))

        return self

    def convert(self, value: Any) -> Any:
        """
        Convert a value to the declared type.

        Args:
            value: Raw value, typically a string decoded from a URI.

        Returns:
            The converted value. None is passed through as an unset parameter.

        Raises:
            TypeMismatchError: If the value is not convertible.
        """
        if value is None:
            return None

        match self.type:
            case ParameterType.STRING:
                if isinstance(value, bool):
                    return "true" if value else "false"
                if isinstance(value, (str, int, float)):
                    return str(value)
            case ParameterType.INTEGER:
                if isinstance(value, int) and not isinstance(value, bool):
                    return value
                if isinstance(value, str) and _INTEGER_RE.fullmatch(value):
                    return int(value, 10)
            case ParameterType.BOOLEAN:
                if isinstance(value, bool):
                    return value
                if isinstance(value, str) and value in _BOOLEAN_STRINGS:
                    return _BOOLEAN_STRINGS[value]
            case ParameterType.ENUM:
                if isinstance(value, str) and value in (self.enum_values or []):
                    return value
            case ParameterType.OBJECT:
                return value

        raise TypeMismatchError(name=self.name, value=value, expected=self.expected_description())

    def expected_description(self) -> str:
        """Human readable description of accepted values, used in error messages."""
        if self.type == ParameterType.ENUM:
            return "one of " + ", ".join(f"'{v}'" for v in self.enum_values or [])
        return f"a value of type '{self.type}'"
