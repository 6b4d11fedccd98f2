"""
endpointconf/endpoints/endpoint.py

Capability interfaces for endpoints and endpoint resolvers.

Contains:
- Endpoint: protocol for reading/writing named parameters on a live endpoint
- EndpointResolver: protocol for materializing an endpoint from a URI string
- ModelEndpoint: Pydantic base implementing Endpoint over its own fields
"""

from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from endpointconf.data_models.parameter_schema import ParameterSchema
from endpointconf.utils.exceptions import TypeMismatchError, UnknownParameterError
from endpointconf.utils.pydantic_utils import schemas_from_model


@runtime_checkable
class Endpoint(Protocol):
    """
    A resolved runtime endpoint whose parameters can be reflected by name.
    """

    def list_parameter_names(self) -> set[str]:
        """Return the names of all parameters this endpoint exposes."""
        ...

    def get_field(self, name: str) -> Any:
        """
        Read a parameter value.

        Raises:
            UnknownParameterError: If the endpoint has no such parameter.
        """
        ...

    def set_field(self, name: str, value: Any) -> None:
        """
        Write a parameter value.

        Raises:
            UnknownParameterError: If the endpoint has no such parameter.
            TypeMismatchError: If the value does not fit the parameter.
        """
        ...


@runtime_checkable
class EndpointResolver(Protocol):
    """
    Materializes endpoints from URI strings.
    """

    def resolve(self, uri: str) -> Endpoint:
        """
        Resolve a URI string into an endpoint.

        Raises:
            ResolutionError: If no endpoint can be created for the URI.
        """
        ...


class ModelEndpoint(BaseModel):
    """
    Endpoint whose parameters are the fields of a Pydantic model.

    Parameter names are the camelCase field aliases ("accessToken"); the
    snake_case field names are accepted as well. Assignments are validated,
    so a value of the wrong type raises TypeMismatchError.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    # fields that are state, not URI parameters
    non_parameter_fields: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def _parameter_fields(cls) -> dict[str, str]:
        """Map every accepted parameter name (alias and field name) to its field name."""
        mapping: dict[str, str] = {}
        for field_name, info in cls.model_fields.items():
            if field_name in cls.non_parameter_fields:
                continue
            mapping[field_name] = field_name
            if info.alias:
                mapping[info.alias] = field_name
        return mapping

    def _field_name(self, name: str) -> str:
        field_name = self._parameter_fields().get(name)
        if field_name is None:
            raise UnknownParameterError(name=name, target=type(self).__name__)
        return field_name

    @classmethod
    def parameter_schemas(cls) -> list[ParameterSchema]:
        """Derive the parameter schemas of this endpoint type from its fields."""
        return schemas_from_model(cls, skip_fields=set(cls.non_parameter_fields))

    def list_parameter_names(self) -> set[str]:
        """Return the URI parameter names (field aliases) of this endpoint."""
        cls = type(self)
        return {
            info.alias or field_name
            for field_name, info in cls.model_fields.items()
            if field_name not in cls.non_parameter_fields
        }

    def get_field(self, name: str) -> Any:
        """Read a parameter value by alias or field name."""
        return getattr(self, self._field_name(name))

    def set_field(self, name: str, value: Any) -> None:
        """Write a parameter value by alias or field name, validating its type."""
        field_name = self._field_name(name)
        try:
            setattr(self, field_name, value)
        except ValidationError as e:
            reasons = "; ".join(error["msg"] for error in e.errors())
            expected = f"a valid value ({reasons})"
            raise TypeMismatchError(name=name, value=value, expected=expected) from e
