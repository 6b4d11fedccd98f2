"""
endpointconf/configuration/component_configuration.py

Configuration values for an endpoint URI.

Contains:
- ComponentConfiguration: base URI + parameters, convertible to/from a URI string
- create_endpoint() / configure_endpoint(): materialize or reflect onto endpoints
- get_endpoint_parameter() / set_endpoint_parameter(): single-field endpoint access
"""

import threading
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from endpointconf.data_models.parameter_schema import ParameterSchema
from endpointconf.data_models.parameter_store import ParameterStore
from endpointconf.endpoints.endpoint import Endpoint, EndpointResolver, ModelEndpoint
from endpointconf.endpoints.registry import apply_parameters
from endpointconf.uri.codec import UriCodec
from endpointconf.utils.exceptions import IncompleteConfigurationError, UnknownParameterError
from endpointconf.utils.logger import get_logger
from endpointconf.utils.pydantic_utils import format_parameter_schemas

logger = get_logger(name=__name__)


class ComponentConfiguration:
    """
    A set of configuration values for an endpoint URI.

    Created from a URI string or from a base URI plus parameter names and
    values; the values can then be introspected, modified and converted
    back into a URI string or an Endpoint.

    When schemas are given (e.g. derived from a ModelEndpoint subclass) all
    parameter values are converted to their declared types on assignment.
    Without schemas every value is kept as given and nothing is validated
    until an endpoint is created from the values.

    Instances are not synchronized. Callers sharing one across threads wrap
    each access in `with configuration.exclusive():`.
    """

    def __init__(
        self,
        resolver: EndpointResolver,
        base_uri: str = "",
        schemas: Mapping[str, ParameterSchema] | Iterable[ParameterSchema] | None = None,
        parameters: Mapping[str, Any] | None = None,
        codec: UriCodec | None = None,
    ) -> None:
        self._resolver = resolver
        self._codec = codec or UriCodec()
        if base_uri:
            self._codec.validate_base(base_uri)
        self._base_uri = base_uri
        self._parameters = ParameterStore(schemas=schemas, values=parameters)
        self._lock = threading.RLock()

    @classmethod
    def from_uri_string(
        cls,
        resolver: EndpointResolver,
        uri: str,
        schemas: Mapping[str, ParameterSchema] | Iterable[ParameterSchema] | None = None,
    ) -> "ComponentConfiguration":
        """
        Create a configuration from a full URI string.

        Raises:
            MalformedUriError: If the URI cannot be decoded.
            TypeMismatchError: If a typed parameter value does not convert.
        """
        configuration = cls(resolver=resolver, schemas=schemas)
        configuration.set_uri_string(uri)
        return configuration

    @classmethod
    def for_endpoint_type(
        cls,
        resolver: EndpointResolver,
        endpoint_cls: type[ModelEndpoint],
        base_uri: str = "",
    ) -> "ComponentConfiguration":
        """
        Create a fully-typed configuration whose schemas come from an endpoint model.

        Args:
            resolver: Resolver used by create_endpoint().
            endpoint_cls: ModelEndpoint subclass describing the parameters.
            base_uri: Initial base URI.
        """
        return cls(resolver=resolver, base_uri=base_uri, schemas=endpoint_cls.parameter_schemas())

    # Base URI ____________________________________________________________________________________

    def get_base_uri(self) -> str:
        """Return the base URI without any query parameters."""
        return self._base_uri

    def set_base_uri(self, base_uri: str) -> None:
        """
        Set the base URI without touching the parameters.

        Raises:
            MalformedUriError: If the base URI is empty or includes a query.
        """
        self._codec.validate_base(base_uri)
        self._base_uri = base_uri

    # Parameters __________________________________________________________________________________

    def get_parameters(self) -> dict[str, Any]:
        """Return a copy of the current parameters, ordered by name."""
        return self._parameters.values()

    def set_parameters(self, parameters: Mapping[str, Any]) -> None:
        """
        Replace all parameter values (full replace, previous names do not survive).

        Raises:
            TypeMismatchError: If a typed value does not convert. Nothing is changed.
        """
        self._parameters.replace_all(parameters)

    def get_parameter(self, name: str) -> Any | None:
        """Return the value of a parameter, or None if it is not set."""
        return self._parameters.get(name)

    def set_parameter(self, name: str, value: Any) -> None:
        """
        Set a single parameter value.

        Raises:
            TypeMismatchError: If the parameter is typed and the value does not convert.
        """
        self._parameters.set(name, value)

    def check_required(self) -> None:
        """
        Check every required parameter has a value.

        Raises:
            IncompleteConfigurationError: Listing the missing parameter names.
        """
        missing = self._parameters.missing_required()
        if missing:
            raise IncompleteConfigurationError(missing=missing)

    # URI string __________________________________________________________________________________

    def get_uri_string(self) -> str:
        """
        Return the base URI with the parameters encoded as its query, sorted by name.

        Raises:
            MalformedUriError: If the base URI is not set or a parameter name is empty,
                i.e. the string could not be read back by set_uri_string().
        """
        return self._codec.encode(self._base_uri, self._parameters)

    def set_uri_string(self, uri: str) -> None:
        """
        Replace the base URI and the parameters from a URI string.

        Both are updated together; on failure neither changes.

        Raises:
            MalformedUriError: If the URI cannot be decoded.
            TypeMismatchError: If a typed parameter value does not convert.
        """
        base, decoded = self._codec.decode(uri)
        parameters = self._parameters.copy(values=decoded.values())
        self._base_uri = base
        self._parameters = parameters
        logger.debug(f"Configuration set from URI {uri!r}: base={base!r}, parameters={sorted(parameters)}")

    # Introspection _______________________________________________________________________________

    def get_parameter_configuration(self, name: str) -> ParameterSchema | None:
        """Return the schema of a parameter, or None if it has none."""
        return self._parameters.schema_for(name)

    def get_parameter_configuration_map(self) -> dict[str, ParameterSchema]:
        """Return all parameter schemas keyed by name, ordered by name."""
        return dict(self._parameters.sorted_schemas())

    def describe(self) -> str:
        """
        Generate a compact markdown description of this configuration.

        Lists the current URI followed by every declared parameter with its
        type, default and description.
        """
        uri = f"`{self.get_uri_string()}`" if self._base_uri else "(base URI not set)"
        lines: list[str] = ["## Component Configuration", "", f"URI: {uri}", ""]
        schemas = [schema for _, schema in self._parameters.sorted_schemas()]
        if schemas:
            lines.append("### Parameters")
            lines.extend(format_parameter_schemas(schemas))
        else:
            lines.append("### Parameters (untyped)")
            lines.extend(f"- {name}" for name in self._parameters)
        return "\n".join(lines)

    # Endpoints ___________________________________________________________________________________

    def create_endpoint(self) -> Endpoint:
        """
        Resolve the current URI string into a new endpoint.

        Errors from the resolver propagate unchanged.

        Raises:
            MalformedUriError: If the configuration cannot be encoded as a URI string.
        """
        uri = self.get_uri_string()
        logger.debug(f"Creating endpoint for {uri!r}")
        return self._resolver.resolve(uri)

    def configure_endpoint(self, endpoint: Endpoint) -> None:
        """
        Apply the current parameters onto an endpoint.

        Parameters the endpoint does not expose are skipped. This
        configuration is not modified.

        Raises:
            TypeMismatchError: If the endpoint rejects a value.
        """
        apply_parameters(endpoint, self._parameters.values())

    def get_endpoint_parameter(self, endpoint: Endpoint, name: str) -> Any:
        """
        Read a named parameter directly from an endpoint.

        Raises:
            UnknownParameterError: If the endpoint has no such parameter.
        """
        self._require_endpoint_parameter(endpoint, name)
        return endpoint.get_field(name)

    def set_endpoint_parameter(self, endpoint: Endpoint, name: str, value: Any) -> None:
        """
        Write a named parameter directly onto an endpoint.

        Raises:
            UnknownParameterError: If the endpoint has no such parameter.
            TypeMismatchError: If the endpoint rejects the value.
        """
        self._require_endpoint_parameter(endpoint, name)
        endpoint.set_field(name, value)

    def _require_endpoint_parameter(self, endpoint: Endpoint, name: str) -> None:
        if name not in endpoint.list_parameter_names():
            raise UnknownParameterError(name=name, target=type(endpoint).__name__)

    # Concurrency _________________________________________________________________________________

    @contextmanager
    def exclusive(self) -> Iterator["ComponentConfiguration"]:
        """
        Hold this configuration's lock for the duration of the block.

        Usage:
            with configuration.exclusive() as config:
                config.set_parameter("delay", 30)
                uri = config.get_uri_string()
        """
        with self._lock:
            yield self

    def __repr__(self) -> str:
        return f"ComponentConfiguration(base_uri={self._base_uri!r}, parameters={self.get_parameters()!r})"
