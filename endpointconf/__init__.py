"""
endpointconf

URI-based endpoint configuration: a base URI plus typed query parameters,
convertible to and from a URI string and reflectable onto endpoints.
"""

from endpointconf.configuration.component_configuration import ComponentConfiguration
from endpointconf.data_models.parameter_schema import ParameterSchema
from endpointconf.data_models.parameter_store import ParameterStore
from endpointconf.data_models.parameter_type import ParameterType
from endpointconf.endpoints.endpoint import Endpoint, EndpointResolver, ModelEndpoint
from endpointconf.endpoints.registry import SchemeEndpointRegistry
from endpointconf.uri.codec import UriCodec
from endpointconf.utils.exceptions import (
    EndpointConfigurationError,
    IncompleteConfigurationError,
    MalformedUriError,
    ResolutionError,
    TypeMismatchError,
    UnknownParameterError,
)

__all__ = [
    "ComponentConfiguration",
    "Endpoint",
    "EndpointConfigurationError",
    "EndpointResolver",
    "IncompleteConfigurationError",
    "MalformedUriError",
    "ModelEndpoint",
    "ParameterSchema",
    "ParameterStore",
    "ParameterType",
    "ResolutionError",
    "SchemeEndpointRegistry",
    "TypeMismatchError",
    "UnknownParameterError",
    "UriCodec",
]
