"""
endpointconf/endpoints

Endpoint capability protocols, the Pydantic-backed endpoint base and the scheme registry.
"""

from endpointconf.endpoints.endpoint import Endpoint, EndpointResolver, ModelEndpoint
from endpointconf.endpoints.registry import EndpointFactory, SchemeEndpointRegistry, apply_parameters

__all__ = [
    "apply_parameters",
    "Endpoint",
    "EndpointFactory",
    "EndpointResolver",
    "ModelEndpoint",
    "SchemeEndpointRegistry",
]
