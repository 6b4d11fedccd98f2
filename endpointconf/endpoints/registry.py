"""
endpointconf/endpoints/registry.py

In-memory endpoint resolver keyed by URI scheme.

Contains:
- EndpointFactory: callable building an endpoint from the URI remainder
- SchemeEndpointRegistry: register factories per scheme, resolve URIs to configured endpoints
- apply_parameters(): configure-by-name shared with ComponentConfiguration
"""

from collections.abc import Callable, Mapping
from typing import Any

from endpointconf.endpoints.endpoint import Endpoint
from endpointconf.uri.codec import UriCodec
from endpointconf.utils.exceptions import MalformedUriError, ResolutionError
from endpointconf.utils.logger import get_logger

logger = get_logger(name=__name__)


# Builds an endpoint from the part of the base URI after "scheme://"
EndpointFactory = Callable[[str], Endpoint]


def apply_parameters(endpoint: Endpoint, parameters: Mapping[str, Any]) -> list[str]:
    """
    Write parameter values onto an endpoint by name.

    Names the endpoint does not expose and unset (None) values are skipped.
    Errors raised by the endpoint itself propagate.

    Args:
        endpoint: Endpoint to configure.
        parameters: Parameter values keyed by name.

    Returns:
        Sorted names of the parameters that were skipped.
    """
    known = endpoint.list_parameter_names()
    skipped: list[str] = []
    for name in sorted(parameters):
        value = parameters[name]
        if name not in known or value is None:
            skipped.append(name)
            continue
        endpoint.set_field(name, value)
    if skipped:
        logger.debug(f"Skipped parameters not applicable to {type(endpoint).__name__}: {skipped}")
    return skipped


class SchemeEndpointRegistry:
    """
    Resolves URI strings to endpoints using one factory per scheme.

    Resolution decodes the URI, builds the endpoint with the factory
    registered for its scheme and applies the query parameters onto it.
    """

    def __init__(self, codec: UriCodec | None = None) -> None:
        self._codec = codec or UriCodec()
        self._factories: dict[str, EndpointFactory] = {}

    def register(self, scheme: str, factory: EndpointFactory) -> None:
        """
        Register the endpoint factory for a scheme (case-insensitive).

        Args:
            scheme: URI scheme, e.g. "twitter".
            factory: Callable receiving the remainder after "scheme://".
        """
        self._factories[scheme.lower()] = factory

    def unregister(self, scheme: str) -> None:
        """Remove the factory for a scheme, if any."""
        self._factories.pop(scheme.lower(), None)

    @property
    def schemes(self) -> list[str]:
        """Registered schemes, sorted."""
        return sorted(self._factories)

    def resolve(self, uri: str) -> Endpoint:
        """
        Resolve a URI string into a configured endpoint.

        Args:
            uri: Endpoint URI, e.g. "twitter://search?keywords=camel".

        Returns:
            The endpoint built by the scheme's factory, with query parameters applied.

        Raises:
            ResolutionError: If the URI is malformed, has no registered scheme or
                its parameters do not fit the endpoint.
        """
        try:
            base, store = self._codec.decode(uri)
        except MalformedUriError as e:
            raise ResolutionError(uri=uri, reason=str(e)) from e

        scheme, remainder = self._codec.split_scheme(base)
        if scheme is None:
            raise ResolutionError(uri=uri, reason="URI has no scheme")
        factory = self._factories.get(scheme.lower())
        if factory is None:
            raise ResolutionError(uri=uri, reason=f"no endpoint registered for scheme '{scheme}'")

        # TypeMismatchError is a ValueError
        try:
            endpoint = factory(remainder)
            apply_parameters(endpoint, store.values())
        except ValueError as e:
            raise ResolutionError(uri=uri, reason=str(e)) from e

        logger.debug(f"Resolved {uri!r} to {type(endpoint).__name__}")
        return endpoint
