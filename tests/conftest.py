"""
tests/conftest.py

Configuration for pytest.
"""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from endpointconf.components.twitter import TwitterEndpoint, TwitterProperties
from endpointconf.configuration.component_configuration import ComponentConfiguration
from endpointconf.data_models.parameter_schema import ParameterSchema
from endpointconf.data_models.parameter_type import ParameterType
from endpointconf.endpoints.registry import SchemeEndpointRegistry
from endpointconf.uri.codec import UriCodec


@pytest.fixture
def codec() -> UriCodec:
    """A fresh UriCodec."""
    return UriCodec()


@pytest.fixture
def port_schemas() -> list[ParameterSchema]:
    """
    Schemas for a small typed component.
    Returns:
        Schemas for port (integer), secure (boolean), mode (enum) and host (required string).
    """
    return [
        ParameterSchema(name="port", type=ParameterType.INTEGER),
        ParameterSchema(name="secure", type=ParameterType.BOOLEAN, default=False),
        ParameterSchema(name="mode", type=ParameterType.ENUM, enum_values=["push", "poll"], default="poll"),
        ParameterSchema(name="host", type=ParameterType.STRING, required=True),
    ]


@pytest.fixture
def twitter_registry() -> SchemeEndpointRegistry:
    """Registry resolving twitter:// URIs to TwitterEndpoint instances."""
    registry = SchemeEndpointRegistry()
    registry.register(TwitterEndpoint.SCHEME, TwitterEndpoint.from_remaining)
    return registry


@pytest.fixture
def mock_resolver() -> MagicMock:
    """Resolver double recording the URIs it is asked to resolve."""
    resolver = MagicMock()
    resolver.resolve.return_value = MagicMock(name="endpoint")
    return resolver


@pytest.fixture
def make_configuration(mock_resolver: MagicMock) -> Callable[..., ComponentConfiguration]:
    """
    Factory fixture to create ComponentConfiguration with a mocked resolver.

    Usage:
        configuration = make_configuration()
        configuration = make_configuration(base_uri="twitter://search", parameters={"keywords": "camel"})
    """
    def factory(**kwargs: Any) -> ComponentConfiguration:
        kwargs.setdefault("resolver", mock_resolver)
        return ComponentConfiguration(**kwargs)
    return factory


@pytest.fixture
def complete_twitter_properties() -> TwitterProperties:
    """TwitterProperties with both credential pairs set."""
    return TwitterProperties(
        consumer_key="ck",
        consumer_secret="cs",
        access_token="at",
        access_token_secret="ats",
    )
