"""
tests/unit/endpoints/test_registry.py

Unit tests for SchemeEndpointRegistry and apply_parameters.
"""

from unittest.mock import MagicMock

import pytest

from endpointconf.components.twitter import TwitterEndpoint, TwitterEndpointKind
from endpointconf.endpoints.endpoint import EndpointResolver
from endpointconf.endpoints.registry import SchemeEndpointRegistry, apply_parameters
from endpointconf.utils.exceptions import ResolutionError, TypeMismatchError


class TestApplyParameters:
    """Tests for apply_parameters()."""

    def test_applies_known_and_skips_unknown(self) -> None:
        endpoint = MagicMock()
        endpoint.list_parameter_names.return_value = {"keywords", "delay"}
        skipped = apply_parameters(endpoint, {"keywords": "camel", "delay": "30", "bogus": "x"})
        assert skipped == ["bogus"]
        endpoint.set_field.assert_any_call("keywords", "camel")
        endpoint.set_field.assert_any_call("delay", "30")
        assert endpoint.set_field.call_count == 2

    def test_skips_none_values(self) -> None:
        endpoint = MagicMock()
        endpoint.list_parameter_names.return_value = {"keywords"}
        assert apply_parameters(endpoint, {"keywords": None}) == ["keywords"]
        endpoint.set_field.assert_not_called()

    def test_endpoint_errors_propagate(self) -> None:
        endpoint = MagicMock()
        endpoint.list_parameter_names.return_value = {"delay"}
        endpoint.set_field.side_effect = TypeMismatchError(name="delay", value="x", expected="int")
        with pytest.raises(TypeMismatchError):
            apply_parameters(endpoint, {"delay": "x"})


class TestSchemeEndpointRegistry:
    """Tests for SchemeEndpointRegistry.resolve()."""

    def test_satisfies_resolver_protocol(self, twitter_registry: SchemeEndpointRegistry) -> None:
        assert isinstance(twitter_registry, EndpointResolver)

    def test_resolve_configures_endpoint(self, twitter_registry: SchemeEndpointRegistry) -> None:
        endpoint = twitter_registry.resolve("twitter://search?keywords=camel&delay=30&unknown=1")
        assert isinstance(endpoint, TwitterEndpoint)
        assert endpoint.kind == TwitterEndpointKind.SEARCH
        assert endpoint.properties.keywords == "camel"
        assert endpoint.properties.delay == 30

    def test_scheme_is_case_insensitive(self, twitter_registry: SchemeEndpointRegistry) -> None:
        assert isinstance(twitter_registry.resolve("TWITTER://timeline"), TwitterEndpoint)

    def test_unknown_scheme(self, twitter_registry: SchemeEndpointRegistry) -> None:
        with pytest.raises(ResolutionError, match="no endpoint registered"):
            twitter_registry.resolve("mail://inbox")

    def test_missing_scheme(self, twitter_registry: SchemeEndpointRegistry) -> None:
        with pytest.raises(ResolutionError, match="no scheme"):
            twitter_registry.resolve("search?keywords=camel")

    def test_malformed_uri(self, twitter_registry: SchemeEndpointRegistry) -> None:
        """Malformed URIs surface as ResolutionError chained from MalformedUriError."""
        with pytest.raises(ResolutionError) as exc_info:
            twitter_registry.resolve("not a uri")
        assert exc_info.value.__cause__ is not None

    def test_bad_parameter_value(self, twitter_registry: SchemeEndpointRegistry) -> None:
        with pytest.raises(ResolutionError, match="delay"):
            twitter_registry.resolve("twitter://search?delay=soon")

    def test_factory_rejects_remainder(self, twitter_registry: SchemeEndpointRegistry) -> None:
        with pytest.raises(ResolutionError, match="Unknown twitter endpoint kind"):
            twitter_registry.resolve("twitter://nowhere")

    def test_register_and_unregister(self) -> None:
        registry = SchemeEndpointRegistry()
        factory = MagicMock()
        factory.return_value.list_parameter_names.return_value = set()
        registry.register("Mock", factory)
        assert registry.schemes == ["mock"]
        registry.resolve("mock:thing")
        factory.assert_called_once_with("thing")
        registry.unregister("mock")
        assert registry.schemes == []
