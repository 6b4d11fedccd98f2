"""
endpointconf/components/twitter.py

Typed parameters and endpoint for twitter:// URIs.

Contains:
- TwitterProperties: all options provided on a twitter endpoint URI
- TwitterEndpointKind: the kinds of twitter endpoint (search, timeline, ...)
- TwitterEndpoint: endpoint exposing TwitterProperties by parameter name
"""

from enum import StrEnum
from typing import Any

from pydantic import Field

from endpointconf.config import Config
from endpointconf.data_models.client_configuration import OAuthClientConfiguration
from endpointconf.endpoints.endpoint import ModelEndpoint
from endpointconf.utils.exceptions import IncompleteConfigurationError


class TwitterEndpointKind(StrEnum):
    """Kind of twitter endpoint, the part of the URI after `twitter://`."""
    SEARCH = "search"
    TIMELINE = "timeline"
    DIRECT_MESSAGE = "directmessage"
    STREAMING = "streaming"


class TwitterProperties(ModelEndpoint):
    """
    Encapsulates all options provided on a twitter endpoint URI.

    Populated field by field (usually by reflecting URI parameters onto it),
    checked once with check_complete() and then converted into the client
    configuration with to_client_configuration().
    """
    consumer_key: str | None = Field(default=None, description="OAuth consumer key")
    consumer_secret: str | None = Field(default=None, description="OAuth consumer secret")
    access_token: str | None = Field(default=None, description="OAuth access token")
    access_token_secret: str | None = Field(default=None, description="OAuth access token secret")

    user: str | None = Field(default=None, description="Username to read the timeline or messages of")
    keywords: str | None = Field(default=None, description="Search keywords")
    delay: int = Field(default=Config.TWITTER_DEFAULT_DELAY, description="Polling delay in seconds")
    type: str | None = Field(default=None, description="Feed type, e.g. polling, direct or event")
    locations: str | None = Field(default=None, description="Bounding boxes to filter by location")

    def check_complete(self) -> None:
        """
        Check that both credential pairs are set.

        Raises:
            IncompleteConfigurationError: If any of the four OAuth fields is empty.
        """
        credentials = {
            "consumerKey": self.consumer_key,
            "consumerSecret": self.consumer_secret,
            "accessToken": self.access_token,
            "accessTokenSecret": self.access_token_secret,
        }
        missing = [name for name, value in credentials.items() if not value]
        if missing:
            raise IncompleteConfigurationError(
                missing=missing,
                message="consumerKey, consumerSecret, accessToken, and accessTokenSecret must be set! "
                        f"Missing: {', '.join(missing)}",
            )

    def to_client_configuration(self) -> OAuthClientConfiguration:
        """
        Build the client configuration from the credential fields.

        Does not re-check completeness: call check_complete() first. Unset
        credentials are carried over as None.
        """
        return OAuthClientConfiguration(
            oauth_consumer_key=self.consumer_key,
            oauth_consumer_secret=self.consumer_secret,
            oauth_access_token=self.access_token,
            oauth_access_token_secret=self.access_token_secret,
        )


class TwitterEndpoint:
    """
    A twitter endpoint of a given kind, configured through its properties.

    Exposes the TwitterProperties fields as its parameters.
    """

    SCHEME = "twitter"

    def __init__(self, kind: TwitterEndpointKind, properties: TwitterProperties | None = None) -> None:
        self.kind = kind
        self.properties = properties or TwitterProperties()

    @classmethod
    def from_remaining(cls, remaining: str) -> "TwitterEndpoint":
        """
        Build an endpoint from the URI part after `twitter://`.

        Raises:
            ValueError: If the remainder is not a known endpoint kind.
        """
        kind = remaining.strip("/").lower()
        try:
            return cls(kind=TwitterEndpointKind(kind))
        except ValueError as e:
            known = ", ".join(k.value for k in TwitterEndpointKind)
            raise ValueError(f"Unknown twitter endpoint kind '{remaining}', expected one of: {known}") from e

    @property
    def endpoint_uri(self) -> str:
        """Base URI of this endpoint, without parameters."""
        return f"{self.SCHEME}://{self.kind.value}"

    def list_parameter_names(self) -> set[str]:
        return self.properties.list_parameter_names()

    def get_field(self, name: str) -> Any:
        return self.properties.get_field(name)

    def set_field(self, name: str, value: Any) -> None:
        self.properties.set_field(name, value)

    def __repr__(self) -> str:
        return f"TwitterEndpoint({self.endpoint_uri!r})"
