"""
endpointconf/data_models/client_configuration.py

Immutable OAuth credential bundle handed to an external API client.
"""

from pydantic import BaseModel, ConfigDict, Field


class OAuthClientConfiguration(BaseModel):
    """OAuth 1.0a credentials for a client library. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    oauth_consumer_key: str | None = Field(default=None, description="OAuth consumer (API) key")
    oauth_consumer_secret: str | None = Field(default=None, description="OAuth consumer (API) secret")
    oauth_access_token: str | None = Field(default=None, description="OAuth access token")
    oauth_access_token_secret: str | None = Field(default=None, description="OAuth access token secret")
