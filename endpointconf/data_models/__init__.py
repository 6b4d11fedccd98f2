"""
endpointconf/data_models

Data models for parameters: type tags, schemas, the parameter store and client configurations.
"""

from endpointconf.data_models.client_configuration import OAuthClientConfiguration
from endpointconf.data_models.parameter_schema import ParameterSchema
from endpointconf.data_models.parameter_store import ParameterStore
from endpointconf.data_models.parameter_type import ParameterType

__all__ = [
    "OAuthClientConfiguration",
    "ParameterSchema",
    "ParameterStore",
    "ParameterType",
]
