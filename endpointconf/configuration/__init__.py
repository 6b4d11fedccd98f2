"""
endpointconf/configuration

The ComponentConfiguration façade.
"""

from endpointconf.configuration.component_configuration import ComponentConfiguration

__all__ = [
    "ComponentConfiguration",
]
