"""
endpointconf/components

Concrete components with typed parameter groups.
"""

from endpointconf.components.twitter import TwitterEndpoint, TwitterEndpointKind, TwitterProperties

__all__ = [
    "TwitterEndpoint",
    "TwitterEndpointKind",
    "TwitterProperties",
]
