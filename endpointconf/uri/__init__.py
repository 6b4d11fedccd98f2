"""
endpointconf/uri

URI string codec for endpoint configurations.
"""

from endpointconf.uri.codec import UriCodec, format_parameter_value

__all__ = [
    "format_parameter_value",
    "UriCodec",
]
