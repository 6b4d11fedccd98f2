"""
endpointconf/utils

Shared helpers: logging, exceptions and pydantic utilities.
"""
