"""
endpointconf/utils/exceptions.py

Custom exceptions for the project.
"""

from typing import Any


class EndpointConfigurationError(Exception):
    """
    Base class for all errors raised by endpointconf.
    """
    pass


class MalformedUriError(EndpointConfigurationError, ValueError):
    """
    Exception raised when a URI string cannot be split into a base and query parameters.
    """

    def __init__(self, uri: str, reason: str) -> None:
        self.uri = uri
        self.reason = reason
        super().__init__(f"Malformed URI {uri!r}: {reason}")


class TypeMismatchError(EndpointConfigurationError, ValueError):
    """
    Exception raised when a value cannot be converted to a parameter's declared type.
    """

    def __init__(self, name: str, value: Any, expected: str) -> None:
        self.name = name
        self.value = value
        self.expected = expected
        super().__init__(f"Parameter '{name}' expects {expected}, got {value!r}")


class UnknownParameterError(EndpointConfigurationError, LookupError):
    """
    Exception raised when a named parameter does not exist on the target.
    """

    def __init__(self, name: str, target: str) -> None:
        self.name = name
        self.target = target
        super().__init__(f"Unknown parameter '{name}' on {target}")


class IncompleteConfigurationError(EndpointConfigurationError):
    """
    Exception raised by an explicit completeness check when required values are missing.
    """

    def __init__(self, missing: list[str], message: str | None = None) -> None:
        self.missing = missing
        super().__init__(message or f"Missing required parameters: {', '.join(missing)}")


class ResolutionError(EndpointConfigurationError):
    """
    Exception raised when an endpoint cannot be resolved from a URI string.
    """

    def __init__(self, uri: str, reason: str) -> None:
        self.uri = uri
        self.reason = reason
        super().__init__(f"Failed to resolve endpoint for {uri!r}: {reason}")
