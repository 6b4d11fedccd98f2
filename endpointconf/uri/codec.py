"""
endpointconf/uri/codec.py

Conversion between endpoint URI strings and (base, ParameterStore) pairs.

Contains:
- UriCodec: decode() / encode() for `<base>[?name=value[&name=value...]]`
- format_parameter_value(): textual form of a parameter value in a URI
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote, unquote_plus

from endpointconf.data_models.parameter_schema import ParameterSchema
from endpointconf.data_models.parameter_store import ParameterStore
from endpointconf.utils.exceptions import MalformedUriError


# scheme per RFC 3986 followed by the ':' separator
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

# '%' not followed by two hex digits
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# whitespace and ASCII control characters
_INVALID_CHAR_RE = re.compile(r"[\s\x00-\x1f\x7f]")


def format_parameter_value(value: Any) -> str:
    """
    Render a parameter value as the text placed in a URI query.

    Args:
        value: Stored parameter value (never None; None values are not encoded).

    Returns:
        "true"/"false" for booleans, str(value) otherwise.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class UriCodec:
    """
    Splits URI strings into a base and query parameters and joins them back.

    Duplicate parameter names resolve last-wins. Encoding sorts parameters
    by name so the same store always produces the same string.
    """

    QUERY_SEPARATOR = "?"
    PAIR_SEPARATOR = "&"
    NAME_VALUE_SEPARATOR = "="

    def decode(
        self,
        uri: str,
        schemas: Mapping[str, ParameterSchema] | Iterable[ParameterSchema] | None = None,
    ) -> tuple[str, ParameterStore]:
        """
        Decode a URI string into its base and parameters.

        Args:
            uri: URI string such as "twitter://search?keywords=camel".
            schemas: Optional schemas typing the decoded store.

        Returns:
            Tuple of (base, ParameterStore).

        Raises:
            MalformedUriError: If the string is not a well-formed endpoint URI.
            TypeMismatchError: If a schema-typed value does not convert.
        """
        if not isinstance(uri, str) or not uri:
            raise MalformedUriError(uri=str(uri), reason="empty URI")
        if _INVALID_CHAR_RE.search(uri):
            raise MalformedUriError(uri=uri, reason="contains whitespace or control characters")
        if "#" in uri:
            raise MalformedUriError(uri=uri, reason="fragments are not supported")

        base, separator, query = uri.partition(self.QUERY_SEPARATOR)
        self.validate_base(base, uri=uri)

        values: dict[str, str] = {}
        if separator:
            for name, value in self._parse_query(query, uri=uri):
                # last occurrence wins
                values.pop(name, None)
                values[name] = value

        return base, ParameterStore(schemas=schemas, values=values)

    def encode(self, base: str, store: ParameterStore) -> str:
        """
        Encode a base and parameters into a URI string.

        Args:
            base: Base URI without query suffix.
            store: Parameters to append, sorted by name.

        Returns:
            `base` when no parameter has a value, otherwise `base?name=value&...`.

        Raises:
            MalformedUriError: If the result could not be decoded again, i.e. the base
                is not valid or a parameter name is empty.
        """
        self.validate_base(base)
        pairs: list[str] = []
        for name, value in store.values().items():
            if value is None:
                continue
            if not name:
                raise MalformedUriError(uri=base, reason="empty parameter name")
            pairs.append(
                f"{quote(name, safe='')}{self.NAME_VALUE_SEPARATOR}{quote(format_parameter_value(value), safe='')}"
            )
        if not pairs:
            return base
        return f"{base}{self.QUERY_SEPARATOR}{self.PAIR_SEPARATOR.join(pairs)}"

    def validate_base(self, base: str, uri: str | None = None) -> None:
        """
        Check that a base URI is non-empty, has no query suffix and, when it
        starts with a scheme, has something after the scheme.

        Args:
            base: Base URI to check.
            uri: Full URI the base came from, used in the error message.

        Raises:
            MalformedUriError: If the base is not usable.
        """
        source = base if uri is None else uri
        if not base:
            raise MalformedUriError(uri=source, reason="empty base URI")
        if self.QUERY_SEPARATOR in base:
            raise MalformedUriError(uri=source, reason="base URI must not contain a query")
        if _INVALID_CHAR_RE.search(base):
            raise MalformedUriError(uri=source, reason="contains whitespace or control characters")
        scheme, remainder = self.split_scheme(base)
        if scheme is not None and not remainder:
            raise MalformedUriError(uri=source, reason=f"nothing after the '{scheme}' scheme")
        if _BAD_ESCAPE_RE.search(base):
            raise MalformedUriError(uri=source, reason="invalid percent escape")

    @staticmethod
    def split_scheme(base: str) -> tuple[str | None, str]:
        """
        Split a base URI into its scheme and the remainder after `scheme:` / `scheme://`.

        Args:
            base: Base URI, e.g. "twitter://search".

        Returns:
            Tuple of (scheme or None, remainder), e.g. ("twitter", "search").
        """
        match = _SCHEME_RE.match(base)
        if match is None:
            return None, base
        return base[:match.end() - 1], base[match.end():].lstrip("/")

    def _parse_query(self, query: str, uri: str) -> list[tuple[str, str]]:
        """Split a raw query string into percent-decoded (name, value) pairs."""
        if _BAD_ESCAPE_RE.search(query):
            raise MalformedUriError(uri=uri, reason="invalid percent escape")

        pairs: list[tuple[str, str]] = []
        for segment in query.split(self.PAIR_SEPARATOR):
            if not segment:
                continue
            raw_name, _, raw_value = segment.partition(self.NAME_VALUE_SEPARATOR)
            try:
                name = unquote_plus(raw_name, errors="strict")
                value = unquote_plus(raw_value, errors="strict")
            except UnicodeDecodeError as e:
                raise MalformedUriError(uri=uri, reason=f"query is not valid UTF-8: {e}") from e
            if not name:
                raise MalformedUriError(uri=uri, reason=f"empty parameter name in '{segment}'")
            pairs.append((name, value))
        return pairs
