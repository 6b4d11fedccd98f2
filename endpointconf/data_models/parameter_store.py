"""
endpointconf/data_models/parameter_store.py

Name -> value mapping for URI parameters, optionally backed by schemas.

Contains:
- ParameterStore: get/set/replace_all with schema-gated type conversion
- sorted_schemas(): deterministic (name-ordered) schema listing
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from endpointconf.data_models.parameter_schema import ParameterSchema


class ParameterStore:
    """
    Current parameter values of a configuration plus their optional schemas.

    Names without a schema are untyped and accept any value. Names with a
    schema are converted on assignment, so stored values always match their
    declared type. Not synchronized: callers sharing an instance across
    threads must serialize access themselves.
    """

    def __init__(
        self,
        schemas: Mapping[str, ParameterSchema] | Iterable[ParameterSchema] | None = None,
        values: Mapping[str, Any] | None = None,
    ) -> None:
        self._schemas: dict[str, ParameterSchema] = self._build_schema_map(schemas)
        self._values: dict[str, Any] = {}
        if values:
            self.replace_all(values)

    @staticmethod
    def _build_schema_map(
        schemas: Mapping[str, ParameterSchema] | Iterable[ParameterSchema] | None,
    ) -> dict[str, ParameterSchema]:
        if schemas is None:
            return {}
        if isinstance(schemas, Mapping):
            for key, schema in schemas.items():
                if key != schema.name:
                    raise ValueError(f"Schema registered as '{key}' is named '{schema.name}'")
            return dict(schemas)
        schema_map: dict[str, ParameterSchema] = {}
        for schema in schemas:
            if schema.name in schema_map:
                raise ValueError(f"Duplicate parameter schema '{schema.name}'")
            schema_map[schema.name] = schema
        return schema_map

    def _convert(self, name: str, value: Any) -> Any:
        schema = self._schemas.get(name)
        if schema is None:
            return value
        return schema.convert(value)

    # Values ______________________________________________________________________________________

    def get(self, name: str) -> Any | None:
        """
        Get the current value of a parameter.

        Args:
            name: Parameter name.

        Returns:
            The stored value, or None if the parameter is not set.
        """
        return self._values.get(name)

    def set(self, name: str, value: Any) -> None:
        """
        Set (insert or overwrite) a single parameter.

        Args:
            name: Parameter name.
            value: New value; converted to the declared type when a schema exists.

        Raises:
            TypeMismatchError: If a schema exists and the value is not convertible.
        """
        self._values[name] = self._convert(name, value)

    def remove(self, name: str) -> None:
        """Remove a parameter value. Unknown names are ignored."""
        self._values.pop(name, None)

    def replace_all(self, values: Mapping[str, Any]) -> None:
        """
        Replace every stored value with the given mapping (full replace, not merge).

        All values are converted before the store is touched, so a
        TypeMismatchError leaves the previous values in place.

        Args:
            values: New parameter values.

        Raises:
            TypeMismatchError: If any value fails conversion to its declared type.
        """
        converted = {name: self._convert(name, value) for name, value in values.items()}
        self._values = converted

    def values(self) -> dict[str, Any]:
        """Return a copy of the stored values ordered by name."""
        return {name: self._values[name] for name in sorted(self._values)}

    def missing_required(self) -> list[str]:
        """Return the sorted names of required parameters that have no value."""
        return [
            name for name, schema in self.sorted_schemas()
            if schema.required and self._values.get(name) is None
        ]

    # Schemas _____________________________________________________________________________________

    def schema_for(self, name: str) -> ParameterSchema | None:
        """Return the schema for a parameter name, or None if the name is untyped."""
        return self._schemas.get(name)

    def sorted_schemas(self) -> list[tuple[str, ParameterSchema]]:
        """Return (name, schema) pairs ordered by name."""
        return sorted(self._schemas.items(), key=lambda item: item[0])

    @property
    def is_typed(self) -> bool:
        """Whether any schema backs this store."""
        return bool(self._schemas)

    def copy(self, values: Mapping[str, Any] | None = None) -> "ParameterStore":
        """
        Create a new store with the same schemas.

        Args:
            values: Values for the new store. Defaults to a copy of the current values.

        Returns:
            The new ParameterStore.
        """
        store = ParameterStore(schemas=self._schemas)
        store.replace_all(self._values if values is None else values)
        return store

    # Dunder methods ______________________________________________________________________________

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterStore):
            return NotImplemented
        return self._values == other._values and self._schemas == other._schemas

    def __repr__(self) -> str:
        return f"ParameterStore(values={self.values()!r}, schemas={sorted(self._schemas)!r})"
