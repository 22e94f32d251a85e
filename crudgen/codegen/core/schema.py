"""
Core schema representation for code generation.

Converts the raw ``{key: {"name": ..., "type": ...}}`` mapping supplied by
the caller into an immutable, ordered Schema that emitters can work with
consistently.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from ...logging_config import get_logger
from .errors import MalformedSchemaError

logger = get_logger(__name__)

REQUIRED_KEYS = ("name", "type")

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass(frozen=True)
class Field:
    """Represents a single property of an entity."""

    name: str
    type: str  # Target-language type expression, inserted verbatim


@dataclass(frozen=True)
class Schema:
    """Ordered, read-only collection of an entity's fields."""

    entries: Tuple[Tuple[str, Field], ...] = ()

    @property
    def fields(self) -> Tuple[Field, ...]:
        """Fields in input insertion order."""
        return tuple(field for _, field in self.entries)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(key for key, _ in self.entries)

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.entries)


def _require_string(key: str, entry: Mapping, attr: str) -> str:
    if attr not in entry:
        raise MalformedSchemaError(f"Field '{key}' is missing '{attr}'")

    value = entry[attr]
    if not isinstance(value, str):
        raise MalformedSchemaError(
            f"Field '{key}' has a non-string '{attr}': {value!r}"
        )
    # Types are inserted verbatim; only names must be non-empty
    if attr == "name" and not value.strip():
        raise MalformedSchemaError(f"Field '{key}' has an empty '{attr}'")
    return value


def build_schema(raw: Any) -> Schema:
    """
    Build a Schema from a raw mapping of field definitions.

    Args:
        raw: Mapping of arbitrary key to ``{"name": str, "type": str}``.
            Extra keys inside an entry are ignored.

    Returns:
        Schema preserving the input's insertion order

    Raises:
        MalformedSchemaError: If raw is not a mapping, any entry lacks a
            string ``name`` or ``type``, or a ``name`` is empty
    """
    if isinstance(raw, Schema):
        return raw

    if not isinstance(raw, Mapping):
        raise MalformedSchemaError(
            f"Schema must be a JSON object of fields, got {type(raw).__name__}"
        )

    entries: List[Tuple[str, Field]] = []
    for key, entry in raw.items():
        if not isinstance(entry, Mapping):
            raise MalformedSchemaError(
                f"Field '{key}' must be an object with 'name' and 'type'"
            )

        name, type_ = (_require_string(key, entry, attr) for attr in REQUIRED_KEYS)
        entries.append((str(key), Field(name=name, type=type_)))

    logger.debug("Built schema with %d field(s)", len(entries))
    return Schema(entries=tuple(entries))


def validate_schema(schema: Schema, entity_name: str = "") -> List[str]:
    """
    Check a schema for problems that do not stop generation.

    Returns:
        List of warning messages (empty if no issues)
    """
    label = entity_name or "entity"
    warnings = []

    if not schema.fields:
        warnings.append(f"Schema for '{label}' has no fields")

    seen = set()
    for field in schema.fields:
        if not _IDENTIFIER.match(field.name):
            warnings.append(
                f"Field name '{field.name}' in {label} may not be a valid identifier"
            )
        if field.name in seen:
            warnings.append(f"Duplicate field name '{field.name}' in {label}")
        seen.add(field.name)

    return warnings
