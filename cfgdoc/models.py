"""Core data models shared across cfgdoc components."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List


@dataclass
class FieldDefinition:
    """A documented member of a config struct.

    Embedded members have an empty ``name`` and carry the embedded type in
    ``composite`` instead.
    """

    name: str = ""
    type_signature: str = ""
    default_value: str = ""
    doc: str = ""
    composite: str = ""

    @property
    def embedded(self) -> bool:
        return bool(self.composite)


@dataclass
class TypeDefinition:
    """A named struct type and its documented fields, in declaration order."""

    name: str
    doc: str = ""
    fields: List[FieldDefinition] = field(default_factory=list)
    source: str = ""

    def with_name(self, name: str) -> "TypeDefinition":
        """Return a copy displayed under a different name."""
        return replace(self, name=name, fields=list(self.fields))


@dataclass(frozen=True)
class ColumnWidths:
    """Column widths shared by every table rendered in one batch."""

    field_length: int
    type_length: int
    default_length: int
    doc_length: int

    @property
    def has_default(self) -> bool:
        return self.default_length > 0


__all__ = ["ColumnWidths", "FieldDefinition", "TypeDefinition"]
