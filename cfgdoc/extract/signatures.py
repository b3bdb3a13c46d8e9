"""Field type shapes and their display strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tree_sitter import Node

from ..errors import UnsupportedTypeShapeError
from ..source_scanner import node_text


@dataclass(frozen=True)
class PlainShape:
    name: str


@dataclass(frozen=True)
class SequenceShape:
    element: str


@dataclass(frozen=True)
class MappingShape:
    key: str
    value: str


@dataclass(frozen=True)
class IndirectionShape:
    referent: str


@dataclass(frozen=True)
class EmbeddedShape:
    """An anonymous member; ``identifier`` is the embedded type's own name."""

    identifier: str
    type_name: str


@dataclass(frozen=True)
class UnsupportedShape:
    kind: str
    text: str
    row: int = -1


TypeShape = Union[
    PlainShape,
    SequenceShape,
    MappingShape,
    IndirectionShape,
    EmbeddedShape,
    UnsupportedShape,
]


def _text(node: Node, source_bytes: bytes) -> str:
    return " ".join(node_text(node, source_bytes).split())


def _qualified(node: Node, source_bytes: bytes) -> str:
    package = node.child_by_field_name("package")
    name = node.child_by_field_name("name")
    if package is None or name is None:
        return _text(node, source_bytes)
    return f"{_text(package, source_bytes)}.{_text(name, source_bytes)}"


def classify(type_node: Node, source_bytes: bytes, *, embedded: bool = False) -> TypeShape:
    """Return the shape of a field's declared type.

    Only the shapes that appear in gochan's config structs are recognised;
    everything else comes back as :class:`UnsupportedShape`.
    """
    kind = type_node.type
    if embedded:
        if kind == "type_identifier":
            name = _text(type_node, source_bytes)
            return EmbeddedShape(identifier=name, type_name=name)
        if kind == "qualified_type":
            name_node = type_node.child_by_field_name("name")
            identifier = _text(name_node, source_bytes) if name_node else _text(type_node, source_bytes)
            return EmbeddedShape(identifier=identifier, type_name=_qualified(type_node, source_bytes))
        return UnsupportedShape(kind, _text(type_node, source_bytes), type_node.start_point[0])

    if kind == "type_identifier":
        return PlainShape(_text(type_node, source_bytes))
    if kind in ("slice_type", "array_type"):
        element = type_node.child_by_field_name("element")
        if element is None:
            return UnsupportedShape(kind, _text(type_node, source_bytes), type_node.start_point[0])
        if element.type == "qualified_type":
            return SequenceShape(_qualified(element, source_bytes))
        return SequenceShape(_text(element, source_bytes))
    if kind == "map_type":
        key = type_node.child_by_field_name("key")
        value = type_node.child_by_field_name("value")
        if key is None or value is None:
            return UnsupportedShape(kind, _text(type_node, source_bytes), type_node.start_point[0])
        return MappingShape(_text(key, source_bytes), _text(value, source_bytes))
    if kind == "pointer_type":
        referents = type_node.named_children
        if not referents:
            return UnsupportedShape(kind, _text(type_node, source_bytes), type_node.start_point[0])
        return IndirectionShape(_text(referents[0], source_bytes))
    return UnsupportedShape(kind, _text(type_node, source_bytes), type_node.start_point[0])


def render_signature(shape: TypeShape) -> str:
    """Return the display string for ``shape``."""
    if isinstance(shape, PlainShape):
        return shape.name
    if isinstance(shape, SequenceShape):
        return f"[]{shape.element}"
    if isinstance(shape, MappingShape):
        return f"map[{shape.key}]{shape.value}"
    if isinstance(shape, IndirectionShape):
        return shape.referent
    if isinstance(shape, EmbeddedShape):
        return shape.type_name
    raise UnsupportedTypeShapeError(shape.kind, shape.text, row=shape.row)


__all__ = [
    "EmbeddedShape",
    "IndirectionShape",
    "MappingShape",
    "PlainShape",
    "SequenceShape",
    "TypeShape",
    "UnsupportedShape",
    "classify",
    "render_signature",
]
