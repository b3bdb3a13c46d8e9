"""Struct type extraction from parsed Go sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from tree_sitter import Node

from ..errors import DuplicateTypeError, UnsupportedTypeShapeError
from ..logging import get_logger
from ..models import FieldDefinition, TypeDefinition
from ..source_scanner import ParsedSource
from .comments import ProbableNames, default_value, lead_comment, resolve_type_doc
from .signatures import EmbeddedShape, UnsupportedShape, classify, render_signature

_GROUP_DECLARATIONS = {
    "const_declaration",
    "var_declaration",
    "import_declaration",
}
_TYPE_SPECS = {"type_spec", "type_alias"}

ON_UNSUPPORTED_ERROR = "error"
ON_UNSUPPORTED_SKIP = "skip"


@dataclass
class TypeCollision:
    """The same type name produced by two different files in one scan."""

    name: str
    first_source: str
    second_source: str


@dataclass
class ExtractionResult:
    """Struct types found by one scan, keyed by name."""

    types: Dict[str, TypeDefinition] = field(default_factory=dict)
    collisions: List[TypeCollision] = field(default_factory=list)

    def get(self, name: str) -> Optional[TypeDefinition]:
        return self.types.get(name)


class StructExtractor:
    """Builds :class:`TypeDefinition` records from struct declarations.

    Each file is walked in source order with a cursor holding the most recent
    type name. Struct bodies (the declaration itself or a later struct literal
    body) are recorded under that name; later records replace earlier ones.
    """

    def __init__(self, *, on_unsupported: str = ON_UNSUPPORTED_ERROR, strict: bool = False) -> None:
        if on_unsupported not in (ON_UNSUPPORTED_ERROR, ON_UNSUPPORTED_SKIP):
            raise ValueError(f"Unknown on_unsupported mode: {on_unsupported}")
        self.on_unsupported = on_unsupported
        self.strict = strict
        self.logger = get_logger("extract")

    def extract(self, sources: Iterable[ParsedSource]) -> ExtractionResult:
        """Return every struct type declared across ``sources``."""
        result = ExtractionResult()
        for parsed in sources:
            _FileVisitor(self, parsed, result).visit(parsed.root_node)
        self.logger.debug("Extracted %d struct types", len(result.types))
        return result

    def record(self, result: ExtractionResult, definition: TypeDefinition) -> None:
        previous = result.types.get(definition.name)
        if previous is not None:
            if previous.source != definition.source:
                collision = TypeCollision(definition.name, previous.source, definition.source)
                if self.strict:
                    raise DuplicateTypeError(
                        collision.name, collision.first_source, collision.second_source
                    )
                result.collisions.append(collision)
                self.logger.warning(
                    "Type %s from %s replaces the one from %s",
                    definition.name,
                    definition.source,
                    previous.source,
                )
            else:
                self.logger.debug("Struct body replaces %s in %s", definition.name, definition.source)
        result.types[definition.name] = definition

    def unsupported(self, shape: UnsupportedShape, parsed: ParsedSource, field_name: str) -> None:
        if self.on_unsupported == ON_UNSUPPORTED_SKIP:
            self.logger.warning(
                "Skipping field %s in %s:%d with unsupported type %s",
                field_name or shape.text,
                parsed.relative_path,
                shape.row + 1,
                shape.text,
            )
            return
        raise UnsupportedTypeShapeError(shape.kind, shape.text, parsed.relative_path, shape.row)


class _FileVisitor:
    def __init__(self, extractor: StructExtractor, parsed: ParsedSource, result: ExtractionResult) -> None:
        self.extractor = extractor
        self.parsed = parsed
        self.result = result
        self.probable = ProbableNames()
        self.type_name = ""
        self.type_doc = ""

    def visit(self, node: Node) -> None:
        kind = node.type
        if kind == "type_declaration":
            self._visit_type_declaration(node)
            return
        if kind in _GROUP_DECLARATIONS:
            self._register_group_doc(node)
        elif kind == "struct_type":
            if self._owns_struct(node):
                self._record_struct(node)
            return
        for child in node.named_children:
            self.visit(child)

    def _register_group_doc(self, node: Node) -> str:
        doc = lead_comment(node, self.parsed.source)
        if doc:
            self.probable.register(doc)
        return doc

    def _visit_type_declaration(self, node: Node) -> None:
        declaration_doc = self._register_group_doc(node)
        grouped = any(child.type == "(" for child in node.children)
        for spec in node.named_children:
            if spec.type not in _TYPE_SPECS:
                continue
            name_node = spec.child_by_field_name("name")
            self.type_name = self.parsed.text(name_node) if name_node is not None else ""
            direct_doc = lead_comment(spec, self.parsed.source) if grouped else declaration_doc
            self.type_doc = resolve_type_doc(direct_doc, self.type_name, self.probable)
            for child in spec.named_children:
                self.visit(child)

    @staticmethod
    def _owns_struct(node: Node) -> bool:
        parent = node.parent
        if parent is None:
            return False
        if parent.type in _TYPE_SPECS:
            return True
        if parent.type == "composite_literal":
            type_node = parent.child_by_field_name("type")
            return type_node is not None and type_node == node
        return False

    def _record_struct(self, node: Node) -> None:
        if not self.type_name:
            self.extractor.logger.debug(
                "Ignoring struct body outside a type declaration in %s", self.parsed.relative_path
            )
            return
        definition = TypeDefinition(
            name=self.type_name,
            doc=self.type_doc,
            source=self.parsed.relative_path,
        )
        for field_list in node.named_children:
            if field_list.type != "field_declaration_list":
                continue
            for declaration in field_list.named_children:
                if declaration.type != "field_declaration":
                    continue
                field_definition = self._field(declaration)
                if field_definition is not None:
                    definition.fields.append(field_definition)
        self.extractor.record(self.result, definition)

    def _field(self, declaration: Node) -> Optional[FieldDefinition]:
        doc = lead_comment(declaration, self.parsed.source)
        if not doc:
            # Undocumented fields are left out of the reference entirely.
            return None

        names = declaration.children_by_field_name("name")
        name = self.parsed.text(names[0]) if names else ""
        type_node = declaration.child_by_field_name("type")
        if type_node is None:
            return None

        shape = classify(type_node, self.parsed.source, embedded=not names)
        if isinstance(shape, UnsupportedShape):
            self.extractor.unsupported(shape, self.parsed, name)
            return None

        return FieldDefinition(
            name=name,
            type_signature=render_signature(shape),
            default_value=default_value(doc),
            doc=doc,
            composite=shape.identifier if isinstance(shape, EmbeddedShape) else "",
        )


__all__ = [
    "ExtractionResult",
    "ON_UNSUPPORTED_ERROR",
    "ON_UNSUPPORTED_SKIP",
    "StructExtractor",
    "TypeCollision",
]
