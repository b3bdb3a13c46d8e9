"""Column width computation and row padding for aligned markdown tables."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..models import ColumnWidths, TypeDefinition

FIELD_FLOOR = 6
TYPE_FLOOR = 5
DEFAULT_FLOOR = 0
DOC_FLOOR = 4
# A non-empty default column is never narrower than this.
DEFAULT_MINIMUM = 8

BOARD_OPTION_SPAN = 13
DOC_RULE = "-" * 14


def compute_widths(batch: Iterable[TypeDefinition]) -> ColumnWidths:
    """Return the widths needed to align every field of every type in ``batch``.

    Deprecated fields count towards the widths even though they are not
    rendered, so the result only depends on the batch membership.
    """
    field_length = FIELD_FLOOR
    type_length = TYPE_FLOOR
    default_length = DEFAULT_FLOOR
    doc_length = DOC_FLOOR
    for definition in batch:
        for field in definition.fields:
            field_length = max(field_length, len(field.name))
            type_length = max(type_length, len(field.type_signature))
            default_length = max(default_length, len(field.default_value))
            doc_length = max(doc_length, len(field.doc))
    if 0 < default_length < DEFAULT_MINIMUM:
        default_length = DEFAULT_MINIMUM
    return ColumnWidths(field_length, type_length, default_length, doc_length)


def column_spans(widths: ColumnWidths, *, board_column: bool) -> List[int]:
    """Return the padded span of every column but the last (doc) one."""
    spans = [widths.field_length + 1, widths.type_length + 1]
    if board_column:
        spans.append(BOARD_OPTION_SPAN)
    if widths.has_default:
        spans.append(widths.default_length + 3)
    return spans


def pad(text: str, width: int) -> str:
    return text.ljust(width)


def pad_row(cells: Sequence[str], spans: Sequence[int], separator: str = "|") -> str:
    """Join ``cells``, padding each one that has a span; extra cells are left as-is."""
    padded = [pad(cell, span) for cell, span in zip(cells, spans)]
    padded.extend(cells[len(spans) :])
    return separator.join(padded)


def rule_row(spans: Sequence[int], separator: str = "|") -> str:
    """Return the header separator row for ``spans``."""
    return separator.join(["-" * span for span in spans] + [DOC_RULE])


__all__ = [
    "BOARD_OPTION_SPAN",
    "DEFAULT_MINIMUM",
    "column_spans",
    "compute_widths",
    "pad",
    "pad_row",
    "rule_row",
]
