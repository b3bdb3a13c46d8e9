"""Markdown table rendering for extracted struct types."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..constants import DEFAULT_BOARD_TYPES, DEPRECATION_MARKER
from ..models import ColumnWidths, FieldDefinition, TypeDefinition
from .layout import column_spans, compute_widths, pad_row, rule_row


class TableRenderer:
    """Renders one struct type as rows of a column-aligned markdown table.

    Grouped tables (``named=False``) get an extra column telling whether the
    setting may be overridden per board; several grouped types rendered with
    the same widths line up under a single header.
    """

    def __init__(
        self,
        *,
        deprecation_marker: str = DEPRECATION_MARKER,
        board_types: Optional[Iterable[str]] = None,
    ) -> None:
        self.deprecation_marker = deprecation_marker
        self.board_types = set(DEFAULT_BOARD_TYPES if board_types is None else board_types)

    def is_board_option(self, definition: TypeDefinition) -> bool:
        return definition.name in self.board_types

    def is_deprecated(self, field: FieldDefinition) -> bool:
        return self.deprecation_marker in field.doc

    def render(
        self,
        definition: TypeDefinition,
        widths: ColumnWidths | None = None,
        *,
        named: bool,
        show_header: bool,
    ) -> str:
        """Return the table fragment for ``definition``.

        When ``widths`` is omitted they are computed from this type alone.
        """
        if widths is None:
            widths = compute_widths([definition])
        board_column = not named
        spans = column_spans(widths, board_column=board_column)

        lines: List[str] = []
        if named:
            lines.append(f"## {definition.name}\n")
            if definition.doc:
                lines.append(definition.doc)

        if show_header:
            header = ["Field", "Type"]
            if board_column:
                header.append("Board option")
            if widths.has_default:
                header.append("Default")
            header.append("Info")
            lines.append(pad_row(header, spans) + "\n")
            lines.append(rule_row(spans) + "\n")

        board_flag = "Yes" if self.is_board_option(definition) else "No"
        for field in definition.fields:
            if self.is_deprecated(field):
                continue
            cells = [field.name, field.type_signature]
            if board_column:
                cells.append(board_flag)
            if widths.has_default:
                cells.append(field.default_value)
            cells.append(field.doc.replace("\n", " "))
            lines.append(pad_row(cells, spans) + "\n")
        return "".join(lines)


__all__ = ["TableRenderer"]
