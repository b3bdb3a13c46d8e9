"""Tests for column width computation and row padding."""

from __future__ import annotations

from cfgdoc.models import ColumnWidths, FieldDefinition, TypeDefinition
from cfgdoc.render.layout import column_spans, compute_widths, pad, pad_row, rule_row


def _type(name: str, *fields: FieldDefinition) -> TypeDefinition:
    return TypeDefinition(name=name, fields=list(fields))


def test_empty_batch_uses_floors() -> None:
    assert compute_widths([]) == ColumnWidths(6, 5, 0, 4)
    assert compute_widths([_type("Empty")]) == ColumnWidths(6, 5, 0, 4)


def test_widths_take_maximum_across_batch() -> None:
    first = _type("A", FieldDefinition("ListenPort", "int", "", "Port.\n"))
    second = _type("B", FieldDefinition("X", "map[string]string", "", "A longer description\n"))

    widths = compute_widths([first, second])

    assert widths == ColumnWidths(10, 17, 0, 21)
    assert not widths.has_default


def test_short_defaults_are_widened() -> None:
    batch = [_type("A", FieldDefinition("Port", "int", "80", "Default: 80\n"))]

    widths = compute_widths(batch)

    assert widths.default_length == 8
    assert widths.has_default


def test_long_defaults_keep_their_length() -> None:
    batch = [_type("A", FieldDefinition("Dir", "string", "/var/www/gochan", "Default: /var/www/gochan\n"))]

    assert compute_widths(batch).default_length == len("/var/www/gochan")


def test_deprecated_fields_count_towards_widths() -> None:
    batch = [
        _type(
            "A",
            FieldDefinition("Short", "int", "", "Current\n"),
            FieldDefinition("AVeryLongDeprecatedName", "int", "", "Deprecated: use Short\n"),
        )
    ]

    assert compute_widths(batch).field_length == len("AVeryLongDeprecatedName")


def test_floors_hold_for_tiny_fields() -> None:
    widths = compute_widths([_type("A", FieldDefinition("X", "b", "1", "d"))])

    assert widths.field_length >= 6
    assert widths.type_length >= 5
    assert widths.doc_length >= 4
    assert widths.default_length >= 8


def test_column_spans() -> None:
    widths = ColumnWidths(6, 5, 8, 4)

    assert column_spans(widths, board_column=True) == [7, 6, 13, 11]
    assert column_spans(widths, board_column=False) == [7, 6, 11]
    assert column_spans(ColumnWidths(6, 5, 0, 4), board_column=False) == [7, 6]


def test_pad_row_pads_every_spanned_cell() -> None:
    assert pad("ab", 4) == "ab  "
    assert pad_row(["Port", "int", "The port. "], [7, 6]) == "Port   |int   |The port. "
    assert rule_row([7, 6]) == "-------|------|--------------"
