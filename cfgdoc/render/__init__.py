"""Column layout and markdown table rendering."""

from __future__ import annotations

from .layout import column_spans, compute_widths, pad, pad_row, rule_row
from .table import TableRenderer

__all__ = [
    "TableRenderer",
    "column_spans",
    "compute_widths",
    "pad",
    "pad_row",
    "rule_row",
]
