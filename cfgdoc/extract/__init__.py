"""Struct and doc comment extraction from Go sources."""

from __future__ import annotations

from .comments import ProbableNames, comment_text, default_value, lead_comment
from .signatures import TypeShape, classify, render_signature
from .structs import ExtractionResult, StructExtractor, TypeCollision

__all__ = [
    "ExtractionResult",
    "ProbableNames",
    "StructExtractor",
    "TypeCollision",
    "TypeShape",
    "classify",
    "comment_text",
    "default_value",
    "lead_comment",
    "render_signature",
]
