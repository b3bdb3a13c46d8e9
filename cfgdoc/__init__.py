"""Generate markdown configuration references from documented Go structs."""

from __future__ import annotations

from .models import ColumnWidths, FieldDefinition, TypeDefinition
from .orchestrator import Orchestrator

__version__ = "0.1.0"

__all__ = ["ColumnWidths", "FieldDefinition", "Orchestrator", "TypeDefinition", "__version__"]
