"""Assembly of the configuration reference document."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from .config import CfgDocConfig
from .constants import CONFIG_HEADER, CUSTOM_FLAGS_EXAMPLE, GEOIP_OPTIONS_EXAMPLE
from .errors import ScanRootError
from .extract.structs import ExtractionResult, StructExtractor
from .logging import get_logger
from .models import TypeDefinition
from .render.layout import compute_widths
from .render.table import TableRenderer
from .source_scanner import SourceScanner


class Orchestrator:
    """Scans the config and auxiliary packages and renders config.md.

    The document is, in order: the preamble, one grouped table of the core
    config structs sharing a single header, the example blocks, one named
    section per standalone struct, and the auxiliary struct.
    """

    def __init__(
        self,
        config: CfgDocConfig,
        scanner: SourceScanner | None = None,
        extractor: StructExtractor | None = None,
        renderer: TableRenderer | None = None,
    ) -> None:
        self.config = config
        self.scanner = scanner or SourceScanner()
        self.extractor = extractor or StructExtractor(
            on_unsupported=config.extract.on_unsupported,
            strict=config.extract.strict,
        )
        self.renderer = renderer or TableRenderer(
            deprecation_marker=config.render.deprecation_marker,
            board_types=config.types.board,
        )
        self.logger = get_logger("orchestrator")

    def build(self, root: str | Path) -> str:
        """Return the full configuration reference for the project at ``root``."""
        root_path = Path(root).expanduser()
        config_types = self.extract_types(root_path / self.config.sources.config_dir)
        auxiliary_types = self.extract_types(root_path / self.config.sources.auxiliary_dir)

        parts = [
            CONFIG_HEADER,
            self.render_grouped(config_types, self.config.types.grouped),
            GEOIP_OPTIONS_EXAMPLE,
            CUSTOM_FLAGS_EXAMPLE,
            self.render_named(config_types, self.config.types.named),
            self.render_auxiliary(auxiliary_types),
        ]
        return "".join(parts)

    def extract_types(self, directory: Path) -> ExtractionResult:
        """Scan ``directory`` and return its struct types."""
        self.logger.debug("Scanning %s", directory)
        try:
            sources = self.scanner.scan(directory)
        except OSError as exc:
            raise ScanRootError(directory, exc) from exc
        return self.extractor.extract(sources)

    def render_grouped(self, types: ExtractionResult, names: Sequence[str]) -> str:
        """Render ``names`` as one table with shared widths and a single header."""
        batch = [self._lookup(types, name) for name in names]
        widths = compute_widths(batch)
        return "".join(
            self.renderer.render(definition, widths, named=False, show_header=index == 0)
            for index, definition in enumerate(batch)
        )

    def render_named(self, types: ExtractionResult, names: Sequence[str]) -> str:
        """Render each of ``names`` as its own section with its own widths."""
        sections: List[str] = []
        for name in names:
            definition = types.get(name)
            if definition is None:
                self.logger.warning("Skipping %s: no documented struct with that name", name)
                continue
            sections.append(self.renderer.render(definition, named=True, show_header=True))
            sections.append("\n")
        return "".join(sections)

    def render_auxiliary(self, types: ExtractionResult) -> str:
        """Render the auxiliary struct under its display name."""
        auxiliary = self.config.auxiliary
        definition = self._lookup(types, auxiliary.type_name).with_name(auxiliary.display_name)
        widths = compute_widths([definition])
        return self.renderer.render(definition, widths, named=True, show_header=True)

    def _lookup(self, types: ExtractionResult, name: str) -> TypeDefinition:
        definition = types.get(name)
        if definition is None:
            self.logger.warning("Struct %s was not found; rendering it without fields", name)
            return TypeDefinition(name=name)
        return definition


__all__ = ["Orchestrator"]
