"""Source tree scanning and Go parsing utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from .errors import SourceParseError, SourceReadError
from .logging import get_logger

_SOURCE_SUFFIX = ".go"
_TEST_SUFFIX = "_test.go"

logger = get_logger("scanner")


def node_text(node: Node, source_bytes: bytes) -> str:
    """Return the source text spanned by ``node``."""
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


@dataclass
class ParsedSource:
    """One parsed source file; the tree keeps comments as positioned nodes."""

    path: Path
    relative_path: str
    source: bytes
    tree: Tree

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node) -> str:
        return node_text(node, self.source)


def go_parser() -> Parser:
    """Return a tree-sitter parser for Go sources."""
    return Parser(Language(tree_sitter_go.language()))


def is_eligible(path: Path) -> bool:
    """Return True for Go sources that are not test files."""
    return path.suffix == _SOURCE_SUFFIX and not path.name.endswith(_TEST_SUFFIX)


def _raise_walk_error(exc: OSError) -> None:
    raise exc


def _iter_source_files(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            path = current_dir / filename
            if not path.is_file():
                continue
            if is_eligible(path):
                yield path


def _first_error(node: Node) -> Optional[Node]:
    if node.is_error or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return node


class SourceScanner:
    """Walks a directory and parses every eligible Go file.

    Any read or parse failure aborts the scan; there are no partial results.
    """

    def __init__(self, parser: Parser | None = None) -> None:
        self._parser = parser or go_parser()

    def scan(self, root: str | Path) -> List[ParsedSource]:
        """Return parsed trees for the eligible files under ``root``, in walk order."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Source path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {root}")

        parsed: List[ParsedSource] = []
        for path in _iter_source_files(root_path):
            parsed.append(self.parse_file(path, root_path))
        logger.debug("Parsed %d source files under %s", len(parsed), root_path)
        return parsed

    def parse_file(self, path: Path, root: Path | None = None) -> ParsedSource:
        """Read and parse one file."""
        relative = path.relative_to(root).as_posix() if root is not None else path.name
        try:
            source = path.read_bytes()
        except OSError as exc:
            raise SourceReadError(path, exc) from exc

        tree = self._parser.parse(source)
        error_node = _first_error(tree.root_node)
        if error_node is not None:
            row, column = error_node.start_point
            raise SourceParseError(relative, row, column)
        logger.debug("Parsed %s", relative)
        return ParsedSource(path=path, relative_path=relative, source=source, tree=tree)


__all__ = [
    "ParsedSource",
    "SourceScanner",
    "go_parser",
    "is_eligible",
    "node_text",
]
