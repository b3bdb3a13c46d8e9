"""Exception hierarchy for cfgdoc runs."""

from __future__ import annotations

from pathlib import Path


class CfgDocError(RuntimeError):
    """Base class for errors raised while generating the configuration reference."""


class ConfigError(CfgDocError):
    """Raised when the configuration file cannot be parsed."""


class ScanRootError(CfgDocError):
    """Raised when a scan root cannot be walked."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Error parsing package in {self.path}: {cause}")


class SourceReadError(CfgDocError):
    """Raised when an eligible source file cannot be read."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Unable to read {self.path}: {cause}")


class SourceParseError(CfgDocError):
    """Raised when a source file does not parse cleanly."""

    def __init__(self, path: Path | str, row: int, column: int) -> None:
        self.path = str(path)
        self.row = row
        self.column = column
        super().__init__(f"Syntax error in {self.path} at line {row + 1}, column {column + 1}")


class UnsupportedTypeShapeError(CfgDocError):
    """Raised when a documented field declares a type shape with no display rule."""

    def __init__(self, kind: str, text: str, path: str = "", row: int = -1) -> None:
        self.kind = kind
        self.text = text
        self.path = path
        self.row = row
        location = f" ({path}:{row + 1})" if path and row >= 0 else ""
        super().__init__(f"Unsupported field type shape '{kind}': {text}{location}")


class DuplicateTypeError(CfgDocError):
    """Raised in strict mode when two files declare the same type name."""

    def __init__(self, name: str, first_source: str, second_source: str) -> None:
        self.name = name
        self.first_source = first_source
        self.second_source = second_source
        super().__init__(
            f"Type {name} is declared in both {first_source} and {second_source}"
        )


__all__ = [
    "CfgDocError",
    "ConfigError",
    "DuplicateTypeError",
    "ScanRootError",
    "SourceParseError",
    "SourceReadError",
    "UnsupportedTypeShapeError",
]
