"""CLI entrypoint for generating the configuration reference."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CfgDocConfig, load_config
from .errors import ConfigError, DuplicateTypeError, ScanRootError, UnsupportedTypeShapeError
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfgdoc",
        description="Generate gochan's configuration reference from its documented config structs.",
    )
    parser.add_argument(
        "root",
        metavar="/path/to/gochan/",
        help="Path to the root of the gochan source tree.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .cfgdoc.yml file (defaults to one in the project root, if present).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the document to this file instead of standard output.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append log records to this file.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when two files declare a struct with the same name.",
    )
    return parser


def _load_config(args: argparse.Namespace) -> CfgDocConfig:
    if args.config is not None:
        config = load_config(args.config, required=True)
    else:
        root = Path(args.root).expanduser()
        # A missing or non-directory root is reported by the scan.
        config = load_config(root) if root.is_dir() else CfgDocConfig(root=root.resolve())
    if args.strict:
        config.extract.strict = True
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for cfgdoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        config = _load_config(args)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    orchestrator = Orchestrator(config)
    try:
        document = orchestrator.build(args.root)
    except ScanRootError as exc:
        parser.exit(1, f"{exc}\n")
    except (UnsupportedTypeShapeError, DuplicateTypeError) as exc:
        parser.exit(1, f"cfgdoc failed: {exc}\n")

    if args.output is not None:
        args.output.write_text(document + "\n", encoding="utf-8")
        logger.info("Configuration reference written to %s", args.output)
    else:
        print(document)


if __name__ == "__main__":
    main(sys.argv[1:])
