"""CLI entrypoints for assetgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assetgen",
        description="Generate type-safe Swift constants from asset catalogs.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Scan asset catalogs and write the generated sources.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory to search for asset catalogs (defaults to current directory).",
    )
    generate_parser.add_argument(
        "-o",
        "--output-dir",
        default="Generated",
        help="Directory that receives the generated Swift files.",
    )
    generate_parser.add_argument(
        "--config",
        default=None,
        help="Path to assets-constant.json (defaults to one found in PATH).",
    )
    generate_parser.add_argument(
        "--catalog",
        action="append",
        default=None,
        help="Explicit asset catalog to scan; may be repeated. Skips discovery.",
    )
    generate_parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log output to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for assetgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = getattr(args, "log_file", None)
    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(log_file) if log_file else None,
    )

    orchestrator = Orchestrator()

    if args.command == "generate":
        try:
            units = orchestrator.run(
                args.path,
                args.output_dir,
                config_path=args.config,
                catalogs=args.catalog,
            )
        except Exception as exc:  # pragma: no cover - defensive guard
            parser.exit(1, f"assetgen generate failed: {exc}\nRun with --verbose for more details.\n")
        if not units:
            parser.exit(1, f"No asset sources generated for {args.path}\n")
        for unit in units.values():
            target = unit.output_path or Path(unit.output_file_name)
            print(f"Generated {_relativize(target)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
