"""CLI entrypoint for gqlcontext."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from gqlcontext import __version__
from gqlcontext.config import load_config
from gqlcontext.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from gqlcontext.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from gqlcontext.exceptions import ConfigError, GqlContextError
from gqlcontext.reporting import TextReporter, build_trace_payload, write_trace_report
from gqlcontext.trace import run_trace


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=BRAND_NAME, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    trace = subparsers.add_parser("trace", help="Trace type context through query documents")
    trace.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    trace.add_argument("-c", "--config", type=Path, help="Explicit config file")
    trace.add_argument(
        "-s",
        "--schema",
        type=Path,
        action="append",
        default=None,
        help="Schema SDL file (repeat for multiple files; overrides config)",
    )
    trace.add_argument(
        "-d",
        "--document",
        type=Path,
        action="append",
        default=None,
        help="Query document to trace (repeat for multiple files; skips discovery)",
    )
    trace.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for trace.json (no files written if omitted)",
    )
    trace.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Stdout format: text (default) or json",
    )
    trace.add_argument(
        "--fail-on-unresolved",
        action="store_true",
        help="Exit with status 1 when any field, argument, directive or type is unresolved",
    )
    trace.add_argument("--summary-only", action="store_true", help="Print only the summary block")
    trace.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    trace.add_argument("--no-color", action="store_true", help="Disable colored output")
    trace.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command != "trace":
        parser.error(f"Unsupported command: {args.command}")

    return _handle_trace(args)


def _handle_trace(args: argparse.Namespace) -> int:
    """Run a trace and report results."""
    root = args.root.resolve()
    if not root.is_dir():
        print(f"Configuration error: root directory does not exist: {root}", file=sys.stderr)
        return 2

    try:
        config = load_config(root, args.config)
        if args.fail_on_unresolved:
            config = replace(config, fail_on_unresolved=True)
        result = run_trace(
            root,
            schema_paths=(tuple(args.schema) if args.schema else None),
            document_paths=(tuple(args.document) if args.document else None),
            config=config,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except GqlContextError as exc:
        print(f"Trace error: {exc}", file=sys.stderr)
        return 1

    if args.output_dir is not None:
        try:
            write_trace_report(args.output_dir, result)
        except OSError as exc:
            print(f"Failed to write trace report: {exc}", file=sys.stderr)
            return 1

    if not args.no_stdout:
        if args.format == "json":
            print(json.dumps(build_trace_payload(result), indent=2))
        else:
            use_color = not args.no_color and sys.stdout.isatty()
            print(TextReporter(result, color=use_color, summary_only=args.summary_only).render())

    if config.fail_on_unresolved and result.total_unresolved:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
