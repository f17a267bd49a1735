"""CLI entry point for gsheety.

Usage:
    python -m gsheety get <url> [--sheet NAME] [--query QUERY] [--raw] [--clear-null]
    python -m gsheety export <url> [--format csv|tsv|pdf|xlsx] [--output PATH]
    python -m gsheety table <url> [--sheet NAME] [--query QUERY] [--table-class CLASS]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from loguru import logger

from gsheety.client import SheetClient
from gsheety.config import get_settings
from gsheety.exceptions import GsheetyError
from gsheety.logging import setup_logging
from gsheety.table import TableOptions, generate_table_from_output, render_html
from gsheety.transport import LocalFileTransport, Transport
from gsheety.types import DEFAULT_QUERY, DEFAULT_SHEET, ExportFormat, QueryOptions


def _make_client(args: argparse.Namespace) -> SheetClient:
    transport: Transport | None = None
    if args.golden_dir:
        transport = LocalFileTransport(Path(args.golden_dir))
    return SheetClient(transport)


def _query_options(args: argparse.Namespace, raw: bool = False) -> QueryOptions:
    return QueryOptions(
        sheet=args.sheet,
        query=args.query,
        raw=raw,
        clear_null=getattr(args, "clear_null", False),
    )


async def cmd_get(args: argparse.Namespace) -> int:
    """Print the query result as JSON."""
    async with _make_client(args) as client:
        result = await client.get(args.url, _query_options(args, raw=args.raw))

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    if not result.ok:
        print(f"Error: {result.msg}", file=sys.stderr)
        return 1
    return 0


async def cmd_export(args: argparse.Namespace) -> int:
    """Export the spreadsheet to stdout or a file."""
    export_format = ExportFormat.parse(args.format)
    if export_format.is_binary and not args.output:
        print(
            f"Error: --output is required for {export_format.value} exports",
            file=sys.stderr,
        )
        return 1

    async with _make_client(args) as client:
        data = await client.get_exported_data(args.url, export_format)

    if not args.output:
        sys.stdout.write(data)  # type: ignore[arg-type]
        return 0

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, bytes):
        output.write_bytes(data)
    else:
        output.write_text(data, encoding="utf-8")
    print(f"Wrote {output}", file=sys.stderr)
    return 0


async def cmd_table(args: argparse.Namespace) -> int:
    """Print the query result as an HTML table."""
    async with _make_client(args) as client:
        result = await client.get(args.url, _query_options(args))

    if not result.ok:
        print(f"Error: {result.msg}", file=sys.stderr)
        return 1

    table = generate_table_from_output(
        result,  # type: ignore[arg-type]
        TableOptions(
            table_class=args.table_class,
            thead_class=args.thead_class,
            tbody_class=args.tbody_class,
        ),
    )
    print(render_html(table))
    return 0


def _add_query_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("url", help="Google Sheets URL (any link containing /d/<id>)")
    parser.add_argument(
        "--sheet",
        default=DEFAULT_SHEET,
        help=f"Sheet name (default: {DEFAULT_SHEET})",
    )
    parser.add_argument(
        "--query",
        default=DEFAULT_QUERY,
        help=f"Query language statement (default: {DEFAULT_QUERY})",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="gsheety",
        description="Read public Google Sheets through the visualization query API",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Minimum log level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.json_logs,
        help="Emit logs as JSON",
    )
    parser.add_argument(
        "--golden-dir",
        default=None,
        help="Read responses from a local directory instead of Google",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # get subcommand
    get_parser = subparsers.add_parser("get", help="Fetch rows as JSON")
    _add_query_arguments(get_parser)
    get_parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the parsed response without normalizing it",
    )
    get_parser.add_argument(
        "--clear-null",
        action="store_true",
        help="Drop empty cells from each row",
    )
    get_parser.set_defaults(func=cmd_get)

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export the spreadsheet")
    export_parser.add_argument("url", help="Google Sheets URL (any link containing /d/<id>)")
    export_parser.add_argument(
        "--format",
        default=ExportFormat.CSV.value,
        choices=[fmt.value for fmt in ExportFormat],
        help="Export format (default: csv)",
    )
    export_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (required for pdf and xlsx)",
    )
    export_parser.set_defaults(func=cmd_export)

    # table subcommand
    table_parser = subparsers.add_parser("table", help="Render rows as an HTML table")
    _add_query_arguments(table_parser)
    table_parser.add_argument("--table-class", default=None)
    table_parser.add_argument("--thead-class", default=None)
    table_parser.add_argument("--tbody-class", default=None)
    table_parser.set_defaults(func=cmd_table)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, json_logs=args.json_logs)

    try:
        result: int = asyncio.run(args.func(args))
    except GsheetyError as e:
        logger.debug("{} failed: {!r}", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return result


if __name__ == "__main__":
    sys.exit(main())
