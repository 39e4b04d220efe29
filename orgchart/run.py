"""Command-line runner: load an org chart export and print its hierarchy."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from orgchart import hierarchy
from orgchart.config import OrgChartConfig, load_config
from orgchart.errors import OrgChartError
from orgchart.utils.types import DuplicatePolicy, Sink, SourceFormat

logger = logging.getLogger("orgchart")

console = Console()


def console_sink(target: Console = console) -> Sink:
    """Sink that prints each line verbatim, without rich markup or wrapping."""

    def emit(line: str) -> None:
        target.print(line, markup=False, highlight=False, soft_wrap=True)

    return emit


def configure_logging(level: str) -> None:
    """Route package logs through rich on stderr, leaving the root logger alone."""
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orgchart",
        description="Rebuild and print the reporting hierarchy of an org chart export",
    )
    parser.add_argument("source", nargs="?", type=Path, help="JSON or CSV record file")
    parser.add_argument("--config", type=Path, help="YAML or TOML config file")
    parser.add_argument("--format", dest="source_format", choices=[f.value for f in SourceFormat])
    parser.add_argument("--max-bytes", type=int, help="Refuse sources larger than this")
    parser.add_argument("--max-depth", type=int, help="Deepest reporting chain to walk")
    parser.add_argument(
        "--include-orphans",
        action="store_const",
        const=True,
        help="Also walk people whose manager is missing from the export",
    )
    parser.add_argument("--duplicates", dest="duplicate_policy", choices=[p.value for p in DuplicatePolicy])
    parser.add_argument("--validate", action="store_true", help="Only validate, don't build")
    parser.add_argument("--table", action="store_true", help="Print a span-of-control table")
    parser.add_argument("--log-level", type=str.upper)
    return parser


def validate_source(config: OrgChartConfig) -> bool:
    result = hierarchy.validate(config)
    if "message" in result:
        console.print(f"[red]{escape(result['message'])}[/red]", soft_wrap=True)
        return False

    table = Table(title=f"Validation: {escape(str(config.source))} ({result['rows_available']} rows)")
    table.add_column("Check", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Details")

    for check in result["checks"]:
        if check["valid"]:
            status = "[green]✓[/green]"
        elif check["severity"] == "warning":
            status = "[yellow]![/yellow]"
        else:
            status = "[red]✗[/red]"
        detail = escape("; ".join(check["errors"])) or "OK"
        table.add_row(check["check"], status, detail)

    console.print(table)
    return result["status"] == "ok"


def print_span_of_control(chart: hierarchy.OrgChart, max_depth: int) -> None:
    frame = hierarchy.span_of_control(hierarchy.flatten_hierarchy(chart, max_depth=max_depth))

    table = Table(title="Span of control")
    table.add_column("Name", style="cyan")
    table.add_column("Title")
    table.add_column("Level")
    table.add_column("Direct", justify="right")
    table.add_column("Total", justify="right")

    for row in frame.itertuples(index=False):
        table.add_row(
            escape(row.name),
            escape(row.title),
            row.org_level,
            str(row.direct_reports),
            str(row.total_reports),
        )

    console.print(table)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            source=args.source,
            source_format=args.source_format,
            max_bytes=args.max_bytes,
            max_depth=args.max_depth,
            include_orphans=args.include_orphans,
            duplicate_policy=args.duplicate_policy,
            log_level=args.log_level,
        )
    except OrgChartError as exc:
        console.print(f"[red]Configuration error: {escape(str(exc))}[/red]", soft_wrap=True)
        sys.exit(1)

    configure_logging(config.log_level)

    if args.validate:
        if not validate_source(config):
            sys.exit(1)
        return

    try:
        chart = hierarchy.run(config, console_sink())
    except OrgChartError as exc:
        logger.debug("Org chart run failed", exc_info=True)
        console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        sys.exit(1)

    if args.table:
        print_span_of_control(chart, config.max_depth)


if __name__ == "__main__":
    main()
