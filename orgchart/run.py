"""Command line entry point: analyze an employee CSV export."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from orgchart import hr
from orgchart.config import get_file_config, resolve_config
from orgchart.report import build_analysis_report

console = Console()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze an organisation's structure from an employee CSV")
    parser.add_argument("csv_path", help="Employee export (Id,firstName,lastName,salary,managerId)")
    parser.add_argument(
        "--format",
        choices=["table", "json", "summary"],
        default="table",
        help="Report format",
    )
    parser.add_argument("--policy", type=str, help="Named threshold policy (default, strict, lenient)")
    parser.add_argument("--max-level", type=int, help="Maximum allowed reporting level")
    parser.add_argument("--underpaid-ratio", type=float, help="Managers below this ratio are underpaid")
    parser.add_argument("--overpaid-ratio", type=float, help="Managers above this ratio are overpaid")
    parser.add_argument("--validate", action="store_true", help="Only validate, don't analyze")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def validate_only(csv_path: str) -> int:
    outcome = hr.validate(csv_path)
    table = Table(title="Validation Results")
    table.add_column("File")
    table.add_column("Valid")
    table.add_column("Details")

    match outcome:
        case {"status": "ok", "rows_available": rows}:
            table.add_row(escape(csv_path), "[green]✓[/green]", f"{rows} employees")
        case {"status": "error", "kind": kind, "message": msg}:
            table.add_row(escape(csv_path), "[red]✗[/red]", escape(f"{kind}: {msg}"))

    console.print(table)
    return 0 if outcome["status"] == "ok" else 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.validate:
        return validate_only(args.csv_path)

    try:
        config = resolve_config(
            get_file_config(),
            policy=args.policy,
            max_reporting_level=args.max_level,
            underpaid_ratio=args.underpaid_ratio,
            overpaid_ratio=args.overpaid_ratio,
        )
    except ValueError as exc:
        console.print(f"[red]Invalid configuration: {escape(str(exc))}[/red]")
        return 1

    result = hr.run(args.csv_path, config)
    report = build_analysis_report(result, args.format)
    if args.format == "table":
        console.print(report, end="", markup=False, highlight=False)
    else:
        print(report)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
