"""Analysis result reporting and formatting.

Converts an ``AnalysisResult`` into a rich table, a JSON document or a short
plain-text summary for the console.
"""

import json
from dataclasses import asdict

import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from orgchart.hr.models import AnalysisResult

type ReportFormat = str  # "table" | "json" | "summary"

FINDING_COLUMNS = ["category", "id", "full_name", "salary", "reporting_level", "amount"]


def result_to_dict(result: AnalysisResult) -> dict:
    """Plain, JSON-serialisable view of a result."""
    if not result.success:
        return {
            "success": False,
            "error": {
                "kind": str(result.error.kind),
                "message": result.error.message,
                "employee_id": result.error.employee_id,
            },
        }
    return {
        "success": True,
        "summary": asdict(result.summary),
        "underpaid_managers": [asdict(f) for f in result.underpaid_managers],
        "overpaid_managers": [asdict(f) for f in result.overpaid_managers],
        "long_reporting_lines": [asdict(f) for f in result.long_reporting_lines],
    }


def result_to_frame(result: AnalysisResult) -> pd.DataFrame:
    """Flatten every finding into one row, tagged by category."""
    rows = []
    if result.success:
        for category, findings in (
            ("underpaid", result.underpaid_managers),
            ("overpaid", result.overpaid_managers),
        ):
            for f in findings:
                rows.append({
                    "category": category,
                    "id": f.employee.id,
                    "full_name": f.employee.full_name,
                    "salary": f.employee.salary,
                    "reporting_level": f.employee.reporting_level,
                    "amount": f.amount,
                })
        for f in result.long_reporting_lines:
            rows.append({
                "category": "long_reporting_line",
                "id": f.employee.id,
                "full_name": f.employee.full_name,
                "salary": f.employee.salary,
                "reporting_level": f.employee.reporting_level,
                "amount": f.excess_levels,
            })
    return pd.DataFrame(rows, columns=FINDING_COLUMNS)


def build_analysis_report(result: AnalysisResult, output_format: ReportFormat = "table") -> str:
    match output_format:
        case "json":
            return _to_json(result)
        case "summary":
            return _to_summary(result)
        case "table":
            return _to_table(result)
        case other:
            raise ValueError(f"Unsupported report format: {other}")


def _to_json(result: AnalysisResult) -> str:
    return json.dumps(result_to_dict(result), indent=2)


def _error_line(result: AnalysisResult) -> str:
    return f"ERROR [{result.error.kind}]: {result.error.message}"


def _to_summary(result: AnalysisResult) -> str:
    if not result.success:
        return _error_line(result)

    s = result.summary
    lines = [
        f"CEO: {s.root.full_name} (ID: {s.root.id})",
        f"Employees: {s.total_employees} ({s.managers} managers, "
        f"{s.individual_contributors} individual contributors)",
        f"Total salary: {s.total_salary:.2f}, average: {s.average_salary:.2f}",
        f"Max reporting level: {s.max_reporting_level}",
    ]
    for f in result.underpaid_managers:
        lines.append(f"  UNDERPAID: {f.employee.full_name} (ID: {f.employee.id}) by {f.amount:.2f}")
    for f in result.overpaid_managers:
        lines.append(f"  OVERPAID: {f.employee.full_name} (ID: {f.employee.id}) by {f.amount:.2f}")
    for f in result.long_reporting_lines:
        lines.append(
            f"  TOO DEEP: {f.employee.full_name} (ID: {f.employee.id}) "
            f"{f.excess_levels} level(s) too deep (level {f.employee.reporting_level})"
        )
    return "\n".join(lines)


def _summary_table(result: AnalysisResult) -> Table:
    s = result.summary
    table = Table(title="Organizational Summary", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("CEO", escape(f"{s.root.full_name} ({s.root.id})"))
    table.add_row("Total employees", str(s.total_employees))
    table.add_row("Managers", str(s.managers))
    table.add_row("Individual contributors", str(s.individual_contributors))
    table.add_row("Total salary", f"{s.total_salary:.2f}")
    table.add_row("Average salary", f"{s.average_salary:.2f}")
    table.add_row("Max reporting level", str(s.max_reporting_level))
    return table


def _findings_table(title: str, frame: pd.DataFrame, amount_label: str, style: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Salary", justify="right")
    table.add_column("Level", justify="right")
    table.add_column(amount_label, justify="right", style=style)

    for row in frame.itertuples(index=False):
        amount = str(int(row.amount)) if row.category == "long_reporting_line" else f"{row.amount:.2f}"
        table.add_row(escape(row.id), escape(row.full_name), f"{row.salary:.2f}", str(row.reporting_level), amount)
    return table


def _to_table(result: AnalysisResult) -> str:
    buf = Console(file=None, force_terminal=False, width=120)
    with buf.capture() as capture:
        if not result.success:
            buf.print(f"[red]{escape(_error_line(result))}[/red]")
        else:
            buf.print(_summary_table(result))
            frame = result_to_frame(result)
            for category, title, label, style in (
                ("underpaid", "Underpaid Managers", "Underpaid by", "yellow"),
                ("overpaid", "Overpaid Managers", "Overpaid by", "yellow"),
                ("long_reporting_line", "Too Long Reporting Lines", "Excess levels", "red"),
            ):
                subset = frame[frame["category"] == category]
                if subset.empty:
                    buf.print(f"[green]No {title.lower()}[/green]")
                else:
                    buf.print(_findings_table(title, subset, label, style))
    return capture.get()
