"""Organisation structure analysis.

Validates the reporting tree of an employee export, then reports managers paid
outside the band relative to their direct reports and employees with too long
a reporting line to the root.
"""

from orgchart.config import AnalysisConfig
from orgchart.hr.analyze import analyze_csv, analyze_organization, load_employee_records
from orgchart.hr.models import AnalysisResult, Employee, EmployeeRecord
from orgchart.hr.structure import validate_structure
from orgchart.utils.io import FilePath
from orgchart.utils.types import AnalysisError


def validate(path: FilePath) -> dict[str, str | int]:
    """Check that an export can be read and forms a valid hierarchy."""
    match load_employee_records(path):
        case AnalysisError() as error:
            return {"status": "error", "kind": str(error.kind), "message": error.message}
        case records:
            pass

    match validate_structure(records):
        case None:
            return {"status": "ok", "rows_available": len(records)}
        case error:
            return {"status": "error", "kind": str(error.kind), "message": error.message}


def run(path: FilePath, config: AnalysisConfig | None = None) -> AnalysisResult:
    """Execute the full analysis for one export."""
    return analyze_csv(path, config)
