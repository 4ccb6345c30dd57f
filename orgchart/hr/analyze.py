"""Run the full organisational analysis for one set of employee records."""

import logging
from collections.abc import Sequence

from orgchart.config import AnalysisConfig
from orgchart.hr.compensation import analyze_manager_salaries
from orgchart.hr.hierarchy import assign_reporting_levels, build_hierarchy
from orgchart.hr.ingest import ingest_employee_csv
from orgchart.hr.models import AnalysisResult, EmployeeRecord
from orgchart.hr.reporting_lines import find_long_reporting_lines
from orgchart.hr.structure import validate_structure
from orgchart.hr.summary import summarize_organization
from orgchart.hr.transform import MalformedRecordsError, normalize_employee_records
from orgchart.utils.io import FilePath
from orgchart.utils.types import AnalysisError, ViolationKind

logger = logging.getLogger(__name__)


def load_employee_records(path: FilePath) -> list[EmployeeRecord] | AnalysisError:
    """Read and normalize an export, turning reader failures into errors."""
    try:
        raw = ingest_employee_csv(path)
        return normalize_employee_records(raw)
    except MalformedRecordsError as exc:
        return AnalysisError(ViolationKind.MALFORMED_RECORDS, str(exc))
    except (FileNotFoundError, ValueError) as exc:
        return AnalysisError(ViolationKind.INVALID_INPUT_FILE, str(exc))


def analyze_organization(
    records: Sequence[EmployeeRecord],
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Validate, build, level and analyze the hierarchy.

    Stops at the first failing stage and returns its error unchanged; a
    failed result never carries partial findings.
    """
    config = config or AnalysisConfig()
    logger.info("Starting organizational analysis for %d employees", len(records))

    if (error := validate_structure(records)) is not None:
        return AnalysisResult.failed(error)

    match build_hierarchy(records):
        case AnalysisError() as error:
            return AnalysisResult.failed(error)
        case hierarchy:
            root = hierarchy.root

    assign_reporting_levels(root)

    match summarize_organization(root):
        case AnalysisError() as error:
            return AnalysisResult.failed(error)
        case summary:
            pass

    salaries = analyze_manager_salaries(root, config)
    long_lines = find_long_reporting_lines(root, config)

    logger.info(
        "Analysis complete: %d underpaid, %d overpaid, %d long reporting lines",
        len(salaries.underpaid), len(salaries.overpaid), len(long_lines),
    )
    return AnalysisResult.succeeded(summary, salaries.underpaid, salaries.overpaid, long_lines)


def analyze_csv(path: FilePath, config: AnalysisConfig | None = None) -> AnalysisResult:
    """Analyze an employee CSV export end to end."""
    logger.info("Starting organizational analysis from %s", path)
    match load_employee_records(path):
        case AnalysisError() as error:
            logger.error("Could not load employee records: %s", error)
            return AnalysisResult.failed(error)
        case records:
            result = analyze_organization(records, config)

    if not result.success:
        logger.error("Organizational analysis failed: %s", result.error)
    return result
