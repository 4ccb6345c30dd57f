"""Detect employees whose reporting line to the root is too long."""

import logging

from orgchart.config import AnalysisConfig
from orgchart.hr.hierarchy import walk_hierarchy
from orgchart.hr.models import Employee, EmployeeView, ReportingLineFinding

logger = logging.getLogger(__name__)


def excess_levels(employee: Employee, max_reporting_level: int) -> int:
    return max(0, employee.reporting_level - max_reporting_level)


def find_long_reporting_lines(root: Employee, config: AnalysisConfig) -> list[ReportingLineFinding]:
    """Employees deeper than ``config.max_reporting_level``, in hierarchy walk order."""
    findings = [
        ReportingLineFinding(EmployeeView.of(employee), excess_levels(employee, config.max_reporting_level))
        for employee in walk_hierarchy(root)
        if employee.reporting_level > config.max_reporting_level
    ]
    logger.debug(
        "Found %d employees beyond reporting level %d",
        len(findings),
        config.max_reporting_level,
    )
    return findings
