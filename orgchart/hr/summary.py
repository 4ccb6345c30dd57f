"""Organisation-wide headcount and payroll summary."""

import logging

import numpy as np

from orgchart.hr.hierarchy import walk_hierarchy
from orgchart.hr.models import Employee, EmployeeView, OrganizationalSummary
from orgchart.utils.types import AnalysisError, ViolationKind

logger = logging.getLogger(__name__)


def summarize_organization(root: Employee | None) -> OrganizationalSummary | AnalysisError:
    """Count managers and individual contributors and aggregate salaries.

    The tree must already carry reporting levels. Without a root there is
    nothing to summarize and an ``UnrootedSummary`` error is returned.
    """
    if root is None:
        logger.error("Cannot summarize an organisation without a root")
        return AnalysisError(
            ViolationKind.UNROOTED_SUMMARY,
            "Cannot summarize an empty or unrooted organisation",
        )

    employees = list(walk_hierarchy(root))
    salaries = np.array([e.salary for e in employees], dtype=float)
    levels = np.array([e.reporting_level for e in employees], dtype=int)
    managers = sum(1 for e in employees if e.has_subordinates)

    total = len(employees)
    total_salary = float(salaries.sum())
    summary = OrganizationalSummary(
        root=EmployeeView.of(root),
        total_employees=total,
        managers=managers,
        individual_contributors=total - managers,
        total_salary=total_salary,
        average_salary=total_salary / total if total else 0.0,
        max_reporting_level=int(levels.max()) if total else 0,
    )
    logger.debug(
        "Summarized %d employees (%d managers), max reporting level %d",
        total, managers, summary.max_reporting_level,
    )
    return summary
