"""Manager pay analysis against the average salary of direct reports."""

import logging
from dataclasses import dataclass, field

from orgchart.config import AnalysisConfig
from orgchart.hr.hierarchy import walk_hierarchy
from orgchart.hr.models import Employee, EmployeeView, SalaryFinding
from orgchart.utils.types import PayClassification, SalaryAmount, classify_pay_ratio

logger = logging.getLogger(__name__)


@dataclass
class SalaryFindings:
    underpaid: list[SalaryFinding] = field(default_factory=list)
    overpaid: list[SalaryFinding] = field(default_factory=list)


def average_subordinate_salary(manager: Employee) -> SalaryAmount:
    """Mean salary of direct reports only; 0.0 for a leaf."""
    reports = manager.direct_subordinates
    if not reports:
        return 0.0
    return sum(r.salary for r in reports) / len(reports)


def salary_ratio(manager: Employee) -> float:
    """Manager salary over the direct-report average, 0.0 when the average is 0."""
    average = average_subordinate_salary(manager)
    if average == 0:
        return 0.0
    return manager.salary / average


def classify_manager(manager: Employee, config: AnalysisConfig) -> PayClassification | None:
    """Pay classification of a manager, or ``None`` for employees without reports."""
    if not manager.has_subordinates:
        return None
    return classify_pay_ratio(salary_ratio(manager), config.underpaid_ratio, config.overpaid_ratio)


def analyze_manager_salaries(root: Employee, config: AnalysisConfig) -> SalaryFindings:
    """Collect underpaid and overpaid managers in hierarchy walk order.

    Underpayment is how far the salary falls short of ``underpaid_ratio`` times
    the direct-report average; overpayment is how far it exceeds
    ``overpaid_ratio`` times that average.
    """
    findings = SalaryFindings()

    for employee in walk_hierarchy(root):
        if not employee.has_subordinates:
            continue

        average = average_subordinate_salary(employee)
        ratio = salary_ratio(employee)
        match classify_pay_ratio(ratio, config.underpaid_ratio, config.overpaid_ratio):
            case PayClassification.UNDERPAID:
                amount = average * config.underpaid_ratio - employee.salary
                findings.underpaid.append(
                    SalaryFinding(EmployeeView.of(employee), average, ratio, max(amount, 0.0))
                )
            case PayClassification.OVERPAID:
                amount = employee.salary - average * config.overpaid_ratio
                findings.overpaid.append(
                    SalaryFinding(EmployeeView.of(employee), average, ratio, max(amount, 0.0))
                )
            case PayClassification.FAIR:
                pass

    logger.debug(
        "Found %d underpaid and %d overpaid managers",
        len(findings.underpaid),
        len(findings.overpaid),
    )
    return findings
