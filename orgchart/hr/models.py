"""Employee data model and pandera schema for incoming records."""

from dataclasses import dataclass, field

import numpy as np
import pandera as pa
from pandera import Column, Check

from orgchart.utils.types import AnalysisError, EmployeeID, ReportingLevel, SalaryAmount

RECORD_COLUMNS = ["id", "first_name", "last_name", "salary", "manager_id"]


employee_record_schema = pa.DataFrameSchema(
    {
        "id": Column(str, Check.str_length(min_value=1), nullable=False),
        "first_name": Column(str, Check.str_length(min_value=1), nullable=False),
        "last_name": Column(str, Check.str_length(min_value=1), nullable=False),
        "salary": Column(
            float,
            [Check.greater_than(0), Check(lambda s: np.isfinite(s), error="finite")],
            nullable=False,
        ),
        "manager_id": Column(str, nullable=True),
    },
    strict=False,
    coerce=True,
)


@dataclass(frozen=True)
class EmployeeRecord:
    """A flat employee row as delivered by the reader."""

    id: EmployeeID
    first_name: str
    last_name: str
    salary: SalaryAmount
    manager_id: EmployeeID | None = None

    @property
    def is_root(self) -> bool:
        return not self.manager_id


@dataclass(eq=False)
class Employee:
    """A node of the organisation tree.

    Nodes compare by identity. ``reporting_level`` is written once by the level
    pass and ``direct_subordinates`` is only appended to while the tree is built.
    """

    id: EmployeeID
    first_name: str
    last_name: str
    salary: SalaryAmount
    manager_id: EmployeeID | None = None
    reporting_level: ReportingLevel = 0
    direct_subordinates: list["Employee"] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> "Employee":
        return cls(
            id=record.id,
            first_name=record.first_name,
            last_name=record.last_name,
            salary=record.salary,
            manager_id=record.manager_id or None,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_root(self) -> bool:
        return not self.manager_id

    @property
    def has_subordinates(self) -> bool:
        return bool(self.direct_subordinates)

    def __repr__(self) -> str:
        return (
            f"Employee(id={self.id!r}, name={self.full_name!r}, level={self.reporting_level}, "
            f"reports={len(self.direct_subordinates)})"
        )


@dataclass(frozen=True)
class EmployeeView:
    """Immutable snapshot of a node, as handed to the presentation layer."""

    id: EmployeeID
    full_name: str
    salary: SalaryAmount
    reporting_level: ReportingLevel

    @classmethod
    def of(cls, employee: Employee) -> "EmployeeView":
        return cls(employee.id, employee.full_name, employee.salary, employee.reporting_level)


@dataclass(frozen=True)
class SalaryFinding:
    employee: EmployeeView
    average_subordinate_salary: SalaryAmount
    ratio: float
    amount: SalaryAmount


@dataclass(frozen=True)
class ReportingLineFinding:
    employee: EmployeeView
    excess_levels: int


@dataclass(frozen=True)
class OrganizationalSummary:
    root: EmployeeView
    total_employees: int
    managers: int
    individual_contributors: int
    total_salary: SalaryAmount
    average_salary: SalaryAmount
    max_reporting_level: ReportingLevel


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis run: either every finding or the first error."""

    success: bool
    error: AnalysisError | None = None
    summary: OrganizationalSummary | None = None
    underpaid_managers: tuple[SalaryFinding, ...] | None = None
    overpaid_managers: tuple[SalaryFinding, ...] | None = None
    long_reporting_lines: tuple[ReportingLineFinding, ...] | None = None

    @classmethod
    def succeeded(
        cls,
        summary: OrganizationalSummary,
        underpaid: list[SalaryFinding],
        overpaid: list[SalaryFinding],
        long_lines: list[ReportingLineFinding],
    ) -> "AnalysisResult":
        return cls(
            success=True,
            summary=summary,
            underpaid_managers=tuple(underpaid),
            overpaid_managers=tuple(overpaid),
            long_reporting_lines=tuple(long_lines),
        )

    @classmethod
    def failed(cls, error: AnalysisError) -> "AnalysisResult":
        return cls(success=False, error=error)

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error else None
