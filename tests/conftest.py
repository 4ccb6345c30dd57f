from __future__ import annotations

from pathlib import Path

import pytest

from orgchart.config import AnalysisConfig
from orgchart.hr.models import EmployeeRecord

HEADER = "Id,firstName,lastName,salary,managerId"

# Three branches under the CEO; the 309 branch runs five levels deep.
SAMPLE_ROWS = [
    ("123", "Joe", "Doe", 60000, None),
    ("124", "Martin", "Chekov", 45000, "123"),
    ("125", "Bob", "Ronstad", 47000, "123"),
    ("300", "Alice", "Hasacat", 50000, "124"),
    ("305", "Brett", "Hardleaf", 34000, "300"),
    ("306", "Sarah", "Johnson", 38000, "300"),
    ("307", "Michael", "Brown", 42000, "125"),
    ("308", "Emily", "Davis", 39000, "125"),
    ("309", "David", "Wilson", 41000, "123"),
    ("310", "Lisa", "Anderson", 36000, "309"),
    ("311", "James", "Taylor", 44000, "309"),
    ("312", "Emma", "Thomas", 37000, "311"),
    ("313", "Christopher", "Lee", 43000, "311"),
    ("314", "Amanda", "White", 35000, "312"),
    ("315", "Daniel", "Harris", 40000, "312"),
    ("316", "John", "Deep", 32000, "314"),
]


def make_record(
    employee_id: str,
    salary: float = 50000,
    manager_id: str | None = None,
    first_name: str = "First",
    last_name: str | None = None,
) -> EmployeeRecord:
    return EmployeeRecord(
        id=employee_id,
        first_name=first_name,
        last_name=last_name or f"Last{employee_id}",
        salary=float(salary),
        manager_id=manager_id,
    )


@pytest.fixture
def sample_records() -> list[EmployeeRecord]:
    return [
        EmployeeRecord(id=i, first_name=f, last_name=l, salary=float(s), manager_id=m)
        for i, f, l, s, m in SAMPLE_ROWS
    ]


@pytest.fixture
def default_config() -> AnalysisConfig:
    return AnalysisConfig()


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    lines = [HEADER] + [f"{i},{f},{l},{s},{m or ''}" for i, f, l, s, m in SAMPLE_ROWS]
    path = tmp_path / "employees.csv"
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def write_csv(tmp_path: Path):
    def _write(content: str, name: str = "employees.csv") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
