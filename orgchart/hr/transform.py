"""Normalize ingested employee rows into ordered ``EmployeeRecord`` values."""

import logging

import numpy as np
import pandas as pd

from orgchart.hr.models import RECORD_COLUMNS, EmployeeRecord, employee_record_schema
from orgchart.utils.transforms import strip_string_columns
from orgchart.utils.validators import validate_dataframe

logger = logging.getLogger(__name__)


class MalformedRecordsError(ValueError):
    """Raised when rows do not match the employee record contract."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"{len(errors)} malformed record(s): {'; '.join(errors[:5])}")


def _optional_str(value: object) -> str | None:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return str(value)


def _salary_errors(raw: pd.Series, parsed: pd.Series) -> list[str]:
    errors = []
    for idx in raw[raw.notna()].index:
        if pd.isna(parsed[idx]):
            errors.append(f"Row {idx + 1}: salary {raw[idx]!r} is not a number")
        elif not np.isfinite(parsed[idx]):
            errors.append(f"Row {idx + 1}: salary {raw[idx]!r} is not finite")
    return errors


def normalize_employee_records(raw_df: pd.DataFrame) -> list[EmployeeRecord]:
    """Clean, validate and convert rows, preserving input order.

    Duplicate ids are kept; detecting them is the structural validator's job.
    """
    df = strip_string_columns(raw_df, RECORD_COLUMNS)
    df = df.reset_index(drop=True)

    parsed_salary = pd.to_numeric(df["salary"], errors="coerce")
    errors = _salary_errors(df["salary"], parsed_salary)
    df["salary"] = parsed_salary.astype(float)

    outcome = validate_dataframe(df, employee_record_schema)
    errors.extend(outcome["errors"])
    if errors:
        logger.error("Rejected employee export: %d malformed value(s)", len(errors))
        raise MalformedRecordsError(errors)

    records = [
        EmployeeRecord(
            id=str(row.id),
            first_name=str(row.first_name),
            last_name=str(row.last_name),
            salary=float(row.salary),
            manager_id=_optional_str(row.manager_id),
        )
        for row in df.itertuples(index=False)
    ]
    logger.info("Normalized %d employee records", len(records))
    return records
