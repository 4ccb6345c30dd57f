"""Ingest employee exports (``Id,firstName,lastName,salary,managerId`` CSV)."""

import logging
from pathlib import Path

import pandas as pd

from orgchart.hr.models import RECORD_COLUMNS
from orgchart.utils.io import FilePath, read_csv_file
from orgchart.utils.transforms import normalize_columns
from orgchart.utils.validators import validate_required_columns

logger = logging.getLogger(__name__)

CSV_EXTENSION = ".csv"
MAX_FILE_SIZE = 100 * 1024 * 1024
BYTES_PER_EMPLOYEE_ESTIMATE = 1024
EXPECTED_HEADER = ["Id", "firstName", "lastName", "salary", "managerId"]

# Export header names -> snake_case record columns
HEADER_MAPPING = {
    "firstname": "first_name",
    "lastname": "last_name",
    "managerid": "manager_id",
}


def check_input_file(path: FilePath) -> Path:
    """Reject paths that cannot be an employee export.

    Raises ``FileNotFoundError`` when the file is missing and ``ValueError``
    for every other problem (extension, size, no data rows).
    """
    if not str(path).strip():
        raise ValueError("Input file path is empty")

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file does not exist: {path}")
    if not path.is_file():
        raise ValueError(f"Input path is not a file: {path}")
    if path.suffix.lower() != CSV_EXTENSION:
        raise ValueError(f"Input file does not have a {CSV_EXTENSION} extension: {path}")

    size = path.stat().st_size
    if size == 0:
        raise ValueError(f"Input file is empty: {path}")
    if size > MAX_FILE_SIZE:
        raise ValueError(f"Input file is too large: {size} bytes (limit {MAX_FILE_SIZE})")

    with open(path, "rb") as f:
        data_lines = sum(1 for line in f if line.strip()) - 1
    if data_lines < 1:
        raise ValueError(f"Input file has no data rows, only a header: {path}")

    logger.debug("Input file %s passed checks (%d bytes, %d data rows)", path.name, size, data_lines)
    logger.debug(
        "Estimated %d employees, roughly %d bytes in memory",
        data_lines, data_lines * BYTES_PER_EMPLOYEE_ESTIMATE,
    )
    return path


def ingest_employee_csv(path: FilePath) -> pd.DataFrame:
    """Load an employee export into a DataFrame with snake_case columns.

    Every column is read as text. A missing ``managerId`` column is allowed and
    treated as blank for every row.
    """
    path = check_input_file(path)

    try:
        raw = read_csv_file(path)
    except pd.errors.ParserError as exc:
        raise ValueError(f"Malformed CSV in {path.name}: {exc}") from exc

    header = [col.strip() for col in raw.columns]
    if header not in (EXPECTED_HEADER, EXPECTED_HEADER[:-1]):
        logger.warning("Unexpected header in %s: %s", path.name, header)

    df = normalize_columns(raw, HEADER_MAPPING)
    if "manager_id" not in df.columns:
        df["manager_id"] = ""

    outcome = validate_required_columns(df, RECORD_COLUMNS)
    if not outcome["valid"]:
        raise ValueError(f"Invalid CSV header in {path.name}: {'; '.join(outcome['errors'])}")

    logger.info("Ingested %d employee rows from %s", len(df), path.name)
    return df[RECORD_COLUMNS]
