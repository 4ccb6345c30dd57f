"""Data validation utilities using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

from orgchart.utils.types import ValidationOutcome


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationOutcome:
    """Validate a DataFrame against a pandera schema, collecting every failure."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val, "index": idx} if pd.notna(idx):
                    errors.append(f"Row {int(idx) + 1}: column '{col}' failed check '{check}': {val}")
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_required_columns(df: pd.DataFrame, columns: list[str]) -> ValidationOutcome:
    """Check that all required columns are present."""
    missing = [col for col in columns if col not in df.columns]

    match missing:
        case []:
            return {"valid": True, "status": "ok", "errors": []}
        case cols:
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Missing required columns: {cols}"],
            }
