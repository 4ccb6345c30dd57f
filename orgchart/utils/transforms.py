"""Common data transformation utilities."""

import pandas as pd

type ColumnMapping = dict[str, str]


def normalize_columns(df: pd.DataFrame, mapping: ColumnMapping | None = None) -> pd.DataFrame:
    """Normalize column names to lower case and apply optional mapping."""
    df.columns = [col.strip().lower().replace(" ", "_").replace("-", "_") for col in df.columns]

    if mapping:
        df = df.rename(columns=mapping)

    return df


def strip_string_columns(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Trim surrounding whitespace; blank cells become None."""
    result = df.copy()
    for col in columns:
        if col not in result.columns:
            continue
        values = result[col].astype(object)
        stripped = values.map(lambda v: v.strip() if isinstance(v, str) else v)
        blank = stripped.isna() | (stripped == "")
        result[col] = stripped.where(~blank, None).astype(object)
    return result
