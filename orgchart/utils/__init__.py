"""Shared utilities for the org chart analysis."""

from orgchart.utils.io import read_csv_file, load_toml_config
from orgchart.utils.transforms import normalize_columns, strip_string_columns
from orgchart.utils.validators import validate_dataframe, validate_required_columns
from orgchart.utils.types import AnalysisError, PayClassification, ViolationKind
