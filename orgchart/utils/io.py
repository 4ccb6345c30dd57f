"""File I/O utilities for reading employee exports and config files."""

import logging
import tomllib
import warnings
from pathlib import Path

import pandas as pd

type FilePath = str | Path

logger = logging.getLogger(__name__)


def read_csv_file(path: FilePath, encodings: tuple[str, ...] = ("utf-8", "latin-1")) -> pd.DataFrame:
    """Read a CSV export as strings, trying each encoding in turn."""
    path = Path(path)
    for encoding in encodings:
        try:
            # Rows wider than the header would otherwise be dropped or shifted into the index
            with warnings.catch_warnings():
                warnings.simplefilter("error", pd.errors.ParserWarning)
                df = pd.read_csv(
                    path,
                    dtype=str,
                    keep_default_na=False,
                    skipinitialspace=True,
                    skip_blank_lines=True,
                    index_col=False,
                    encoding=encoding,
                )
        except pd.errors.ParserWarning as exc:
            raise pd.errors.ParserError(f"Rows have more fields than the header: {exc}") from exc
        except UnicodeDecodeError:
            logger.debug("Could not decode %s as %s", path.name, encoding)
            continue
        logger.info("Read %d rows from %s", len(df), path.name)
        return df
    raise ValueError(f"Could not decode {path}")


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file using Python 3.11+ stdlib."""
    with open(path, "rb") as f:
        return tomllib.load(f)
