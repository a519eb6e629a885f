"""Reading delimited sample files into raw rows for validation."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Dict, List, Union

import pandas as pd

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO[str]]


class LoaderError(ValueError):
    """Raised when a sample file cannot be parsed."""


def dataframe_to_rows(df: pd.DataFrame) -> List[Dict[str, object]]:
    """Convert a DataFrame to raw rows; missing cells become empty strings."""
    if df.empty:
        return []
    frame = df.astype(object).where(pd.notna(df), "")
    frame.columns = [str(column) for column in frame.columns]
    return frame.to_dict(orient="records")


def read_rows(source: Source, delimiter: str = ",") -> List[Dict[str, object]]:
    """Parse a delimited file with a header row into raw rows.

    Every cell is kept as text so numeric checks stay with the validator.
    Blank lines are skipped and an empty file yields no rows.
    """
    try:
        df = pd.read_csv(
            source,
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        logger.warning("Sample file %s is empty", source)
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise LoaderError(f"File parsing error: {exc}") from exc

    rows = dataframe_to_rows(df)
    logger.info("Read %d rows with columns %s", len(rows), list(df.columns))
    return rows
