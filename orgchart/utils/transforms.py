"""Column normalization for decoded record frames."""

from typing import TypeAlias

import pandas as pd

ColumnMapping: TypeAlias = dict[str, str]

# Spellings seen in HRIS exports, after snake_casing.
RECORD_COLUMN_ALIASES: ColumnMapping = {
    "joindate": "join_date",
    "reportsto": "reports_to",
}


def normalize_columns(df: pd.DataFrame, mapping: ColumnMapping | None = None) -> pd.DataFrame:
    """Normalize column names to snake_case and apply optional mapping."""
    df = df.copy()
    df.columns = [
        str(col).strip().lower().replace(" ", "_").replace("-", "_") for col in df.columns
    ]

    if mapping:
        df = df.rename(columns=mapping)

    return df


def ensure_columns(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Add any missing columns, filled with None."""
    missing = [col for col in columns if col not in df.columns]
    if not missing:
        return df

    df = df.copy()
    for col in missing:
        df[col] = pd.Series([None] * len(df), index=df.index, dtype=object)
    return df


def nulls_to_none(value: object) -> object:
    """Map pandas null markers (NaN, NaT, pd.NA) to None."""
    match value:
        case None:
            return None
        case str() | list() | dict():
            return value
        case _ if pd.isna(value):
            return None
        case _:
            return value
