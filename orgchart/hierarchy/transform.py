"""Normalize decoded record frames into records."""

import logging

import pandas as pd

from orgchart.errors import InputUnavailableError
from orgchart.hierarchy.models import RECORD_COLUMNS, RawRecord
from orgchart.utils.transforms import (
    RECORD_COLUMN_ALIASES,
    ensure_columns,
    normalize_columns,
    nulls_to_none,
)

logger = logging.getLogger(__name__)


def normalize_record_frame(raw_df: pd.DataFrame) -> pd.DataFrame:
    """Canonicalize column names and make sure the optional manager column exists.

    Fields other than the record columns are kept but ignored downstream.
    """
    df = normalize_columns(raw_df, RECORD_COLUMN_ALIASES)

    # joinDate and join_date both map to join_date
    conflicts = df.columns[df.columns.duplicated()].unique().tolist()
    if conflicts:
        raise InputUnavailableError(
            "Record source has conflicting fields for " + ", ".join(conflicts)
        )

    # All-root exports omit the manager column entirely
    df = ensure_columns(df, ["reports_to"])
    if df.empty:
        df = ensure_columns(df, RECORD_COLUMNS)

    df["reports_to"] = df["reports_to"].map(nulls_to_none).astype(object)
    return df


def frame_to_records(df: pd.DataFrame) -> list[RawRecord]:
    """Convert a validated record frame into records, keeping row order."""
    records = [
        RawRecord(
            name=name,
            title=title,
            join_date=join_date,
            reports_to=nulls_to_none(reports_to),
        )
        for name, title, join_date, reports_to in df[RECORD_COLUMNS].itertuples(
            index=False, name=None
        )
    ]
    logger.info("Normalized %d personnel records", len(records))
    return records
