"""Ingest personnel records from JSON or CSV org chart exports."""

import logging
from pathlib import Path

import pandas as pd

from orgchart.errors import InputUnavailableError
from orgchart.hierarchy.models import RawRecord, record_schema
from orgchart.hierarchy.transform import frame_to_records, normalize_record_frame
from orgchart.utils.io import DEFAULT_MAX_BYTES, decode_records_frame, read_source_text
from orgchart.utils.types import FilePath, SourceFormat, infer_source_format
from orgchart.utils.validators import validate_dataframe

logger = logging.getLogger(__name__)


def resolve_source_format(path: FilePath, fmt: SourceFormat | None = None) -> SourceFormat:
    if fmt is not None:
        return SourceFormat(fmt)
    try:
        return infer_source_format(path)
    except ValueError as exc:
        raise InputUnavailableError(str(exc)) from exc


def load_records_frame(
    path: FilePath,
    max_bytes: int = DEFAULT_MAX_BYTES,
    fmt: SourceFormat | None = None,
) -> pd.DataFrame:
    """Read and decode a record source into a normalized, unvalidated frame."""
    path = Path(path)
    fmt = resolve_source_format(path, fmt)
    text = read_source_text(path, max_bytes=max_bytes)
    frame = normalize_record_frame(decode_records_frame(text, fmt))
    logger.info("Read %d rows from %s", len(frame), path.name)
    return frame


def load_records(
    path: FilePath,
    max_bytes: int = DEFAULT_MAX_BYTES,
    fmt: SourceFormat | None = None,
) -> list[RawRecord]:
    """Load the ordered personnel records of an org chart export.

    Every way the records can fail to materialize (missing file, oversized
    file, bad encoding, malformed JSON/CSV, schema violations) is raised as
    InputUnavailableError.
    """
    frame = load_records_frame(path, max_bytes=max_bytes, fmt=fmt)

    result = validate_dataframe(frame, record_schema)
    if not result["valid"]:
        for error in result["errors"]:
            logger.error("Record source %s: %s", path, error)
        raise InputUnavailableError(
            f"Record source {path} failed validation: " + "; ".join(result["errors"])
        )

    return frame_to_records(frame)
