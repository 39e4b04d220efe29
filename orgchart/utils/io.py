"""File I/O utilities for reading personnel record sources."""

import json
import logging
import tomllib
from io import StringIO
from pathlib import Path

import pandas as pd

from orgchart.errors import InputUnavailableError
from orgchart.utils.types import FilePath, SourceFormat

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 16 * 1024


def read_source_text(path: FilePath, max_bytes: int = DEFAULT_MAX_BYTES) -> str:
    """Read a record source, refusing anything larger than ``max_bytes``."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            raw = f.read(max_bytes + 1)
    except OSError as exc:
        raise InputUnavailableError(f"Cannot read record source {path}: {exc}") from exc

    if len(raw) > max_bytes:
        raise InputUnavailableError(
            f"Record source {path} is larger than the {max_bytes} byte limit"
        )

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputUnavailableError(f"Record source {path} is not valid UTF-8") from exc


def _decode_json(text: str) -> pd.DataFrame:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputUnavailableError(f"Malformed JSON record source: {exc}") from exc

    match payload:
        case list() if all(isinstance(item, dict) for item in payload):
            return pd.DataFrame.from_records(payload)
        case list():
            raise InputUnavailableError("JSON record source must be an array of objects")
        case _:
            raise InputUnavailableError(
                f"JSON record source must be an array, got {type(payload).__name__}"
            )


def _decode_csv(text: str) -> pd.DataFrame:
    if not text.strip():
        return pd.DataFrame()
    try:
        return pd.read_csv(StringIO(text), dtype=str, keep_default_na=False, na_values=[""])
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise InputUnavailableError(f"Malformed CSV record source: {exc}") from exc


def decode_records_frame(text: str, fmt: SourceFormat) -> pd.DataFrame:
    """Decode source text into a DataFrame with one row per record."""
    match fmt:
        case SourceFormat.JSON:
            frame = _decode_json(text)
        case SourceFormat.CSV:
            frame = _decode_csv(text)
        case other:
            raise InputUnavailableError(f"Unsupported record source format: {other}")

    logger.debug("Decoded %d %s rows", len(frame), fmt)
    return frame


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file using Python 3.11+ stdlib."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_yaml_config(path: FilePath) -> dict:
    """Load a YAML configuration file."""
    import yaml

    with open(path) as f:
        return yaml.safe_load(f) or {}
