"""Shared utilities for the org chart package."""

from orgchart.utils.io import read_source_text, decode_records_frame
from orgchart.utils.transforms import normalize_columns, ensure_columns
from orgchart.utils.validators import validate_dataframe
from orgchart.utils.types import DuplicatePolicy, SourceFormat, Sink
