"""Shared type definitions for the org chart package."""

from collections.abc import Callable
from enum import StrEnum
from pathlib import Path
from typing import TypeAlias


FilePath: TypeAlias = str | Path
Sink: TypeAlias = Callable[[str], None]
CheckResult: TypeAlias = dict[str, str | bool | list[str]]
ValidationOutcome: TypeAlias = dict[str, str | int | list[CheckResult]]


class DuplicatePolicy(StrEnum):
    LAST_WRITE_WINS = "last-write-wins"
    REJECT = "reject"


class SourceFormat(StrEnum):
    JSON = "json"
    CSV = "csv"


def infer_source_format(path: FilePath) -> SourceFormat:
    """Pick the decoder from a file suffix."""
    match Path(path).suffix.lower():
        case ".json":
            return SourceFormat.JSON
        case ".csv" | ".txt":
            return SourceFormat.CSV
        case ext:
            raise ValueError(f"Unsupported record source format: {ext or '<none>'}")


def discard(_line: str) -> None:
    """Sink that drops every line."""
