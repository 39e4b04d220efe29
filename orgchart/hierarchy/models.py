"""Record schema and in-memory hierarchy types."""

from dataclasses import dataclass, field
from typing import TypeAlias

from pandera.pandas import Check, Column, DataFrameSchema

PersonName: TypeAlias = str

RECORD_COLUMNS = ["name", "title", "join_date", "reports_to"]


record_schema = DataFrameSchema(
    {
        "name": Column(str, Check.str_length(min_value=1), nullable=False),
        "title": Column(str, nullable=False),
        "join_date": Column(str, nullable=False),
        "reports_to": Column(str, nullable=True),
    },
    strict=False,
)


@dataclass(frozen=True)
class RawRecord:
    name: PersonName
    title: str
    join_date: str
    reports_to: PersonName | None = None


@dataclass(eq=False)
class Node:
    """One person in the org chart.

    ``direct_reports`` holds references to nodes owned by the registry.
    Nodes compare by identity and leave the report list out of their repr,
    so a cyclic manager chain is safe to compare and print.
    """

    name: PersonName
    title: str
    join_date: str
    reports_to: PersonName | None = None
    direct_reports: list["Node"] = field(default_factory=list, repr=False)

    @classmethod
    def from_record(cls, record: RawRecord) -> "Node":
        return cls(
            name=record.name,
            title=record.title,
            join_date=record.join_date,
            reports_to=record.reports_to,
        )

    @property
    def is_root(self) -> bool:
        return self.reports_to is None


@dataclass(frozen=True)
class DanglingManagerReference:
    child: PersonName
    manager: PersonName

    def __str__(self) -> str:
        return f"Manager {self.manager} referenced by {self.child} not found in org chart"


@dataclass
class LinkReport:
    linked: int = 0
    dangling: list[DanglingManagerReference] = field(default_factory=list)


@dataclass(frozen=True)
class ReportEntry:
    node: Node
    depth: int
