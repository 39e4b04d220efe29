"""Find the roots of the org chart forest and walk each of them."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from orgchart.config import DEFAULT_MAX_DEPTH
from orgchart.hierarchy.linker import link_hierarchy
from orgchart.hierarchy.models import LinkReport, Node, PersonName, RawRecord, ReportEntry
from orgchart.hierarchy.registry import NodeRegistry, build_registry
from orgchart.hierarchy.traversal import iter_reports, render_report_line
from orgchart.utils.types import DuplicatePolicy, Sink, discard

logger = logging.getLogger(__name__)


@dataclass
class ForestSummary:
    people_count: int
    roots: list[Node] = field(default_factory=list)
    links: list[ReportEntry] = field(default_factory=list)

    @property
    def root_names(self) -> list[PersonName]:
        return [node.name for node in self.roots]

    @property
    def root_count(self) -> int:
        return len(self.roots)

    @property
    def subordinate_link_count(self) -> int:
        return len(self.links)


@dataclass
class OrgChart:
    registry: NodeRegistry
    link_report: LinkReport
    summary: ForestSummary


def _root_banner(node: Node, orphan: bool) -> str:
    if orphan:
        return (
            f"Orphan root: {node.name} ({node.title}) joined {node.join_date}, "
            f"manager {node.reports_to} not found"
        )
    return f"Org root: {node.name} ({node.title}) joined {node.join_date}"


def walk_forest(
    registry: NodeRegistry,
    sink: Sink = discard,
    *,
    include_orphans: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ForestSummary:
    """Walk every root in registry order and collect all visited reports.

    Only people without a manager are roots. People whose manager is missing
    from the registry still carry a manager name, so they are skipped and
    never counted unless ``include_orphans`` is set.
    """
    summary = ForestSummary(people_count=len(registry))
    for node in registry.roots(include_orphans=include_orphans):
        summary.roots.append(node)
        sink(_root_banner(node, registry.is_orphan(node)))
        for entry in iter_reports(node, max_depth=max_depth):
            sink(render_report_line(entry))
            summary.links.append(entry)

    logger.info(
        "Walked %d root(s), %d subordinate link(s)",
        summary.root_count,
        summary.subordinate_link_count,
    )
    return summary


def build_org_chart(
    records: Iterable[RawRecord],
    sink: Sink = discard,
    *,
    source_label: str = "JSON",
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WRITE_WINS,
    include_orphans: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> OrgChart:
    """Register, link and walk a batch of records, reporting to ``sink``."""
    registry = build_registry(records, duplicate_policy)
    link_report = link_hierarchy(registry, sink)
    sink(f"Loaded {len(registry)} people from {source_label}.")

    summary = walk_forest(
        registry,
        sink,
        include_orphans=include_orphans,
        max_depth=max_depth,
    )
    sink(f"Tracked {summary.subordinate_link_count} subordinate links.")
    return OrgChart(registry=registry, link_report=link_report, summary=summary)
