"""Walk reporting trees depth-first."""

from collections.abc import Iterator, Sequence

from orgchart.config import DEFAULT_MAX_DEPTH
from orgchart.errors import HierarchyDepthError
from orgchart.hierarchy.models import Node, ReportEntry

DEPTH_MARKER = "-"


def direct_reports(node: Node) -> Sequence[Node]:
    """Immediate subordinates of ``node``, in linking order."""
    return tuple(node.direct_reports)


def iter_reports(node: Node, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[ReportEntry]:
    """Yield every transitive report of ``node`` in pre-order.

    A report is yielded before any of its own reports, and the whole subtree
    of one direct report is exhausted before its next sibling. ``node`` itself
    is not yielded; its direct reports have depth 1.

    The walk uses an explicit stack of (node, depth) pairs, so the depth of
    each entry is fixed when it is pushed. Going deeper than ``max_depth``
    raises HierarchyDepthError, which is also how a cycle surfaces.
    """
    stack: list[tuple[Node, int]] = [(child, 1) for child in reversed(node.direct_reports)]
    while stack:
        current, depth = stack.pop()
        if depth > max_depth:
            raise HierarchyDepthError(node.name, max_depth)

        yield ReportEntry(node=current, depth=depth)
        stack.extend((child, depth + 1) for child in reversed(current.direct_reports))


def all_reports(node: Node, max_depth: int = DEFAULT_MAX_DEPTH) -> list[ReportEntry]:
    return list(iter_reports(node, max_depth=max_depth))


def render_report_line(entry: ReportEntry, marker: str = DEPTH_MARKER) -> str:
    """Format a visited report as ``<marker * depth> <title> | <name>``."""
    return f"{marker * entry.depth} {entry.node.title} | {entry.node.name}"
