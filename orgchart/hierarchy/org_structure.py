"""Org structure metrics: depth, org level and span of control per person."""

import logging

import pandas as pd

from orgchart.config import DEFAULT_MAX_DEPTH
from orgchart.hierarchy.forest import OrgChart
from orgchart.hierarchy.models import Node
from orgchart.hierarchy.traversal import all_reports

logger = logging.getLogger(__name__)

ORG_STRUCTURE_COLUMNS = [
    "name", "title", "root", "depth", "org_level", "direct_reports", "total_reports",
]


def classify_org_level(depth: int) -> str:
    """Classify the organizational level based on depth from a root."""
    match depth:
        case 0:
            return "Executive"
        case 1:
            return "Senior Leadership"
        case 2:
            return "Director"
        case 3:
            return "Manager"
        case 4:
            return "Lead"
        case _:
            return "IC"


def _row(node: Node, root: Node, depth: int, max_depth: int) -> dict[str, str | int]:
    return {
        "name": node.name,
        "title": node.title,
        "root": root.name,
        "depth": depth,
        "org_level": classify_org_level(depth),
        "direct_reports": len(node.direct_reports),
        "total_reports": len(all_reports(node, max_depth=max_depth)),
    }


def flatten_hierarchy(chart: OrgChart, max_depth: int = DEFAULT_MAX_DEPTH) -> pd.DataFrame:
    """Flatten every walked tree into one row per person, in pre-order."""
    flat_rows = []
    for root in chart.summary.roots:
        flat_rows.append(_row(root, root, 0, max_depth))
        for entry in all_reports(root, max_depth=max_depth):
            flat_rows.append(_row(entry.node, root, entry.depth, max_depth))

    result = pd.DataFrame(flat_rows, columns=ORG_STRUCTURE_COLUMNS)
    logger.info(
        "Flattened org hierarchy: %d rows, %d root(s)", len(result), chart.summary.root_count
    )
    return result


def span_of_control(frame: pd.DataFrame) -> pd.DataFrame:
    """Managers only, widest span first."""
    managers = frame[frame["direct_reports"] > 0]
    return managers.sort_values(
        ["direct_reports", "name"], ascending=[False, True]
    ).reset_index(drop=True)
