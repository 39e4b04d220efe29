"""Org hierarchy pipeline.

Loads flat personnel records, links each person under their manager and
walks the resulting forest of reporting trees.
"""

from orgchart.config import OrgChartConfig
from orgchart.errors import InputUnavailableError
from orgchart.hierarchy.forest import ForestSummary, OrgChart, build_org_chart, walk_forest
from orgchart.hierarchy.ingest import load_records, load_records_frame, resolve_source_format
from orgchart.hierarchy.linker import link_hierarchy
from orgchart.hierarchy.models import (
    DanglingManagerReference,
    LinkReport,
    Node,
    RawRecord,
    ReportEntry,
    record_schema,
)
from orgchart.hierarchy.org_structure import flatten_hierarchy, span_of_control
from orgchart.hierarchy.registry import NodeRegistry, build_registry
from orgchart.hierarchy.traversal import all_reports, direct_reports, iter_reports, render_report_line
from orgchart.utils.types import DuplicatePolicy, Sink, ValidationOutcome, discard
from orgchart.utils.validators import (
    validate_dataframe,
    validate_referential_integrity,
    validate_unique,
)


def validate(config: OrgChartConfig) -> ValidationOutcome:
    """Check the record source without building the hierarchy.

    Schema problems are errors. Duplicate names are errors only under the
    reject policy, and unresolved managers are always warnings.
    """
    try:
        frame = load_records_frame(
            config.source, max_bytes=config.max_bytes, fmt=config.source_format
        )
    except InputUnavailableError as exc:
        return {"status": "error", "message": str(exc), "rows_available": 0, "checks": []}

    schema = validate_dataframe(frame, record_schema)
    checks = [{"check": "schema", "severity": "error", **schema}]
    if schema["valid"]:
        duplicate_severity = (
            "error" if config.duplicate_policy is DuplicatePolicy.REJECT else "warning"
        )
        checks.append({
            "check": "unique_names",
            "severity": duplicate_severity,
            **validate_unique(frame, ["name"]),
        })
        checks.append({
            "check": "manager_references",
            "severity": "warning",
            **validate_referential_integrity(frame, frame, "reports_to", "name"),
        })

    failed = any(not c["valid"] and c["severity"] == "error" for c in checks)
    return {
        "status": "error" if failed else "ok",
        "rows_available": len(frame),
        "checks": checks,
    }


def run(config: OrgChartConfig, sink: Sink = discard) -> OrgChart:
    """Execute the full org hierarchy pipeline."""
    fmt = resolve_source_format(config.source, config.source_format)
    records = load_records(config.source, max_bytes=config.max_bytes, fmt=fmt)
    return build_org_chart(
        records,
        sink,
        source_label=fmt.upper(),
        duplicate_policy=config.duplicate_policy,
        include_orphans=config.include_orphans,
        max_depth=config.max_depth,
    )
