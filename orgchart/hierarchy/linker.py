"""Resolve manager names into parent/child links."""

import logging

from orgchart.hierarchy.models import DanglingManagerReference, LinkReport
from orgchart.hierarchy.registry import NodeRegistry
from orgchart.utils.types import Sink, discard

logger = logging.getLogger(__name__)


def link_hierarchy(registry: NodeRegistry, sink: Sink = discard) -> LinkReport:
    """Attach every node under its manager, in input order.

    Unknown managers are reported to the sink as they are found and linking
    carries on. Such nodes keep their ``reports_to`` value but are never
    attached under anyone.
    """
    report = LinkReport()
    for node in registry:
        if node.reports_to is None:
            continue

        manager = registry.get(node.reports_to)
        if manager is None:
            warning = DanglingManagerReference(child=node.name, manager=node.reports_to)
            report.dangling.append(warning)
            logger.warning("%s", warning)
            sink(str(warning))
            continue

        manager.direct_reports.append(node)
        report.linked += 1

    logger.info(
        "Linked %d reporting edges, %d dangling manager reference(s)",
        report.linked,
        len(report.dangling),
    )
    return report
