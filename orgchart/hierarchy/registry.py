"""Node registry: owns every node and indexes them by name."""

import logging
from collections.abc import Iterable, Iterator

from orgchart.errors import DuplicateNameError
from orgchart.hierarchy.models import Node, PersonName, RawRecord
from orgchart.utils.types import DuplicatePolicy

logger = logging.getLogger(__name__)


class NodeRegistry:
    """All nodes of one org chart, in input order, plus a name index."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._by_name: dict[PersonName, Node] = {}

    def add(self, node: Node, duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WRITE_WINS) -> None:
        if node.name in self._by_name:
            match duplicate_policy:
                case DuplicatePolicy.REJECT:
                    raise DuplicateNameError(node.name)
                case DuplicatePolicy.LAST_WRITE_WINS:
                    logger.warning(
                        "Duplicate name %r: later record replaces the earlier one in the index",
                        node.name,
                    )
        self._nodes.append(node)
        self._by_name[node.name] = node

    def get(self, name: PersonName) -> Node | None:
        return self._by_name.get(name)

    def is_orphan(self, node: Node) -> bool:
        """True when the node names a manager that is not registered."""
        return not node.is_root and node.reports_to not in self._by_name

    def roots(self, include_orphans: bool = False) -> list[Node]:
        """Nodes without a manager, in input order.

        With ``include_orphans`` the orphans are listed too, interleaved in
        input order.
        """
        return [
            node for node in self._nodes
            if node.is_root or (include_orphans and self.is_orphan(node))
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)


def build_registry(
    records: Iterable[RawRecord],
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WRITE_WINS,
) -> NodeRegistry:
    """Create one node per record, keeping input order."""
    registry = NodeRegistry()
    for record in records:
        registry.add(Node.from_record(record), duplicate_policy)

    logger.info("Registered %d people", len(registry))
    return registry
