"""
Tests for manager resolution and dangling references.
"""

import logging

from orgchart.hierarchy.linker import link_hierarchy
from orgchart.hierarchy.models import DanglingManagerReference, RawRecord
from orgchart.hierarchy.registry import build_registry


class TestLinking:
    """Tests for parent/child wiring."""

    def test_direct_reports_match_manager_names(self, branching_records):
        """Test that each node's reports are exactly the records naming it, in order."""
        registry = build_registry(branching_records)
        link_hierarchy(registry)

        for node in registry:
            expected = [r.name for r in branching_records if r.reports_to == node.name]
            assert [child.name for child in node.direct_reports] == expected

    def test_link_count(self, branching_records):
        """Test the number of edges created."""
        registry = build_registry(branching_records)
        report = link_hierarchy(registry)
        assert report.linked == 6

    def test_reports_are_registry_nodes(self, chain_records):
        """Test that reports reference the registry's own node objects."""
        registry = build_registry(chain_records)
        link_hierarchy(registry)
        assert registry.get("Alice").direct_reports[0] is registry.get("Bob")

    def test_manager_listed_after_report(self):
        """Test that a manager may appear later in the input than the report."""
        registry = build_registry([
            RawRecord("Bob", "VP", "-", "Alice"),
            RawRecord("Alice", "CEO", "-"),
        ])
        report = link_hierarchy(registry)
        assert report.dangling == []
        assert registry.get("Alice").direct_reports == [registry.get("Bob")]

    def test_roots_are_not_linked(self, chain_records):
        """Test that nobody ends up above a root."""
        registry = build_registry(chain_records)
        link_hierarchy(registry)
        alice = registry.get("Alice")
        assert all(alice not in node.direct_reports for node in registry)


class TestDanglingReferences:
    """Tests for managers missing from the dataset."""

    def test_single_dangling_reference(self, lines):
        """Test that one unknown manager yields one warning naming both people."""
        registry = build_registry([RawRecord("Dan", "Mgr", "-", "Ghost")])
        report = link_hierarchy(registry, lines.append)

        assert report.dangling == [DanglingManagerReference(child="Dan", manager="Ghost")]
        assert lines == ["Manager Ghost referenced by Dan not found in org chart"]

    def test_dangling_node_keeps_manager_name(self):
        """Test that an orphan is not reclassified as a root."""
        registry = build_registry([RawRecord("Dan", "Mgr", "-", "Ghost")])
        link_hierarchy(registry)
        dan = registry.get("Dan")
        assert dan.reports_to == "Ghost"
        assert not dan.is_root

    def test_dangling_node_is_nobodys_report(self, branching_records):
        """Test that an orphan appears in no report list."""
        registry = build_registry(branching_records)
        link_hierarchy(registry)
        lost = registry.get("Lost")
        assert all(lost not in node.direct_reports for node in registry)

    def test_linking_continues_after_warning(self, lines):
        """Test that warnings come out in order and later records still link."""
        registry = build_registry([
            RawRecord("Boss", "CEO", "-"),
            RawRecord("X", "Eng", "-", "Nobody"),
            RawRecord("Y", "Eng", "-", "Boss"),
            RawRecord("Z", "Eng", "-", "Missing"),
        ])
        report = link_hierarchy(registry, lines.append)

        assert [w.child for w in report.dangling] == ["X", "Z"]
        assert lines == [
            "Manager Nobody referenced by X not found in org chart",
            "Manager Missing referenced by Z not found in org chart",
        ]
        assert registry.get("Boss").direct_reports == [registry.get("Y")]

    def test_warning_is_logged(self, caplog):
        """Test that dangling references are logged at warning level."""
        registry = build_registry([RawRecord("Dan", "Mgr", "-", "Ghost")])
        with caplog.at_level(logging.WARNING, logger="orgchart.hierarchy.linker"):
            link_hierarchy(registry)
        assert "Manager Ghost referenced by Dan not found in org chart" in caplog.text
