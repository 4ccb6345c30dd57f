from __future__ import annotations

from conftest import make_record

from orgchart.hr.hierarchy import Hierarchy, assign_reporting_levels, build_hierarchy, walk_hierarchy
from orgchart.utils.types import AnalysisError, ViolationKind


def _built(records) -> Hierarchy:
    hierarchy = build_hierarchy(records)
    assert isinstance(hierarchy, Hierarchy)
    return hierarchy


def test_every_record_becomes_exactly_one_node(sample_records):
    hierarchy = _built(sample_records)

    nodes = list(walk_hierarchy(hierarchy.root))

    assert len(nodes) == len(sample_records) == len(hierarchy)
    assert {n.id for n in nodes} == {r.id for r in sample_records}


def test_root_and_direct_reports_in_input_order(sample_records):
    root = _built(sample_records).root

    assert root.id == "123"
    assert root.full_name == "Joe Doe"
    assert [e.id for e in root.direct_subordinates] == ["124", "125", "309"]


def test_leaves_have_no_subordinates(sample_records):
    hierarchy = _built(sample_records)

    assert hierarchy.get("316").direct_subordinates == []
    assert not hierarchy.get("305").has_subordinates


def test_levels_follow_depth(sample_records):
    hierarchy = _built(sample_records)
    assign_reporting_levels(hierarchy.root)

    expected = {"123": 0, "124": 1, "300": 2, "305": 3, "314": 4, "316": 5}
    for employee_id, level in expected.items():
        assert hierarchy.get(employee_id).reporting_level == level


def test_depth_consistency_across_tree(sample_records):
    root = _built(sample_records).root
    visited = assign_reporting_levels(root)

    assert visited == len(sample_records)
    nodes = list(walk_hierarchy(root))
    assert sum(1 for n in nodes if n.reporting_level == 0) == 1
    for node in nodes:
        for child in node.direct_subordinates:
            assert child.reporting_level == node.reporting_level + 1


def test_walk_is_breadth_first_with_sibling_order(sample_records):
    root = _built(sample_records).root

    order = [e.id for e in walk_hierarchy(root)]

    assert order[:4] == ["123", "124", "125", "309"]
    assert order[-1] == "316"


def test_deep_chain_does_not_hit_recursion_limit():
    depth = 20_000
    records = [make_record("0")] + [make_record(str(i), manager_id=str(i - 1)) for i in range(1, depth)]
    hierarchy = _built(records)

    assign_reporting_levels(hierarchy.root)

    assert hierarchy.get(str(depth - 1)).reporting_level == depth - 1


def test_wide_hierarchy():
    records = [make_record("ceo")] + [make_record(f"e{i}", manager_id="ceo") for i in range(5000)]
    root = _built(records).root

    assign_reporting_levels(root)

    assert len(root.direct_subordinates) == 5000
    assert {e.reporting_level for e in root.direct_subordinates} == {1}


def test_unresolved_manager_is_skipped_with_warning(caplog):
    records = [make_record("1"), make_record("2", manager_id="1"), make_record("3", manager_id="missing")]

    with caplog.at_level("WARNING"):
        hierarchy = _built(records)

    assert hierarchy.unresolved == [("3", "missing")]
    assert [e.id for e in hierarchy.root.direct_subordinates] == ["2"]
    assert "missing" in caplog.text


def test_missing_root_returns_error():
    result = build_hierarchy([make_record("1", manager_id="2"), make_record("2", manager_id="1")])

    assert isinstance(result, AnalysisError)
    assert result.kind is ViolationKind.NO_ROOT
