from __future__ import annotations

from conftest import make_record

from orgchart.hr.structure import validate_structure
from orgchart.utils.types import ViolationKind


def test_valid_sample_organisation_passes(sample_records):
    assert validate_structure(sample_records) is None


def test_single_root_is_valid():
    assert validate_structure([make_record("1")]) is None


def test_empty_input():
    error = validate_structure([])

    assert error.kind is ViolationKind.EMPTY_INPUT


def test_duplicate_id_names_the_id():
    records = [make_record("1"), make_record("2", manager_id="1"), make_record("2", manager_id="1")]

    error = validate_structure(records)

    assert error.kind is ViolationKind.DUPLICATE_ID
    assert error.employee_id == "2"
    assert "'2'" in error.message


def test_duplicate_check_runs_before_root_check():
    records = [make_record("1", manager_id="9"), make_record("1", manager_id="9")]

    assert validate_structure(records).kind is ViolationKind.DUPLICATE_ID


def test_no_root():
    records = [make_record("1", manager_id="2"), make_record("2", manager_id="1")]

    assert validate_structure(records).kind is ViolationKind.NO_ROOT


def test_multiple_roots_lists_every_root():
    records = [make_record("1"), make_record("2"), make_record("3", manager_id="1")]

    error = validate_structure(records)

    assert error.kind is ViolationKind.MULTIPLE_ROOTS
    assert "1, 2" in error.message


def test_empty_string_manager_counts_as_root():
    records = [make_record("1", manager_id=""), make_record("2", manager_id="")]

    assert validate_structure(records).kind is ViolationKind.MULTIPLE_ROOTS


def test_orphan_reference_names_employee_and_manager():
    records = [make_record("1"), make_record("2", manager_id="1"), make_record("3", manager_id="99")]

    error = validate_structure(records)

    assert error.kind is ViolationKind.ORPHAN_REFERENCE
    assert error.employee_id == "3"
    assert "'99'" in error.message


def test_two_node_cycle():
    records = [
        make_record("root"),
        make_record("A", manager_id="B"),
        make_record("B", manager_id="A"),
    ]

    error = validate_structure(records)

    assert error.kind is ViolationKind.CIRCULAR_REFERENCE
    assert error.employee_id in {"A", "B"}


def test_self_reference_is_a_cycle():
    records = [make_record("root"), make_record("A", manager_id="A")]

    assert validate_structure(records).kind is ViolationKind.CIRCULAR_REFERENCE


def test_cycle_hanging_below_valid_branch():
    records = [
        make_record("root"),
        make_record("A", manager_id="root"),
        make_record("B", manager_id="D"),
        make_record("C", manager_id="B"),
        make_record("D", manager_id="C"),
        make_record("E", manager_id="D"),
    ]

    assert validate_structure(records).kind is ViolationKind.CIRCULAR_REFERENCE


def test_deep_chain_is_valid():
    records = [make_record("0")] + [make_record(str(i), manager_id=str(i - 1)) for i in range(1, 5000)]

    assert validate_structure(records) is None
