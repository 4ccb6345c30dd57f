"""Structural validation: the records must form a single-rooted tree.

Checks run in a fixed order and stop at the first violation:

1. the record set is not empty
2. every id is unique
3. exactly one record has no manager (the root)
4. every manager reference resolves to an existing id
5. following manager references from any record reaches the root
   without repeating an id
"""

import logging
from collections import Counter
from collections.abc import Sequence

from orgchart.hr.models import EmployeeRecord
from orgchart.utils.types import AnalysisError, EmployeeID, ViolationKind

logger = logging.getLogger(__name__)


def _check_not_empty(records: Sequence[EmployeeRecord]) -> AnalysisError | None:
    if not records:
        return AnalysisError(ViolationKind.EMPTY_INPUT, "No employee records to analyze")
    return None


def _check_unique_ids(records: Sequence[EmployeeRecord]) -> AnalysisError | None:
    counts = Counter(r.id for r in records)
    for record in records:
        if counts[record.id] > 1:
            return AnalysisError(
                ViolationKind.DUPLICATE_ID,
                f"Employee id {record.id!r} appears {counts[record.id]} times",
                employee_id=record.id,
            )
    return None


def _check_single_root(records: Sequence[EmployeeRecord]) -> AnalysisError | None:
    roots = [r.id for r in records if r.is_root]
    match roots:
        case [_]:
            return None
        case []:
            return AnalysisError(
                ViolationKind.NO_ROOT,
                "No employee without a manager; the organisation has no root",
            )
        case [first, *_]:
            return AnalysisError(
                ViolationKind.MULTIPLE_ROOTS,
                f"Found {len(roots)} employees without a manager (expected 1): {', '.join(roots)}",
                employee_id=first,
            )


def _check_manager_references(records: Sequence[EmployeeRecord]) -> AnalysisError | None:
    known_ids = {r.id for r in records}
    for record in records:
        if not record.is_root and record.manager_id not in known_ids:
            return AnalysisError(
                ViolationKind.ORPHAN_REFERENCE,
                f"Employee {record.id!r} references unknown manager {record.manager_id!r}",
                employee_id=record.id,
            )
    return None


def _check_acyclic(records: Sequence[EmployeeRecord]) -> AnalysisError | None:
    manager_of: dict[EmployeeID, EmployeeID | None] = {r.id: r.manager_id for r in records}
    limit = len(records)
    # ids whose manager chain is already known to end at the root
    reaches_root: set[EmployeeID] = set()

    for record in records:
        chain: list[EmployeeID] = []
        on_chain: set[EmployeeID] = set()
        current: EmployeeID | None = record.id

        while current is not None and current not in reaches_root:
            if current in on_chain or len(chain) > limit:
                logger.debug("Manager chain from %s: %s", record.id, " -> ".join(chain))
                return AnalysisError(
                    ViolationKind.CIRCULAR_REFERENCE,
                    f"Circular manager reference involving employee {current!r} "
                    f"(reached from {record.id!r})",
                    employee_id=current,
                )
            chain.append(current)
            on_chain.add(current)
            current = manager_of[current] or None

        reaches_root.update(chain)
    return None


_CHECKS = (
    _check_not_empty,
    _check_unique_ids,
    _check_single_root,
    _check_manager_references,
    _check_acyclic,
)


def validate_structure(records: Sequence[EmployeeRecord]) -> AnalysisError | None:
    """Return the first structural violation, or ``None`` when the records form a tree."""
    for check in _CHECKS:
        if (error := check(records)) is not None:
            logger.error("Structural validation failed: %s", error)
            return error
    logger.debug("Structural validation passed for %d records", len(records))
    return None
