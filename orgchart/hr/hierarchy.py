"""Org hierarchy resolution: link records into a tree and assign reporting levels."""

import logging
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from orgchart.hr.models import Employee, EmployeeRecord
from orgchart.utils.types import AnalysisError, EmployeeID, ViolationKind

logger = logging.getLogger(__name__)

type UnresolvedReference = tuple[EmployeeID, EmployeeID]


@dataclass
class Hierarchy:
    """The built tree plus the id lookup used to build it.

    ``employees`` is filled completely before any link is made and is only
    read afterwards.
    """

    root: Employee
    employees: dict[EmployeeID, Employee]
    unresolved: list[UnresolvedReference] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.employees)

    def get(self, employee_id: EmployeeID) -> Employee | None:
        return self.employees.get(employee_id)


def build_hierarchy(records: Sequence[EmployeeRecord]) -> Hierarchy | AnalysisError:
    """Attach every record to its manager's ``direct_subordinates`` in input order.

    Expects validated records. On unvalidated input a manager id that resolves to
    nothing is skipped with a warning and reported on ``Hierarchy.unresolved``.
    Only a missing root is returned as an error, since there is nothing to anchor
    the tree to.
    """
    logger.debug("Building organizational hierarchy for %d employees", len(records))

    employees: dict[EmployeeID, Employee] = {}
    nodes: list[Employee] = []
    for record in records:
        node = Employee.from_record(record)
        nodes.append(node)
        employees.setdefault(node.id, node)

    root = next((node for node in nodes if node.is_root), None)
    if root is None:
        logger.error("No root employee found while building the hierarchy")
        return AnalysisError(ViolationKind.NO_ROOT, "Cannot build a hierarchy without a root employee")

    unresolved: list[UnresolvedReference] = []
    for node in nodes:
        if node.is_root:
            continue
        manager = employees.get(node.manager_id)
        if manager is None:
            logger.warning(
                "Manager not found for employee %s (%s); manager id %s skipped",
                node.id, node.full_name, node.manager_id,
            )
            unresolved.append((node.id, node.manager_id))
            continue
        manager.direct_subordinates.append(node)

    logger.debug("Hierarchy built; root is %s (%s)", root.id, root.full_name)
    return Hierarchy(root=root, employees=employees, unresolved=unresolved)


def walk_hierarchy(root: Employee) -> Iterator[Employee]:
    """Yield every node breadth-first, siblings in input order.

    Uses an explicit queue, so depth is bounded by memory rather than the
    interpreter's recursion limit. Each node is yielded at most once.
    """
    seen: set[int] = {id(root)}
    queue: deque[Employee] = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        for child in node.direct_subordinates:
            if id(child) in seen:
                continue
            seen.add(id(child))
            queue.append(child)


def assign_reporting_levels(root: Employee) -> int:
    """Set ``reporting_level`` to the distance from ``root`` for every node.

    Returns the number of nodes visited.
    """
    root.reporting_level = 0
    visited = 0
    for node in walk_hierarchy(root):
        visited += 1
        for child in node.direct_subordinates:
            child.reporting_level = node.reporting_level + 1

    logger.debug("Assigned reporting levels to %d employees", visited)
    return visited
