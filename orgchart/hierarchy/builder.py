from __future__ import annotations

import logging
from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional

from orgchart.errors import DuplicateEmployeeIdError, RootCardinalityError
from orgchart.hierarchy.tree import Hierarchy, HierarchyNode
from orgchart.models.employee import Employee

_LOGGER = logging.getLogger(__name__)


class HierarchyBuilder:
    """Reconstruct the management tree implied by a flat list of employees.

    Exactly one employee may be their own manager; that employee becomes the
    chief. Everyone else is attached beneath the employee named by their
    ``manager_id``, in the order the records were supplied. Records whose
    manager never gets placed are dropped from the tree and logged.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or _LOGGER

    def build(self, employees: Optional[Iterable[Employee]]) -> Hierarchy:
        records = list(employees or ())
        if not records:
            self.logger.info("No employees supplied; returning empty organisation")
            return Hierarchy.empty()

        self._check_unique_ids(records)
        chief = self._find_chief(records)

        reports_by_manager: Dict[int, List[Employee]] = defaultdict(list)
        for record in records:
            if not record.is_chief:
                reports_by_manager[record.manager_id].append(record)

        placed: List[Employee] = [chief]
        depths: List[int] = [0]
        children: List[List[int]] = [[]]
        pending = [0]
        while pending:
            position = pending.pop()
            manager = placed[position]
            for report in reports_by_manager.get(manager.id, ()):
                self.logger.debug(
                    "Employee %s reports to %s",
                    report,
                    manager,
                )
                placed.append(report)
                depths.append(depths[position] + 1)
                children.append([])
                children[position].append(len(placed) - 1)
                pending.append(len(placed) - 1)

        nodes = [
            HierarchyNode(employee=employee, reports=tuple(reports), depth=depth)
            for employee, reports, depth in zip(placed, children, depths)
        ]

        dropped = len(records) - len(nodes)
        if dropped:
            placed_ids = {node.employee.id for node in nodes}
            for record in records:
                if record.id not in placed_ids:
                    self.logger.warning(
                        "Dropping %s: manager %d is not part of the organisation",
                        record,
                        record.manager_id,
                    )

        self.logger.info("Built hierarchy of %d employees under %s", len(nodes), chief)
        return Hierarchy(nodes)

    def _check_unique_ids(self, records: List[Employee]) -> None:
        counts = Counter(record.id for record in records)
        duplicates = sorted(employee_id for employee_id, count in counts.items() if count > 1)
        if duplicates:
            raise DuplicateEmployeeIdError(duplicates)

    def _find_chief(self, records: List[Employee]) -> Employee:
        chiefs = [record for record in records if record.is_chief]
        if len(chiefs) != 1:
            raise RootCardinalityError(chiefs)
        return chiefs[0]


def build_hierarchy(employees: Optional[Iterable[Employee]], logger: logging.Logger | None = None) -> Hierarchy:
    """Build a :class:`Hierarchy` from employee records."""

    return HierarchyBuilder(logger).build(employees)


__all__ = ["HierarchyBuilder", "build_hierarchy"]
