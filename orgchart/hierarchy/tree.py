from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from orgchart.models.employee import Employee


EMPTY_ORGANISATION = "Empty organisation"


@dataclass(frozen=True, slots=True)
class HierarchyNode:
    """An employee placed in the organisation, with direct reports by arena index."""

    employee: Employee
    reports: Tuple[int, ...] = ()
    depth: int = 0

    @property
    def is_leaf(self) -> bool:
        return not self.reports


class Hierarchy:
    """Single-rooted n-ary tree of employees.

    Nodes are stored in an arena (a plain list) and refer to their direct
    reports by index; the chief always sits at index 0. A hierarchy without
    nodes is the empty organisation, which is a valid state distinct from a
    one-person company. Instances are read-only once built; use
    :func:`orgchart.hierarchy.builder.build_hierarchy` to create them.
    """

    __slots__ = ("_nodes", "_index")

    def __init__(self, nodes: Sequence[HierarchyNode] = ()) -> None:
        self._nodes: List[HierarchyNode] = list(nodes)
        self._index: Dict[int, int] = {node.employee.id: position for position, node in enumerate(self._nodes)}

    @classmethod
    def empty(cls) -> "Hierarchy":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self._nodes

    @property
    def chief(self) -> Optional[Employee]:
        """The employee at the root, or ``None`` for the empty organisation."""

        return self._nodes[0].employee if self._nodes else None

    def node(self, position: int) -> HierarchyNode:
        return self._nodes[position]

    def position_of(self, employee: Employee) -> Optional[int]:
        """Arena index of ``employee``, matched on the whole record, or ``None``."""

        position = self._index.get(employee.id)
        if position is None or self._nodes[position].employee != employee:
            return None
        return position

    def get(self, employee_id: int) -> Optional[Employee]:
        position = self._index.get(employee_id)
        return None if position is None else self._nodes[position].employee

    def reports_of(self, employee: Employee) -> List[Employee]:
        position = self.position_of(employee)
        if position is None:
            return []
        return [self._nodes[child].employee for child in self._nodes[position].reports]

    def is_direct_report(self, manager: Employee, employee: Employee) -> bool:
        return employee in self.reports_of(manager)

    def depth_of(self, employee: Employee) -> Optional[int]:
        position = self.position_of(employee)
        return None if position is None else self._nodes[position].depth

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, employee: object) -> bool:
        return isinstance(employee, Employee) and self.position_of(employee) is not None

    def __iter__(self) -> Iterator[Employee]:
        """Pre-order traversal, reports visited in the order they were attached."""

        for position in self._preorder():
            yield self._nodes[position].employee

    def _preorder(self) -> Iterator[int]:
        if not self._nodes:
            return
        stack = [0]
        while stack:
            position = stack.pop()
            yield position
            stack.extend(reversed(self._nodes[position].reports))

    def render(self, indent: str = "\t") -> str:
        """Render one employee per line, indented by management depth."""

        if not self._nodes:
            return EMPTY_ORGANISATION
        lines = [f"{indent * self._nodes[position].depth}{self._nodes[position].employee}" for position in self._preorder()]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Hierarchy(chief={self.chief!r}, size={len(self)})"


__all__ = ["Hierarchy", "HierarchyNode", "EMPTY_ORGANISATION"]
