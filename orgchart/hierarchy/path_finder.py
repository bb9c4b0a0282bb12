from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from orgchart.errors import EmployeeNotFoundError
from orgchart.hierarchy.tree import Hierarchy
from orgchart.models.employee import Employee

_LOGGER = logging.getLogger(__name__)

UP_ARROW = "->"
DOWN_ARROW = "<-"


@dataclass(frozen=True, slots=True)
class PathResult:
    """Shortest reporting path between two employees.

    ``ascent`` runs from the first employee up to, but excluding, their
    lowest common manager; ``descent`` runs from just below that manager down
    to the second employee.
    """

    ascent: Tuple[Employee, ...]
    manager: Employee
    descent: Tuple[Employee, ...]

    @property
    def path(self) -> Tuple[Employee, ...]:
        return self.ascent + (self.manager,) + self.descent

    @property
    def source(self) -> Employee:
        return self.ascent[0] if self.ascent else self.manager

    @property
    def target(self) -> Employee:
        return self.descent[-1] if self.descent else self.manager

    def __len__(self) -> int:
        return len(self.ascent) + 1 + len(self.descent)

    def render(self, up: str = UP_ARROW, down: str = DOWN_ARROW) -> str:
        parts: List[str] = [f"{employee} {up} " for employee in self.ascent]
        parts.append(str(self.manager))
        parts.extend(f" {down} {employee}" for employee in self.descent)
        return "".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.source.to_dict(),
            "to": self.target.to_dict(),
            "common_manager": self.manager.to_dict(),
            "path": [employee.to_dict() for employee in self.path],
            "rendered": self.render(),
        }

    def __str__(self) -> str:
        return self.render()


class PathFinder:
    """Find the path between two employees through their lowest common manager.

    A PathFinder answers exactly one question. The first call to
    :meth:`find_shortest_path` computes and caches the result; any later call
    returns that cached result and ignores its arguments. Create a new
    instance for each pair of employees.
    """

    def __init__(self, hierarchy: Hierarchy, logger: logging.Logger | None = None) -> None:
        self.hierarchy = hierarchy
        self.logger = logger or _LOGGER
        self._result: Optional[PathResult] = None

    @property
    def result(self) -> Optional[PathResult]:
        return self._result

    @property
    def common_manager(self) -> Optional[Employee]:
        return self._result.manager if self._result else None

    def find_shortest_path(self, first: Employee, second: Employee) -> PathResult:
        if self._result is not None:
            self.logger.debug(
                "Returning cached path %s; ignoring request for %s and %s",
                self._result,
                first,
                second,
            )
            return self._result

        first_path = self.path_from_chief(first)
        self.logger.info("Path from chief to %s: %s", first, [str(e) for e in first_path])
        second_path = self.path_from_chief(second)
        self.logger.info("Path from chief to %s: %s", second, [str(e) for e in second_path])

        shared = 0
        for mine, theirs in zip(first_path, second_path):
            if mine != theirs:
                break
            shared += 1

        manager = first_path[shared - 1]
        ascent = tuple(reversed(first_path[shared:]))
        descent = tuple(second_path[shared:])
        self._result = PathResult(ascent=ascent, manager=manager, descent=descent)
        self.logger.info("Lowest common manager of %s and %s is %s", first, second, manager)
        return self._result

    def path_from_chief(self, employee: Employee) -> List[Employee]:
        """Depth-first search from the chief down to ``employee``.

        The search keeps its own stack of (node, next report) pairs, so the
        stack itself is the path when the target is reached.
        """

        if self.hierarchy.position_of(employee) is None:
            raise EmployeeNotFoundError(employee)

        stack: List[List[int]] = [[0, 0]]
        while stack:
            frame = stack[-1]
            node = self.hierarchy.node(frame[0])
            if frame[1] == 0 and node.employee == employee:
                return [self.hierarchy.node(position).employee for position, _ in stack]
            if frame[1] < len(node.reports):
                child = node.reports[frame[1]]
                frame[1] += 1
                stack.append([child, 0])
            else:
                stack.pop()

        # position_of found it, so the search cannot fall through
        raise EmployeeNotFoundError(employee)

    def __str__(self) -> str:
        return self._result.render() if self._result else ""


def find_shortest_path(
    hierarchy: Hierarchy,
    first: Employee,
    second: Employee,
    logger: logging.Logger | None = None,
) -> PathResult:
    return PathFinder(hierarchy, logger).find_shortest_path(first, second)


__all__ = ["PathFinder", "PathResult", "find_shortest_path", "UP_ARROW", "DOWN_ARROW"]
