from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from orgchart.errors import EmployeeNotFoundError
from orgchart.hierarchy import Hierarchy, PathFinder, PathResult, build_hierarchy
from orgchart.ingest import PipeTableParser, PipeTableParserConfig, RecordParser, normalize_name
from orgchart.models.employee import Employee
from orgchart.settings import Settings, get_settings

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryOutcome:
    """The path found for one combination of matching employees."""

    first: Employee
    second: Employee
    result: PathResult

    def to_dict(self) -> Dict[str, Any]:
        return self.result.to_dict()


class OrgChartQuery:
    """Answer reporting-path questions about one organisation by employee name."""

    def __init__(
        self,
        employees: Sequence[Employee],
        hierarchy: Hierarchy | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or _LOGGER
        self.employees = list(employees)
        self.hierarchy = hierarchy if hierarchy is not None else build_hierarchy(self.employees, self.logger)

    @classmethod
    def from_path(
        cls,
        path: Path,
        settings: Settings | None = None,
        *,
        parser: RecordParser | None = None,
        logger: logging.Logger | None = None,
    ) -> "OrgChartQuery":
        if parser is None:
            settings = settings or get_settings()
            parser = PipeTableParser(
                PipeTableParserConfig(encoding=settings.encoding, skip_malformed=settings.skip_malformed)
            )
        (logger or _LOGGER).info("Reading file %s", path)
        return cls(parser.parse(path), logger=logger)

    def resolve(self, name: str) -> List[Employee]:
        """Every employee whose normalised name equals ``name``, in file order."""

        wanted = normalize_name(name)
        matches = [employee for employee in self.employees if normalize_name(employee.name) == wanted]
        if not matches:
            raise EmployeeNotFoundError(name=name)
        return matches

    def shortest_paths(self, first_name: str, second_name: str) -> List[QueryOutcome]:
        """One path per combination of employees matching the two names."""

        firsts = self.resolve(first_name)
        seconds = self.resolve(second_name)
        self.logger.info(
            "Finding shortest path between %r (%d matches) and %r (%d matches)",
            normalize_name(first_name),
            len(firsts),
            normalize_name(second_name),
            len(seconds),
        )
        return list(self._combinations(firsts, seconds))

    def _combinations(self, firsts: Iterable[Employee], seconds: Sequence[Employee]) -> Iterable[QueryOutcome]:
        for first in firsts:
            for second in seconds:
                self.logger.info("Searching for path between %s and %s", first, second)
                # PathFinder instances answer a single question each
                finder = PathFinder(self.hierarchy, self.logger)
                yield QueryOutcome(first=first, second=second, result=finder.find_shortest_path(first, second))


__all__ = ["OrgChartQuery", "QueryOutcome"]
