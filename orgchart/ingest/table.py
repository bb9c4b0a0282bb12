from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from orgchart.errors import MalformedHeaderError, MalformedLineError
from orgchart.ingest.base import RecordParser, RecordParserConfig
from orgchart.models.employee import Employee

logger = logging.getLogger(__name__)


_HEADER_PATTERN = re.compile(
    r"^\s*\|\s*Employee\s+ID\s*\|\s*Name\s*\|\s*Manager\s+ID\s*\|\s*$",
    re.IGNORECASE,
)
_ENTRY_PATTERN = re.compile(
    r"^\s*\|\s*(?P<id>-?\d+)\s*\|(?P<name>[\w'\-\s]+)\|\s*(?P<manager>-?\d+)?\s*\|\s*$"
)


@dataclass(slots=True)
class PipeTableParserConfig(RecordParserConfig):
    """Configuration for pipe-delimited org chart tables."""

    require_header: bool = True


class PipeTableParser(RecordParser):
    """Parse ``| Employee ID | Name | Manager ID |`` tables into employees."""

    config: PipeTableParserConfig

    def __init__(self, config: PipeTableParserConfig | None = None) -> None:
        super().__init__(config or PipeTableParserConfig())
        assert isinstance(self.config, PipeTableParserConfig)

    def parse_line(self, line: str, line_number: int | None = None) -> Employee:
        """Parse one record line.

        A blank manager field makes the employee their own manager, i.e. the
        chief of the organisation.
        """

        match = _ENTRY_PATTERN.match(line)
        if not match:
            raise MalformedLineError(line, line_number=line_number)

        name = match.group("name").strip()
        if not name:
            raise MalformedLineError(line, "name cannot be blank", line_number)
        if "_" in name:
            raise MalformedLineError(line, "name contains invalid characters", line_number)

        employee_id = int(match.group("id"))
        manager = match.group("manager")
        manager_id = int(manager) if manager else employee_id

        logger.debug("From line %r read id: %d, name: %s, manager: %d", line, employee_id, name, manager_id)
        return Employee(id=employee_id, name=name, manager_id=manager_id)

    def parse_lines(self, lines: Iterable[str]) -> List[Employee]:
        numbered = self._non_blank(lines)
        if self.config.require_header:
            self._consume_header(numbered)

        employees: List[Employee] = []
        for line_number, line in numbered:
            try:
                employees.append(self.parse_line(line, line_number))
            except MalformedLineError as exc:
                if not self.config.skip_malformed:
                    raise
                logger.warning("Skipping %s", exc)

        logger.info("Parsed %d records", len(employees))
        return employees

    @staticmethod
    def _non_blank(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
        for line_number, line in enumerate(lines, start=1):
            if line.strip():
                yield line_number, line.strip()

    @staticmethod
    def _consume_header(numbered: Iterator[Tuple[int, str]]) -> None:
        first = next(numbered, None)
        if first is None:
            raise MalformedHeaderError(None)
        _, header = first
        if not _HEADER_PATTERN.match(header):
            logger.info("Parsed invalid header %r", header)
            raise MalformedHeaderError(header)
        logger.debug("Parsed valid header %r", header)


def parse_org_chart(text: str, config: PipeTableParserConfig | None = None) -> List[Employee]:
    """Convenience wrapper around :class:`PipeTableParser` for in-memory text."""

    return PipeTableParser(config).parse_text(text)


__all__ = ["PipeTableParser", "PipeTableParserConfig", "parse_org_chart"]
