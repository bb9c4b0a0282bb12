from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from orgchart.models.employee import Employee


@dataclass(slots=True)
class RecordParserConfig:
    """Configuration for reading org chart files into employee records."""

    encoding: str = "utf-8"
    skip_malformed: bool = False


class RecordParser(ABC):
    """Abstract base class for turning org chart documents into employee records."""

    def __init__(self, config: RecordParserConfig | None = None) -> None:
        self.config = config or RecordParserConfig()

    @abstractmethod
    def parse_lines(self, lines: Iterable[str]) -> List[Employee]:
        """Parse the lines of a single document, header included."""

    def parse_text(self, text: str) -> List[Employee]:
        return self.parse_lines(text.splitlines())

    def parse(self, document_path: Path) -> List[Employee]:
        """Read and parse a document from disk."""

        if not document_path.exists():
            raise FileNotFoundError(f"Org chart file not found: {document_path}")
        text = document_path.read_text(encoding=self.config.encoding)
        return self.parse_text(text)

    def parse_many(self, paths: Iterable[Path]) -> Iterable[List[Employee]]:
        """Utility for parsing multiple documents."""

        for path in paths:
            yield self.parse(path)


__all__ = ["RecordParser", "RecordParserConfig"]
