"""Readers that turn org chart files into employee records."""

from .base import RecordParser, RecordParserConfig
from .table import PipeTableParser, PipeTableParserConfig, parse_org_chart
from .utils import normalize_name

__all__ = [
    "RecordParser",
    "RecordParserConfig",
    "PipeTableParser",
    "PipeTableParserConfig",
    "parse_org_chart",
    "normalize_name",
]
