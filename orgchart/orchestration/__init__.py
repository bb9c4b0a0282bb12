"""Glue between files, configuration and the hierarchy queries."""

from .config_loader import load_settings
from .query import OrgChartQuery, QueryOutcome

__all__ = ["OrgChartQuery", "QueryOutcome", "load_settings"]
