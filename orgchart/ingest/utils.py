from __future__ import annotations

import re


_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Collapse whitespace runs, strip and lowercase a name for comparison."""

    return _WHITESPACE_PATTERN.sub(" ", name).strip().lower()


__all__ = ["normalize_name"]
