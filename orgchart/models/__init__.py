"""Value types shared across the org chart packages."""

from .employee import Employee

__all__ = ["Employee"]
