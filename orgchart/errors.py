from __future__ import annotations

from typing import Iterable, Tuple

from orgchart.models.employee import Employee


class OrgChartError(Exception):
    """Base class for every error raised by the org chart packages."""


class InputFormatError(OrgChartError, ValueError):
    """The org chart text does not follow the pipe-delimited table format."""


class MalformedHeaderError(InputFormatError):
    def __init__(self, header: str | None) -> None:
        self.header = header
        if header is None:
            message = "Malformed input file: no header"
        else:
            message = f"Malformed input file: header format incorrect: {header!r}"
        super().__init__(message)


class MalformedLineError(InputFormatError):
    def __init__(self, line: str, reason: str = "line does not match the record format", line_number: int | None = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"Malformed {location}{reason}: {line!r}")


class HierarchyValidationError(OrgChartError, ValueError):
    """The records cannot form a single-rooted hierarchy."""


class RootCardinalityError(HierarchyValidationError):
    """Zero or several employees report to themselves."""

    def __init__(self, candidates: Iterable[Employee]) -> None:
        self.candidates: Tuple[Employee, ...] = tuple(candidates)
        if not self.candidates:
            message = "No chief found; exactly one employee must be their own manager"
        else:
            listed = ", ".join(str(candidate) for candidate in self.candidates)
            message = (
                "Multiple chiefs; only one employee may be answerable to no one. "
                f"Employees {listed} are all chiefs"
            )
        super().__init__(message)


class DuplicateEmployeeIdError(HierarchyValidationError):
    def __init__(self, duplicate_ids: Iterable[int]) -> None:
        self.duplicate_ids: Tuple[int, ...] = tuple(duplicate_ids)
        listed = ", ".join(str(employee_id) for employee_id in self.duplicate_ids)
        super().__init__(f"Employee ids must be unique; duplicated ids: {listed}")


class EmployeeNotFoundError(OrgChartError, LookupError):
    """An employee (or a name) could not be found in the organisation."""

    def __init__(self, employee: Employee | None = None, name: str | None = None) -> None:
        self.employee = employee
        self.name = name
        if employee is not None:
            message = f"Employee {employee} not found in hierarchy"
        else:
            message = f"No employee named {name!r} found"
        super().__init__(message)


__all__ = [
    "OrgChartError",
    "InputFormatError",
    "MalformedHeaderError",
    "MalformedLineError",
    "HierarchyValidationError",
    "RootCardinalityError",
    "DuplicateEmployeeIdError",
    "EmployeeNotFoundError",
]
