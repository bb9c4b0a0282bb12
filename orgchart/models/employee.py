from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class Employee:
    """One row of an org chart file."""

    id: int
    name: str
    manager_id: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError(f"Employee {self.id} must have a non-empty name")

    @property
    def is_chief(self) -> bool:
        """A chief is the employee who reports to themselves."""

        return self.id == self.manager_id

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "manager_id": self.manager_id}

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


__all__ = ["Employee"]
