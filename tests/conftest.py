from __future__ import annotations

from pathlib import Path

import pytest

from orgchart.hierarchy import Hierarchy, build_hierarchy
from orgchart.ingest import parse_org_chart
from orgchart.models.employee import Employee


KOOPAS = """\
| Employee ID | Name             | Manager ID |
| 0           | Bowser           |            |
| 1           | Bowser Jr        | 0          |
| -1          | Kamek            | 0          |
| -2          | Kammy            | -1         |
| 3           | Roy              | 0          |
| 7           | Morton           | 0          |
| 10          | Boom-Boom        | 7          |
| 11          | Pom-Pom          | 7          |
| 700         | Chargin Chuck    | 10         |
| 200         | Hammer Bro       | 10         |
| 201         | Hammer Bro       | 10         |
| 100         | Koopa Troopa     | 3          |
| 171         | Koopa Troopa     | 3          |
| 180         | Koopa Paratroopa | 3          |
"""


@pytest.fixture
def koopas_text() -> str:
    return KOOPAS


@pytest.fixture
def koopas_file(tmp_path: Path) -> Path:
    path = tmp_path / "koopas.txt"
    path.write_text(KOOPAS, encoding="utf-8")
    return path


@pytest.fixture
def koopas() -> list[Employee]:
    return parse_org_chart(KOOPAS)


@pytest.fixture
def koopa_hierarchy(koopas: list[Employee]) -> Hierarchy:
    return build_hierarchy(koopas)


@pytest.fixture
def by_id(koopas: list[Employee]) -> dict[int, Employee]:
    return {employee.id: employee for employee in koopas}
