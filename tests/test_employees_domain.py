from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote empresa seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from empresa.domain.employees import (  # noqa: E402
    Employee,
    InvalidEmployeeError,
    new_employee,
    next_id,
    parse_employee_id,
)


def test_next_id_empty_is_one():
    assert next_id([]) == 1


def test_next_id_is_max_plus_one():
    records = [Employee("A", "P", id=7), Employee("B", "P", id=2), Employee("C", "P", id=4)]
    assert next_id(records) == 8


def test_new_employee_requires_name_and_position():
    with pytest.raises(InvalidEmployeeError):
        new_employee("  ", "Manager")
    with pytest.raises(InvalidEmployeeError):
        new_employee("Jane", None)


def test_new_employee_has_no_id_and_keeps_extras():
    employee = new_employee(" Jane Doe ", "Manager", email="jane@example.com")
    assert employee.id is None
    assert employee.name == "Jane Doe"
    assert employee.to_dict() == {"id": None, "name": "Jane Doe", "position": "Manager", "email": "jane@example.com"}


def test_from_dict_splits_extras():
    employee = Employee.from_dict({"position": "Dev", "id": 3, "name": "Ana", "team": "core"})
    assert employee == Employee(name="Ana", position="Dev", id=3, extra={"team": "core"})
    assert list(employee.to_dict()) == ["id", "name", "position", "team"]


@pytest.mark.parametrize("raw", [{"id": True, "name": "A", "position": "B"}, {"id": 1.5, "name": "A", "position": "B"}])
def test_from_dict_rejects_non_integer_ids(raw):
    with pytest.raises(InvalidEmployeeError):
        Employee.from_dict(raw)


def test_parse_employee_id():
    assert parse_employee_id(3) == 3
    assert parse_employee_id(" 12 ") == 12
    for bad in ("x", "", "1.0", "1_0", "\u0661", "\uff12", None, True):
        with pytest.raises(InvalidEmployeeError):
            parse_employee_id(bad)
