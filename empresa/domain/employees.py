"""Domain helpers for employee records and id assignment."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

REQUIRED_FIELDS = ("name", "position")
_FIXED_FIELDS = ("id",) + REQUIRED_FIELDS
_ID_PATTERN = re.compile(r"-?[0-9]+")


class InvalidEmployeeError(ValueError):
    """Raised when a record lacks a required field or carries a bad id."""


@dataclass
class Employee:
    name: str
    position: str
    id: Optional[int] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        if not isinstance(data, Mapping):
            raise InvalidEmployeeError(f"Expected an object, got {type(data).__name__}")
        missing = [key for key in REQUIRED_FIELDS if data.get(key) is None]
        if missing:
            raise InvalidEmployeeError(f"Missing required field(s): {', '.join(missing)}")
        raw_id = data.get("id")
        if raw_id is not None and not _is_int(raw_id):
            raise InvalidEmployeeError(f"Employee id must be an integer, got {raw_id!r}")
        extra = {key: value for key, value in data.items() if key not in _FIXED_FIELDS}
        return cls(name=data["name"], position=data["position"], id=raw_id, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        # extras never shadow the fixed keys
        payload: dict[str, Any] = {"id": self.id, "name": self.name, "position": self.position}
        for key, value in self.extra.items():
            if key not in _FIXED_FIELDS:
                payload[key] = value
        return payload

    def with_id(self, new_id: int) -> "Employee":
        return Employee(name=self.name, position=self.position, id=new_id, extra=dict(self.extra))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def new_employee(name: str | None, position: str | None, **extra: Any) -> Employee:
    """Build an unsaved employee; the store assigns the id on add."""
    name_value = (name or "").strip()
    position_value = (position or "").strip()
    if not name_value:
        raise InvalidEmployeeError("Employee name is required")
    if not position_value:
        raise InvalidEmployeeError("Employee position is required")
    return Employee(name=name_value, position=position_value, extra=dict(extra))


def next_id(records: Iterable[Employee]) -> int:
    """Return max(existing ids) + 1, or 1 for an empty collection."""
    return max((record.id for record in records if record.id is not None), default=0) + 1


def parse_employee_id(value: int | str) -> int:
    """Accept an int or a numeric string such as "2"."""
    if _is_int(value):
        return value
    if isinstance(value, str) and _ID_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    raise InvalidEmployeeError(f"Invalid employee id: {value!r}")
