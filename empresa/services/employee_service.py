"""Employee use cases (hire, dismiss, lookup, export)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from empresa.core.config import Settings, get_settings
from empresa.domain.employees import Employee, new_employee
from empresa.repositories.json_storage import RecordStore
from empresa.services.export_service import ExportFormatter

logger = logging.getLogger(__name__)


class EmployeeError(Exception):
    """Base exception for employee workflows."""


class EmployeeNotFoundError(EmployeeError):
    """Raised when looking up an id that is not in the store."""


class EmployeeService:
    """Orchestrates RecordStore and ExportFormatter for routers and scripts."""

    def __init__(
        self,
        store: RecordStore | None = None,
        *,
        settings: Settings | None = None,
        formatter: ExportFormatter | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.store = store or RecordStore.at(self.settings.store_path, atomic=self.settings.atomic_writes)
        self.formatter = formatter or ExportFormatter()

    def list_employees(self) -> list[Employee]:
        return self.store.load()

    def get_employee(self, employee_id: int | str) -> Employee:
        employee = self.store.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee {employee_id} not found")
        return employee

    def hire(
        self,
        name: str | None,
        position: str | None,
        extra: Mapping[str, Any] | None = None,
        *,
        id_override: int | str | None = None,
    ) -> Employee:
        employee = new_employee(name, position)
        employee.extra.update(extra or {})
        stored = self.store.add(employee, id_override=id_override)
        logger.info("Added employee %s (%s)", stored.id, stored.position)
        return stored

    def dismiss(self, employee_id: int | str) -> int:
        removed = self.store.remove(employee_id)
        if removed:
            logger.info("Removed employee %s", employee_id)
        else:
            logger.info("No employee with id %s; store rewritten unchanged", employee_id)
        return removed

    def render_export(self) -> str:
        return self.formatter.render(self.store.load())

    def export(self, target: Optional[str] = None) -> Path:
        return self.formatter.export(self.store, target, settings=self.settings)
