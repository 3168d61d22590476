"""YAML export of the current record set (one-way, no import)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from empresa.core.config import Settings, get_settings
from empresa.domain.employees import Employee
from empresa.repositories.json_storage import FileBackend, RecordStore

logger = logging.getLogger(__name__)


def resolve_export_path(settings: Settings, store_path: str | os.PathLike | None = None) -> Path:
    """
    The export goes to the fixed `export_path` whatever store was read.
    With `export_mirror_store` enabled it follows the store name instead
    (staff.json -> staff.yaml).
    """
    if settings.export_mirror_store and store_path:
        return Path(store_path).with_suffix(".yaml")
    return Path(settings.export_path)


class ExportFormatter:
    """Renders employee records as block-style YAML, a single document holding the list."""

    def render(self, records: Iterable[Employee | Mapping[str, Any]]) -> str:
        documents = [
            record.to_dict() if isinstance(record, Employee) else dict(record)
            for record in records
        ]
        return yaml.safe_dump(
            documents,
            explicit_start=True,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def export(
        self,
        store: RecordStore,
        target: str | os.PathLike | None = None,
        settings: Settings | None = None,
    ) -> Path:
        settings = settings or get_settings()
        destination = Path(target) if target else resolve_export_path(settings, store.path)
        records = store.load()
        text = self.render(records)
        FileBackend(destination, atomic=settings.atomic_writes).write(text.encode("utf-8"))
        logger.info("Exported %d employee(s) to %s", len(records), destination)
        return destination
