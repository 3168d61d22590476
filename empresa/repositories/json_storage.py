"""
JSON-based persistence adapter for employee records.

Every operation reloads the whole file, mutates the list in memory and writes
it back; nothing is kept resident between calls. Filesystem access goes
through a backend object so tests can run against MemoryBackend.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, Optional

from empresa.core.config import get_settings
from empresa.domain.employees import (
    Employee,
    InvalidEmployeeError,
    next_id,
    parse_employee_id,
)

from .codec import decode, encode
from .errors import DecodeError, DuplicateIdError, StoreError, WriteError

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class FileBackend:
    """Reads and writes the store file on disk."""

    def __init__(self, path: str | os.PathLike, *, atomic: bool = True) -> None:
        self.path = Path(path)
        self.atomic = atomic

    def read(self) -> Optional[bytes]:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreError(f"Could not read {self.path}: {exc}", exc) from exc

    def write(self, data: bytes) -> None:
        try:
            if self.atomic:
                self._replace(data)
            else:
                self.path.write_bytes(data)
        except OSError as exc:
            raise WriteError(f"Could not write {self.path}: {exc}", exc) from exc

    def _replace(self, data: bytes) -> None:
        directory = self.path.parent
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            # mkstemp creates 0600; keep the mode of the file being replaced
            if self.path.exists():
                mode = stat.S_IMODE(os.stat(self.path).st_mode)
            else:
                mode = 0o666 & ~_current_umask()
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except OSError:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise


class MemoryBackend:
    """In-memory stand-in for FileBackend; `data` is None until written."""

    path = None

    def __init__(self, initial: Optional[bytes] = None) -> None:
        self.data = initial
        self.writes = 0

    def read(self) -> Optional[bytes]:
        return self.data

    def write(self, data: bytes) -> None:
        self.data = bytes(data)
        self.writes += 1


class RecordStore:
    """Sole authority over one employee collection."""

    def __init__(self, backend) -> None:
        self.backend = backend

    @classmethod
    def at(cls, path: str | os.PathLike, *, atomic: bool | None = None) -> "RecordStore":
        if atomic is None:
            atomic = get_settings().atomic_writes
        return cls(FileBackend(path, atomic=atomic))

    @property
    def path(self) -> Optional[Path]:
        return getattr(self.backend, "path", None)

    def load(self) -> list[Employee]:
        raw = self.backend.read()
        if raw is None:
            return []
        try:
            return [Employee.from_dict(item) for item in decode(raw)]
        except DecodeError:
            logger.warning("Malformed store file %s", self.path)
            raise
        except InvalidEmployeeError as exc:
            logger.warning("Malformed record in %s: %s", self.path, exc)
            raise DecodeError(str(exc), exc) from exc

    def save(self, records: Iterable[Employee]) -> None:
        payload = encode([record.to_dict() for record in records], pretty=True)
        self.backend.write(payload)
        logger.debug("Wrote %d bytes to %s", len(payload), self.path)

    def get(self, employee_id: int | str) -> Optional[Employee]:
        wanted = parse_employee_id(employee_id)
        for record in self.load():
            if record.id == wanted:
                return record
        return None

    def add(self, employee: Employee, id_override: int | str | None = None) -> Employee:
        records = self.load()
        if id_override is None:
            new_id = next_id(records)
        else:
            new_id = parse_employee_id(id_override)
            if any(record.id == new_id for record in records):
                raise DuplicateIdError(f"Employee id {new_id} already exists")
        stored = employee.with_id(new_id)
        # newest first
        self.save([stored] + records)
        return stored

    def remove(self, employee_id: int | str) -> int:
        wanted = parse_employee_id(employee_id)
        records = self.load()
        kept = [record for record in records if record.id != wanted]
        self.save(kept)
        return len(records) - len(kept)


def load(path: str | os.PathLike) -> list[Employee]:
    return RecordStore.at(path).load()


def add(path: str | os.PathLike, employee: Employee, id_override: int | str | None = None) -> Employee:
    return RecordStore.at(path).add(employee, id_override=id_override)


def remove(path: str | os.PathLike, employee_id: int | str) -> int:
    return RecordStore.at(path).remove(employee_id)
