"""
Configuration helpers for the Empresa record store.

Routers, services and scripts read the store/export locations from here
instead of relying on default filenames buried in function signatures.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    store_path: str
    export_path: str
    export_mirror_store: bool
    atomic_writes: bool
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        store_path=os.getenv("EMPRESA_STORE_PATH") or "employees.json",
        export_path=os.getenv("EMPRESA_EXPORT_PATH") or "employees.yaml",
        export_mirror_store=_bool(os.getenv("EMPRESA_EXPORT_MIRROR_STORE"), False),
        atomic_writes=_bool(os.getenv("EMPRESA_ATOMIC_WRITES"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
