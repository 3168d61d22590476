from __future__ import annotations

from fastapi import FastAPI

from empresa import __version__
from empresa.core.config import Settings, get_settings
from empresa.core.log import configure_logging
from empresa.routers import employees as employees_router
from empresa.services.employee_service import EmployeeService


def create_app(settings: Settings | None = None, service: EmployeeService | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (`--factory`)."""
    settings = settings or get_settings()
    configure_logging(settings)

    application = FastAPI(title="Empresa Employee Records", version=__version__)
    application.state.settings = settings
    application.state.employee_service = service or EmployeeService(settings=settings)
    application.include_router(employees_router.router)

    @application.get("/health")
    def health():
        return {"ok": True, "store": settings.store_path}

    return application
