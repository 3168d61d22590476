from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse

from empresa.domain.employees import InvalidEmployeeError
from empresa.repositories.errors import DecodeError, StoreError, WriteError
from empresa.services.employee_service import EmployeeNotFoundError, EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])

# ids are always assigned by the store
_NOT_FORWARDED = ("id", "id_override", "name", "position")


def _get_employee_service(request: Request) -> EmployeeService:
    svc = getattr(getattr(request.app, "state", None), "employee_service", None)
    if not svc:
        raise RuntimeError("EmployeeService not configured")
    return svc


def _store_failure(exc: StoreError) -> HTTPException:
    if isinstance(exc, DecodeError):
        return HTTPException(500, "Employee store is corrupted")
    if isinstance(exc, WriteError):
        return HTTPException(500, "Could not write employee store")
    return HTTPException(500, "Employee store unavailable")


@router.get("")
def list_employees(request: Request):
    svc = _get_employee_service(request)
    try:
        return [employee.to_dict() for employee in svc.list_employees()]
    except StoreError as exc:
        raise _store_failure(exc)


@router.post("", status_code=201)
def create_employee(request: Request, payload: dict):
    svc = _get_employee_service(request)
    extra = {k: v for k, v in payload.items() if k not in _NOT_FORWARDED}
    try:
        employee = svc.hire(payload.get("name"), payload.get("position"), extra)
    except InvalidEmployeeError as exc:
        raise HTTPException(400, str(exc))
    except StoreError as exc:
        raise _store_failure(exc)
    return employee.to_dict()


@router.get("/export", response_class=PlainTextResponse)
def export_preview(request: Request):
    svc = _get_employee_service(request)
    try:
        text = svc.render_export()
    except StoreError as exc:
        raise _store_failure(exc)
    return PlainTextResponse(text, media_type="application/x-yaml")


@router.post("/export")
def export_employees(request: Request):
    svc = _get_employee_service(request)
    try:
        path = svc.export()
    except StoreError as exc:
        raise _store_failure(exc)
    return {"path": str(path)}


@router.get("/{employee_id}")
def get_employee(employee_id: str, request: Request):
    svc = _get_employee_service(request)
    try:
        return svc.get_employee(employee_id).to_dict()
    except InvalidEmployeeError as exc:
        raise HTTPException(400, str(exc))
    except EmployeeNotFoundError:
        raise HTTPException(404, "Employee not found")
    except StoreError as exc:
        raise _store_failure(exc)


@router.delete("/{employee_id}")
def delete_employee(employee_id: str, request: Request):
    svc = _get_employee_service(request)
    try:
        removed = svc.dismiss(employee_id)
    except InvalidEmployeeError as exc:
        raise HTTPException(400, str(exc))
    except StoreError as exc:
        raise _store_failure(exc)
    return {"removed": removed}
