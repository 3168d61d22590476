"""Domain types and rules that do not depend on storage."""

from .employees import (
    Employee,
    InvalidEmployeeError,
    new_employee,
    next_id,
    parse_employee_id,
)

__all__ = ["Employee", "InvalidEmployeeError", "new_employee", "next_id", "parse_employee_id"]
