#!/usr/bin/env python3
"""
Manage the employee store from a shell.

Usage:
  python scripts/employees.py add --name "Jane Doe" --position Manager [--extra email=jane@example.com]
  python scripts/employees.py remove 2
  python scripts/employees.py list
  python scripts/employees.py export [--out employees.yaml]

--store overrides EMPRESA_STORE_PATH (default: employees.json).
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

# Make the empresa package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from empresa.core.config import get_settings  # noqa: E402
from empresa.core.log import configure_logging  # noqa: E402
from empresa.domain.employees import InvalidEmployeeError  # noqa: E402
from empresa.repositories.errors import StoreError  # noqa: E402
from empresa.services.employee_service import EmployeeService  # noqa: E402


def parse_extra(pairs: list[str] | None) -> dict:
    extra = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise SystemExit(f"Invalid extra (use key=value): {pair}")
        if key in ("id", "id_override", "name", "position"):
            raise SystemExit(f"Reserved field: {key}")
        extra[key] = value
    return extra


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Employee records (JSON store)")
    ap.add_argument("--store", help="JSON store path (default: EMPRESA_STORE_PATH or employees.json)")
    sub = ap.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add an employee")
    add.add_argument("--name", required=True)
    add.add_argument("--position", required=True)
    add.add_argument("--id", dest="id_override", help="Explicit id (must be unused)")
    add.add_argument("--extra", action="append", metavar="KEY=VALUE", help="Optional attribute, repeatable")

    rm = sub.add_parser("remove", help="Remove an employee by id")
    rm.add_argument("id")

    sub.add_parser("list", help="Print the stored employees")

    exp = sub.add_parser("export", help="Write the YAML export")
    exp.add_argument("--out", help="Target file (default: EMPRESA_EXPORT_PATH or employees.yaml)")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    if args.store:
        settings = replace(settings, store_path=args.store)
    configure_logging(settings)
    svc = EmployeeService(settings=settings)

    if args.command == "add":
        employee = svc.hire(args.name, args.position, parse_extra(args.extra), id_override=args.id_override)
        print(f"OK: employee {employee.id} added")
    elif args.command == "remove":
        removed = svc.dismiss(args.id)
        print(f"OK: {removed} record(s) removed")
    elif args.command == "list":
        for employee in svc.list_employees():
            print(f"{employee.id}\t{employee.name}\t{employee.position}")
    elif args.command == "export":
        path = svc.export(args.out)
        print(f"OK: exported to {path}")


if __name__ == "__main__":
    try:
        main()
    except (InvalidEmployeeError, StoreError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
