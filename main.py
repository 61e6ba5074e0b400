from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from xlexport.config.api import load_settings
from xlexport.exporter.exporter import XlExporter
from xlexport.fileroute.api import file_route
from xlexport.output.model import OutputMode
from xlexport.schema.api import DataKind, XlMeta, metadata_companion, xl_field
from xlexport.sheetspec.api import sheet

SEPARATOR = "=" * 50


class EmployeeMeta:
    employee_id = XlMeta(display="Employee #")
    hired = XlMeta(display="Hire Date", kind=DataKind.DATE)
    ssn = XlMeta(ignore=True)


@metadata_companion(EmployeeMeta)
@dataclass
class Employee:
    employee_id: int
    name: str = xl_field(friendly_name="Full Name")
    department: str = ""
    hired: Optional[date] = None
    last_login: Optional[datetime] = xl_field(None, display="Last Login", kind=DataKind.DATETIME)
    ssn: str = ""


@dataclass
class Department:
    code: str = xl_field(display="Code")
    name: str = xl_field(display="Department")
    budget: Decimal = xl_field(Decimal("0"), display="Budget", kind=DataKind.CURRENCY)


def sample_sheets():
    employees = [
        Employee(1, "Ada Lovelace", "ENG", date(2019, 3, 1), datetime(2024, 5, 2, 8, 30), "000-00-0001"),
        Employee(2, "Grace Hopper", "ENG", date(2020, 7, 15), datetime(2024, 5, 3, 9, 0), "000-00-0002"),
        Employee(3, "Edgar Codd", "DATA", date(2021, 1, 4), None, "000-00-0003"),
    ]
    departments = [
        Department("ENG", "Engineering", Decimal("125000.00")),
        Department("DATA", "Data Platform", Decimal("80000.00")),
    ]
    return [sheet(employees, "Employees"), sheet(departments)]


def _selection(value: Optional[str]) -> Optional[Tuple[str, str]]:
    if not value:
        return None
    sheet_name, _, cell = value.rpartition("!")
    if not sheet_name or not cell:
        raise argparse.ArgumentTypeError("--select expects SHEET!CELL, e.g. Employees!A2")
    return sheet_name, cell


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Export sample records to an xlsx workbook.")
    ap.add_argument("--name", default="export.xlsx", help="file name used for download/backup")
    ap.add_argument("--template", help="template workbook (settings key, base_dir relative or path)")
    ap.add_argument("--backup", help="backup directory (settings key, base_dir relative or path)")
    ap.add_argument("--settings", help="settings JSON (default: $XLEXPORT_SETTINGS)")
    ap.add_argument("--select", type=_selection, help="initially selected cell, SHEET!CELL")
    ap.add_argument("--out", help="write the workbook to this file (download target)")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.settings)
    out = open(args.out, "wb") if args.out else None
    try:
        route = file_route(
            args.name,
            template=args.template,
            backup=args.backup,
            output=OutputMode.BOTH if args.backup else OutputMode.DOWNLOAD,
            stream=out,
            settings=settings,
        )
        exporter = XlExporter(sample_sheets(), route, selected=args.select, settings=settings)
        data = exporter.run()
    finally:
        if out is not None:
            out.close()

    print(SEPARATOR)
    print(f"FILE: {args.name}")
    print(SEPARATOR)
    print(f"source: {exporter.source_kind.value}")
    print(f"bytes: {len(data)}")
    for w in exporter.last_writes:
        print(f"- {w.sheet_name}: {w.status}, rows {w.first_row}..{w.last_row}")


if __name__ == "__main__":
    main()
