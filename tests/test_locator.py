import pytest
from openpyxl import Workbook

from xlexport.locator.api import SheetLocatorError, header_labels, last_populated_row, locate_sheet
from xlexport.schema.api import resolve_schema
from tests.records import Department, Employee


def _empty_workbook():
    wb = Workbook()
    wb.remove(wb.active)
    return wb


def test_new_sheet_gets_styled_header():
    wb = _empty_workbook()
    located = locate_sheet(wb, "Employees", resolve_schema(Employee))

    assert located.is_new_sheet and located.header_written
    assert located.first_writable_row == 2
    ws = wb["Employees"]
    header = [c.value for c in ws[1]]
    assert header == ["employee_id", "Full Name", "Hire Date", "Last Login"]
    assert all(c.font.bold for c in ws[1])
    assert all(c.alignment.horizontal == "center" for c in ws[1])


def test_existing_sheet_appends_below_last_row():
    wb = _empty_workbook()
    ws = wb.create_sheet("Departments")
    ws.append(["code", "Department"])
    ws.append(["D1", "One"])
    ws.append(["D2", "Two"])

    located = locate_sheet(wb, "Departments", resolve_schema(Department))
    assert not located.is_new_sheet
    assert not located.header_written
    assert located.first_writable_row == 4
    assert ws["A1"].value == "code"


def test_formatting_only_rows_do_not_move_frontier():
    wb = _empty_workbook()
    ws = wb.create_sheet("Departments")
    ws.append(["code", "Department"])
    ws.cell(row=10, column=1).number_format = "0.00"

    assert last_populated_row(ws) == 1
    assert locate_sheet(wb, "Departments", resolve_schema(Department)).first_writable_row == 2


def test_existing_empty_sheet_gets_header():
    wb = _empty_workbook()
    wb.create_sheet("Departments")

    located = locate_sheet(wb, "Departments", resolve_schema(Department))
    assert not located.is_new_sheet
    assert located.header_written
    assert located.first_writable_row == 2
    assert wb["Departments"]["B1"].value == "Department"


def test_lookup_is_exact_and_case_clash_rejected():
    wb = _empty_workbook()
    wb.create_sheet("Departments")
    with pytest.raises(SheetLocatorError):
        locate_sheet(wb, "departments", resolve_schema(Department))


def test_scans_do_not_materialize_cells():
    wb = _empty_workbook()
    ws = wb.create_sheet("Departments")
    ws.append(["code", "Department"])
    ws.cell(row=1000, column=30).number_format = "0.00"
    before = len(ws._cells)

    assert last_populated_row(ws) == 1
    assert header_labels(ws) == ("code", "Department")
    assert len(ws._cells) == before


def test_header_labels_keep_inner_gaps():
    wb = _empty_workbook()
    ws = wb.create_sheet("S")
    ws["A1"] = "a"
    ws["C1"] = "c"
    assert header_labels(ws) == ("a", None, "c")
