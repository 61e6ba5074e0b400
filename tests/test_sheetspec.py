import pytest

from xlexport.sheetspec.api import (
    MAX_SHEET_NAME,
    EmptyCollectionError,
    HeterogeneousCollectionError,
    effective_name,
    sanitize_sheet_name,
    sheet,
)
from tests.records import Department, employees, departments


def test_name_defaults_to_record_type():
    assert effective_name(sheet(departments(1))) == "Department"
    assert effective_name(sheet(departments(1), "Depts")) == "Depts"


def test_empty_collection_rejected():
    with pytest.raises(EmptyCollectionError):
        sheet([], "Employees")


def test_heterogeneous_collection_rejected():
    with pytest.raises(HeterogeneousCollectionError):
        sheet(employees(1) + departments(1), "Mixed")


def test_subclass_counts_as_other_type():
    class SpecialDepartment(Department):
        pass

    with pytest.raises(HeterogeneousCollectionError):
        sheet([Department("A", "a"), SpecialDepartment("B", "b")])


def test_extend_keeps_name_and_validates():
    c = sheet(departments(2), "Depts").extend(departments(1))
    assert c.name == "Depts"
    assert len(c) == 3
    with pytest.raises(HeterogeneousCollectionError):
        c.extend(employees(1))


@pytest.mark.parametrize(
    "raw, cleaned",
    [
        ("Q1/Q2 [draft]", "Q1Q2 draft"),
        ("a:b\\c?d*e", "abcde"),
        ("x" * 40, "x" * 31),
        ("'quoted'", "quoted"),
        ("[]", "Data"),
        ("   ", "Data"),
    ],
)
def test_sanitize_sheet_name(raw, cleaned):
    assert sanitize_sheet_name(raw) == cleaned


def test_effective_name_is_sanitized():
    assert effective_name(sheet(departments(1), "2024/01")) == "202401"
    assert len(effective_name(sheet(departments(1), "d" * 50))) == MAX_SHEET_NAME
