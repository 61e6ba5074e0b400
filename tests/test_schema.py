import itertools
from dataclasses import dataclass

import pytest

from xlexport.schema.api import DataKind, SchemaError, XlMeta, metadata_companion, resolve_schema, xl_field
from xlexport.schema.schema import SchemaResolver
from tests.records import Employee


def test_schema_order_labels_kinds():
    schema = resolve_schema(Employee)
    assert [c.source_field for c in schema] == ["employee_id", "name", "hired", "last_login"]
    assert schema.labels == ("employee_id", "Full Name", "Hire Date", "Last Login")
    assert [c.kind for c in schema] == [DataKind.TEXT, DataKind.TEXT, DataKind.DATE, DataKind.DATETIME]


def test_schema_is_stable_and_memoized():
    resolver = SchemaResolver()
    first = resolver.resolve(Employee)
    second = resolver.resolve(Employee)
    assert first is second
    assert SchemaResolver().resolve(Employee) == first


def test_direct_and_companion_ignore():
    class Meta:
        secret = XlMeta(ignore=True)
        forced = XlMeta(ignore=True)

    @metadata_companion(Meta)
    @dataclass
    class Rec:
        keep: int = 0
        hidden: int = xl_field(0, ignore=True)
        secret: int = 0
        forced: int = xl_field(0, ignore=False)

    assert [c.source_field for c in resolve_schema(Rec)] == ["keep", "forced"]


def _label_cases():
    # every combination of direct and companion friendly_name/display
    for f, d, cf, cd in itertools.product(("F", None), ("D", None), ("CF", None), ("CD", None)):
        expected = next((v for v in (f, d, cf, cd) if v is not None), "value")
        yield XlMeta(friendly_name=f, display=d), XlMeta(friendly_name=cf, display=cd), expected


@pytest.mark.parametrize("direct, companion, expected", list(_label_cases()))
def test_label_cascade_precedence(direct, companion, expected):
    meta_cls = type("Meta", (), {"value": companion})

    @metadata_companion(meta_cls)
    @dataclass
    class Rec:
        value: int = xl_field(
            0, ignore=direct.ignore, friendly_name=direct.friendly_name, display=direct.display, kind=direct.kind
        )

    assert resolve_schema(Rec).labels == (expected,)


def test_kind_cascade():
    class Meta:
        a = XlMeta(kind=DataKind.DATE)
        b = XlMeta(kind=DataKind.DATE)

    @metadata_companion(Meta)
    @dataclass
    class Rec:
        a: int = 0
        b: int = xl_field(0, kind=DataKind.DATETIME)
        c: int = 0

    assert [c.kind for c in resolve_schema(Rec)] == [DataKind.DATE, DataKind.DATETIME, DataKind.TEXT]


def test_dataclass_companion():
    @dataclass
    class Meta:
        amount: int = xl_field(display="Amount", kind=DataKind.CURRENCY)

    @metadata_companion(Meta)
    @dataclass
    class Rec:
        amount: int = 0

    col = resolve_schema(Rec).columns[0]
    assert (col.label, col.kind) == ("Amount", DataKind.CURRENCY)


def test_empty_schema_is_not_an_error():
    @dataclass
    class Nothing:
        pass

    @dataclass
    class AllHidden:
        x: int = xl_field(0, ignore=True)

    assert len(resolve_schema(Nothing)) == 0
    assert resolve_schema(AllHidden).labels == ()


def test_non_dataclass_rejected():
    class Plain:
        x = 1

    with pytest.raises(SchemaError):
        resolve_schema(Plain)
