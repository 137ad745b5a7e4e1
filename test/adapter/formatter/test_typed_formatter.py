import datetime
import decimal

import pytest

from rowmerge import adapter, data


@pytest.fixture(scope="function")
def typed_formatter_fixture(typed_schema_fixture: data.TableSchema) -> data.Formatter:
    return adapter.formatter.TypedFormatter(schema=typed_schema_fixture)


@pytest.mark.parametrize(
    "column_name,value,expected",
    [
        ("customer_id", 42, "42"),
        ("first_name", "Steve", "Steve"),
        ("active", True, "true"),
        ("active", False, "false"),
        ("purchases", 1234.5, "1234.50"),
        ("purchases", decimal.Decimal("3"), "3.00"),
        ("purchases", "99.99", "99.99"),
        ("ratio", 2, "2.0"),
        ("ratio", 0.25, "0.25"),
        ("birth_date", datetime.date(2022, 9, 1), "2022-09-01"),
        ("birth_date", "2022-09-02", "2022-09-02"),
        ("birth_date", datetime.datetime(2022, 9, 3, 12, 30), "2022-09-03"),
        ("date_added", datetime.datetime(2022, 9, 10, 8, 0, 5), "2022-09-10T08:00:05"),
        ("date_added", "2022-09-10T08:00:05", "2022-09-10T08:00:05"),
    ],
)
def test_format(typed_formatter_fixture: data.Formatter, column_name: str, value: object, expected: str):
    assert typed_formatter_fixture.format(column_name, value) == expected


@pytest.mark.parametrize(
    "column_name,value,error_type",
    [
        ("customer_id", True, TypeError),
        ("customer_id", "42", TypeError),
        ("active", 1, TypeError),
        ("purchases", "abc", decimal.InvalidOperation),
        ("purchases", float("nan"), ValueError),
        ("ratio", "0.5", TypeError),
        ("birth_date", "not a date", ValueError),
        ("date_added", datetime.date(2022, 9, 1), TypeError),
        ("unknown", 1, KeyError),
    ],
)
def test_format_rejects_values_that_do_not_fit(
    typed_formatter_fixture: data.Formatter,
    column_name: str,
    value: object,
    error_type: type[Exception],
):
    with pytest.raises(error_type):
        typed_formatter_fixture.format(column_name, value)


def test_decimal_without_scale_keeps_digits():
    schema = data.TableSchema(column_defs=(data.Column(name="amount", data_type=data.DataType.Decimal),))
    formatter = adapter.formatter.TypedFormatter(schema=schema)

    assert formatter.format("amount", "10.500") == "10.500"


def test_merger_wraps_typed_formatter_errors(typed_schema_fixture: data.TableSchema, typed_formatter_fixture):
    merger = data.RowMerger(schema=typed_schema_fixture, formatter=typed_formatter_fixture, row_index=0)
    row = {
        "customer_id": 1,
        "first_name": "Steve",
        "active": "yes",
        "purchases": None,
        "ratio": None,
        "birth_date": None,
        "date_added": None,
    }

    with pytest.raises(data.FormatError) as exc_info:
        merger.merge(row, version=1)

    assert exc_info.value.column_name == "active"
    assert merger.snapshot() == {}


def test_create():
    schema = data.TableSchema.from_names("a")

    assert isinstance(adapter.formatter.create(kind="str", schema=schema), adapter.formatter.StrFormatter)
    assert isinstance(adapter.formatter.create(kind="typed", schema=schema), adapter.formatter.TypedFormatter)
    assert isinstance(adapter.formatter.create(kind="html", schema=schema), data.Error)
