import typing

import pytest

from rowmerge import adapter, data


class CountingFormatter(data.Formatter):
    def __init__(self) -> None:
        self.calls: list[tuple[str, typing.Any]] = []

    def format(self, column_name: str, value: typing.Any, /) -> str:
        self.calls.append((column_name, value))
        return str(value)


@pytest.fixture(scope="function")
def ab_schema_fixture() -> data.TableSchema:
    return data.TableSchema.from_names("a", "b")


@pytest.fixture(scope="function")
def str_formatter_fixture() -> data.Formatter:
    return adapter.formatter.StrFormatter()


@pytest.fixture(scope="function")
def counting_formatter_fixture() -> CountingFormatter:
    return CountingFormatter()


@pytest.fixture(scope="function")
def ab_merger_fixture(ab_schema_fixture: data.TableSchema, str_formatter_fixture: data.Formatter) -> data.RowMerger:
    return data.RowMerger(schema=ab_schema_fixture, formatter=str_formatter_fixture, row_index=0)


@pytest.fixture(scope="function")
def typed_schema_fixture() -> data.TableSchema:
    return data.TableSchema(
        table_name="customer",
        column_defs=(
            data.Column(name="customer_id", data_type=data.DataType.Int),
            data.Column(name="first_name", data_type=data.DataType.Text),
            data.Column(name="active", data_type=data.DataType.Bool),
            data.Column(name="purchases", data_type=data.DataType.Decimal, scale=2),
            data.Column(name="ratio", data_type=data.DataType.Float),
            data.Column(name="birth_date", data_type=data.DataType.Date),
            data.Column(name="date_added", data_type=data.DataType.Timestamp),
        ),
    )
