import pydantic
import pytest

from rowmerge import data


def test_columns_keep_schema_order():
    schema = data.TableSchema.from_names("c", "a", "b", table_name="t")

    assert schema.column_names() == ("c", "a", "b")
    assert schema.column("a") == data.Column(name="a")
    assert schema.column("z") is None


def test_duplicate_column_names_are_rejected():
    with pytest.raises(pydantic.ValidationError, match="Duplicate column names: a"):
        data.TableSchema.from_names("a", "b", "a")


def test_empty_schema_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        data.TableSchema(column_defs=())
