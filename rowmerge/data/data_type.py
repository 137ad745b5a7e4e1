import enum

__all__ = ("DataType",)


class DataType(enum.Enum):
    BigInt = "bigint"
    Bool = "bool"
    Date = "date"
    Decimal = "decimal"
    Float = "float"
    Int = "int"
    Text = "text"
    Timestamp = "timestamp"

    def __repr__(self) -> str:
        return f"DataType.{self.name}"

    def __str__(self) -> str:
        return self.value
