import dataclasses

from rowmerge.data.data_type import DataType

__all__ = ("Column",)


@dataclasses.dataclass(frozen=True)
class Column:
    name: str
    data_type: DataType = DataType.Text
    scale: int | None = None
