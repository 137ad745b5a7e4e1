import typing

import pydantic

__all__ = ("RowUpdate",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class RowUpdate:
    row_index: int
    version: int
    values: dict[str, typing.Any]
