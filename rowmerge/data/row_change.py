import pydantic

__all__ = ("RowChange",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class RowChange:
    changes: dict[str, str | None]
    row_index: int
    version: int
