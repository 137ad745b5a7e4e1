import typing

import pydantic

__all__ = ("Config",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class Config:
    log_level: typing.Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    formatter: typing.Literal["str", "typed"] = "typed"
    strict_columns: bool = False
    skip_rejected: bool = True

    def __repr__(self) -> str:
        return (
            f"Config(log_level={self.log_level!r}, formatter={self.formatter!r}, "
            f"strict_columns={self.strict_columns}, skip_rejected={self.skip_rejected})"
        )
