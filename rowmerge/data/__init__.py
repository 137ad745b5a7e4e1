from rowmerge.data.data_type import DataType
from rowmerge.data.column import Column
from rowmerge.data.config import Config
from rowmerge.data.error import (
    DuplicateVersion,
    Error,
    FormatError,
    RowMergeError,
    SchemaMismatch,
    StaleVersion,
)
from rowmerge.data.formatter import Formatter
from rowmerge.data.replay_result import ReplayResult
from rowmerge.data.row_change import RowChange
from rowmerge.data.row_merger import RowMerger
from rowmerge.data.row_update import RowUpdate
from rowmerge.data.schema import Schema
from rowmerge.data.table_merger import TableMerger
from rowmerge.data.table_schema import TableSchema

__all__ = (
    "Column",
    "Config",
    "DataType",
    "DuplicateVersion",
    "Error",
    "FormatError",
    "Formatter",
    "ReplayResult",
    "RowChange",
    "RowMergeError",
    "RowMerger",
    "RowUpdate",
    "Schema",
    "SchemaMismatch",
    "StaleVersion",
    "TableMerger",
    "TableSchema",
)
