from rowmerge.adapter.formatter.callable_formatter import CallableFormatter
from rowmerge.adapter.formatter.str_formatter import StrFormatter
from rowmerge.adapter.formatter.strategy import create
from rowmerge.adapter.formatter.typed import TypedFormatter

__all__ = ("CallableFormatter", "StrFormatter", "TypedFormatter", "create")
