from rowmerge.adapter import config, formatter, fs, schema, updates

__all__ = ("config", "formatter", "fs", "schema", "updates")
