from rowmerge.service.replay import replay

__all__ = ("replay",)
