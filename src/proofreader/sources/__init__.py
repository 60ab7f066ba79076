"""Document sources for proofreader."""

from .loader import Source, SourceLoader, is_url

__all__ = [
    "Source",
    "SourceLoader",
    "is_url",
]
