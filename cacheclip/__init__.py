"""CacheClip - clipboard history manager."""

from cacheclip.history import Entry, History

__version__ = "0.1.0"

__all__ = ["Entry", "History", "__version__"]
