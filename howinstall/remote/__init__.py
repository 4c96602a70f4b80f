"""HTTP collaborators: the install page lookup and tldr usage notes."""

from .fetcher import PageFetcher
from .tldr import TldrClient

__all__ = [
    "PageFetcher",
    "TldrClient",
]
