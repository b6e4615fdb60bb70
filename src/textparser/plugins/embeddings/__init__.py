"""Word-embedding plugins."""

from __future__ import annotations

# Import all embedding plugins to trigger registration
from . import gensim

__all__ = ["gensim"]
