"""Sentiment analyzer plugins."""

from __future__ import annotations

# Import all sentiment plugins to trigger registration
from . import vader
from . import textblob

__all__ = ["vader", "textblob"]
