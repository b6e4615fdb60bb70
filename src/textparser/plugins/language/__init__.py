"""Language detector plugins."""

from __future__ import annotations

# Import all language detector plugins to trigger registration
from . import langdetect

__all__ = ["langdetect"]
