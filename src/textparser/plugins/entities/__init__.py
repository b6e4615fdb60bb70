"""Named-entity recognizer plugins."""

from __future__ import annotations

# Import all entity recognizer plugins to trigger registration
from . import spacy

__all__ = ["spacy"]
