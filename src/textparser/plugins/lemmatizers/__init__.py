"""Lemmatizer plugins."""

from __future__ import annotations

# Import all lemmatizer plugins to trigger registration
from . import spacy

__all__ = ["spacy"]
