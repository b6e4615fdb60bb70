"""Plugin system for textparser.

Every NLP capability (language detection, sentiment scoring, lemmatization,
word embeddings, named-entity recognition) is provided by a plugin held in
a registry. Plugins are automatically registered on import.

Example usage:
    >>> from textparser.plugins import registry, PluginType
    >>> detector = registry.create("langdetect", PluginType.LANGUAGE_DETECTOR)
    >>> lemmatizer = registry.create("spacy", PluginType.LEMMATIZER)
    >>> embeddings = registry.create("gensim", PluginType.EMBEDDING_PROVIDER)
"""

from __future__ import annotations

# Core plugin infrastructure
from .base import PluginMetadata, PluginRegistration, PluginType
from .registry import PluginRegistry, registry

# Auto-load all plugins by importing their modules
# This triggers the registration calls at the bottom of each plugin file
from . import language
from . import sentiment
from . import lemmatizers
from . import embeddings
from . import entities

__all__ = [
    "PluginMetadata",
    "PluginRegistration",
    "PluginType",
    "PluginRegistry",
    "registry",
    "language",
    "sentiment",
    "lemmatizers",
    "embeddings",
    "entities",
]
