"""Gensim word-embedding plugin."""

from __future__ import annotations

import logging
import os
import pickle
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ...config import get_settings
from ...exceptions import ModelNotAvailableError

logger = logging.getLogger(__name__)


class GensimEmbeddingProvider:
    """Nearest-neighbour lookup in per-language gensim ``KeyedVectors``.

    Each language maps either to a local vectors file or to a model name from
    the gensim-data catalogue (e.g. "glove-wiki-gigaword-100"). Vectors are
    loaded on first use and kept for the lifetime of the provider.

    Distances are cosine distances (1 - cosine similarity), closest first.
    """

    def __init__(
        self,
        models: Optional[Dict[str, str]] = None,
        vectors: Optional[Dict[str, Any]] = None,
        lowercase_fallback: bool = True,
    ) -> None:
        """Initialize provider.

        Args:
            models: Language tag to vectors path or gensim-data model name
                    (default: settings.embedding_models)
            vectors: Already loaded ``KeyedVectors`` per language
            lowercase_fallback: Retry lookups with the lower-cased word
        """
        self.models = dict(get_settings().embedding_models if models is None else models)
        self._vectors: Dict[str, Any] = {k.lower(): v for k, v in (vectors or {}).items()}
        self.lowercase_fallback = lowercase_fallback

    def _language_key(self, language: Optional[str]) -> Optional[str]:
        if not language:
            return None
        key = language.lower()
        for candidate in (key, key.split("-")[0]):
            if candidate in self._vectors or candidate in self.models:
                return candidate
        return None

    def _load_vectors(self, key: str) -> Any:
        if key in self._vectors:
            return self._vectors[key]

        source = self.models[key]
        try:
            from gensim.models import KeyedVectors
        except ImportError:
            raise ImportError(
                "Gensim embeddings require gensim. Install with: pip install gensim"
            )

        logger.info("Loading word vectors for '%s' from %s", key, source)
        try:
            if os.path.exists(source):
                if source.endswith(".bin"):
                    kv = KeyedVectors.load_word2vec_format(source, binary=True)
                elif source.endswith((".txt", ".vec", ".txt.gz", ".vec.gz")):
                    kv = KeyedVectors.load_word2vec_format(source, binary=False)
                else:
                    kv = KeyedVectors.load(source, mmap="r")
            else:
                import gensim.downloader as api

                kv = api.load(source)
        except (OSError, ValueError, EOFError, pickle.UnpicklingError) as e:
            raise ModelNotAvailableError(
                f"Could not load word vectors '{source}' for language '{key}': {e}"
            ) from e

        self._vectors[key] = kv
        logger.info("Loaded %d word vectors (%d-dim) for '%s'", len(kv), kv.vector_size, key)
        return kv

    def neighbors(
        self,
        word: str,
        language: Optional[str] = None,
        maximum_count: int = 10,
    ) -> List[Tuple[str, float]]:
        """Return up to ``maximum_count`` (neighbour, distance) pairs.

        Returns an empty list when no embedding space exists for the language
        or the word is not in its vocabulary.
        """
        if maximum_count <= 0:
            return []

        key = self._language_key(language)
        if key is None:
            logger.debug("No word embedding available for language %r", language)
            return []

        kv = self._load_vectors(key)
        lookup = word
        if lookup not in kv.key_to_index and self.lowercase_fallback:
            lookup = word.lower()
        if lookup not in kv.key_to_index:
            logger.debug("Word %r not in %s vocabulary", word, key)
            return []

        similar = kv.most_similar(lookup, topn=maximum_count)
        return [
            (neighbor, float(np.clip(1.0 - similarity, 0.0, 2.0)))
            for neighbor, similarity in similar[:maximum_count]
        ]


# Plugin registration
from ..base import PluginMetadata, PluginType
from ..registry import registry

metadata = PluginMetadata(
    name="gensim",
    display_name="Gensim KeyedVectors",
    description="Cosine nearest neighbours in word2vec/GloVe/fastText vectors per language",
    plugin_type=PluginType.EMBEDDING_PROVIDER,
    dependencies=["gensim>=4.3", "numpy>=1.22"],
    requires_pretrained=True,
    pretrained_models=[
        "glove-wiki-gigaword-100",
        "glove-wiki-gigaword-300",
        "word2vec-google-news-300",
        "fasttext-wiki-news-subwords-300",
    ],
    default_params={
        "lowercase_fallback": True,
    },
)

registry.register(
    metadata=metadata,
    factory=lambda **kwargs: GensimEmbeddingProvider(**kwargs)
)
