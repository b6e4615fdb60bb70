from __future__ import annotations

from typing import List, Optional, Protocol, Tuple, Union

from .models import EntityCategory


class LanguageDetectorProtocol(Protocol):
    def detect(self, text: str) -> Optional[str]:
        """Return the best-guess language tag, or None when inconclusive."""
        ...


class SentimentAnalyzerProtocol(Protocol):
    def score(self, text: str) -> Optional[Union[float, str]]:
        """Return the raw paragraph-level polarity reported by the engine."""
        ...


class LemmatizerProtocol(Protocol):
    def lemmatize(self, text: str, language: Optional[str] = None) -> List[str]:
        ...


class EmbeddingProviderProtocol(Protocol):
    def neighbors(
        self,
        word: str,
        language: Optional[str] = None,
        maximum_count: int = 10,
    ) -> List[Tuple[str, float]]:
        """Return (neighbour, distance) pairs, closest first."""
        ...


class EntityRecognizerProtocol(Protocol):
    def entities(
        self,
        text: str,
        language: Optional[str] = None,
    ) -> List[Tuple[Optional[EntityCategory], str]]:
        """Return (category, span text) pairs; category is None for labels outside the taxonomy."""
        ...
