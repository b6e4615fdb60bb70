"""High-level text analysis API (Facade pattern).

This module hides the orchestration of the provider plugins behind a single
class: each enabled feature makes one call into its provider, in a fixed
order, and the results are gathered into an :class:`AnalysisReport`.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Optional

from .config import get_settings
from .exceptions import ProviderNotConfiguredError
from .interfaces import (
    EmbeddingProviderProtocol,
    EntityRecognizerProtocol,
    LanguageDetectorProtocol,
    LemmatizerProtocol,
    SentimentAnalyzerProtocol,
)
from .models import (
    UNDETERMINED_LANGUAGE,
    Alternative,
    AnalysisOptions,
    AnalysisReport,
    Entity,
    EntityCategory,
)
from .plugins import PluginType, registry

logger = logging.getLogger(__name__)


def coerce_score(raw: Any) -> float:
    """Turn a raw sentiment result into a float, defaulting to 0.0.

    None, non-numeric values and NaN/inf all become 0.0.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.debug("Non-numeric sentiment score %r, using 0.0", raw)
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


class TextAnalyzer:
    """High-level API for analysing a piece of text.

    Example (Library Usage):
        >>> from textparser import TextAnalyzer, AnalysisOptions
        >>> options = AnalysisOptions(detect_language=True, places=True)
        >>> analyzer = TextAnalyzer.from_plugins(options)
        >>> report = analyzer.analyze("Paris is beautiful", options)
        >>> [str(e) for e in report.entities]
        ['Place: Paris']

    Example (Direct provider calls):
        >>> analyzer = TextAnalyzer.from_plugins()
        >>> score = analyzer.sentiment("What a lovely day")
        >>> lemmas = analyzer.lemmatize("The cats were running")
    """

    def __init__(
        self,
        language_detector: Optional[LanguageDetectorProtocol] = None,
        sentiment_analyzer: Optional[SentimentAnalyzerProtocol] = None,
        lemmatizer: Optional[LemmatizerProtocol] = None,
        embedding_provider: Optional[EmbeddingProviderProtocol] = None,
        entity_recognizer: Optional[EntityRecognizerProtocol] = None,
        default_language: Optional[str] = None,
    ):
        """Initialize TextAnalyzer.

        Args:
            language_detector: Language identification provider
            sentiment_analyzer: Sentiment scoring provider
            lemmatizer: Lemma tagging provider
            embedding_provider: Word-embedding neighbour provider
            entity_recognizer: Named-entity provider
            default_language: Language used when detection is off
                (default: settings.default_language)
        """
        self.language_detector = language_detector
        self.sentiment_analyzer = sentiment_analyzer
        self.lemmatizer = lemmatizer
        self.embedding_provider = embedding_provider
        self.entity_recognizer = entity_recognizer
        self.default_language = default_language or get_settings().default_language

    @classmethod
    def from_plugins(
        cls,
        options: Optional[AnalysisOptions] = None,
        language_detector: Optional[str] = None,
        sentiment_analyzer: Optional[str] = None,
        lemmatizer: Optional[str] = None,
        embedding_provider: Optional[str] = None,
        entity_recognizer: Optional[str] = None,
        default_language: Optional[str] = None,
    ) -> "TextAnalyzer":
        """Create an analyzer from plugin names.

        Only the providers needed by ``options`` are created; with no options
        every provider is created. Plugin names default to the settings.

        Raises:
            PluginNotFoundError: If a plugin name is unknown
            PluginDependencyError: If a plugin's library is not installed
        """
        settings = get_settings()
        options = (options or AnalysisOptions(enable_all=True)).resolved()

        def create(needed: bool, name: Optional[str], default: str, plugin_type: PluginType) -> Any:
            if not needed:
                return None
            return registry.create(name or default, plugin_type=plugin_type)

        return cls(
            language_detector=create(
                options.detect_language, language_detector,
                settings.language_detector, PluginType.LANGUAGE_DETECTOR,
            ),
            sentiment_analyzer=create(
                options.sentiment, sentiment_analyzer,
                settings.sentiment_provider, PluginType.SENTIMENT_ANALYZER,
            ),
            lemmatizer=create(
                options.needs_lemmas, lemmatizer,
                settings.lemmatizer, PluginType.LEMMATIZER,
            ),
            embedding_provider=create(
                options.alternatives, embedding_provider,
                settings.embedding_provider, PluginType.EMBEDDING_PROVIDER,
            ),
            entity_recognizer=create(
                bool(options.entity_categories), entity_recognizer,
                settings.entity_recognizer, PluginType.ENTITY_RECOGNIZER,
            ),
            default_language=default_language or settings.default_language,
        )

    def _require(self, provider: Any, what: str) -> Any:
        if provider is None:
            raise ProviderNotConfiguredError(f"No {what} configured for this analyzer")
        return provider

    def detect_language(self, text: str) -> str:
        """Return the detected language tag, or "und" when inconclusive."""
        detector = self._require(self.language_detector, "language detector")
        language = detector.detect(text)
        return language or UNDETERMINED_LANGUAGE

    def sentiment(self, text: str) -> float:
        """Paragraph-level polarity; 0.0 when the provider has no usable score."""
        analyzer = self._require(self.sentiment_analyzer, "sentiment analyzer")
        return coerce_score(analyzer.score(text))

    def lemmatize(self, text: str, language: Optional[str] = None) -> List[str]:
        lemmatizer = self._require(self.lemmatizer, "lemmatizer")
        lemmas = []
        for lemma in lemmatizer.lemmatize(text, language or self.default_language):
            stem = lemma.strip() if lemma else ""
            if stem:
                lemmas.append(stem)
        return lemmas

    def alternatives(
        self,
        word: str,
        language: Optional[str] = None,
        maximum_count: int = 10,
    ) -> List[Alternative]:
        """Nearest neighbours of ``word``, at most ``maximum_count`` of them."""
        provider = self._require(self.embedding_provider, "embedding provider")
        if maximum_count <= 0:
            return []
        neighbors = provider.neighbors(word, language or self.default_language, maximum_count)
        return [Alternative(neighbor, float(distance)) for neighbor, distance in neighbors[:maximum_count]]

    def entities(
        self,
        text: str,
        language: Optional[str] = None,
        *,
        people: bool = False,
        places: bool = False,
        organizations: bool = False,
    ) -> List[Entity]:
        """Named entities of the requested categories, in text order."""
        recognizer = self._require(self.entity_recognizer, "entity recognizer")
        wanted = set()
        if people:
            wanted.add(EntityCategory.PERSON)
        if places:
            wanted.add(EntityCategory.PLACE)
        if organizations:
            wanted.add(EntityCategory.ORGANIZATION)
        if not wanted:
            return []

        return [
            Entity(category, match)
            for category, match in recognizer.entities(text, language or self.default_language)
            if category in wanted
        ]

    def analyze(self, text: str, options: AnalysisOptions) -> AnalysisReport:
        """Run every enabled feature: language, sentiment, lemmas, alternatives, entities."""
        options = options.resolved()
        report = AnalysisReport(text=text)
        language = self.default_language

        if options.detect_language:
            language = self.detect_language(text)
            report.language = language
            logger.debug("Detected language: %s", language)

        if options.sentiment:
            report.sentiment = self.sentiment(text)

        lemmas: List[str] = []
        if options.needs_lemmas:
            lemmas = self.lemmatize(text, language)

        if options.lemmatize:
            report.lemmas = lemmas

        if options.alternatives:
            report.alternatives = [
                (lemma, self.alternatives(lemma, language, options.maximum_alternatives))
                for lemma in lemmas
            ]

        if options.entity_categories:
            report.entities = self.entities(
                text,
                language,
                people=options.people,
                places=options.places,
                organizations=options.organizations,
            )

        return report
