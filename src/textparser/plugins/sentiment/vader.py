"""NLTK VADER sentiment plugin."""

from __future__ import annotations

import logging
from typing import Optional

from ...exceptions import ModelNotAvailableError

logger = logging.getLogger(__name__)


class VaderSentimentAnalyzer:
    """Rule-based sentiment scoring with NLTK's VADER lexicon.

    Reports the normalized ``compound`` score, which lies in [-1.0, 1.0].
    """

    def __init__(self, download: bool = True) -> None:
        """Initialize analyzer.

        Args:
            download: Fetch the vader_lexicon resource when it is not installed
        """
        self.download = download
        self.analyzer = None

    def _load_model(self) -> None:
        """Lazy load the VADER lexicon."""
        if self.analyzer is not None:
            return

        try:
            import nltk
            from nltk.sentiment import SentimentIntensityAnalyzer
        except ImportError:
            raise ImportError(
                "VADER sentiment requires nltk. Install with: pip install nltk"
            )

        try:
            nltk.data.find("sentiment/vader_lexicon.zip")
        except LookupError:
            if not self.download:
                raise ModelNotAvailableError(
                    "NLTK resource 'vader_lexicon' not found. "
                    "Download with: python -m nltk.downloader vader_lexicon"
                )
            logger.info("Downloading NLTK vader_lexicon")
            if not nltk.download("vader_lexicon", quiet=True):
                raise ModelNotAvailableError("Could not download NLTK resource 'vader_lexicon'")

        self.analyzer = SentimentIntensityAnalyzer()

    def score(self, text: str) -> Optional[float]:
        self._load_model()
        scores = self.analyzer.polarity_scores(text)  # type: ignore[union-attr]
        return scores.get("compound")


# Plugin registration
from ..base import PluginMetadata, PluginType
from ..registry import registry

metadata = PluginMetadata(
    name="vader",
    display_name="VADER (NLTK)",
    description="Lexicon and rule-based polarity; compound score in [-1, 1]",
    plugin_type=PluginType.SENTIMENT_ANALYZER,
    dependencies=["nltk>=3.8"],
    requires_pretrained=True,
    pretrained_models=["vader_lexicon"],
    default_params={
        "download": True,
    },
)

registry.register(
    metadata=metadata,
    factory=lambda **kwargs: VaderSentimentAnalyzer(**kwargs)
)
