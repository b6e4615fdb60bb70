"""TextBlob sentiment plugin."""

from __future__ import annotations

from typing import Optional


class TextBlobSentimentAnalyzer:
    """Pattern-lexicon polarity from TextBlob, in [-1.0, 1.0]."""

    def score(self, text: str) -> Optional[float]:
        try:
            from textblob import TextBlob
        except ImportError:
            raise ImportError(
                "TextBlob sentiment requires textblob. Install with: pip install textblob"
            )

        return TextBlob(text).sentiment.polarity


# Plugin registration
from ..base import PluginMetadata, PluginType
from ..registry import registry

metadata = PluginMetadata(
    name="textblob",
    display_name="TextBlob",
    description="Pattern lexicon polarity averaged over the text (English)",
    plugin_type=PluginType.SENTIMENT_ANALYZER,
    dependencies=["textblob>=0.17"],
)

registry.register(
    metadata=metadata,
    factory=lambda **kwargs: TextBlobSentimentAnalyzer(**kwargs)
)
