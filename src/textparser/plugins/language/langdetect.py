"""langdetect language detector plugin."""

from __future__ import annotations

import logging
from typing import Optional

from ...config import get_settings

logger = logging.getLogger(__name__)


class LangDetectLanguageDetector:
    """Language identification with the langdetect port of Google's detector.

    langdetect is probabilistic; the factory seed is fixed so the same input
    always yields the same tag.
    """

    def __init__(self, seed: Optional[int] = None, min_probability: float = 0.0) -> None:
        """Initialize detector.

        Args:
            seed: Seed for langdetect's sampling (default: settings.random_seed)
            min_probability: Best guesses below this probability count as inconclusive
        """
        self.seed = get_settings().random_seed if seed is None else seed
        self.min_probability = min_probability

    def detect(self, text: str) -> Optional[str]:
        """Return the most probable language tag, or None when inconclusive."""
        try:
            from langdetect import DetectorFactory, detect_langs
            from langdetect.lang_detect_exception import LangDetectException
        except ImportError:
            raise ImportError(
                "langdetect detector requires langdetect. "
                "Install with: pip install langdetect"
            )

        DetectorFactory.seed = self.seed
        try:
            candidates = detect_langs(text)
        except LangDetectException as e:
            logger.debug("Language detection inconclusive: %s", e)
            return None

        if not candidates:
            return None
        best = candidates[0]
        if best.prob < self.min_probability:
            logger.debug("Best language guess %s (p=%.3f) below threshold", best.lang, best.prob)
            return None
        return best.lang


# Plugin registration
from ..base import PluginMetadata, PluginType
from ..registry import registry

metadata = PluginMetadata(
    name="langdetect",
    display_name="langdetect",
    description="Naive Bayes language identification over character n-grams (55 languages)",
    plugin_type=PluginType.LANGUAGE_DETECTOR,
    dependencies=["langdetect>=1.0.9"],
    default_params={
        "min_probability": 0.0,
    },
)

registry.register(
    metadata=metadata,
    factory=lambda **kwargs: LangDetectLanguageDetector(**kwargs)
)
