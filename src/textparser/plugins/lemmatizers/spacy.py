"""spaCy lemmatizer plugin."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..spacy_support import SpacyModelResolver

logger = logging.getLogger(__name__)


class SpacyLemmatizer:
    """Word-level lemmas from a spaCy pipeline.

    A token contributes its lemma only when the token's trimmed surface form
    is non-empty. Pipelines without a lemmatizer component (e.g. the Chinese
    ones) leave lemmas blank; those tokens contribute their surface form.
    Output keeps input order and duplicates.
    """

    def __init__(
        self,
        models: Optional[Dict[str, str]] = None,
        fallback_model: Optional[str] = None,
        disable: List[str] | None = None,
        remove_punct: bool = True,
    ) -> None:
        """Initialize spaCy lemmatizer.

        Args:
            models: Language tag to spaCy model name (default: settings.spacy_models)
            fallback_model: Model for languages missing from ``models``
            disable: Pipeline components skipped on each call
                     (default: ["parser", "ner"])
            remove_punct: Skip punctuation tokens
        """
        self.resolver = SpacyModelResolver(models=models, fallback_model=fallback_model)
        self.disable = list(disable if disable is not None else ["parser", "ner"])
        self.remove_punct = remove_punct
        self.nlp = None

    def lemmatize(self, text: str, language: Optional[str] = None) -> List[str]:
        nlp = self.nlp if self.nlp is not None else self.resolver.load(language)
        doc = nlp(text, disable=self.disable)
        surface_fallback = "lemmatizer" not in nlp.pipe_names

        lemmas: List[str] = []
        for token in doc:
            if token.is_space or (self.remove_punct and token.is_punct):
                continue
            surface = token.text.strip()
            if not surface:
                continue
            lemma = (token.lemma_ or "").strip()
            if not lemma and surface_fallback:
                lemma = surface
            if lemma:
                lemmas.append(lemma)

        logger.debug("Extracted %d lemmas", len(lemmas))
        return lemmas


# Plugin registration
from ..base import PluginMetadata, PluginType
from ..registry import registry

metadata = PluginMetadata(
    name="spacy",
    display_name="spaCy",
    description="Rule and lookup lemmatizer from the language's spaCy pipeline",
    plugin_type=PluginType.LEMMATIZER,
    dependencies=["spacy>=3.0"],
    requires_pretrained=True,
    pretrained_models=["en_core_web_sm", "de_core_news_sm", "fr_core_news_sm", "es_core_news_sm"],
    default_params={
        "remove_punct": True,
    },
)

registry.register(
    metadata=metadata,
    factory=lambda **kwargs: SpacyLemmatizer(**kwargs)
)
