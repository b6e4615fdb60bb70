"""spaCy named-entity recognizer plugin."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from ...models import EntityCategory
from ..spacy_support import SpacyModelResolver

logger = logging.getLogger(__name__)

# OntoNotes labels (English pipelines) and WikiNER labels (most other languages)
LABEL_CATEGORIES: Dict[str, EntityCategory] = {
    "PERSON": EntityCategory.PERSON,
    "PER": EntityCategory.PERSON,
    "GPE": EntityCategory.PLACE,
    "LOC": EntityCategory.PLACE,
    "FAC": EntityCategory.PLACE,
    "ORG": EntityCategory.ORGANIZATION,
}


class SpacyEntityRecognizer:
    """Named entities from a spaCy pipeline.

    spaCy entity spans already cover multi-word names, so "New York City"
    comes back as one match.
    """

    def __init__(
        self,
        models: Optional[Dict[str, str]] = None,
        fallback_model: Optional[str] = None,
        disable: List[str] | None = None,
    ) -> None:
        self.resolver = SpacyModelResolver(models=models, fallback_model=fallback_model)
        self.disable = list(disable if disable is not None else ["parser", "lemmatizer"])
        self.nlp = None

    def entities(
        self,
        text: str,
        language: Optional[str] = None,
    ) -> List[Tuple[Optional[EntityCategory], str]]:
        nlp = self.nlp if self.nlp is not None else self.resolver.load(language)
        doc = nlp(text, disable=self.disable)

        results = []
        for ent in doc.ents:
            category = LABEL_CATEGORIES.get(ent.label_)
            if category is None:
                logger.debug("Ignoring entity %r with label %s", ent.text, ent.label_)
            results.append((category, ent.text))
        return results


# Plugin registration
from ..base import PluginMetadata, PluginType
from ..registry import registry

metadata = PluginMetadata(
    name="spacy",
    display_name="spaCy",
    description="Statistical NER from the language's spaCy pipeline",
    plugin_type=PluginType.ENTITY_RECOGNIZER,
    dependencies=["spacy>=3.0"],
    requires_pretrained=True,
    pretrained_models=["en_core_web_sm", "en_core_web_md", "de_core_news_sm", "xx_ent_wiki_sm"],
)

registry.register(
    metadata=metadata,
    factory=lambda **kwargs: SpacyEntityRecognizer(**kwargs)
)
