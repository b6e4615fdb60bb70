"""Shared spaCy pipeline loading for the spaCy-backed plugins."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config import get_settings
from ..exceptions import ModelNotAvailableError

logger = logging.getLogger(__name__)

# model name -> full pipeline, shared by every spaCy plugin in the process
_PIPELINES: Dict[str, Any] = {}


class SpacyModelResolver:
    """Choose a spaCy pipeline per language and load it lazily.

    Languages without an entry in ``models`` use ``fallback_model``.
    """

    def __init__(
        self,
        models: Optional[Dict[str, str]] = None,
        fallback_model: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.models = dict(settings.spacy_models if models is None else models)
        self.fallback_model = fallback_model or settings.spacy_fallback_model

    def model_name(self, language: Optional[str]) -> str:
        if language:
            key = language.lower()
            if key in self.models:
                return self.models[key]
            # "pt-BR" style tags fall back to their primary subtag
            primary = key.split("-")[0]
            if primary in self.models:
                return self.models[primary]
        return self.fallback_model

    def load(self, language: Optional[str]) -> Any:
        return load_pipeline(self.model_name(language))


def load_pipeline(model_name: str) -> Any:
    """Load (and cache) a full spaCy pipeline.

    Plugins skip the components they do not need per call, so the lemmatizer
    and the entity recognizer share one loaded copy of each model.

    Raises:
        ModelNotAvailableError: If the model package is not installed
    """
    if model_name in _PIPELINES:
        return _PIPELINES[model_name]

    try:
        import spacy
    except ImportError:
        raise ImportError(
            "spaCy plugins require spacy. "
            "Install with: pip install spacy && "
            "python -m spacy download en_core_web_sm"
        )

    try:
        logger.info("Loading spaCy model: %s", model_name)
        nlp = spacy.load(model_name)
    except OSError as e:
        raise ModelNotAvailableError(
            f"spaCy model '{model_name}' not found. "
            f"Download with: python -m spacy download {model_name}"
        ) from e

    _PIPELINES[model_name] = nlp
    logger.info("spaCy model %s loaded with components: %s", model_name, ", ".join(nlp.pipe_names))
    return nlp
