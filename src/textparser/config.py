from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional


# Try to load a .env file if python-dotenv is available. This is optional.
try:  # pragma: no cover - optional convenience
    from dotenv import load_dotenv  # type: ignore

    load_dotenv()
except Exception:  # noqa: BLE001 - optional dependency
    pass


DEFAULT_SPACY_MODELS = (
    "en=en_core_web_sm,de=de_core_news_sm,es=es_core_news_sm,fr=fr_core_news_sm,"
    "it=it_core_news_sm,nl=nl_core_news_sm,pt=pt_core_news_sm,zh-cn=zh_core_web_sm"
)
DEFAULT_EMBEDDING_MODELS = "en=glove-wiki-gigaword-100"


def parse_mapping(value: Optional[str]) -> Dict[str, str]:
    """Parse ``lang=value`` pairs separated by commas into a dict.

    Blank entries and entries without ``=`` are ignored; keys are lower-cased.
    """
    mapping: Dict[str, str] = {}
    if not value:
        return mapping
    for item in value.split(","):
        key, sep, target = item.partition("=")
        key, target = key.strip().lower(), target.strip()
        if sep and key and target:
            mapping[key] = target
    return mapping


def _env(name: str, default: str) -> str:
    return os.getenv(f"TEXTPARSER_{name}", default)


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    All values have sensible defaults for local use.
    """

    # Logging
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "WARNING").upper())
    log_format: str = field(default_factory=lambda: _env("LOG_FORMAT", "text").lower())  # text | json
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("TEXTPARSER_LOG_FILE"))
    spacy_log_level: str = field(default_factory=lambda: _env("SPACY_LOG_LEVEL", "WARNING").upper())
    gensim_log_level: str = field(default_factory=lambda: _env("GENSIM_LOG_LEVEL", "WARNING").upper())

    # Analysis defaults
    default_language: str = field(default_factory=lambda: _env("DEFAULT_LANGUAGE", "en"))
    max_alternatives: int = field(default_factory=lambda: int(_env("MAX_ALTERNATIVES", "10")))

    # Reproducibility (langdetect is non-deterministic without a seed)
    random_seed: int = field(default_factory=lambda: int(_env("RANDOM_SEED", "0")))

    # Provider plugins
    language_detector: str = field(default_factory=lambda: _env("LANGUAGE_DETECTOR", "langdetect"))
    sentiment_provider: str = field(default_factory=lambda: _env("SENTIMENT_PROVIDER", "vader"))
    lemmatizer: str = field(default_factory=lambda: _env("LEMMATIZER", "spacy"))
    embedding_provider: str = field(default_factory=lambda: _env("EMBEDDING_PROVIDER", "gensim"))
    entity_recognizer: str = field(default_factory=lambda: _env("ENTITY_RECOGNIZER", "spacy"))

    # Pre-trained models
    spacy_models: Dict[str, str] = field(
        default_factory=lambda: parse_mapping(_env("SPACY_MODELS", DEFAULT_SPACY_MODELS))
    )
    spacy_fallback_model: str = field(default_factory=lambda: _env("SPACY_FALLBACK_MODEL", "en_core_web_sm"))
    embedding_models: Dict[str, str] = field(
        default_factory=lambda: parse_mapping(_env("EMBEDDING_MODELS", DEFAULT_EMBEDDING_MODELS))
    )


def get_settings() -> Settings:
    """Return current settings snapshot.

    Re-evaluates the environment on each call.
    """
    return Settings()
