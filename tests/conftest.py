"""Shared fixtures: in-process fake providers so tests never load real models."""

import pytest

from textparser.models import EntityCategory
from textparser.plugins import PluginMetadata, PluginType, registry

FAKE = "fake"

LEMMA_TABLE = {
    "is": "be",
    "are": "be",
    "was": "be",
    "were": "be",
    "running": "run",
    "ran": "run",
    "cats": "cat",
    "presented": "present",
}


class FakeLanguageDetector:
    def __init__(self, language="en"):
        self.language = language

    def detect(self, text):
        return self.language


class FakeSentimentAnalyzer:
    def __init__(self, value=0.25):
        self.value = value

    def score(self, text):
        return self.value


class FakeLemmatizer:
    """Splits on whitespace, strips punctuation and looks words up in a tiny table."""

    def __init__(self):
        self.calls = []

    def lemmatize(self, text, language=None):
        self.calls.append((text, language))
        lemmas = []
        for word in text.split():
            word = word.strip(".,!?")
            if word:
                lemmas.append(LEMMA_TABLE.get(word.lower(), word))
        return lemmas


class FakeEmbeddingProvider:
    """Always returns twenty neighbours, ignoring the requested maximum."""

    def __init__(self, languages=("en",)):
        self.languages = set(languages)
        self.calls = []

    def neighbors(self, word, language=None, maximum_count=10):
        self.calls.append((word, language, maximum_count))
        if language not in self.languages:
            return []
        return [(f"{word}{i}", round(0.05 * i, 2)) for i in range(1, 21)]


class FakeEntityRecognizer:
    KNOWN = {
        "Tim Cook": EntityCategory.PERSON,
        "Paris": EntityCategory.PLACE,
        "Cupertino": EntityCategory.PLACE,
        "Apple": EntityCategory.ORGANIZATION,
        "Monday": None,
    }

    def entities(self, text, language=None):
        found = []
        for name, category in self.KNOWN.items():
            position = text.find(name)
            if position >= 0:
                found.append((position, category, name))
        return [(category, name) for _, category, name in sorted(found, key=lambda f: f[0])]


FAKE_FACTORIES = {
    PluginType.LANGUAGE_DETECTOR: FakeLanguageDetector,
    PluginType.SENTIMENT_ANALYZER: FakeSentimentAnalyzer,
    PluginType.LEMMATIZER: FakeLemmatizer,
    PluginType.EMBEDDING_PROVIDER: FakeEmbeddingProvider,
    PluginType.ENTITY_RECOGNIZER: FakeEntityRecognizer,
}

ENV_NAMES = {
    PluginType.LANGUAGE_DETECTOR: "TEXTPARSER_LANGUAGE_DETECTOR",
    PluginType.SENTIMENT_ANALYZER: "TEXTPARSER_SENTIMENT_PROVIDER",
    PluginType.LEMMATIZER: "TEXTPARSER_LEMMATIZER",
    PluginType.EMBEDDING_PROVIDER: "TEXTPARSER_EMBEDDING_PROVIDER",
    PluginType.ENTITY_RECOGNIZER: "TEXTPARSER_ENTITY_RECOGNIZER",
}


@pytest.fixture
def fake_plugins(monkeypatch):
    """Register fake providers under the name "fake" and make them the defaults."""
    for plugin_type, factory in FAKE_FACTORIES.items():
        registry.register(
            PluginMetadata(
                name=FAKE,
                display_name="Fake",
                description="Test double",
                plugin_type=plugin_type,
            ),
            factory=lambda _factory=factory, **kwargs: _factory(**kwargs),
            override=True,
        )
        monkeypatch.setenv(ENV_NAMES[plugin_type], FAKE)
    monkeypatch.setenv("TEXTPARSER_DEFAULT_LANGUAGE", "en")

    yield

    for plugin_type in FAKE_FACTORIES:
        registry.unregister(FAKE, plugin_type)
