"""Tests for the provider plugin registry."""

import pytest

from textparser.exceptions import (
    PluginDependencyError,
    PluginNotFoundError,
    PluginRegistrationError,
)
from textparser.plugins import PluginMetadata, PluginRegistry, PluginType, registry


def make_metadata(name, plugin_type=PluginType.SENTIMENT_ANALYZER, **kwargs):
    return PluginMetadata(
        name=name,
        display_name=name.title(),
        description="test plugin",
        plugin_type=plugin_type,
        **kwargs,
    )


class Dummy:
    def __init__(self, **params):
        self.params = params


@pytest.fixture
def fresh_registry():
    return PluginRegistry()


class TestPluginRegistry:

    def test_register_and_create(self, fresh_registry):
        fresh_registry.register(make_metadata("dummy"), factory=Dummy)

        instance = fresh_registry.create("dummy", PluginType.SENTIMENT_ANALYZER, threshold=0.5)

        assert isinstance(instance, Dummy)
        assert instance.params == {"threshold": 0.5}

    def test_default_params_are_merged(self, fresh_registry):
        fresh_registry.register(
            make_metadata("dummy", default_params={"threshold": 0.1, "lowercase": True}),
            factory=Dummy,
        )

        instance = fresh_registry.create("dummy", PluginType.SENTIMENT_ANALYZER, threshold=0.9)

        assert instance.params == {"threshold": 0.9, "lowercase": True}

    def test_duplicate_registration_fails(self, fresh_registry):
        fresh_registry.register(make_metadata("dummy"), factory=Dummy)

        with pytest.raises(PluginRegistrationError):
            fresh_registry.register(make_metadata("dummy"), factory=Dummy)

    def test_override(self, fresh_registry):
        fresh_registry.register(make_metadata("dummy"), factory=Dummy)
        fresh_registry.register(make_metadata("dummy"), factory=lambda **kwargs: "replaced", override=True)

        assert fresh_registry.create("dummy", PluginType.SENTIMENT_ANALYZER) == "replaced"

    def test_same_name_for_different_types(self, fresh_registry):
        fresh_registry.register(make_metadata("spacy", PluginType.LEMMATIZER), factory=lambda: "lemmas")
        fresh_registry.register(make_metadata("spacy", PluginType.ENTITY_RECOGNIZER), factory=lambda: "ents")

        assert fresh_registry.create("spacy", PluginType.LEMMATIZER) == "lemmas"
        assert fresh_registry.create("spacy", PluginType.ENTITY_RECOGNIZER) == "ents"
        assert fresh_registry.list_plugins() == ["spacy"]

    def test_unknown_plugin(self, fresh_registry):
        fresh_registry.register(make_metadata("dummy"), factory=Dummy)

        with pytest.raises(PluginNotFoundError, match="dummy"):
            fresh_registry.get("missing", PluginType.SENTIMENT_ANALYZER)

    def test_wrong_type_is_not_found(self, fresh_registry):
        fresh_registry.register(make_metadata("dummy"), factory=Dummy)

        with pytest.raises(PluginNotFoundError):
            fresh_registry.get("dummy", PluginType.LEMMATIZER)

    def test_missing_dependency(self, fresh_registry):
        fresh_registry.register(
            make_metadata("needy", dependencies=["surely-not-installed-package>=1.0"]),
            factory=Dummy,
        )

        with pytest.raises(PluginDependencyError, match="surely-not-installed-package"):
            fresh_registry.create("needy", PluginType.SENTIMENT_ANALYZER)

    def test_list_plugins(self, fresh_registry):
        fresh_registry.register(make_metadata("zeta"), factory=Dummy)
        fresh_registry.register(make_metadata("alpha"), factory=Dummy)
        fresh_registry.register(
            make_metadata("needy", dependencies=["surely-not-installed-package"]),
            factory=Dummy,
        )
        fresh_registry.register(make_metadata("other", PluginType.LEMMATIZER), factory=Dummy)

        assert fresh_registry.list_plugins(PluginType.SENTIMENT_ANALYZER) == ["alpha", "needy", "zeta"]
        assert fresh_registry.list_plugins(PluginType.SENTIMENT_ANALYZER, available_only=True) == ["alpha", "zeta"]
        assert fresh_registry.list_plugins() == ["alpha", "needy", "other", "zeta"]

    def test_unregister(self, fresh_registry):
        fresh_registry.register(make_metadata("dummy"), factory=Dummy)
        fresh_registry.unregister("dummy", PluginType.SENTIMENT_ANALYZER)

        assert fresh_registry.list_plugins() == []


class TestBuiltinPlugins:

    @pytest.mark.parametrize(
        "name, plugin_type",
        [
            ("langdetect", PluginType.LANGUAGE_DETECTOR),
            ("vader", PluginType.SENTIMENT_ANALYZER),
            ("textblob", PluginType.SENTIMENT_ANALYZER),
            ("spacy", PluginType.LEMMATIZER),
            ("gensim", PluginType.EMBEDDING_PROVIDER),
            ("spacy", PluginType.ENTITY_RECOGNIZER),
        ],
    )
    def test_registered(self, name, plugin_type):
        metadata = registry.get_metadata(name, plugin_type)

        assert metadata.plugin_type is plugin_type
        assert metadata.dependencies

    def test_dependency_check(self):
        assert registry.get("gensim", PluginType.EMBEDDING_PROVIDER).is_available()
