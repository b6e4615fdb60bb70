"""Base classes and metadata for provider plugins."""

from __future__ import annotations

import importlib.util
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List


class PluginType(str, Enum):
    """NLP capabilities a plugin can provide."""
    LANGUAGE_DETECTOR = "language_detector"
    SENTIMENT_ANALYZER = "sentiment_analyzer"
    LEMMATIZER = "lemmatizer"
    EMBEDDING_PROVIDER = "embedding_provider"
    ENTITY_RECOGNIZER = "entity_recognizer"

    @property
    def heading(self) -> str:
        return self.value.replace("_", " ").title() + "s"


@dataclass
class PluginMetadata:
    """Metadata about a plugin.

    Attributes:
        name: Identifier of the plugin, unique per plugin type
        display_name: Human-readable name
        description: Brief description of the plugin
        plugin_type: Capability the plugin provides
        dependencies: List of required packages
        default_params: Default parameters for initialization
        requires_pretrained: Whether a model or lexicon must be downloaded first
        pretrained_models: Known models the plugin works with
    """
    name: str
    display_name: str
    description: str
    plugin_type: PluginType
    dependencies: List[str] = field(default_factory=list)
    default_params: Dict[str, Any] = field(default_factory=dict)
    requires_pretrained: bool = False
    pretrained_models: List[str] = field(default_factory=list)

    def check_dependencies(self) -> tuple[bool, List[str]]:
        """Check if required dependencies are installed.

        Returns:
            Tuple of (all_installed, missing_packages)
        """
        missing = []
        for dep in self.dependencies:
            # Parse package name (handle versions like "spacy>=3.0")
            package_name = dep.split(">=")[0].split("==")[0].split("<")[0].strip()
            import_name = package_name.replace("-", "_")

            if importlib.util.find_spec(import_name) is None:
                missing.append(dep)

        return len(missing) == 0, missing


@dataclass
class PluginRegistration:
    """Complete plugin registration with metadata and factory."""
    metadata: PluginMetadata
    factory: Callable[..., Any]

    def create(self, **kwargs) -> Any:
        """Create plugin instance with parameters."""
        params = {**self.metadata.default_params, **kwargs}
        return self.factory(**params)

    def is_available(self) -> bool:
        """Check if plugin can be used (dependencies installed)."""
        available, _ = self.metadata.check_dependencies()
        return available

    def get_missing_dependencies(self) -> List[str]:
        _, missing = self.metadata.check_dependencies()
        return missing
