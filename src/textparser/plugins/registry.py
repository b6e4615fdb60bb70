"""Plugin registry with metadata and validation."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from .base import PluginMetadata, PluginRegistration, PluginType
from ..exceptions import PluginNotFoundError, PluginRegistrationError, PluginDependencyError

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registry for textparser provider plugins.

    Plugin names are unique per plugin type, so a single library
    (e.g. spaCy) can back several capabilities under the same name.
    """

    def __init__(self):
        self._plugins: Dict[PluginType, Dict[str, PluginRegistration]] = {
            plugin_type: {} for plugin_type in PluginType
        }

    def register(
        self,
        metadata: PluginMetadata,
        factory: Callable[..., Any],
        override: bool = False,
    ) -> None:
        """Register a plugin with metadata.

        Args:
            metadata: Plugin metadata
            factory: Factory function to create plugin instance
            override: Whether to override existing plugin with same name and type

        Raises:
            PluginRegistrationError: If plugin already exists and override=False
        """
        plugins = self._plugins[metadata.plugin_type]
        if metadata.name in plugins and not override:
            raise PluginRegistrationError(
                f"{metadata.plugin_type.value} plugin '{metadata.name}' already registered. "
                f"Use override=True to replace."
            )

        plugins[metadata.name] = PluginRegistration(metadata=metadata, factory=factory)
        logger.debug("Registered %s plugin: %s", metadata.plugin_type.value, metadata.name)

    def unregister(self, name: str, plugin_type: PluginType) -> None:
        self._plugins[plugin_type].pop(name, None)

    def get(self, name: str, plugin_type: PluginType) -> PluginRegistration:
        """Get plugin registration by name and type.

        Raises:
            PluginNotFoundError: If plugin not found
        """
        plugins = self._plugins[plugin_type]
        if name not in plugins:
            available = self.list_plugins(plugin_type)
            raise PluginNotFoundError(
                f"No {plugin_type.value} plugin named '{name}'. Available plugins: {available}"
            )
        return plugins[name]

    def create(self, name: str, plugin_type: PluginType, **kwargs) -> Any:
        """Create plugin instance.

        Args:
            name: Plugin name
            plugin_type: Capability the plugin must provide
            **kwargs: Parameters for plugin initialization

        Returns:
            Plugin instance

        Raises:
            PluginNotFoundError: If plugin not found
            PluginDependencyError: If required dependencies missing
        """
        registration = self.get(name, plugin_type)

        if not registration.is_available():
            missing = registration.get_missing_dependencies()
            raise PluginDependencyError(
                f"Plugin '{name}' requires missing dependencies: {missing}\n"
                f"Install with: pip install {' '.join(missing)}"
            )

        logger.debug("Creating %s plugin '%s' with %s", plugin_type.value, name, kwargs)
        return registration.create(**kwargs)

    def list_plugins(
        self,
        plugin_type: Optional[PluginType] = None,
        available_only: bool = False,
    ) -> List[str]:
        """List registered plugin names.

        Args:
            plugin_type: Filter by plugin type
            available_only: Only list plugins with dependencies installed

        Returns:
            Sorted list of plugin names
        """
        names = set()
        for registration in self.registrations(plugin_type):
            if available_only and not registration.is_available():
                continue
            names.add(registration.metadata.name)
        return sorted(names)

    def registrations(self, plugin_type: Optional[PluginType] = None) -> List[PluginRegistration]:
        types = [plugin_type] if plugin_type else list(PluginType)
        result = []
        for ptype in types:
            for name in sorted(self._plugins[ptype]):
                result.append(self._plugins[ptype][name])
        return result

    def get_metadata(self, name: str, plugin_type: PluginType) -> PluginMetadata:
        return self.get(name, plugin_type).metadata


# Global registry instance
registry = PluginRegistry()
