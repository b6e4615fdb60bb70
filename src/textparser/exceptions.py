"""Custom exceptions for textparser."""

from __future__ import annotations


class TextParserError(Exception):
    """Base exception for all textparser errors."""
    pass


class PluginError(TextParserError):
    """Base exception for plugin-related errors."""
    pass


class PluginNotFoundError(PluginError):
    """Raised when a requested plugin is not found in the registry."""
    pass


class PluginRegistrationError(PluginError):
    """Raised when there's an error registering a plugin."""
    pass


class PluginDependencyError(PluginError):
    """Raised when required plugin dependencies are missing."""
    pass


class ModelNotAvailableError(TextParserError):
    """Raised when a configured pre-trained model or lexicon cannot be loaded."""
    pass


class ProviderNotConfiguredError(TextParserError):
    """Raised when an analysis step runs without the provider it needs."""
    pass
