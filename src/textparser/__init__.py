"""textparser: command-line text analysis on top of pre-trained NLP libraries.

Reports, for a piece of text:
- Detected language (langdetect)
- Sentiment polarity (NLTK VADER, TextBlob)
- Word lemmas (spaCy)
- Word-embedding neighbours, a.k.a. alternatives (gensim)
- Named entities: people, places, organizations (spaCy)

Every capability is a swappable provider plugin.

Quick Start (Simple API):
    >>> from textparser import TextAnalyzer, AnalysisOptions
    >>>
    >>> options = AnalysisOptions(detect_language=True, sentiment=True, places=True)
    >>> analyzer = TextAnalyzer.from_plugins(options)
    >>> report = analyzer.analyze("Paris is beautiful", options)
    >>> print(format_report_text(report))

Quick Start (Plugin System):
    >>> from textparser.plugins import registry, PluginType
    >>>
    >>> registry.list_plugins(PluginType.SENTIMENT_ANALYZER)
    ['textblob', 'vader']
    >>> sentiment = registry.create("textblob", PluginType.SENTIMENT_ANALYZER)
"""

__version__ = "0.1.0"

from .config import get_settings, Settings
from .logging_utils import configure_logging

# Import plugins to trigger auto-registration
from . import plugins

# Main high-level API
from .analyzer import TextAnalyzer
from .models import AnalysisOptions, AnalysisReport, Alternative, Entity, EntityCategory
from .report import format_list, format_report_json, format_report_text

__all__ = [
    "__version__",
    "get_settings",
    "Settings",
    "configure_logging",
    "plugins",
    "TextAnalyzer",
    "AnalysisOptions",
    "AnalysisReport",
    "Alternative",
    "Entity",
    "EntityCategory",
    "format_list",
    "format_report_json",
    "format_report_text",
]
