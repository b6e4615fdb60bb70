from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

import typer

from textparser.analyzer import TextAnalyzer
from textparser.config import get_settings
from textparser.exceptions import PluginError, TextParserError
from textparser.logging_utils import configure_logging
from textparser.models import AnalysisOptions
from textparser.plugins import PluginType, registry
from textparser.report import format_report_json, format_report_text

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Analyzes input text using a range of natural language approaches.",
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def _list_providers(value: bool) -> None:
    """Print registered provider plugins grouped by capability, then exit."""
    if not value:
        return

    for plugin_type in PluginType:
        typer.echo(f"\n{plugin_type.heading}:")
        registrations = registry.registrations(plugin_type)
        if not registrations:
            typer.echo("  (none)")
            continue
        for registration in registrations:
            status = "✓" if registration.is_available() else "✗"
            meta = registration.metadata
            typer.echo(f"  {status} {meta.name:<20} {meta.display_name} - {meta.description}")
            if meta.requires_pretrained and meta.pretrained_models:
                typer.echo(f"      {'':<20} models: {', '.join(meta.pretrained_models)}")
    typer.echo()
    raise typer.Exit()


@app.command()
def analyze(
    text: List[str] = typer.Argument(..., metavar="INPUT...", help="The text you want to analyze"),
    detect_language: bool = typer.Option(False, "-d", "--detect-language", help="Show detected language"),
    sentiment_analysis: bool = typer.Option(False, "-s", "--sentiment-analysis", help="Prints how positive or negative the input is."),
    lemmatize: bool = typer.Option(False, "-l", "--lemmatize", help="Shows the stem form of each word in the input."),
    alternatives: bool = typer.Option(False, "-v", "--alternatives", help="Prints alternative words for each word in the input."),
    places: bool = typer.Option(False, "-p", "--places", help="Prints names of places in the input."),
    people: bool = typer.Option(False, "-e", "--people", help="Prints names of people in the input."),
    organizations: bool = typer.Option(False, "-o", "--organizations", help="Prints names of organizations in the input."),
    all_: bool = typer.Option(False, "-a", "--all", help="Enables all flags."),
    maximum_alternatives: Optional[int] = typer.Option(
        None, "-m", "--maximum-alternatives", min=0,
        help="The maximum number of alternatives to suggest (default: $TEXTPARSER_MAX_ALTERNATIVES, else 10).",
    ),
    output_format: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", help="Output format: text or json"),
    language_detector: Optional[str] = typer.Option(None, help="Language detector plugin (e.g., langdetect)"),
    sentiment_provider: Optional[str] = typer.Option(None, help="Sentiment plugin (e.g., vader, textblob)"),
    lemmatizer: Optional[str] = typer.Option(None, help="Lemmatizer plugin (e.g., spacy)"),
    embedding_provider: Optional[str] = typer.Option(None, help="Word-embedding plugin (e.g., gensim)"),
    entity_recognizer: Optional[str] = typer.Option(None, help="Named-entity plugin (e.g., spacy)"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose logging (overrides env)"),
    list_providers: bool = typer.Option(
        False, "--list-providers", is_eager=True, callback=_list_providers,
        help="List available provider plugins and exit.",
    ),
) -> None:
    """Analyzes input text using a range of natural language approaches.

    Provider plugins default to the TEXTPARSER_* environment settings.

    Example:
        textparser --all "Tim Cook presented the new iPhone in Cupertino"
        textparser -v -m 3 "The quick brown fox"
        textparser --places --format json "Paris is beautiful"
    """
    # Env controls defaults; --verbose forces DEBUG.
    configure_logging(override_level="DEBUG" if verbose else None)
    settings = get_settings()

    options = AnalysisOptions(
        detect_language=detect_language,
        sentiment=sentiment_analysis,
        lemmatize=lemmatize,
        alternatives=alternatives,
        places=places,
        people=people,
        organizations=organizations,
        enable_all=all_,
        maximum_alternatives=settings.max_alternatives if maximum_alternatives is None else maximum_alternatives,
    )
    input_text = " ".join(text)
    logger.debug("Analysing %d characters with %s", len(input_text), options)

    try:
        analyzer = TextAnalyzer.from_plugins(
            options,
            language_detector=language_detector,
            sentiment_analyzer=sentiment_provider,
            lemmatizer=lemmatizer,
            embedding_provider=embedding_provider,
            entity_recognizer=entity_recognizer,
        )
    except PluginError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        report = analyzer.analyze(input_text, options)
    except (TextParserError, ImportError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == OutputFormat.JSON:
        typer.echo(format_report_json(report))
    else:
        typer.echo(format_report_text(report))
