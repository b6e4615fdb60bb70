"""Rendering of analysis reports for the command line."""

from __future__ import annotations

import json
from typing import Iterable, List

from .models import AnalysisReport


def format_list(items: Iterable[object]) -> str:
    """Join items as an English conjunction list.

    ``[]`` -> ``""``, ``[a]`` -> ``"a"``, ``[a, b]`` -> ``"a and b"``,
    ``[a, b, c]`` -> ``"a, b, and c"``.
    """
    parts = [str(item) for item in items]
    if len(parts) <= 1:
        return "".join(parts)
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return ", ".join(parts[:-1]) + f", and {parts[-1]}"


def _entry(content: str) -> str:
    # Entry lines are tab-indented with no trailing whitespace
    return f"\t{content}".rstrip()


def format_report_text(report: AnalysisReport) -> str:
    """Format a report as labelled plain-text sections.

    The output always opens with a blank line; every section after it is
    separated by a blank line, except the sentiment line, which directly
    follows the language line.
    """
    lines: List[str] = [""]

    if report.language is not None:
        lines.append("")
        lines.append(f"Detected language: {report.language}")

    if report.sentiment is not None:
        lines.append(f"Sentiment: {report.sentiment}")

    if report.lemmas is not None:
        lines.append("")
        lines.append("Found the following lemmas:")
        lines.append(_entry(format_list(report.lemmas)))

    if report.alternatives is not None:
        lines.append("")
        lines.append("Found the following alternatives:")
        for lemma, alternatives in report.alternatives:
            lines.append(_entry(f"{lemma}: {format_list(alternatives)}"))

    # The entity block is left out when nothing matched
    if report.entities:
        lines.append("")
        lines.append("Found the following entities:")
        for entity in report.entities:
            lines.append(_entry(str(entity)))

    return "\n".join(lines)


def format_report_json(report: AnalysisReport) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
