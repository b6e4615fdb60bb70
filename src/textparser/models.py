"""Value types shared by the analyzer, the providers and the report renderer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

UNDETERMINED_LANGUAGE = "und"


class EntityCategory(str, Enum):
    """Named-entity categories the analyzer reports."""
    PERSON = "person"
    PLACE = "place"
    ORGANIZATION = "organization"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Entity:
    category: EntityCategory
    text: str

    def __str__(self) -> str:
        return f"{self.category.label}: {self.text}"


@dataclass(frozen=True)
class Alternative:
    """A nearest neighbour of a word in an embedding space."""
    word: str
    distance: float

    def __str__(self) -> str:
        return f"{self.word} has a distance of {self.distance}"


@dataclass(frozen=True)
class AnalysisOptions:
    """Feature switches for one analysis run.

    Attributes:
        detect_language: Report the detected language
        sentiment: Report the sentiment score
        lemmatize: Report the lemma list
        alternatives: Report embedding neighbours for every lemma
        places: Report place names
        people: Report personal names
        organizations: Report organization names
        enable_all: Switch every feature above on
        maximum_alternatives: Upper bound of neighbours per lemma
    """
    detect_language: bool = False
    sentiment: bool = False
    lemmatize: bool = False
    alternatives: bool = False
    places: bool = False
    people: bool = False
    organizations: bool = False
    enable_all: bool = False
    maximum_alternatives: int = 10

    def resolved(self) -> "AnalysisOptions":
        """Return options with every feature on when ``enable_all`` is set."""
        if not self.enable_all:
            return self
        return replace(
            self,
            detect_language=True,
            sentiment=True,
            lemmatize=True,
            alternatives=True,
            places=True,
            people=True,
            organizations=True,
            enable_all=False,
        )

    @property
    def entity_categories(self) -> FrozenSet[EntityCategory]:
        options = self.resolved()
        wanted = set()
        if options.people:
            wanted.add(EntityCategory.PERSON)
        if options.places:
            wanted.add(EntityCategory.PLACE)
        if options.organizations:
            wanted.add(EntityCategory.ORGANIZATION)
        return frozenset(wanted)

    @property
    def needs_lemmas(self) -> bool:
        options = self.resolved()
        return options.lemmatize or options.alternatives


@dataclass
class AnalysisReport:
    """Results of one run. A section is ``None`` when it was not requested."""
    text: str
    language: Optional[str] = None
    sentiment: Optional[float] = None
    lemmas: Optional[List[str]] = None
    alternatives: Optional[List[Tuple[str, List[Alternative]]]] = None
    entities: Optional[List[Entity]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"text": self.text}
        if self.language is not None:
            data["language"] = self.language
        if self.sentiment is not None:
            data["sentiment"] = self.sentiment
        if self.lemmas is not None:
            data["lemmas"] = list(self.lemmas)
        if self.alternatives is not None:
            data["alternatives"] = [
                {
                    "lemma": lemma,
                    "neighbors": [{"word": alt.word, "distance": alt.distance} for alt in alts],
                }
                for lemma, alts in self.alternatives
            ]
        if self.entities is not None:
            data["entities"] = [
                {"category": entity.category.value, "text": entity.text}
                for entity in self.entities
            ]
        return data
