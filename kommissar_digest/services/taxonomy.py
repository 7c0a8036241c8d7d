"""Weighted keyword taxonomy used by the relevance scorer.

Each category carries one weight shared by all of its terms. Terms are
lowercase phrases and may repeat across categories; a text hitting the same
phrase in two categories is credited twice. ``locations`` is special-cased by
the scorer: it only counts once another category has matched.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping, Tuple

LOCATIONS_CATEGORY: Final[str] = "locations"


@dataclass(frozen=True, slots=True)
class CategoryDefinition:
    """A named group of keywords sharing one weight."""

    name: str
    weight: float
    terms: Tuple[str, ...]

    def __post_init__(self) -> None:
        if self.weight <= 0 or (self.weight * 2) != int(self.weight * 2):
            raise ValueError(
                f"Category '{self.name}' weight must be a positive integer or half-integer"
            )
        for term in self.terms:
            if not term or term != term.strip().lower():
                raise ValueError(f"Category '{self.name}' has malformed term {term!r}")


def _build_taxonomy(*categories: CategoryDefinition) -> Mapping[str, CategoryDefinition]:
    table = {}
    for category in categories:
        if category.name in table:
            raise ValueError(f"Duplicate category '{category.name}'")
        table[category.name] = category
    return MappingProxyType(table)


KEYWORD_TAXONOMY: Final[Mapping[str, CategoryDefinition]] = _build_taxonomy(
    CategoryDefinition(
        name="core",
        weight=3,
        terms=(
            "communist",
            "communists",
            "communism",
            "bolshevik",
            "bolsheviks",
            "soviet",
            "ussr",
            "marxist",
            "marxism",
            "leninist",
            "socialist",
            "socialism",
            "proletariat",
            "politburo",
            "comintern",
            "red army",
            "gulag",
            "kgb",
            "collectivization",
        ),
    ),
    CategoryDefinition(
        name="leaders",
        weight=2,
        terms=(
            "lenin",
            "stalin",
            "trotsky",
            "mao zedong",
            "mao",
            "khrushchev",
            "brezhnev",
            "gorbachev",
            "fidel castro",
            "castro",
            "che guevara",
            "ho chi minh",
            "tito",
            "marx",
            "engels",
            "kim il-sung",
            "deng xiaoping",
            "pol pot",
        ),
    ),
    CategoryDefinition(
        name="institutions",
        weight=2,
        terms=(
            "communist party",
            "central committee",
            "warsaw pact",
            "comecon",
            "khmer rouge",
            "viet cong",
            "red guards",
            "people's liberation army",
            "supreme soviet",
            "stasi",
            "cheka",
            "nkvd",
            "cpsu",
        ),
    ),
    CategoryDefinition(
        name="events",
        weight=2.5,
        terms=(
            "october revolution",
            "russian revolution",
            "cultural revolution",
            "great leap forward",
            "long march",
            "cuban revolution",
            "berlin wall",
            "prague spring",
            "hungarian revolution",
            "cold war",
            "iron curtain",
            "bay of pigs",
        ),
    ),
    CategoryDefinition(
        name="related",
        weight=1,
        terms=(
            "revolution",
            "revolutionary",
            "revolutionaries",
            "uprising",
            "worker",
            "workers",
            "peasant",
            "peasants",
            "insurgent",
            "insurgents",
            "proletarian",
            "collective",
            "strike",
            "labor",
            "labour",
            "trade union",
            "manifesto",
            "comrade",
            "nationalization",
            "eastern bloc",
        ),
    ),
    CategoryDefinition(
        name=LOCATIONS_CATEGORY,
        weight=1,
        terms=(
            "russia",
            "moscow",
            "petrograd",
            "leningrad",
            "kremlin",
            "china",
            "beijing",
            "peking",
            "cuba",
            "havana",
            "vietnam",
            "hanoi",
            "north korea",
            "pyongyang",
            "east germany",
            "east berlin",
            "yugoslavia",
            "cambodia",
            "laos",
            "albania",
            "poland",
            "hungary",
            "czechoslovakia",
            "romania",
            "bulgaria",
            "siberia",
            "tiananmen",
        ),
    ),
)


__all__ = [
    "CategoryDefinition",
    "KEYWORD_TAXONOMY",
    "LOCATIONS_CATEGORY",
]
