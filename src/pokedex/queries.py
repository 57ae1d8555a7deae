"""Natural language intent matching for Pokédex queries."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.pokedex.constants import KNOWN_TYPES

_POKEMON = r"pok[eé]mon"

NUMBER_PATTERNS = [
    re.compile(rf"{_POKEMON}\s+(?:number\s+|no\.?\s*)?#?(\d+)"),
    re.compile(r"#(\d+)"),
    re.compile(rf"(?:number|no\.)\s*#?(\d+)\s+{_POKEMON}"),
]
REGION_PATTERNS = [
    re.compile(rf"random\s+{_POKEMON}\s+from\s+(?:the\s+)?(\w+)"),
    re.compile(rf"random\s+(\w+)\s+region\s+{_POKEMON}"),
]
TYPE_PATTERNS = [
    re.compile(rf"random\s+(\w+)[\s-]+type\s+{_POKEMON}"),
    re.compile(rf"random\s+(\w+)\s+{_POKEMON}"),
    re.compile(rf"random\s+{_POKEMON}\s+of\s+(?:the\s+)?(\w+)\s+type"),
]
RANDOM_PATTERN = re.compile(rf"random\s+{_POKEMON}")

HELP_TEXT = "\n".join(
    [
        "I can help with Pokémon queries! Try asking:",
        '- "What is pokemon #25?"',
        '- "Give me a random pokemon"',
        '- "Give me a random pokemon from kanto"',
        '- "Give me a random fire pokemon"',
    ]
)


class IntentKind(str, Enum):
    LOOKUP_BY_NUMBER = "lookup_by_number"
    RANDOM = "random"
    RANDOM_FROM_REGION = "random_from_region"
    RANDOM_BY_TYPE = "random_by_type"


@dataclass
class QueryIntent:
    kind: IntentKind
    argument: Optional[str] = None

    @property
    def number(self) -> int:
        return int(self.argument)


def _first_match(patterns: list[re.Pattern], text: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def parse_query(query: str) -> Optional[QueryIntent]:
    """
    Match a free-form query against the supported intents

    Checked in order: lookup by number, random from a region, random of a known
    type, plain random. Region names are passed through unchecked so an unknown
    region gets a helpful error; type words must be one of KNOWN_TYPES.

    Returns:
        The matched intent, or None when nothing matches
    """
    text = query.strip().lower()

    number = _first_match(NUMBER_PATTERNS, text)
    if number is not None:
        return QueryIntent(IntentKind.LOOKUP_BY_NUMBER, number)

    region = _first_match(REGION_PATTERNS, text)
    if region is not None:
        return QueryIntent(IntentKind.RANDOM_FROM_REGION, region)

    for pattern in TYPE_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1) in KNOWN_TYPES:
            return QueryIntent(IntentKind.RANDOM_BY_TYPE, match.group(1))

    if RANDOM_PATTERN.search(text):
        return QueryIntent(IntentKind.RANDOM)

    return None
