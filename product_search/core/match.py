"""Match tiers shared by the word scorer and the typo heuristics."""

from enum import Enum
from typing import NamedTuple


class MatchTier(str, Enum):
    """How a query token matched a single field word, strongest first."""

    EXACT = "exact"
    PREFIX = "prefix"
    SUBSTRING = "substring"
    FUZZY_HIGH = "fuzzy_high"
    FUZZY_MEDIUM = "fuzzy_medium"
    FUZZY_LOW = "fuzzy_low"
    MISSING_CHARACTERS = "missing_characters"
    ADJACENT_SWAP = "adjacent_swap"
    NONE = "no_match"


class WordMatch(NamedTuple):
    """Tier that accepted a token/word pair and the score it yields."""

    tier: MatchTier
    score: float


NO_MATCH = WordMatch(MatchTier.NONE, 0.0)
