"""Core search engine functionality."""

from .engine import FuzzySearchEngine
from .fields import FieldRegistry, SearchField
from .scorer import FieldScorer
from .normalizer import TextNormalizer
from .cache import QueryCache
from .match import MatchTier, WordMatch
from .edit_distance import levenshtein_distance

__all__ = [
    "FuzzySearchEngine",
    "FieldRegistry",
    "SearchField",
    "FieldScorer",
    "TextNormalizer",
    "QueryCache",
    "MatchTier",
    "WordMatch",
    "levenshtein_distance",
]
