"""Token-level scoring of a query against a single field value."""

from typing import Optional, Tuple

from .edit_distance import similarity_ratio
from .match import MatchTier, NO_MATCH, WordMatch
from .normalizer import TextNormalizer
from .typos import check_common_typos

EXACT_SCORE = 10.0
PREFIX_SCORE = 8.0
SUBSTRING_SCORE = 6.0

# Whole-field substring hits short-circuit the per-word path
FIELD_CONTAINS_SCORE = 10.0

# (minimum similarity, multiplier, tier), checked in order
FUZZY_TIERS: Tuple[Tuple[float, float, MatchTier], ...] = (
    (0.8, 6.0, MatchTier.FUZZY_HIGH),
    (0.7, 5.0, MatchTier.FUZZY_MEDIUM),
    (0.6, 4.0, MatchTier.FUZZY_LOW),
)

LENGTH_PENALTY_FLOOR = 0.1
LENGTH_PENALTY_SCALE = 1000.0


class FieldScorer:
    """Scores one normalized field value against a free-text query."""

    def __init__(self) -> None:
        """Initialize the field scorer."""
        self.normalizer = TextNormalizer()

    def score_field(self, query: Optional[str], field_value: Optional[str]) -> float:
        """
        Score a field value against a query.

        Each query token earns 10.0 when the whole field contains it, otherwise
        the best word similarity among the field's words. The summed score is
        scaled down for long fields.

        Args:
            query: Search query
            field_value: Value extracted from an item

        Returns:
            Penalized field score, 0.0 when either side is blank
        """
        normalized_query = self.normalizer.normalize(query)
        normalized_field = self.normalizer.normalize(field_value)

        if not normalized_query or not normalized_field:
            return 0.0

        field_words = normalized_field.split()
        total_score = 0.0

        for token in normalized_query.split():
            if token in normalized_field:
                total_score += FIELD_CONTAINS_SCORE
                continue

            total_score += self.best_word_score(token, field_words)

        return total_score * self.length_penalty(normalized_field)

    def best_word_score(self, token: str, words) -> float:
        """Highest word similarity between token and any of the words."""
        best_score = 0.0
        for word in words:
            best_score = max(best_score, self.word_similarity(token, word))
        return best_score

    def word_similarity(self, token: str, word: str) -> float:
        """Score of the first tier that accepts token against word."""
        return self.classify_word(token, word).score

    def classify_word(self, token: str, word: str) -> WordMatch:
        """
        Run a token/word pair through the tier table.

        Args:
            token: Query token
            word: Field word

        Returns:
            WordMatch for the strongest tier that accepts the pair
        """
        if self.normalizer.is_blank(token) or self.normalizer.is_blank(word):
            return NO_MATCH

        token = token.lower()
        word = word.lower()

        if token == word:
            return WordMatch(MatchTier.EXACT, EXACT_SCORE)

        if word.startswith(token):
            return WordMatch(MatchTier.PREFIX, PREFIX_SCORE)

        if token in word:
            return WordMatch(MatchTier.SUBSTRING, SUBSTRING_SCORE)

        similarity = similarity_ratio(token, word)
        for minimum, multiplier, tier in FUZZY_TIERS:
            if similarity >= minimum:
                return WordMatch(tier, similarity * multiplier)

        return check_common_typos(token, word)

    @staticmethod
    def length_penalty(normalized_field: str) -> float:
        """Multiplier that keeps long fields from dominating on size alone."""
        return max(LENGTH_PENALTY_FLOOR, 1.0 - len(normalized_field) / LENGTH_PENALTY_SCALE)
