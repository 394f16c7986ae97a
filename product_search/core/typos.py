"""Detection of common typing mistakes that edit distance scores too harshly."""

from .match import MatchTier, NO_MATCH, WordMatch

MISSING_CHARACTERS_SCORE = 3.0
ADJACENT_SWAP_SCORE = 3.5

# Maximum number of characters the shorter string may be missing
MAX_MISSING_CHARACTERS = 2


def is_missing_characters(shorter: str, longer: str) -> bool:
    """
    Check whether ``shorter`` is ``longer`` with up to two characters dropped.

    The walk is greedy: on a mismatch only the cursor of the longer string
    advances, and the check aborts once more than two characters are skipped.

    Args:
        shorter: Candidate string with missing characters
        longer: Reference string

    Returns:
        True when shorter is a subsequence of longer within the skip budget
    """
    if abs(len(shorter) - len(longer)) > MAX_MISSING_CHARACTERS:
        return False
    if len(shorter) >= len(longer):
        return False

    shorter_index = 0
    longer_index = 0
    missing_count = 0

    while shorter_index < len(shorter) and longer_index < len(longer):
        if shorter[shorter_index] == longer[longer_index]:
            shorter_index += 1
            longer_index += 1
        else:
            missing_count += 1
            if missing_count > MAX_MISSING_CHARACTERS:
                return False
            longer_index += 1

    return shorter_index == len(shorter)


def is_adjacent_swap(first: str, second: str) -> bool:
    """
    Check whether two equal-length strings differ by one adjacent transposition.

    Args:
        first: First string
        second: Second string

    Returns:
        True when exactly two neighbouring characters are swapped
    """
    if len(first) != len(second):
        return False

    differences = [i for i, (a, b) in enumerate(zip(first, second)) if a != b]

    if len(differences) != 2:
        return False

    pos1, pos2 = differences
    if abs(pos1 - pos2) != 1:
        return False

    return first[pos1] == second[pos2] and first[pos2] == second[pos1]


def check_common_typos(token: str, word: str) -> WordMatch:
    """
    Classify a token/word pair that failed every similarity tier.

    Checks run in a fixed order: characters missing from the token, characters
    missing from the word, then an adjacent swap.

    Args:
        token: Query token
        word: Field word

    Returns:
        WordMatch scoring 3.0 for missing characters, 3.5 for an adjacent swap,
        or the zero-score NONE match
    """
    token = token.lower()
    word = word.lower()

    if is_missing_characters(token, word):
        return WordMatch(MatchTier.MISSING_CHARACTERS, MISSING_CHARACTERS_SCORE)

    if is_missing_characters(word, token):
        return WordMatch(MatchTier.MISSING_CHARACTERS, MISSING_CHARACTERS_SCORE)

    if is_adjacent_swap(token, word):
        return WordMatch(MatchTier.ADJACENT_SWAP, ADJACENT_SWAP_SCORE)

    return NO_MATCH
