"""Edit distance calculation used by the fuzzy word scorer."""

from typing import List


def levenshtein_distance(source: str, target: str) -> int:
    """
    Calculate the Levenshtein (edit) distance between two strings.

    Every insertion, deletion and substitution costs 1. The distance is
    computed over the full (len(source) + 1) x (len(target) + 1) table.

    Args:
        source: First string
        target: Second string

    Returns:
        Minimum number of single-character edits turning source into target

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "abc")
        3
    """
    if not source:
        return len(target) if target else 0
    if not target:
        return len(source)

    source_length = len(source)
    target_length = len(target)

    matrix: List[List[int]] = [[0] * (target_length + 1) for _ in range(source_length + 1)]

    for i in range(source_length + 1):
        matrix[i][0] = i
    for j in range(target_length + 1):
        matrix[0][j] = j

    for i in range(1, source_length + 1):
        for j in range(1, target_length + 1):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,  # deletion
                matrix[i][j - 1] + 1,  # insertion
                matrix[i - 1][j - 1] + cost,  # substitution
            )

    return matrix[source_length][target_length]


def similarity_ratio(source: str, target: str) -> float:
    """
    Normalized similarity in [0, 1] derived from the edit distance.

    Args:
        source: First string
        target: Second string

    Returns:
        1 - distance / max length, or 0.0 when both strings are empty
    """
    max_len = max(len(source), len(target))
    if max_len == 0:
        return 0.0

    return 1.0 - (levenshtein_distance(source, target) / max_len)
