"""Aggregation of field scores into ranked search results."""

from typing import Iterable, List, Optional, TypeVar

from ..models.response import SearchResult
from .fields import SearchField
from .scorer import FieldScorer

ItemT = TypeVar("ItemT")


def score_item(
    item: ItemT,
    query: str,
    fields: Iterable[SearchField[ItemT]],
    scorer: FieldScorer,
) -> Optional[SearchResult[ItemT]]:
    """
    Combine the weighted field scores of one item.

    Only fields scoring above zero contribute to the total and to the matched
    field count.

    Args:
        item: Candidate item
        query: Normalized search query
        fields: Registered search fields
        scorer: Field scorer

    Returns:
        SearchResult for the item, or None when its total is not positive
    """
    total_score = 0.0
    matched_fields = 0

    for field in fields:
        field_value = field.extract(item)
        if scorer.normalizer.is_blank(field_value):
            continue

        score = scorer.score_field(query, field_value)
        if score > 0:
            total_score += score * field.weight
            matched_fields += 1

    if total_score > 0:
        return SearchResult(item=item, score=total_score, matched_fields=matched_fields)

    return None


def rank_results(
    results: Iterable[SearchResult[ItemT]],
    max_results: Optional[int],
) -> List[SearchResult[ItemT]]:
    """
    Order results by score, then matched field count, and keep the top entries.

    The sort is stable, so items tied on both keys keep their input order.

    Args:
        results: Scored results
        max_results: Maximum number of results, None for no limit

    Returns:
        Ranked results, empty for a non-positive limit
    """
    ranked = sorted(results, key=lambda r: (r.score, r.matched_fields), reverse=True)

    if max_results is None:
        return ranked
    if max_results <= 0:
        return []

    return ranked[:max_results]
