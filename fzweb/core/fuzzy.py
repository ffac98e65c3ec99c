"""
Fuzzy ranking of selection candidates.
"""

from typing import List, Sequence

from rapidfuzz import fuzz, process, utils

FUZZY_SCORE_CUTOFF = 50.0
FUZZY_LIMIT = 20


def rank_candidates(
    query: str,
    candidates: Sequence[str],
    score_cutoff: float = FUZZY_SCORE_CUTOFF,
    limit: int = FUZZY_LIMIT,
) -> List[str]:
    """
    Rank candidates against a query, best match first.

    An empty query keeps insertion order. Candidates scoring below
    score_cutoff are dropped; equal scores keep insertion order. The result
    only ever contains items of ``candidates``.

    Args:
        query: Text typed by the user
        candidates: Names to rank
        score_cutoff: Minimum WRatio score (0-100)
        limit: Maximum number of results

    Returns:
        Matching candidates, at most ``limit`` of them
    """
    if not query.strip():
        return list(candidates[:limit])

    scored = process.extract(
        query,
        candidates,
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        score_cutoff=score_cutoff,
        limit=None,
    )

    # (choice, score, index)
    scored.sort(key=lambda match: (-match[1], match[2]))
    return [choice for choice, _, _ in scored[:limit]]
