"""
Tests for fuzzy candidate ranking.
"""

import pytest

from fzweb.core.fuzzy import rank_candidates

NAMES = ["docs", "news", "pypi", "github", "python-docs"]


class TestRankCandidates:
    """Tests for rank_candidates()."""

    def test_empty_query_keeps_insertion_order(self):
        """Test an empty query lists every candidate in order."""
        assert rank_candidates("", NAMES) == NAMES
        assert rank_candidates("   ", NAMES) == NAMES

    def test_empty_query_respects_limit(self):
        """Test the limit applies without a query."""
        assert rank_candidates("", NAMES, limit=2) == ["docs", "news"]

    def test_no_candidates(self):
        """Test ranking an empty list."""
        assert rank_candidates("", []) == []
        assert rank_candidates("docs", []) == []

    def test_best_match_first(self):
        """Test an exact name ranks ahead of partial matches."""
        ranked = rank_candidates("docs", NAMES)

        assert ranked[0] == "docs"
        assert "python-docs" in ranked
        assert "news" not in ranked

    def test_case_insensitive(self):
        """Test case does not affect matching."""
        assert rank_candidates("PYPI", NAMES)[0] == "pypi"

    def test_prefix_query(self):
        """Test a short prefix finds its candidate."""
        assert rank_candidates("pyp", ["docs", "news", "pypi"]) == ["pypi"]

    def test_unmatched_query(self):
        """Test a query unlike every candidate returns nothing."""
        assert rank_candidates("zzzz", NAMES) == []

    def test_ties_keep_insertion_order(self):
        """Test candidates with equal scores stay in list order."""
        assert rank_candidates("abc", ["abc1", "abc2"]) == ["abc1", "abc2"]
        assert rank_candidates("abc", ["abc2", "abc1"]) == ["abc2", "abc1"]

    def test_limit_applies_to_matches(self):
        """Test the limit truncates ranked results."""
        assert rank_candidates("abc", ["abc1", "abc2", "abc3"], limit=2) == [
            "abc1",
            "abc2",
        ]

    @pytest.mark.parametrize("query", ["d", "doc", "hub", "py-d", "x", "!!"])
    def test_results_are_candidates(self, query):
        """Test ranking never produces a string outside the candidate list."""
        ranked = rank_candidates(query, NAMES, score_cutoff=0)

        assert set(ranked) <= set(NAMES)
        assert len(ranked) == len(set(ranked))
