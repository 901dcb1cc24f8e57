"""Tests for dominance and strict Pareto filtering."""

import numpy as np
import pytest

from paretofront.scoring.dominance import dominates, get_dominance_test, strictly_dominates
from paretofront.scoring.pareto import (
    StrictParetoFilter,
    build_score_matrix,
    compute_pareto_frontier,
    extract_pareto_nondominated,
    get_dominated_names,
    get_dominating_names,
    rank_datums,
)
from paretofront.types import DominanceRule, TieBreak

# Pareto front of the example score file: no datum beats another on all scores
EXAMPLE_FRONT = {
    "datum2_winner": [831.263, 39.031, 1023.151, 1418.738],
    "datum3_winner": [806.411, 782.751, 1671.403, 1014.266],
    "datum5_winner": [302.505, 150.483, 1952.222, 1119.167],
    "datum4_winner": [209.139, 812.053, 1042.86, 3307.762],
    "datum1_winner": [51.123, 187.342, 1290.674, 36769.698],
    "datum934": [15.839, 11.557, 16.696, 68278.517],
    "datum1922": [1.037, 14.427, 13.566, 437904.174],
    "datum490": [7.952, 5.648, 12.075, 90505.479],
    "datum268": [16.503, 15.505, 19.59, 46050.783],
}

SCENARIO_A = {
    "a": [10.0, 10.0],
    "b": [5.0, 20.0],
    "c": [1.0, 1.0],
    "d": [10.0, 10.0],
}


def random_scores(seed: int, n_datums: int = 40, n_scores: int = 3) -> dict[str, list[float]]:
    rng = np.random.default_rng(seed)
    values = rng.uniform(0.0, 100.0, size=(n_datums, n_scores))
    return {f"datum{i}": [float(v) for v in row] for i, row in enumerate(values)}


class TestDominates:
    """Tests for the dominance test."""

    def test_clear_dominance(self) -> None:
        """A clearly dominates B."""
        a = np.array([0.9, 0.8, 0.85])
        b = np.array([0.7, 0.6, 0.65])

        assert dominates(a, b) is True
        assert dominates(b, a) is False

    def test_identical_vectors_dominate_each_other(self) -> None:
        """Identical vectors dominate each other under the weak rule."""
        a = np.array([10.0, 10.0])
        b = np.array([10.0, 10.0])

        assert dominates(a, b) is True
        assert dominates(b, a) is True

    def test_pareto_incomparable(self) -> None:
        """Neither dominates when each is better on different dims."""
        a = np.array([0.9, 0.5])
        b = np.array([0.5, 0.9])

        assert dominates(a, b) is False
        assert dominates(b, a) is False

    def test_equal_on_some_dims(self) -> None:
        """Being equal on some dims and worse on the rest is dominated."""
        a = np.array([5.0, 7.0, 3.0])
        b = np.array([5.0, 6.0, 3.0])

        assert dominates(a, b) is True
        assert dominates(b, a) is False


class TestStrictlyDominates:
    """Tests for the textbook dominance rule."""

    def test_tie_no_dominance(self) -> None:
        """Equal scores mean no dominance."""
        a = np.array([0.8, 0.7, 0.75])
        b = np.array([0.8, 0.7, 0.75])

        assert strictly_dominates(a, b) is False
        assert strictly_dominates(b, a) is False

    def test_clear_dominance(self) -> None:
        """One strictly better dim with the rest equal is enough."""
        a = np.array([5.0, 7.0, 3.0])
        b = np.array([5.0, 6.0, 3.0])

        assert strictly_dominates(a, b) is True
        assert strictly_dominates(b, a) is False

    @pytest.mark.parametrize(
        ("rule", "expected"),
        [
            pytest.param(DominanceRule.WEAK, dominates, id="weak"),
            pytest.param(DominanceRule.STRICT, strictly_dominates, id="strict"),
        ],
    )
    def test_get_dominance_test(self, rule: DominanceRule, expected) -> None:
        """Each rule maps to its dominance function."""
        assert get_dominance_test(rule) is expected


class TestBuildScoreMatrix:
    """Tests for stacking score vectors."""

    def test_rows_follow_mapping_order(self) -> None:
        """Rows keep the iteration order of the mapping."""
        names, matrix = build_score_matrix({"x": [1, 2], "y": [3, 4]})

        assert names == ["x", "y"]
        assert matrix.shape == (2, 2)
        assert matrix.dtype == np.float64
        assert matrix[1].tolist() == [3.0, 4.0]

    def test_empty_mapping(self) -> None:
        """Empty input gives an empty matrix."""
        names, matrix = build_score_matrix({})

        assert names == []
        assert matrix.shape == (0, 0)

    def test_unequal_lengths_raise(self) -> None:
        """Score vectors of different lengths are rejected."""
        with pytest.raises(ValueError, match="equal length"):
            build_score_matrix({"x": [1.0, 2.0], "y": [1.0, 2.0, 3.0]})


class TestRankDatums:
    """Tests for the initial ranking."""

    def test_descending_on_reference_score(self) -> None:
        """Rows are ordered highest first on the reference score."""
        names, matrix = build_score_matrix({"p": [10, 1], "q": [1, 10], "r": [5, 5]})

        assert rank_datums(matrix, names, rank_index=0) == [0, 2, 1]
        assert rank_datums(matrix, names, rank_index=1) == [1, 2, 0]

    def test_ties_keep_input_order(self) -> None:
        """Tied rows keep their input order by default."""
        names, matrix = build_score_matrix({"z": [3, 0], "a": [3, 1], "m": [7, 0]})

        assert rank_datums(matrix, names) == [2, 0, 1]

    def test_ties_by_name(self) -> None:
        """TieBreak.NAME orders tied rows by name."""
        names, matrix = build_score_matrix({"z": [3, 0], "a": [3, 1], "m": [7, 0]})

        assert rank_datums(matrix, names, tie_break=TieBreak.NAME) == [2, 1, 0]


class TestParetoFrontier:
    """Tests for strict Pareto frontier computation."""

    def test_empty_input(self) -> None:
        """No datums means an empty frontier, not an error."""
        result = compute_pareto_frontier({})

        assert result.frontier_names == set()
        assert result.ranked_names == []

    def test_single_datum(self) -> None:
        """A single datum is always on the frontier."""
        result = compute_pareto_frontier({"only": [0.8, 0.7]})

        assert result.frontier_names == {"only"}

    def test_identical_pair_keeps_first_ranked(self) -> None:
        """Of two identical datums only the first processed survives."""
        result = compute_pareto_frontier(SCENARIO_A)

        assert result.frontier_names == {"a", "b"}
        assert result.excluded_by == {"d": "a", "c": "a"}

    def test_identical_pair_follows_input_order(self) -> None:
        """Reversing the input order flips which identical datum survives."""
        reordered = {name: SCENARIO_A[name] for name in ["d", "c", "b", "a"]}

        assert extract_pareto_nondominated(reordered) == {"d", "b"}

    def test_identical_pair_with_name_tie_break(self) -> None:
        """TieBreak.NAME makes the survivor independent of input order."""
        reordered = {name: SCENARIO_A[name] for name in ["d", "c", "b", "a"]}
        result = compute_pareto_frontier(reordered, tie_break=TieBreak.NAME)

        assert result.frontier_names == {"a", "b"}

    def test_identical_pair_with_strict_rule(self) -> None:
        """Under the strict rule identical datums both survive."""
        result = compute_pareto_frontier(SCENARIO_A, rule=DominanceRule.STRICT)

        assert result.frontier_names == {"a", "b", "d"}

    @pytest.mark.parametrize("rank_index", [0, 1, 2, 3])
    def test_example_front_regardless_of_rank_index(self, rank_index: int) -> None:
        """A mutually non-dominated set survives whatever score ranks it."""
        result = compute_pareto_frontier(EXAMPLE_FRONT, rank_index=rank_index)

        assert result.frontier_names == set(EXAMPLE_FRONT)

    def test_dominant_datum_is_sole_survivor(self) -> None:
        """One datum better on every score excludes all the others."""
        scores = dict(EXAMPLE_FRONT)
        scores["thebest"] = [99999999.0] * 4

        assert extract_pareto_nondominated(scores) == {"thebest"}

    def test_rank_index_out_of_range(self) -> None:
        """rank_index must address one of the scores."""
        with pytest.raises(ValueError, match="out of range"):
            compute_pareto_frontier({"x": [1.0, 2.0]}, rank_index=2)

    def test_negative_rank_index(self) -> None:
        """Negative rank_index is rejected."""
        with pytest.raises(ValueError, match=">= 0"):
            compute_pareto_frontier({"x": [1.0, 2.0]}, rank_index=-1)

    def test_input_is_not_modified(self) -> None:
        """The caller's mapping is left untouched."""
        scores = {name: list(values) for name, values in SCENARIO_A.items()}
        compute_pareto_frontier(scores)

        assert scores == SCENARIO_A


class TestFrontierProperties:
    """Properties that hold for any input without ties on the ranking score."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_frontier_is_subset_of_input(self, seed: int) -> None:
        scores = random_scores(seed)
        result = compute_pareto_frontier(scores)

        assert result.frontier_names <= set(scores)
        assert sorted(result.ranked_names) == sorted(scores)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_frontier_members_do_not_dominate_each_other(self, seed: int) -> None:
        scores = random_scores(seed)
        result = compute_pareto_frontier(scores)

        for a in result.frontier_names:
            for b in result.frontier_names:
                if a != b:
                    assert not dominates(np.array(scores[a]), np.array(scores[b]))

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_every_exclusion_traces_to_a_survivor(self, seed: int) -> None:
        scores = random_scores(seed)
        result = compute_pareto_frontier(scores)

        excluded = set(scores) - result.frontier_names
        assert set(result.excluded_by) == excluded
        for name, survivor in result.excluded_by.items():
            assert survivor in result.frontier_names
            assert dominates(np.array(scores[survivor]), np.array(scores[name]))

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_idempotent(self, seed: int) -> None:
        """Filtering the frontier again returns the same frontier."""
        scores = random_scores(seed)
        frontier = extract_pareto_nondominated(scores)

        again = extract_pareto_nondominated({name: scores[name] for name in frontier})

        assert again == frontier


class TestDominanceQueries:
    """Tests for dominating/dominated lookups."""

    def test_get_dominating_names(self) -> None:
        result = compute_pareto_frontier(SCENARIO_A)

        assert get_dominating_names(result, "c") == ["a", "b", "d"]
        assert get_dominating_names(result, "d") == ["a"]
        assert get_dominating_names(result, "b") == []

    def test_get_dominated_names(self) -> None:
        result = compute_pareto_frontier(SCENARIO_A)

        assert get_dominated_names(result, "a") == ["c", "d"]
        assert get_dominated_names(result, "c") == []

    def test_unknown_name(self) -> None:
        result = compute_pareto_frontier(SCENARIO_A)

        assert get_dominating_names(result, "missing") == []
        assert get_dominated_names(result, "missing") == []


class TestStrictParetoFilter:
    """Tests for the configured strict filter."""

    def test_extract(self) -> None:
        pareto_filter = StrictParetoFilter(rank_index=1)

        assert pareto_filter.extract(SCENARIO_A) == {"a", "b"}

    def test_compute_records_parameters(self) -> None:
        result = StrictParetoFilter(rank_index=1).compute(SCENARIO_A)

        assert result.rank_index == 1
        assert result.smoothness is None
        assert result.ranked_names[0] == "b"

    def test_negative_rank_index_rejected(self) -> None:
        with pytest.raises(ValueError):
            StrictParetoFilter(rank_index=-1)
