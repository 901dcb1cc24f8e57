"""
Fuzzy Pareto non-dominated set extraction.

Scores are normalized by the highest value of their dimension and quantized
to integers between 0 and ``smoothness`` before comparison. Differences
smaller than one quantization step become ties, which collapses near-duplicate
datums and yields a smaller set than the strict filter.
"""

from dataclasses import dataclass

import numpy as np
import structlog

from paretofront.config import MAX_SMOOTHNESS, ParetoConfig
from paretofront.scoring.pareto import (
    ParetoResult,
    build_score_matrix,
    check_rank_index,
    frontier_from_matrix,
)
from paretofront.types import DatumName, DominanceRule, ScoreTable, TieBreak

logger = structlog.get_logger()

DEFAULT_SMOOTHNESS = 10


class DegenerateDimensionError(ValueError):
    """Raised when a score dimension has no positive value to normalize against."""

    def __init__(self, dimensions: list[int]):
        self.dimensions = dimensions
        super().__init__(
            f"Score dimension(s) {dimensions} have no positive value; "
            "cannot normalize by a maximum of zero"
        )


def compute_dimension_maxima(score_matrix: np.ndarray) -> np.ndarray:
    """
    Highest value of each score dimension across all datums.

    Maxima start from zero, matching the assumption that scores are non-negative.
    """
    if score_matrix.shape[0] == 0:
        return np.zeros(score_matrix.shape[1], dtype=np.float64)
    return np.maximum(score_matrix.max(axis=0), 0.0)


def check_smoothness(smoothness: int) -> None:
    """Raise ValueError unless 1 <= smoothness <= MAX_SMOOTHNESS."""
    if smoothness < 1:
        raise ValueError(f"smoothness must be >= 1, got {smoothness}")
    if smoothness > MAX_SMOOTHNESS:
        raise ValueError(f"smoothness must be <= {MAX_SMOOTHNESS}, got {smoothness}")


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, with halves rounded towards +inf."""
    return np.floor(values + 0.5)


def quantize_scores(score_matrix: np.ndarray, smoothness: int = DEFAULT_SMOOTHNESS) -> np.ndarray:
    """
    Convert raw scores to integers between 0 and ``smoothness``.

    Each score is divided by the highest score of its dimension, multiplied
    by ``smoothness`` and rounded half up.

    Args:
        score_matrix: Matrix of shape (n_datums, n_scores), non-negative
        smoothness: Number of quantization steps (higher = less fuzzy)

    Returns:
        Integer matrix with the same shape as score_matrix

    Raises:
        ValueError: If smoothness is not between 1 and MAX_SMOOTHNESS
        DegenerateDimensionError: If a dimension has no positive value
    """
    check_smoothness(smoothness)

    if score_matrix.shape[0] == 0:
        return np.zeros(score_matrix.shape, dtype=np.int64)

    highest = compute_dimension_maxima(score_matrix)
    degenerate = np.where(highest <= 0)[0]
    if degenerate.size:
        raise DegenerateDimensionError([int(i) for i in degenerate])

    normalized = score_matrix / highest
    return round_half_up(normalized * smoothness).astype(np.int64)


def compute_fuzzy_pareto_frontier(
    name_to_scores: ScoreTable,
    smoothness: int = DEFAULT_SMOOTHNESS,
    rank_index: int = 0,
    tie_break: TieBreak = TieBreak.INPUT,
    rule: DominanceRule = DominanceRule.WEAK,
) -> ParetoResult:
    """
    Compute the fuzzy Pareto non-dominated set.

    Ranking and dominance both use the quantized scores; the caller's
    raw scores are left untouched for reporting.

    Args:
        name_to_scores: Dict mapping name -> scores (non-negative, higher is better)
        smoothness: Number of quantization steps (higher = less fuzzy)
        rank_index: Index of the score used for the initial ranking
        tie_break: Ordering among datums tied on the ranking score
        rule: Dominance rule

    Returns:
        ParetoResult whose score_matrix holds the quantized scores
    """
    names, raw_matrix = build_score_matrix(name_to_scores)
    check_rank_index(raw_matrix, rank_index)

    quantized = quantize_scores(raw_matrix, smoothness)
    return frontier_from_matrix(
        names,
        quantized,
        rank_index=rank_index,
        tie_break=tie_break,
        rule=rule,
        smoothness=smoothness,
    )


def extract_fuzzy_pareto_nondominated(
    name_to_scores: ScoreTable,
    smoothness: int = DEFAULT_SMOOTHNESS,
    rank_index: int = 0,
) -> set[DatumName]:
    """Return the names of the fuzzy Pareto non-dominated datums."""
    return compute_fuzzy_pareto_frontier(
        name_to_scores, smoothness=smoothness, rank_index=rank_index
    ).frontier_names


@dataclass(frozen=True)
class FuzzyParetoFilter:
    """Pareto filter comparing quantized scores."""

    smoothness: int = DEFAULT_SMOOTHNESS
    rank_index: int = 0
    tie_break: TieBreak = TieBreak.INPUT
    rule: DominanceRule = DominanceRule.WEAK

    def __post_init__(self) -> None:
        check_smoothness(self.smoothness)
        if self.rank_index < 0:
            raise ValueError(f"rank_index must be >= 0, got {self.rank_index}")

    @classmethod
    def from_config(cls, config: ParetoConfig) -> "FuzzyParetoFilter":
        """Build a filter from a ParetoConfig."""
        return cls(
            smoothness=config.smoothness,
            rank_index=config.rank_index,
            tie_break=config.tie_break,
            rule=config.dominance_rule,
        )

    def compute(self, name_to_scores: ScoreTable) -> ParetoResult:
        result = compute_fuzzy_pareto_frontier(
            name_to_scores,
            smoothness=self.smoothness,
            rank_index=self.rank_index,
            tie_break=self.tie_break,
            rule=self.rule,
        )
        logger.info(
            "fuzzy_pareto_frontier_computed",
            n_datums=len(result.name_mapping),
            frontier_size=len(result.frontier_names),
            smoothness=self.smoothness,
            rank_index=self.rank_index,
        )
        return result

    def extract(self, name_to_scores: ScoreTable) -> set[DatumName]:
        return self.compute(name_to_scores).frontier_names
