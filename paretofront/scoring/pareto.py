"""Pareto non-dominated set extraction over raw scores."""

from dataclasses import dataclass, field

import numpy as np
import structlog

from paretofront.config import ParetoConfig
from paretofront.scoring.dominance import get_dominance_test
from paretofront.types import DatumName, DominanceRule, ScoreTable, TieBreak

logger = structlog.get_logger()


@dataclass
class ParetoResult:
    """Result of Pareto frontier computation."""

    # Names of the datums on the non-dominated front
    frontier_names: set[DatumName]

    # Names in the order they were considered for admission
    ranked_names: list[DatumName]

    # Excluded name -> name of the survivor that kept it out
    excluded_by: dict[DatumName, DatumName]

    # Score matrix used for the dominance tests (quantized for the fuzzy filter)
    score_matrix: np.ndarray

    # Mapping from matrix row to datum name
    name_mapping: list[DatumName] = field(default_factory=list)

    rank_index: int = 0
    rule: DominanceRule = DominanceRule.WEAK

    # Quantization resolution, None for the strict filter
    smoothness: int | None = None


def build_score_matrix(name_to_scores: ScoreTable) -> tuple[list[DatumName], np.ndarray]:
    """
    Stack score vectors into a matrix of shape (n_datums, n_scores).

    Rows follow the iteration order of the mapping.

    Args:
        name_to_scores: Dict mapping name -> scores

    Returns:
        Tuple of (names, score_matrix)

    Raises:
        ValueError: If the score vectors do not all have the same length
    """
    names = [DatumName(name) for name in name_to_scores]
    if not names:
        return [], np.zeros((0, 0), dtype=np.float64)

    lengths = {len(name_to_scores[name]) for name in names}
    if len(lengths) != 1:
        raise ValueError(f"Score vectors must have equal length, got lengths {sorted(lengths)}")

    score_matrix = np.array(
        [[float(v) for v in name_to_scores[name]] for name in names],
        dtype=np.float64,
    ).reshape(len(names), lengths.pop())
    return names, score_matrix


def check_rank_index(score_matrix: np.ndarray, rank_index: int) -> None:
    """Raise ValueError if rank_index does not address a score dimension."""
    if rank_index < 0:
        raise ValueError(f"rank_index must be >= 0, got {rank_index}")

    n_datums, n_scores = score_matrix.shape
    if n_datums and rank_index >= n_scores:
        raise ValueError(f"rank_index {rank_index} out of range for {n_scores} scores per datum")


def rank_datums(
    score_matrix: np.ndarray,
    names: list[DatumName],
    rank_index: int = 0,
    tie_break: TieBreak = TieBreak.INPUT,
) -> list[int]:
    """
    Order matrix rows by the reference score, highest first.

    The sort is stable, so rows tied on the reference score keep the order
    they had before sorting: input order, or name order with TieBreak.NAME.

    Args:
        score_matrix: Matrix of shape (n_datums, n_scores)
        names: Datum name of each row
        rank_index: Column used for ranking
        tie_break: Ordering among rows tied on the reference score

    Returns:
        Row indices in processing order
    """
    n_datums = score_matrix.shape[0]
    if n_datums == 0:
        return []

    if tie_break is TieBreak.NAME:
        base = np.array(sorted(range(n_datums), key=names.__getitem__), dtype=np.intp)
    else:
        base = np.arange(n_datums)

    column = score_matrix[base, rank_index]
    order = base[np.argsort(-column, kind="stable")]
    return [int(i) for i in order]


def extract_front(
    score_matrix: np.ndarray,
    order: list[int],
    rule: DominanceRule = DominanceRule.WEAK,
) -> tuple[list[int], dict[int, int]]:
    """
    Greedily build the non-dominated set.

    Starting with the highest-ranked row, each row is compared against the
    survivors admitted so far. If any survivor dominates it, the row is
    skipped; otherwise it joins the survivors immediately, so later rows
    are compared against it too.

    Rows tied on the ranking score are admitted in processing order, so a
    later tied row that beats an earlier survivor elsewhere does not evict it.

    Args:
        score_matrix: Matrix of shape (n_datums, n_scores)
        order: Row indices in processing order
        rule: Dominance rule used for the comparisons

    Returns:
        Tuple of (surviving row indices in admission order,
        excluded row -> row of the survivor that excluded it)
    """
    test = get_dominance_test(rule)
    survivors: list[int] = []
    excluded_by: dict[int, int] = {}

    for idx in order:
        candidate = score_matrix[idx]
        dominated = False
        for dom_idx in survivors:
            if test(score_matrix[dom_idx], candidate):
                excluded_by[idx] = dom_idx
                dominated = True
                break

        if not dominated:
            survivors.append(idx)

    return survivors, excluded_by


def frontier_from_matrix(
    names: list[DatumName],
    score_matrix: np.ndarray,
    rank_index: int = 0,
    tie_break: TieBreak = TieBreak.INPUT,
    rule: DominanceRule = DominanceRule.WEAK,
    smoothness: int | None = None,
) -> ParetoResult:
    """Rank the rows of ``score_matrix`` and extract their non-dominated front."""
    check_rank_index(score_matrix, rank_index)

    order = rank_datums(score_matrix, names, rank_index, tie_break)
    survivors, excluded_by = extract_front(score_matrix, order, rule)

    return ParetoResult(
        frontier_names={names[i] for i in survivors},
        ranked_names=[names[i] for i in order],
        excluded_by={names[i]: names[j] for i, j in excluded_by.items()},
        score_matrix=score_matrix,
        name_mapping=names,
        rank_index=rank_index,
        rule=rule,
        smoothness=smoothness,
    )


def compute_pareto_frontier(
    name_to_scores: ScoreTable,
    rank_index: int = 0,
    tie_break: TieBreak = TieBreak.INPUT,
    rule: DominanceRule = DominanceRule.WEAK,
) -> ParetoResult:
    """
    Compute the Pareto non-dominated set over raw scores.

    Args:
        name_to_scores: Dict mapping name -> scores (higher is better)
        rank_index: Index of the score used for the initial ranking
        tie_break: Ordering among datums tied on the ranking score
        rule: Dominance rule

    Returns:
        ParetoResult with the frontier names and the ranking used
    """
    names, score_matrix = build_score_matrix(name_to_scores)
    return frontier_from_matrix(names, score_matrix, rank_index, tie_break, rule)


def extract_pareto_nondominated(
    name_to_scores: ScoreTable, rank_index: int = 0
) -> set[DatumName]:
    """Return the names of the Pareto non-dominated datums."""
    return compute_pareto_frontier(name_to_scores, rank_index=rank_index).frontier_names


def get_dominating_names(pareto_result: ParetoResult, name: str) -> list[DatumName]:
    """
    Get the datums that dominate the given datum.

    Every other row of the result's score matrix is tested, not only
    the survivors, using the result's dominance rule.

    Args:
        pareto_result: Result from compute_pareto_frontier
        name: Name of the datum to check

    Returns:
        Names of the datums that dominate it, in row order
    """
    if name not in pareto_result.name_mapping:
        return []

    test = get_dominance_test(pareto_result.rule)
    matrix = pareto_result.score_matrix
    idx = pareto_result.name_mapping.index(name)
    return [
        other
        for j, other in enumerate(pareto_result.name_mapping)
        if j != idx and test(matrix[j], matrix[idx])
    ]


def get_dominated_names(pareto_result: ParetoResult, name: str) -> list[DatumName]:
    """
    Get the datums dominated by the given datum.

    Args:
        pareto_result: Result from compute_pareto_frontier
        name: Name of the datum to check

    Returns:
        Names of the datums it dominates, in row order
    """
    if name not in pareto_result.name_mapping:
        return []

    test = get_dominance_test(pareto_result.rule)
    matrix = pareto_result.score_matrix
    idx = pareto_result.name_mapping.index(name)
    return [
        other
        for j, other in enumerate(pareto_result.name_mapping)
        if j != idx and test(matrix[idx], matrix[j])
    ]


@dataclass(frozen=True)
class StrictParetoFilter:
    """Pareto filter comparing raw scores."""

    rank_index: int = 0
    tie_break: TieBreak = TieBreak.INPUT
    rule: DominanceRule = DominanceRule.WEAK

    def __post_init__(self) -> None:
        if self.rank_index < 0:
            raise ValueError(f"rank_index must be >= 0, got {self.rank_index}")

    @classmethod
    def from_config(cls, config: ParetoConfig) -> "StrictParetoFilter":
        """Build a filter from a ParetoConfig."""
        return cls(
            rank_index=config.rank_index,
            tie_break=config.tie_break,
            rule=config.dominance_rule,
        )

    def compute(self, name_to_scores: ScoreTable) -> ParetoResult:
        result = compute_pareto_frontier(
            name_to_scores,
            rank_index=self.rank_index,
            tie_break=self.tie_break,
            rule=self.rule,
        )
        logger.info(
            "pareto_frontier_computed",
            n_datums=len(result.name_mapping),
            frontier_size=len(result.frontier_names),
            rank_index=self.rank_index,
        )
        return result

    def extract(self, name_to_scores: ScoreTable) -> set[DatumName]:
        return self.compute(name_to_scores).frontier_names
