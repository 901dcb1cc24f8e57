"""
Scoring module for Pareto dominance filtering.

Implements the strict filter over raw scores and the fuzzy filter
over quantized scores, both built on greedy front extraction.
"""

from paretofront.scoring.dominance import (
    dominates,
    get_dominance_test,
    strictly_dominates,
)
from paretofront.scoring.fuzzy import (
    DegenerateDimensionError,
    FuzzyParetoFilter,
    compute_fuzzy_pareto_frontier,
    extract_fuzzy_pareto_nondominated,
    quantize_scores,
)
from paretofront.scoring.pareto import (
    ParetoResult,
    StrictParetoFilter,
    build_score_matrix,
    compute_pareto_frontier,
    extract_front,
    extract_pareto_nondominated,
    get_dominated_names,
    get_dominating_names,
    rank_datums,
)

__all__ = [
    "DegenerateDimensionError",
    "FuzzyParetoFilter",
    "ParetoResult",
    "StrictParetoFilter",
    "build_score_matrix",
    "compute_fuzzy_pareto_frontier",
    "compute_pareto_frontier",
    "dominates",
    "extract_front",
    "extract_fuzzy_pareto_nondominated",
    "extract_pareto_nondominated",
    "get_dominance_test",
    "get_dominated_names",
    "get_dominating_names",
    "quantize_scores",
    "rank_datums",
    "strictly_dominates",
]
