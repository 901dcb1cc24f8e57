"""Dominance tests between two score vectors."""

from collections.abc import Callable

import numpy as np

from paretofront.types import DominanceRule

DominanceTest = Callable[[np.ndarray, np.ndarray], bool]


def dominates(dom_scores: np.ndarray, candidate_scores: np.ndarray) -> bool:
    """
    Check if a survivor dominates a candidate for admission.

    The candidate is admitted only if it beats the survivor on at least
    one dimension. Consequently two identical vectors dominate each other,
    and whichever of them is processed first keeps the other out.

    Args:
        dom_scores: Scores of the datum that may be dominant
        candidate_scores: Scores of the datum that may be dominated

    Returns:
        True if candidate_scores is dominated by dom_scores
    """
    return not bool(np.any(candidate_scores > dom_scores))


def strictly_dominates(dom_scores: np.ndarray, candidate_scores: np.ndarray) -> bool:
    """
    Check if a survivor dominates a candidate under the textbook rule.

    The survivor must be no worse on every dimension and strictly better
    on at least one, so identical vectors never dominate each other.

    Args:
        dom_scores: Scores of the datum that may be dominant
        candidate_scores: Scores of the datum that may be dominated

    Returns:
        True if candidate_scores is strictly dominated by dom_scores
    """
    if np.any(candidate_scores > dom_scores):
        return False

    return bool(np.any(dom_scores > candidate_scores))


def get_dominance_test(rule: DominanceRule) -> DominanceTest:
    """Return the dominance function implementing ``rule``."""
    if rule is DominanceRule.STRICT:
        return strictly_dominates
    return dominates
