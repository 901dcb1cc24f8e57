"""
Cross-module type definitions for paretofront.

This module centralizes NewTypes, type aliases and enums used across
multiple paretofront modules. It has zero paretofront imports
to avoid circular dependency risk.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import NewType, TypeAlias

DatumName = NewType("DatumName", str)

ScoreTable: TypeAlias = Mapping[str, Sequence[float]]  # name -> scores, higher is better


class TieBreak(str, Enum):
    """Ordering among datums that share the same reference-dimension value."""

    INPUT = "input"  # traversal order of the input mapping
    NAME = "name"  # datum name, ascending


class DominanceRule(str, Enum):
    """Rule used to decide whether one score vector dominates another."""

    # No dimension strictly better. Identical vectors dominate each other.
    WEAK = "weak"
    # No dimension worse and at least one strictly better.
    STRICT = "strict"
