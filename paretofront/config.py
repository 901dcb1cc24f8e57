"""Configuration management for paretofront."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from paretofront.types import DominanceRule, TieBreak

# Largest smoothness whose quantized scores stay exact integers in float64 and fit in int64
MAX_SMOOTHNESS = 10**15


class ParetoConfig(BaseSettings):
    """Pareto filter configuration."""

    model_config = SettingsConfigDict(env_prefix="PARETOFRONT_")

    # Ranking
    rank_index: int = Field(
        default=0, ge=0, description="Index of the score used for the initial ranking"
    )
    tie_break: TieBreak = Field(
        default=TieBreak.INPUT,
        description="Ordering among datums tied on the ranking score: input or name",
    )

    # Dominance
    dominance_rule: DominanceRule = Field(
        default=DominanceRule.WEAK,
        description="weak: identical vectors dominate each other; "
        "strict: at least one score must be strictly better",
    )

    # Fuzzy filter
    smoothness: int = Field(
        default=10,
        ge=1,
        le=MAX_SMOOTHNESS,
        description="Number of quantization steps for the fuzzy filter (higher = less fuzzy)",
    )

    # Score files
    n_scores: int = Field(default=4, ge=1, description="Number of scores per line in a score file")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
