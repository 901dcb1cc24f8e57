"""Shared utility functions for CLI commands."""

import logging
import sys
from typing import Any

import structlog

from paretofront.config import ParetoConfig


def configure_logging(log_level: str) -> None:
    """
    Configure structlog with a level filter.

    Log lines go to stderr so stdout only carries command output.
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_config(**overrides: Any) -> ParetoConfig:
    """
    Build a ParetoConfig, letting explicit CLI values win over the environment.

    Options left as None fall back to PARETOFRONT_* variables or defaults.
    """
    return ParetoConfig(**{k: v for k, v in overrides.items() if v is not None})
