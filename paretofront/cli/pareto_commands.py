"""Pareto filtering commands for paretofront CLI."""

from pathlib import Path

import typer

from paretofront.cli.utils import build_config, configure_logging
from paretofront.config import ParetoConfig
from paretofront.scorefile import format_frontier, load_scores
from paretofront.scoring.fuzzy import FuzzyParetoFilter
from paretofront.scoring.pareto import StrictParetoFilter
from paretofront.types import DominanceRule, TieBreak


def _run_filter(scores_file: Path, config: ParetoConfig, fuzzy: bool) -> None:
    """Load the score file, apply the filter and print the surviving datums."""
    pareto_filter: StrictParetoFilter | FuzzyParetoFilter
    if fuzzy:
        pareto_filter = FuzzyParetoFilter.from_config(config)
    else:
        pareto_filter = StrictParetoFilter.from_config(config)

    try:
        name_to_scores = load_scores(scores_file, n_scores=config.n_scores)
        result = pareto_filter.compute(name_to_scores)
    except FileNotFoundError:
        typer.echo(f"Score file not found: {scores_file}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for line in format_frontier(result, name_to_scores):
        typer.echo(line)
    typer.echo("done")


def strict(
    scores_file: Path = typer.Argument(..., help="TSV file: header line, then name and scores"),
    rank_index: int | None = typer.Option(None, help="Index of the score used for ranking"),
    n_scores: int | None = typer.Option(None, help="Number of scores per line"),
    tie_break: TieBreak | None = typer.Option(None, help="Order among datums tied on rank"),
    rule: DominanceRule | None = typer.Option(None, help="Dominance rule"),
    log_level: str | None = typer.Option(None, help="Logging level"),
):
    """
    Print the Pareto non-dominated datums of a score file.

    Examples:
        paretofront strict scores.tsv

        paretofront strict scores.tsv --rank-index 3
    """
    try:
        config = build_config(
            rank_index=rank_index,
            n_scores=n_scores,
            tie_break=tie_break,
            dominance_rule=rule,
            log_level=log_level,
        )
        configure_logging(config.log_level)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    _run_filter(scores_file, config, fuzzy=False)


def fuzzy(
    scores_file: Path = typer.Argument(..., help="TSV file: header line, then name and scores"),
    smoothness: int | None = typer.Option(
        None, help="Quantization steps per score (higher = less fuzzy)"
    ),
    rank_index: int | None = typer.Option(None, help="Index of the score used for ranking"),
    n_scores: int | None = typer.Option(None, help="Number of scores per line"),
    tie_break: TieBreak | None = typer.Option(None, help="Order among datums tied on rank"),
    rule: DominanceRule | None = typer.Option(None, help="Dominance rule"),
    log_level: str | None = typer.Option(None, help="Logging level"),
):
    """
    Print the fuzzy Pareto non-dominated datums of a score file.

    Scores within one quantization step of each other count as ties,
    so near-duplicates collapse into a single survivor.

    Examples:
        paretofront fuzzy scores.tsv

        paretofront fuzzy scores.tsv --smoothness 2
    """
    try:
        config = build_config(
            smoothness=smoothness,
            rank_index=rank_index,
            n_scores=n_scores,
            tie_break=tie_break,
            dominance_rule=rule,
            log_level=log_level,
        )
        configure_logging(config.log_level)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    _run_filter(scores_file, config, fuzzy=True)
