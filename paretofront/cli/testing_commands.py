"""Testing commands for paretofront CLI."""

from pathlib import Path

import numpy as np
import typer

from paretofront.scorefile import format_frontier, write_scores
from paretofront.scoring.fuzzy import compute_fuzzy_pareto_frontier
from paretofront.scoring.pareto import compute_pareto_frontier


def test_scoring(
    n_items: int = typer.Option(20, help="Number of simulated datums"),
    n_dims: int = typer.Option(4, help="Number of scores per datum"),
    smoothness: int = typer.Option(10, help="Quantization steps for the fuzzy filter"),
    seed: int | None = typer.Option(None, help="Random seed for reproducible data"),
    output: Path | None = typer.Option(None, help="Write the simulated scores to this TSV file"),
):
    """
    Compare the strict and fuzzy filters on simulated data.

    A few datums get boosted scores so the fronts have clear winners.
    """
    if n_items < 1 or n_dims < 1 or smoothness < 1:
        typer.echo("n-items, n-dims and smoothness must all be >= 1", err=True)
        raise typer.Exit(1)

    typer.echo(f"Testing Pareto filters with {n_items} datums, {n_dims} scores\n")

    rng = np.random.default_rng(seed)
    n_winners = max(1, n_items // 10)
    name_to_scores: dict[str, list[float]] = {}

    for i in range(n_items):
        scores = rng.uniform(0.0, 20.0, size=n_dims)
        if i < n_winners:
            # Boost the first datums so they stand out
            name = f"datum{i + 1}_winner"
            scores = scores * 50.0
        else:
            name = f"datum{i + 1}"
        name_to_scores[name] = [float(s) for s in scores]

    if output is not None:
        write_scores(output, name_to_scores)
        typer.echo(f"Simulated scores written to {output}\n")

    strict_result = compute_pareto_frontier(name_to_scores)
    fuzzy_result = compute_fuzzy_pareto_frontier(name_to_scores, smoothness=smoothness)

    typer.echo(f"Strict front ({len(strict_result.frontier_names)} datums):")
    for line in format_frontier(strict_result, name_to_scores):
        typer.echo(f"  {line}")

    typer.echo(
        f"\nFuzzy front, smoothness={smoothness} ({len(fuzzy_result.frontier_names)} datums):"
    )
    for line in format_frontier(fuzzy_result, name_to_scores):
        typer.echo(f"  {line}")

    collapsed = sorted(strict_result.frontier_names - fuzzy_result.frontier_names)
    if collapsed:
        typer.echo("\nCollapsed by the fuzzy filter:")
        for name in collapsed:
            typer.echo(f"  {name} (excluded by {fuzzy_result.excluded_by[name]})")
