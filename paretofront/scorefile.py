"""Reading score tables from TSV files and rendering Pareto fronts."""

import re
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

import structlog

from paretofront.scoring.pareto import ParetoResult

logger = structlog.get_logger()

DEFAULT_N_SCORES = 4

_LINE_SPLIT = re.compile(r"\r\n|\r|\n")


class ScoreFileError(ValueError):
    """Raised when a score file cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def parse_scores(text: str, n_scores: int = DEFAULT_N_SCORES) -> dict[str, list[float]]:
    """
    Parse a tab-separated score table.

    The first line is a header and is skipped. Every other non-blank line
    holds a datum name followed by exactly ``n_scores`` numeric fields.

    Args:
        text: Contents of the score file
        n_scores: Number of scores expected after the name

    Returns:
        Dict mapping name -> scores, in file order

    Raises:
        ScoreFileError: On a malformed line or a duplicate name
    """
    scores: dict[str, list[float]] = {}
    lines = _LINE_SPLIT.split(text)

    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue

        fields = line.split("\t")
        if len(fields) != n_scores + 1:
            raise ScoreFileError(
                f"expected a name and {n_scores} scores, got {len(fields)} fields",
                line_number,
            )

        name = fields[0].strip()
        if not name:
            raise ScoreFileError("missing datum name", line_number)
        if name in scores:
            raise ScoreFileError(f"duplicate datum name {name!r}", line_number)

        try:
            scores[name] = [float(value) for value in fields[1:]]
        except ValueError as e:
            raise ScoreFileError(f"non-numeric score for {name!r}: {e}", line_number) from e

    return scores


def load_scores(path: Path | str, n_scores: int = DEFAULT_N_SCORES) -> dict[str, list[float]]:
    """
    Read a score table from a TSV file.

    Raises:
        FileNotFoundError: If path does not exist
        ScoreFileError: If the file is malformed
    """
    path = Path(path)
    scores = parse_scores(path.read_text(encoding="utf-8"), n_scores=n_scores)
    logger.info("scores_loaded", path=str(path), n_datums=len(scores), n_scores=n_scores)
    return scores


def format_datum(name: str, scores: Sequence[float]) -> str:
    """Render one datum as ``name: s1, s2, ...``."""
    return f"{name}: " + ", ".join(str(float(s)) for s in scores)


def format_frontier(
    pareto_result: ParetoResult,
    name_to_scores: Mapping[str, Sequence[float]],
) -> list[str]:
    """
    Render the frontier datums with their raw scores.

    Lines follow the ranked processing order so the output is reproducible.
    """
    return [
        format_datum(name, name_to_scores[name])
        for name in pareto_result.ranked_names
        if name in pareto_result.frontier_names
    ]


def write_scores(
    path: Path | str,
    name_to_scores: Mapping[str, Sequence[float]],
    header: Iterable[str] | None = None,
) -> None:
    """Write a score table in the format read by load_scores."""
    rows = list(name_to_scores.items())
    if header is None:
        n_scores = len(rows[0][1]) if rows else DEFAULT_N_SCORES
        header = ["name"] + [f"score{i + 1}" for i in range(n_scores)]

    lines = ["\t".join(header)]
    lines.extend("\t".join([name] + [repr(float(s)) for s in scores]) for name, scores in rows)
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")
