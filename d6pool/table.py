"""
Probability tables over a grid of skills and difficulties.

Rows are difficulties in half-point steps and columns are skills. Each
cell is estimated independently, either by sampling or, with exact=True,
by enumerating every roll. The finished table is written as CSV with the
percentages floored to two decimals.
"""

from __future__ import annotations

import csv
import logging
from math import ceil, floor
from pathlib import Path
from random import Random

from d6pool.odds import estimate, exact_estimate, outcome_distribution
from d6pool.records import ProbabilityTable
from d6pool.renderers import TextRenderer

logger = logging.getLogger(__name__)


def difficulty_steps(low: float, high: float) -> list[float]:
    """Every half-point difficulty from low to high inclusive.

    Bounds off the half-point grid are pulled inward, so no step falls
    outside the range.
    """
    first, last = ceil(low * 2), floor(high * 2)
    if last < first:
        raise ValueError(f"no half-point difficulty in {low}..{high}")
    return [step / 2 for step in range(first, last + 1)]


def build_table(
    skills: list[int],
    difficulties: list[float],
    attempts: int,
    rng: Random,
    *,
    exact: bool = False,
    renderer: TextRenderer | None = None,
) -> ProbabilityTable:
    """Estimate every cell of the grid, logging each one as it finishes.

    In exact mode the outcome distribution of each skill is computed once
    and reused for every difficulty; `attempts` and `rng` are then unused
    except as a record of the configuration.
    """
    renderer = renderer or TextRenderer()
    skills = sorted(skills)
    difficulties = sorted(difficulties)
    table = ProbabilityTable(skills=skills, difficulties=difficulties, attempts=attempts, exact=exact)
    dists = {skill: outcome_distribution(skill) for skill in skills} if exact else {}

    for difficulty in difficulties:
        for skill in skills:
            if exact:
                cell = exact_estimate(skill, difficulty, dists[skill])
            else:
                cell = estimate(skill, difficulty, attempts, rng)
            logger.info(renderer.render_estimate(cell))
            table.cells[difficulty, skill] = cell
    return table


def output_path(attempts: int, directory: str | Path = "output") -> Path:
    return Path(directory) / f"probs-{attempts}.csv"


def write_table(table: ProbabilityTable, path: str | Path, renderer: TextRenderer | None = None) -> Path:
    """Write the table as CSV, replacing any previous file at `path`.

    Missing parent directories are created. OSErrors are not caught.
    """
    renderer = renderer or TextRenderer()
    path = Path(path)
    path.unlink(missing_ok=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        csv.writer(f).writerows(renderer.table_rows(table))
    logger.info("wrote %d x %d table to %s", len(table.difficulties), len(table.skills), path)
    return path
