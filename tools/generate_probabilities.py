#!/usr/bin/env python3
"""Generate the skill vs difficulty probability table.

Runs Monte Carlo simulations for every skill in SKILLS against every
half-point difficulty in DIFFICULTIES and writes the percentages to
<output_dir>/probs-<ATTEMPTS>.csv.

Usage:
    python tools/generate_probabilities.py [output_dir]

If no output directory is given, writes to output/.
"""

import logging
import sys
from random import Random

from d6pool.table import build_table, difficulty_steps, output_path, write_table

ATTEMPTS = 100000
SKILLS = range(11, 70)
DIFFICULTIES = (5, 15)


def main() -> None:
    [outdir] = sys.argv[1:2] or ["output"]
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    table = build_table(
        list(SKILLS), difficulty_steps(*DIFFICULTIES), ATTEMPTS, Random(),
    )
    write_table(table, output_path(ATTEMPTS, outdir))


if __name__ == "__main__":
    main()
