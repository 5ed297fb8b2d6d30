"""Renderers that convert d6pool records into text output.

The TextRenderer produces terminal-friendly lines. The CSV writer in
d6pool.table and the Streamlit viewer share its number formatting so a
value reads the same everywhere.
"""

from __future__ import annotations

from d6pool.records import Estimate, PoolRoll, ProbabilityTable

CORNER = "DIFF\\SKILL"


def number(value: float) -> str:
    """Format without a trailing .0: 5.0 -> '5', 5.5 -> '5.5'."""
    return f"{value:g}"


class TextRenderer:
    """Renders rolls, estimates and tables to lists of text lines."""

    def render_roll(self, record: PoolRoll) -> list[str]:
        lines = [
            f"skill: {record.skill}",
            f"rolled dice: {sorted(record.dice)}",
            f"with bonuses: {sorted(record.bonused)}",
        ]
        if not record.stages:
            lines.append("no successes, highest die counts")
        else:
            lines.append(f"successes: {record.stages[0]}")
        for i, stage in enumerate(record.stages[1:], 1):
            lines.append(f"  pass {i}: {stage}")
        lines.append(f"total: {number(record.outcome)}")
        return lines

    def render_estimate(self, record: Estimate) -> str:
        return (
            f"probability for skill {record.skill} and difficulty"
            f" {number(record.difficulty)} ≈ {record.probability * 100:.3f}%"
        )

    def table_rows(self, table: ProbabilityTable) -> list[list[str]]:
        """Header row of skills, then one row of percentages per difficulty."""
        rows = [[CORNER] + [str(skill) for skill in table.skills]]
        for difficulty in table.difficulties:
            rows.append(
                [number(difficulty)]
                + [number(cell.percent) for cell in table.row(difficulty)]
            )
        return rows

    def render_table(self, table: ProbabilityTable) -> list[str]:
        rows = self.table_rows(table)
        width = max(len(cell) for row in rows for cell in row)
        return [" ".join(cell.rjust(width) for cell in row) for row in rows]
