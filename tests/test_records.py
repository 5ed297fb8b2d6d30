"""Tests for result records and text rendering."""

import random
from unittest.mock import patch

from d6pool.dice import roll_detailed
from d6pool.records import Estimate, PoolRoll, ProbabilityTable
from d6pool.renderers import TextRenderer, number


class TestEstimate:
    def test_probability(self) -> None:
        assert Estimate(skill=11, difficulty=5, wins=25, attempts=100).probability == 0.25

    def test_percent_is_floored(self) -> None:
        """1/3 is 33.333...%, shown as 33.33; 2/3 is 66.666...%, shown
        as 66.66, not rounded up."""
        assert Estimate(skill=11, difficulty=5, wins=1, attempts=3).percent == 33.33
        assert Estimate(skill=11, difficulty=5, wins=2, attempts=3).percent == 66.66

    def test_percent_bounds(self) -> None:
        assert Estimate(skill=11, difficulty=5, wins=0, attempts=7).percent == 0
        assert Estimate(skill=11, difficulty=5, wins=7, attempts=7).percent == 100

    def test_percent_avoids_float_error(self) -> None:
        """29% must not come out as 28.99."""
        assert Estimate(skill=11, difficulty=5, wins=29, attempts=100).percent == 29.0


class TestProbabilityTable:
    def test_row(self) -> None:
        cells = {
            (5.0, s): Estimate(skill=s, difficulty=5.0, wins=s, attempts=100)
            for s in (11, 12)
        }
        table = ProbabilityTable(skills=[11, 12], difficulties=[5.0], attempts=100, cells=cells)
        assert [c.wins for c in table.row(5.0)] == [11, 12]


class TestNumber:
    def test_drops_trailing_zero(self) -> None:
        assert number(5.0) == "5"
        assert number(100.0) == "100"
        assert number(0.0) == "0"

    def test_keeps_fraction(self) -> None:
        assert number(5.5) == "5.5"
        assert number(12.34) == "12.34"


class TestTextRenderer:
    def test_render_roll(self) -> None:
        with patch("d6pool.dice.d6", side_effect=[6, 2, 6]):
            record = roll_detailed(3, random.Random())
        assert TextRenderer().render_roll(record) == [
            "skill: 3",
            "rolled dice: [2, 6, 6]",
            "with bonuses: [2, 6, 6]",
            "successes: [6, 6]",
            "  pass 1: [7]",
            "total: 7",
        ]

    def test_render_roll_no_successes(self) -> None:
        record = PoolRoll(skill=2, dice=[3, 1], bonused=[3, 1], stages=[], outcome=3.0)
        lines = TextRenderer().render_roll(record)
        assert "no successes, highest die counts" in lines
        assert lines[-1] == "total: 3"

    def test_render_half_point(self) -> None:
        record = PoolRoll(
            skill=11, dice=[6, 6], bonused=[7, 6],
            stages=[[6, 7]], outcome=7.5,
        )
        assert TextRenderer().render_roll(record)[-1] == "total: 7.5"

    def test_render_estimate(self) -> None:
        record = Estimate(skill=11, difficulty=5.5, wins=12345, attempts=100000)
        assert TextRenderer().render_estimate(record) == (
            "probability for skill 11 and difficulty 5.5 ≈ 12.345%"
        )

    def test_table_rows(self) -> None:
        cells = {
            (d, s): Estimate(skill=s, difficulty=d, wins=w, attempts=3)
            for (d, s), w in {(5, 11): 3, (5, 12): 3, (5.5, 11): 1, (5.5, 12): 2}.items()
        }
        table = ProbabilityTable(skills=[11, 12], difficulties=[5, 5.5], attempts=3, cells=cells)
        assert TextRenderer().table_rows(table) == [
            ["DIFF\\SKILL", "11", "12"],
            ["5", "100", "100"],
            ["5.5", "33.33", "66.66"],
        ]

    def test_render_table_aligned(self) -> None:
        cells = {(5, 11): Estimate(skill=11, difficulty=5, wins=1, attempts=2)}
        table = ProbabilityTable(skills=[11], difficulties=[5], attempts=2, cells=cells)
        lines = TextRenderer().render_table(table)
        assert len(lines) == 2
        assert len({len(line) for line in lines}) == 1
