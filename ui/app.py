"""Streamlit probability table viewer.

Run with: PYTHONPATH=. streamlit run ui/app.py
"""

from __future__ import annotations

from random import Random

import streamlit as st

from d6pool.dice import roll_detailed
from d6pool.records import ProbabilityTable
from d6pool.renderers import TextRenderer, number
from d6pool.table import build_table, difficulty_steps

MIN_SKILL, MAX_SKILL = 1, 99
MIN_DIFFICULTY, MAX_DIFFICULTY = 1.0, 20.0


def table_config() -> dict:
    """Render sidebar controls for the table and return config dict."""
    st.sidebar.subheader("Table")
    skills = st.sidebar.slider("Skills", MIN_SKILL, MAX_SKILL, (11, 30))
    difficulties = st.sidebar.slider(
        "Difficulties", MIN_DIFFICULTY, MAX_DIFFICULTY, (5.0, 15.0), step=0.5,
    )
    exact = st.sidebar.checkbox("Exact (enumerate every roll)")
    attempts = st.sidebar.number_input(
        "Attempts per cell", min_value=100, max_value=1_000_000,
        value=10_000, step=1000, disabled=exact,
    )
    seed = st.sidebar.number_input("Seed", min_value=0, value=0)
    return {
        "skills": skills,
        "difficulties": difficulties,
        "attempts": int(attempts),
        "seed": int(seed),
        "exact": exact,
    }


def generate(config: dict) -> ProbabilityTable:
    """Build the table a config dict describes."""
    low, high = config["skills"]
    return build_table(
        list(range(low, high + 1)),
        difficulty_steps(*config["difficulties"]),
        config["attempts"],
        Random(config["seed"]),
        exact=config.get("exact", False),
    )


def table_records(table: ProbabilityTable) -> list[dict[str, object]]:
    """One dict per difficulty row, keyed by skill, for st.dataframe."""
    records = []
    for difficulty in table.difficulties:
        record: dict[str, object] = {"difficulty": number(difficulty)}
        for cell in table.row(difficulty):
            record[str(cell.skill)] = cell.percent
        records.append(record)
    return records


def trace_roll(skill: int, seed: int) -> list[str]:
    return TextRenderer().render_roll(roll_detailed(skill, Random(seed)))


def main() -> None:
    st.set_page_config(page_title="d6 Pool Odds", layout="wide")
    st.title("d6 Pool Odds")

    config = table_config()
    st.sidebar.divider()
    st.sidebar.subheader("Single Roll")
    roll_skill = st.sidebar.number_input(
        "Skill", min_value=1, max_value=MAX_SKILL, value=25,
    )
    roll_seed = st.sidebar.number_input("Roll seed", min_value=0, value=0)
    roll_clicked = st.sidebar.button("Roll")
    generate_clicked = st.sidebar.button("Generate", type="primary")

    if roll_clicked:
        st.subheader("Roll")
        st.code("\n".join(trace_roll(int(roll_skill), int(roll_seed))))

    if generate_clicked:
        with st.spinner("Rolling..."):
            table = generate(config)
        kind = "exact" if table.exact else f"{table.attempts} attempts per cell"
        st.subheader(f"Chance to reach difficulty, % ({kind})")
        st.dataframe(table_records(table), hide_index=True)


if __name__ == "__main__":
    main()
