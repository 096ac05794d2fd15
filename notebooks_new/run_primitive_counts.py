#!/usr/bin/env python
"""
Count primitive instruction calls in a set of sample BugsWorld programs.
Saves results to CSV and generates a bar chart.
"""

import os
import sys
from typing import Dict

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

# Configuration
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from bugsworld.dsl import (
    Statement, Condition, PRIMITIVE_ORDER,
    call, block, if_, if_else, while_, instructions_to_block,
)
from bugsworld.eval import primitive_call_table

OUT_DIR = os.path.join(ROOT_DIR, "results", "primitive_counts")
CSV_NAME = "primitive_counts.csv"
PLOT_NAME = "primitive_counts.png"
PLOT_DPI = 150


def sample_programs() -> Dict[str, Statement]:
    return {
        "two_steps": instructions_to_block(["move", "turnleft"]),
        "guarded_move": if_(
            Condition.NEXT_IS_EMPTY,
            instructions_to_block(["move", "foo"]),
        ),
        "infect_loop": while_(
            Condition.TRUE,
            block(
                call("infect"),
                if_else(
                    Condition.NEXT_IS_ENEMY,
                    instructions_to_block(["skip"]),
                    instructions_to_block(["turnright", "bar"]),
                ),
            ),
        ),
        "empty": block(),
        "skip_or_move": if_else(
            Condition.RANDOM,
            instructions_to_block(["skip", "skip"]),
            instructions_to_block(["move"]),
        ),
    }


def main():
    print("=" * 60)
    print("Counting Primitive Calls")
    print("=" * 60)

    programs = sample_programs()
    if not programs:
        raise ValueError("No programs to analyze")
    print(f"Analyzing {len(programs)} programs...")

    df = primitive_call_table(programs)

    os.makedirs(OUT_DIR, exist_ok=True)
    csv_path = os.path.join(OUT_DIR, CSV_NAME)
    df.to_csv(csv_path, index=False)
    print(f"\nResults saved to: {csv_path}")

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(df.round(3).to_string(index=False))

    print("\nGenerating plot...")
    fig, ax = plt.subplots(figsize=(8, 4))
    df.set_index("name")[list(PRIMITIVE_ORDER)].plot(kind="bar", stacked=True, ax=ax)
    ax.set_ylabel("Primitive calls")
    ax.set_title("Primitive calls per program")
    ax.grid(alpha=0.3, axis="y")
    plt.tight_layout()

    plot_path = os.path.join(OUT_DIR, PLOT_NAME)
    plt.savefig(plot_path, dpi=PLOT_DPI)
    print(f"Plot saved to: {plot_path}")
    plt.close(fig)

    print("\n" + "=" * 60)
    print("COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
