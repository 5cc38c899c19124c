#!/usr/bin/env python3
"""
Run History Plotter

Reads a history file written by ``binevo.utils.history.save_history`` (CSV or
JSON) and renders:
- best / average / worst raw fitness per generation
- population diversity per generation, with the convergence threshold
- best / average fitness percentage per generation

Usage:
    python tools/plot_history.py history.csv --output-folder plots [--threshold 0.01]
"""

import argparse
from pathlib import Path

from loguru import logger
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import seaborn as sns  # noqa: E402

from binevo.utils.history import history_to_dataframe, load_history  # noqa: E402


def configure_plotting_style() -> None:
    """Set global Matplotlib / Seaborn parameters for a consistent look."""
    sns.set_theme(style="whitegrid", context="talk", palette="deep")
    plt.rcParams.update(
        {
            "font.size": 14,
            "axes.titlesize": 18,
            "axes.titleweight": "bold",
            "axes.labelsize": 14,
            "legend.fontsize": 12,
            "axes.grid": True,
            "grid.alpha": 0.25,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "savefig.dpi": 300,
            "figure.dpi": 150,
        }
    )


def save_fig(fig: plt.Figure, path_no_ext: Path) -> None:
    png_path = path_no_ext.with_suffix(".png")
    pdf_path = path_no_ext.with_suffix(".pdf")
    fig.savefig(png_path, bbox_inches="tight")
    fig.savefig(pdf_path, bbox_inches="tight")
    plt.close(fig)
    logger.info(f"Saved figure to {png_path.name} & {pdf_path.name}")


def plot_fitness(df: pd.DataFrame, output_folder: Path) -> None:
    fig, ax = plt.subplots(figsize=(12, 6))
    ax.plot(df["generation"], df["best_fitness"], label="best", linewidth=2.5)
    ax.plot(df["generation"], df["average_fitness"], label="average", linewidth=1.8)
    ax.plot(df["generation"], df["worst_fitness"], label="worst", linewidth=1.2, alpha=0.7)
    ax.set_title("Fitness per generation")
    ax.set_xlabel("Generation")
    ax.set_ylabel("Raw fitness")
    ax.legend()
    save_fig(fig, output_folder / "fitness")


def plot_diversity(df: pd.DataFrame, output_folder: Path, threshold: float) -> None:
    fig, ax = plt.subplots(figsize=(12, 5))
    ax.plot(df["generation"], df["diversity"] * 100, color="tab:orange", linewidth=2)
    ax.axhline(threshold * 100, color="tab:red", linestyle="--", label="convergence threshold")
    ax.set_title("Population diversity")
    ax.set_xlabel("Generation")
    ax.set_ylabel("Mean Hamming distance (%)")
    ax.set_ylim(0, 100)
    ax.legend()
    save_fig(fig, output_folder / "diversity")


def plot_percentages(df: pd.DataFrame, output_folder: Path) -> None:
    fig, ax = plt.subplots(figsize=(12, 5))
    ax.plot(df["generation"], df["best_fitness_percentage"], label="best %", linewidth=2.5)
    ax.plot(df["generation"], df["average_fitness_percentage"], label="average %", linewidth=1.8)
    ax.set_title("Fitness percentage")
    ax.set_xlabel("Generation")
    ax.set_ylabel("Percentage")
    ax.set_ylim(0, 105)
    ax.legend()
    save_fig(fig, output_folder / "fitness_percentage")


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot a binevo run history")
    parser.add_argument("history", help="History file (.csv or .json)")
    parser.add_argument(
        "--output-folder", default="plots", help="Where to write figures (default: plots)"
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=0.01,
        help="Convergence threshold to draw on the diversity plot (default: 0.01)",
    )
    args = parser.parse_args()

    output_folder = Path(args.output_folder)
    output_folder.mkdir(parents=True, exist_ok=True)

    df = history_to_dataframe(load_history(args.history))
    if df.empty:
        logger.warning("History is empty; nothing to plot")
        return
    logger.info(f"Loaded {len(df)} generations from {args.history}")

    configure_plotting_style()
    plot_fitness(df, output_folder)
    plot_diversity(df, output_folder, args.threshold)
    plot_percentages(df, output_folder)


if __name__ == "__main__":
    main()
