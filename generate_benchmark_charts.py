"""
Benchmark Chart Generator
=========================
Generates charts comparing the natural merge-sort, classic merge-sort
and brute-force inversion counters.
Run:  python generate_benchmark_charts.py --repeats 3
Output: benchmark_charts/ folder with 3 PNG files.
"""

import sys
import os
import argparse
import numpy as np
from collections import defaultdict

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_counters import SHAPES, run_benchmark

# Suppress natural merge sort debug output
import inversions.counters.natural_merge_sort as nms_mod
nms_mod.DEBUG_MODE = False

# ---------------------------------------------------------------
# Color Palette & Styling
# ---------------------------------------------------------------
COLORS = {
    "natural":     "#339AF0",   # Sky Blue
    "mergesort":   "#51CF66",   # Emerald Green
    "brute_force": "#FF6B6B",   # Coral Red
}
COUNTER_LABELS = {"natural": "Natural Merge Sort", "mergesort": "Merge Sort",
                  "brute_force": "Brute Force"}
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "axes.titlesize": 16,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "figure.dpi": 150,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def _finish(ax):
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


def group_by_shape(results):
    """
    Returns {shape: {length: [rows]}} preserving first-seen order.
    """
    grouped = defaultdict(lambda: defaultdict(list))
    for row in results:
        grouped[row["shape"]][row["length"]].append(row)
    return grouped


def chart_1_time_by_shape(results, out_dir, length=None):
    """Bar chart: average time per counter for each input shape at one length."""
    grouped = group_by_shape(results)
    if length is None:
        length = max(r["length"] for r in results)
    shapes = [s for s in grouped if length in grouped[s]]

    fig, ax = plt.subplots(figsize=(10, 6))
    x = np.arange(len(shapes))
    width = 0.25

    for i, tag in enumerate(COLORS):
        times = []
        for shape in shapes:
            values = [r[f"{tag}_time"] for r in grouped[shape][length]
                      if r[f"{tag}_time"] is not None]
            times.append(np.mean(values) if values else 0.0)
        ax.bar(x + i * width, times, width, label=COUNTER_LABELS[tag],
               color=COLORS[tag], edgecolor="none", alpha=0.9, zorder=3)

    ax.set_xticks(x + width)
    ax.set_xticklabels([s.replace("_", "\n") for s in shapes], fontsize=10)
    ax.set_ylabel("Average Time (seconds)")
    ax.set_title(f"Counting Time by Input Shape (n={length})", pad=15)
    ax.legend(loc="upper left")
    ax.grid(axis="y", zorder=0)
    _finish(ax)

    path = os.path.join(out_dir, "1_time_by_shape.png")
    fig.savefig(path)
    plt.close(fig)
    print("  + Chart 1: Time by Shape")
    return path


def chart_2_scalability(results, out_dir):
    """Line chart: time vs length for both merge-sort counters on each shape."""
    grouped = group_by_shape(results)
    fig, ax = plt.subplots(figsize=(10, 6))

    for tag, style in [("natural", "o-"), ("mergesort", "s--")]:
        for shape, by_length in grouped.items():
            lengths = sorted(by_length)
            times = [np.mean([r[f"{tag}_time"] for r in by_length[n]]) for n in lengths]
            ax.plot(lengths, times, style, color=COLORS[tag], alpha=0.8,
                    label=f"{COUNTER_LABELS[tag]} / {shape}", linewidth=2, markersize=6)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Range Length")
    ax.set_ylabel("Average Time (seconds)")
    ax.set_title("Scalability: Time vs Range Length", pad=15)
    ax.legend(fontsize=8, ncol=2)
    ax.grid(True, zorder=0)
    _finish(ax)

    path = os.path.join(out_dir, "2_scalability.png")
    fig.savefig(path)
    plt.close(fig)
    print("  + Chart 2: Scalability")
    return path


def chart_3_run_structure(results, out_dir):
    """Bar chart: initial runs and merge passes found by the natural counter."""
    grouped = group_by_shape(results)
    length = max(r["length"] for r in results)
    shapes = [s for s in grouped if length in grouped[s]]

    runs = [np.mean([r["initial_runs"] for r in grouped[s][length]]) for s in shapes]
    passes = [np.mean([r["merge_passes"] for r in grouped[s][length]]) for s in shapes]

    fig, (ax_runs, ax_passes) = plt.subplots(1, 2, figsize=(12, 5))
    x = np.arange(len(shapes))

    ax_runs.bar(x, runs, color=COLORS["natural"], zorder=3)
    ax_runs.set_yscale("symlog")
    ax_runs.set_title("Initial Runs")
    ax_passes.bar(x, passes, color=COLORS["mergesort"], zorder=3)
    ax_passes.set_title("Merge Passes")

    for ax in (ax_runs, ax_passes):
        ax.set_xticks(x)
        ax.set_xticklabels([s.replace("_", "\n") for s in shapes], fontsize=9)
        ax.grid(axis="y", zorder=0)
        _finish(ax)

    fig.suptitle(f"Run Structure Detected (n={length})", color=TEXT_COLOR, fontweight="bold")
    path = os.path.join(out_dir, "3_run_structure.png")
    fig.savefig(path)
    plt.close(fig)
    print("  + Chart 3: Run Structure")
    return path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate inversion counter benchmark charts")
    parser.add_argument("--repeats", type=int, default=3, help="Runs per configuration")
    parser.add_argument("--lengths", nargs="+", type=int, default=[100, 1000, 10000],
                        help="Input lengths")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--brute-force-limit", type=int, default=2000,
                        help="Skip the quadratic counter above this length")
    parser.add_argument("--out", type=str, default=None, help="Output folder")
    args = parser.parse_args(argv)

    out_dir = args.out or os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                       "benchmark_charts")
    os.makedirs(out_dir, exist_ok=True)

    setup_style()

    print(f"  Repeats        : {args.repeats}")
    print(f"  Lengths        : {args.lengths}")
    print(f"  Output folder  : {out_dir}")
    print()

    print("Phase 1/2: Running Benchmarks...")
    results = run_benchmark(SHAPES, args.lengths, args.repeats,
                            args.seed, args.brute_force_limit)

    print("\nPhase 2/2: Generating Charts...")
    chart_1_time_by_shape(results, out_dir)
    chart_2_scalability(results, out_dir)
    chart_3_run_structure(results, out_dir)

    print(f"All charts saved to: {out_dir}")


if __name__ == "__main__":
    main()
