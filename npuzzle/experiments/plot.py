#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.experiments.analyze import load_results, summarize

LABEL = {"manhattan": "Manhattan",
         "linear_conflict": "Linear Conflict",
         "hamming": "Hamming"}

def plot_metric(ax, table, metric):
    for heur, grp in table.groupby("heuristic", observed=True):
        ax.errorbar(grp["depth"], grp[f"{metric}_mean"], yerr=grp[f"{metric}_sem"],
                    marker="o", capsize=3, label=LABEL.get(heur, heur))
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± sem)")
    ax.set_yscale("log")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)
    table = summarize(df)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "peak_memory", "time_sec"]):
        plot_metric(ax, table, metric)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")
    if args.show:
        plt.show()
    plt.close(fig)

if __name__ == "__main__":
    main()
