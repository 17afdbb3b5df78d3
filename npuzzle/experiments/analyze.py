#!/usr/bin/env python3
import argparse
from pathlib import Path

import numpy as np
import pandas as pd

METRICS = ("expanded", "generated", "peak_memory", "time_sec")
ORDER = ["linear_conflict", "manhattan", "hamming"]


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)


def load_results(paths) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    for c in ("depth", "seed", "g") + METRICS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df


def solved(df: pd.DataFrame) -> pd.DataFrame:
    return df[df["termination"].fillna("ok") == "ok"]


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and standard error per (heuristic, depth) for each metric."""
    ok = solved(df)
    agg = {}
    for m in METRICS:
        if m in ok.columns:
            agg[f"{m}_mean"] = (m, "mean")
            agg[f"{m}_sem"] = (m, sem)
    out = ok.groupby(["heuristic", "depth"]).agg(**agg).reset_index()
    out["heuristic"] = pd.Categorical(out["heuristic"], categories=ORDER, ordered=True)
    return out.sort_values(["depth", "heuristic"]).reset_index(drop=True)


def optimality_mismatches(df: pd.DataFrame) -> pd.DataFrame:
    """Instances where the heuristics disagree on the optimal g (should be empty)."""
    ok = solved(df)
    spread = ok.groupby(["depth", "seed"])["g"].agg(["min", "max", "count"]).reset_index()
    return spread[spread["min"] != spread["max"]]


def print_summary(table: pd.DataFrame, mismatches: pd.DataFrame, unsolvable: int) -> None:
    print("=" * 80)
    print("A* heuristic comparison (mean per depth)")
    print("=" * 80)
    cols = ["depth", "heuristic"] + [c for c in table.columns if c.endswith("_mean")]
    with pd.option_context("display.width", 120, "display.float_format", "{:.2f}".format):
        print(table[cols].to_string(index=False))
    print()
    if mismatches.empty:
        print("All heuristics agree on the optimal solution length.")
    else:
        print(f"WARNING: {len(mismatches)} instance(s) with differing solution lengths:")
        print(mismatches.to_string(index=False))
    if unsolvable:
        print(f"{unsolvable} unsolvable variant(s) rejected before search.")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs per heuristic and depth.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV path for the summary table")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        return
    table = summarize(df)
    unsolvable = int((df["termination"] == "unsolvable").sum())
    print_summary(table, optimality_mismatches(df), unsolvable)
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
