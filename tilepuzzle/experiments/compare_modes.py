#!/usr/bin/env python3
from __future__ import annotations
import argparse
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from tilepuzzle.experiments.cases import CASES, DEFAULT_CASES
from tilepuzzle.search.best_first import best_first
from tilepuzzle.search.state import Mode

State = Tuple[int, ...]

def run_cases(cases: Dict[str, State], modes: Iterable[Mode]) -> pd.DataFrame:
    modes = list(modes)
    rows: List[dict] = []
    for name, board in cases.items():
        for mode in modes:
            res = best_first(board, mode)
            row = {"case": name, "tiles": len(board) - 1}
            row.update(res.as_row())
            rows.append(row)
    return pd.DataFrame(rows)

def depth_agreement(df: pd.DataFrame) -> pd.Series:
    """Per case: True when every mode that solved it found the same depth."""
    return df.groupby("case", sort=False)["depth"].agg(lambda d: d.dropna().nunique() <= 1)

def expansion_ratios(df: pd.DataFrame) -> pd.DataFrame:
    """Expanded nodes of each mode relative to uniform cost, per case."""
    wide = df.pivot(index="case", columns="mode", values="expanded")
    base = Mode.UNIFORM_COST.label
    if base not in wide.columns:
        return pd.DataFrame(index=wide.index)
    return wide.div(wide[base], axis=0).drop(columns=[base])

def main(argv: Optional[Sequence[str]] = None):
    ap = argparse.ArgumentParser(description="Compare UCS, A* misplaced tile and A* Manhattan on the same boards.")
    ap.add_argument("--case", dest="cases", nargs="+", choices=sorted(CASES), default=None,
                    help=f"Built-in layouts (default: {' '.join(DEFAULT_CASES)})")
    ap.add_argument("--board", type=int, nargs="+", default=None, help="Explicit layout, row-major, 0 as blank")
    ap.add_argument("--modes", nargs="+", default=["0", "1", "2"], help="Cost functions to run")
    args = ap.parse_args(argv)

    try:
        modes = list(dict.fromkeys(Mode.parse(m) for m in args.modes))
    except ValueError as exc:
        ap.error(str(exc))

    if args.board is not None:
        cases = {"board": tuple(args.board)}
    else:
        cases = {name: CASES[name] for name in (args.cases or DEFAULT_CASES)}

    try:
        df = run_cases(cases, modes)
    except ValueError as exc:
        ap.error(str(exc))

    with pd.option_context("display.width", 120, "display.max_columns", None):
        print(df.to_string(index=False, float_format=lambda x: f"{x:.4f}"))
        ratios = expansion_ratios(df)
        if not ratios.empty:
            print("\nExpanded nodes relative to UCS:")
            print(ratios.to_string(float_format=lambda x: f"{x:.3f}"))

    agree = depth_agreement(df)
    for name, ok in agree.items():
        if not ok:
            print(f"Warning: modes disagree on solution depth for {name}")
    print(f"\nDepth agreement across modes: {int(agree.sum())}/{len(agree)} cases")
    return df

if __name__ == "__main__":
    main()
