#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from typing import List, Optional, Sequence, Tuple

from tilepuzzle.domains.puzzlen import NPuzzle
from tilepuzzle.experiments.cases import CASES
from tilepuzzle.search.best_first import best_first

State = Tuple[int, ...]

def draw_board(state: State, n: int, out_path: Path, title: Optional[str] = None):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1, color="black")
        ax.plot([i,i],[0,n], linewidth=1, color="black")
    # tiles, blank shaded
    for idx, t in enumerate(state):
        r, c = divmod(idx, n)
        if t == 0:
            ax.add_patch(plt.Rectangle((c, r), 1, 1, color="lightgray"))
            continue
        ax.text(c+0.5, r+0.55, str(t), ha="center", va="center", fontsize=16 if n <= 4 else 12)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=120)
    plt.close()

def save_frames(path: List[State], n: int, outdir: Path) -> List[Path]:
    frames = []
    for i, s in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, n, p, title=f"move {i}/{len(path) - 1}")
        frames.append(p)
    return frames

def main(argv: Optional[Sequence[str]] = None):
    p = argparse.ArgumentParser(description="Solve one board and save an image per move along the path.")
    p.add_argument("--mode", default="2", help="0: UCS, 1: A* misplaced tile, 2: A* Manhattan")
    p.add_argument("--case", choices=sorted(CASES), default="p8_classic")
    p.add_argument("--board", type=int, nargs="+", default=None, help="Explicit layout, overrides --case")
    p.add_argument("--outdir", default="figs/example_path")
    args = p.parse_args(argv)

    board = tuple(args.board) if args.board else CASES[args.case]
    try:
        res = best_first(board, args.mode)
    except ValueError as exc:
        p.error(str(exc))

    if not res.solved:
        print("No path (frontier exhausted). The layout is not solvable.")
        return []

    n = NPuzzle.for_board(board).N
    frames = save_frames(res.path, n, Path(args.outdir))
    print(f"Saved {len(frames)} frames to {args.outdir}")
    return frames

if __name__ == "__main__":
    main()
