#!/usr/bin/env python3
from __future__ import annotations
import argparse
from typing import List, Optional, Sequence

from tilepuzzle.domains.puzzlen import NPuzzle
from tilepuzzle.experiments.cases import CASES
from tilepuzzle.search.best_first import PuzzleSearch, SearchResult
from tilepuzzle.search.state import Mode, PuzzleState

def _ask(prompt: str) -> str:
    return input(prompt).strip()

def read_board(tiles: int) -> List[int]:
    """Read tiles+1 integers from stdin, across as many lines as needed."""
    print(f"Please input initial state {tiles + 1} separate number (0 as blank):")
    values: List[int] = []
    while len(values) < tiles + 1:
        values.extend(int(x) for x in input().split())
    return values

def show_path(puzzle: NPuzzle, res: SearchResult):
    for s in res.path or []:
        print()
        print(puzzle.format_board(s))

def report(puzzle: NPuzzle, res: SearchResult, show: bool = False):
    print(f"To solve this problem the search algorithm expanded a total of {res.expanded} nodes.")
    print(f"The maximum number of nodes in the queue at any one time was {res.peak_frontier}")
    if not res.solved:
        print(f"No solution: frontier exhausted after visiting {res.visited} boards.")
        return
    print(f"The depth of the goal node was {res.depth}")
    if show:
        show_path(puzzle, res)

def main(argv: Optional[Sequence[str]] = None):
    ap = argparse.ArgumentParser(description="Solve one sliding-tile puzzle with UCS or A*.")
    ap.add_argument("--size", type=int, default=None,
                    help="Number of tiles (8, 15, 24, ...); asked on stdin if omitted")
    ap.add_argument("--mode", default=None,
                    help="0: UCS, 1: A* misplaced tile, 2: A* Manhattan (names accepted)")
    ap.add_argument("--board", type=int, nargs="+", default=None,
                    help="Initial layout, row-major, 0 as blank")
    ap.add_argument("--case", choices=sorted(CASES), default=None,
                    help="Use a built-in layout instead of --board")
    ap.add_argument("--show-path", action="store_true", help="Print every board along the solution")
    args = ap.parse_args(argv)

    try:
        if args.case is not None:
            board = list(CASES[args.case])
            tiles = len(board) - 1
        else:
            tiles = args.size
            if tiles is None:
                tiles = int(_ask("Please input puzzle size: "))
            board = args.board
        puzzle = NPuzzle.from_tile_count(tiles)

        raw_mode = args.mode
        if raw_mode is None:
            raw_mode = _ask("Please chose algorithm (0: UCS, 1: A*_MTH, 2: A*_MDH): ")
        mode = Mode.parse(raw_mode)

        if board is None:
            board = read_board(tiles)
        start = PuzzleState(board=puzzle.validate(board), mode=mode)
    except ValueError as exc:  # PuzzleError or a non-integer answer
        ap.error(str(exc))

    if not puzzle.is_solvable(start.board):
        print("Warning: this layout is in the unsolvable parity class; the search will exhaust the state space.")

    res = PuzzleSearch(puzzle).solve(start)
    report(puzzle, res, show=args.show_path)
    return res

if __name__ == "__main__":
    main()
