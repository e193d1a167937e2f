from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple
from itertools import combinations
import math

from tilepuzzle.errors import InvalidConfiguration, InvalidInput

State = Tuple[int, ...]

class NPuzzle:
    """Generic k×k sliding-tile puzzle (0 is the blank, k*k - 1 tiles)."""
    def __init__(self, n: int):
        if n < 2:
            raise InvalidConfiguration(f"row length must be at least 2, got {n}")
        self.N = n
        self.size = n * n
        self.tiles = self.size - 1
        self.GOAL: State = tuple(list(range(1, self.size)) + [0])

    @classmethod
    def from_tile_count(cls, tiles: int) -> "NPuzzle":
        """Build from the number of non-blank tiles (8 -> 3×3, 15 -> 4×4, ...)."""
        if tiles < 3:
            raise InvalidConfiguration(f"puzzle needs at least 3 tiles, got {tiles}")
        n = math.isqrt(tiles + 1)
        if n * n != tiles + 1:
            raise InvalidConfiguration(
                f"{tiles} tiles plus the blank do not form a square grid"
            )
        return cls(n)

    @classmethod
    def for_board(cls, board: Sequence[int]) -> "NPuzzle":
        return cls.from_tile_count(len(board) - 1)

    # ---------- Validation ----------
    def validate(self, board: Iterable[int]) -> State:
        """Return the board as a tuple, or raise InvalidInput."""
        try:
            s = tuple(int(x) for x in board)
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"board entries must be integers: {exc}") from exc
        if len(s) != self.size:
            raise InvalidInput(f"expected {self.size} entries for a {self.N}x{self.N} board, got {len(s)}")
        if 0 not in s:
            raise InvalidInput("no blank (0) in the puzzle")
        if sorted(s) != list(range(self.size)):
            raise InvalidInput(f"board must be a permutation of 0..{self.tiles}: {list(s)}")
        return s

    # ---------- Core dynamics ----------
    def goal(self, s: Sequence[int]) -> bool:
        for i in range(self.tiles):
            if s[i] != i + 1:
                return False
        return True

    def find_blank(self, s: Sequence[int]) -> int:
        for i, tile in enumerate(s):
            if tile == 0:
                return i
        raise InvalidInput("no blank (0) in the puzzle")

    def is_solvable(self, s: Sequence[int]) -> bool:
        """True when s can reach GOAL by blank moves.

        Odd row length k: the inversion count over the p tiles is even.
        Even k: inversions plus the blank's row, 1-based from the bottom, is odd.
        """
        tiles = [t for t in s if t != 0]
        inversions = sum(1 for a, b in combinations(tiles, 2) if a > b)
        if self.N % 2:
            return inversions % 2 == 0
        blank_row_from_bottom = self.N - self.find_blank(s) // self.N
        return (inversions + blank_row_from_bottom) % 2 == 1

    # ---------- Display ----------
    def format_board(self, s: Sequence[int]) -> str:
        width = len(str(self.tiles))
        rows: List[str] = []
        for r in range(self.N):
            row = s[r * self.N:(r + 1) * self.N]
            rows.append(" ".join(str(t).rjust(width) for t in row))
        return "\n".join(rows)
