from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union
from time import perf_counter
import heapq
import itertools

from tilepuzzle.domains.puzzlen import NPuzzle
from tilepuzzle.search.state import Mode, PuzzleState

State = Tuple[int, ...]

@dataclass
class SearchResult:
    state: Optional[PuzzleState]
    mode: Mode
    expanded: int
    peak_frontier: int
    visited: int
    time: float
    termination: str  # "ok" | "exhausted"

    @property
    def solved(self) -> bool:
        return self.state is not None

    @property
    def depth(self) -> Optional[int]:
        return self.state.depth if self.state is not None else None

    @property
    def path(self) -> Optional[List[State]]:
        return list(self.state.history) if self.state is not None else None

    def as_row(self) -> Dict[str, object]:
        return {
            "mode": self.mode.label,
            "expanded": self.expanded,
            "peak_frontier": self.peak_frontier,
            "visited": self.visited,
            "depth": self.depth,
            "time_sec": self.time,
            "termination": self.termination,
        }


class PuzzleSearch:
    """Best-first graph search over one puzzle instance.

    Successors are generated Left, Right, Up, Down. Boards are closed when
    popped, so duplicates on the frontier are dropped lazily. Equal
    priorities pop in insertion order.
    """
    def __init__(self, puzzle: NPuzzle):
        self.puzzle = puzzle
        self.board_size = puzzle.tiles
        self.row_length = puzzle.N
        self.visited: Dict[State, bool] = {}
        self.expanded_nodes = 0
        self.peak_frontier = 0

    def goal(self, board: Sequence[int]) -> bool:
        return self.puzzle.goal(board)

    def find_blank(self, board: Sequence[int]) -> int:
        return self.puzzle.find_blank(board)

    # ---------- Move generation ----------
    def _move(self, state: PuzzleState, blank: int, illegal: bool, offset: int) -> Optional[PuzzleState]:
        if illegal:
            return None
        lst = list(state.board)
        j = blank + offset
        lst[blank], lst[j] = lst[j], lst[blank]
        return state.child(tuple(lst))

    def go_up(self, blank: int, state: PuzzleState) -> Optional[PuzzleState]:
        return self._move(state, blank, blank < self.row_length, -self.row_length)

    def go_down(self, blank: int, state: PuzzleState) -> Optional[PuzzleState]:
        illegal = blank > self.board_size - self.row_length
        return self._move(state, blank, illegal, self.row_length)

    def go_left(self, blank: int, state: PuzzleState) -> Optional[PuzzleState]:
        return self._move(state, blank, blank % self.row_length == 0, -1)

    def go_right(self, blank: int, state: PuzzleState) -> Optional[PuzzleState]:
        return self._move(state, blank, (blank + 1) % self.row_length == 0, 1)

    def successors(self, state: PuzzleState) -> List[PuzzleState]:
        blank = self.find_blank(state.board)
        out: List[PuzzleState] = []
        for step in (self.go_left, self.go_right, self.go_up, self.go_down):
            nxt = step(blank, state)
            if nxt is not None:
                out.append(nxt)
        return out

    # ---------- Search ----------
    def solve(self, start: PuzzleState) -> SearchResult:
        self.puzzle.validate(start.board)
        t0 = perf_counter()

        self.visited = {}
        self.expanded_nodes = 0
        self.peak_frontier = 0

        counter = itertools.count()
        frontier: List[Tuple[int, int, PuzzleState]] = []
        heapq.heappush(frontier, (start.priority, next(counter), start))

        while frontier:
            self.peak_frontier = max(self.peak_frontier, len(frontier))
            _, _, node = heapq.heappop(frontier)
            if node.board in self.visited:
                continue
            self.visited[node.board] = True

            if self.goal(node.board):
                return self._result(node, start.mode, perf_counter() - t0, "ok")

            for child in self.successors(node):
                self.expanded_nodes += 1
                heapq.heappush(frontier, (child.priority, next(counter), child))

        # Frontier exhausted: start is in the other parity class
        return self._result(None, start.mode, perf_counter() - t0, "exhausted")

    def _result(self, node: Optional[PuzzleState], mode: Mode, elapsed: float, termination: str) -> SearchResult:
        return SearchResult(
            state=node,
            mode=mode,
            expanded=self.expanded_nodes,
            peak_frontier=self.peak_frontier,
            visited=len(self.visited),
            time=elapsed,
            termination=termination,
        )


def best_first(board: Sequence[int], mode: Union[int, str, Mode] = Mode.UNIFORM_COST) -> SearchResult:
    """Solve one board with a fresh engine.

    Raises InvalidConfiguration if the board length is not a square of at
    least 4, InvalidInput if the board is not a permutation of 0..N-1.
    """
    puzzle = NPuzzle.for_board(board)
    start = PuzzleState(board=puzzle.validate(board), mode=Mode.parse(mode))
    return PuzzleSearch(puzzle).solve(start)
