from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Tuple, Union

from tilepuzzle.errors import InvalidConfiguration
from tilepuzzle.heuristics.manhattan import manhattan_sum
from tilepuzzle.heuristics.misplaced import misplaced_count

State = Tuple[int, ...]

class Mode(IntEnum):
    UNIFORM_COST = 0
    MISPLACED_TILE = 1
    MANHATTAN = 2

    @classmethod
    def parse(cls, value: Union[int, str, "Mode"]) -> "Mode":
        """Accept 0/1/2, their string forms, or names like 'manhattan'."""
        if isinstance(value, str):
            key = value.strip().lower()
            if key.isdigit():
                value = int(key)
            else:
                for m in cls:
                    if m.name.lower() == key or m.label == key:
                        return m
                raise InvalidConfiguration(f"unknown cost function: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise InvalidConfiguration(f"unknown cost function: {value!r} (expected 0, 1 or 2)") from None

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Mode.UNIFORM_COST: "ucs",
    Mode.MISPLACED_TILE: "misplaced",
    Mode.MANHATTAN: "manhattan",
}

def _zero(s: State) -> int:
    return 0

HEURISTICS: Dict[Mode, Callable[[State], int]] = {
    Mode.UNIFORM_COST: _zero,
    Mode.MISPLACED_TILE: misplaced_count,
    Mode.MANHATTAN: manhattan_sum,
}

@dataclass(frozen=True, eq=False)
class PuzzleState:
    """One node of the search: a board, its path cost and how it was reached.

    The heuristic for the node's mode is computed once here and kept in ``h``;
    ``priority`` is g for uniform cost and g + h for the two A* modes.
    History is shared with the parent chain rather than copied per child.
    """
    board: State
    mode: Mode = Mode.UNIFORM_COST
    g: int = 0
    parent: Optional["PuzzleState"] = field(default=None, repr=False)
    h: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "board", tuple(self.board))
        object.__setattr__(self, "mode", Mode.parse(self.mode))
        object.__setattr__(self, "h", HEURISTICS[self.mode](self.board))

    @property
    def priority(self) -> int:
        return self.g + self.h

    @property
    def history(self) -> Tuple[State, ...]:
        path: List[State] = []
        node: Optional[PuzzleState] = self
        while node is not None:
            path.append(node.board)
            node = node.parent
        path.reverse()
        return tuple(path)

    @property
    def depth(self) -> int:
        """Moves from the root of the parent chain; equals g for states built by child() from a g=0 root."""
        return len(self.history) - 1

    def child(self, board: State) -> "PuzzleState":
        return PuzzleState(board=board, mode=self.mode, g=self.g + 1, parent=self)

    def __lt__(self, other: "PuzzleState") -> bool:
        return self.priority < other.priority
