from typing import Dict, Tuple

State = Tuple[int, ...]

# Reference layouts, row-major, 0 = blank.
CASES: Dict[str, State] = {
    "p8_classic": (1, 2, 3, 4, 8, 0, 7, 6, 5),
    "p8_top": (1, 0, 2, 3, 4, 5, 6, 7, 8),
    "p8_one_move": (1, 2, 3, 4, 5, 6, 7, 0, 8),
    "p8_mixed": (2, 0, 3,
                 7, 4, 6,
                 5, 1, 8),
    "p15_one_move": (1, 2, 3, 4,
                     5, 6, 7, 8,
                     9, 10, 11, 12,
                     13, 14, 0, 15),
    "p15_corner": (0, 2, 3, 8,
                   1, 6, 4, 7,
                   5, 10, 11, 12,
                   9, 13, 14, 15),
    "p15_deep": (1, 5, 3, 7,
                 9, 14, 4, 8,
                 2, 6, 13, 12,
                 10, 0, 15, 11),
    "p24_column": (0, 2, 3, 4, 5,
                   1, 7, 8, 9, 10,
                   6, 12, 13, 14, 15,
                   11, 17, 18, 19, 20,
                   16, 21, 22, 23, 24),
    "p24_deep": (7, 1, 5, 4, 11,
                 16, 17, 14, 8, 15,
                 3, 13, 23, 2, 10,
                 21, 12, 9, 6, 18,
                 22, 0, 19, 20, 24),
}

# Small enough for uniform cost in a few seconds.
DEFAULT_CASES = ("p8_classic", "p8_one_move", "p8_mixed", "p15_one_move")
