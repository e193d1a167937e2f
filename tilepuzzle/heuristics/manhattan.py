from typing import Optional, Sequence
import math

def manhattan_sum(s: Sequence[int], row_length: Optional[int] = None) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored).

    Tile v belongs at index v - 1 of the row-major grid; row_length defaults
    to the square root of the board length.
    """
    n = row_length or math.isqrt(len(s))
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(tile - 1, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist
