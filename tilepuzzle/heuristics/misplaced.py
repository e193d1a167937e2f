from typing import Sequence

def misplaced_count(s: Sequence[int]) -> int:
    """Number of tiles not on their goal square (blank ignored)."""
    misplaced = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        if tile != idx + 1:
            misplaced += 1
    return misplaced
