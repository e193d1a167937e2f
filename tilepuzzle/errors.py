from __future__ import annotations


class PuzzleError(ValueError):
    """Base class for bad puzzle input or configuration."""


class InvalidInput(PuzzleError):
    """Board is not a permutation of 0..N-1 (wrong length, repeats, no blank)."""


class InvalidConfiguration(PuzzleError):
    """Tile count does not form a square grid, or the cost mode is unknown."""
