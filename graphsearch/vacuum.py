"""Grid-cleaning robot: sweeps row by row, cleaning every dirty cell."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

DIRT = "D"
CLEAN = "C"


@dataclass(frozen=True)
class CleaningStep:
    """One cleaned cell and the state of the grid right after cleaning it."""

    row: int
    col: int
    grid: tuple[tuple[str, ...], ...]

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)


def clean_steps(grid: Sequence[Sequence[str]]) -> Iterator[CleaningStep]:
    """Yield a step for each dirty cell in row-major order.

    The given grid is not modified.
    """
    cells = [list(row) for row in grid]
    for i, row in enumerate(cells):
        for j, cell in enumerate(row):
            if cell == DIRT:
                row[j] = CLEAN
                yield CleaningStep(i, j, tuple(tuple(r) for r in cells))


def format_grid(grid: Sequence[Sequence[str]]) -> str:
    """Render the grid with cells separated by spaces, one row per line."""
    return "\n".join(" ".join(row) for row in grid)