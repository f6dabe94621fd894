"""
Layout generation using Wave Function Collapse.

This module provides the main entry point for solving a tile layout: a grid
of meadow tiles (grass, flowers, trees) whose neighbors all agree on their
shared sockets.
"""

from __future__ import annotations

import random
from typing import Callable, Mapping

from ..logging_config import get_logger
from .noise import mix_seed
from .tileset import create_meadow_tileset
from .wfc import Contradiction, Solution, SolverState, TileSet, WFCSolver

logger = get_logger(__name__)

# Seed used by the CLI when none is given
DEFAULT_LAYOUT_SEED = 23_534_536_336_534

# Tile fixed at the center of the grid when no priors are given
DEFAULT_CENTER_TILE = "grass"


class LayoutGenerationError(RuntimeError):
    """Every attempt ended in a contradiction."""

    def __init__(self, attempts: int, last: Contradiction | None = None):
        message = f"Layout generation failed after {attempts} attempts"
        if last is not None:
            message += f" (last: {last})"
        super().__init__(message)
        self.attempts = attempts
        self.last = last


def attempt_seed(seed: int, attempt: int) -> int:
    """Seed for one attempt. Attempt 0 uses the seed unchanged."""
    if attempt == 0:
        return seed
    return mix_seed(seed, attempt)


def generate_layout(
    width: int,
    height: int,
    seed: int | None = None,
    tileset: TileSet | None = None,
    priors: Mapping[tuple[int, int], str] | None = None,
    max_retries: int = 10,
    progress_callback: Callable[[int, int], None] | None = None,
) -> Solution:
    """
    Solve a tile layout.

    Args:
        width: Grid width in cells
        height: Grid height in cells
        seed: Random seed for reproducibility (None = random)
        tileset: Tile alphabet (default: the meadow tileset)
        priors: Tiles fixed before solving, keyed by (x, y).
                Defaults to grass at the center cell.
        max_retries: Max attempts before giving up (each contradiction restarts)
        progress_callback: Optional callback(collapsed, total_cells) after each step

    Returns:
        Row-major list of ((x, y), TileVariant)

    Raises:
        LayoutGenerationError: If every attempt hit a contradiction
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be >= 1, got {max_retries}")
    if seed is None:
        seed = random.getrandbits(63)
    if tileset is None:
        tileset = create_meadow_tileset()
    if priors is None:
        priors = {(width // 2, height // 2): DEFAULT_CENTER_TILE}

    total_cells = width * height
    last: Contradiction | None = None

    for attempt in range(max_retries):
        solver = WFCSolver(width, height, tileset, seed=attempt_seed(seed, attempt))
        for pos, tile_id in priors.items():
            solver.set(pos, tile_id)

        while True:
            state = solver.step()

            if progress_callback is not None:
                progress_callback(solver.collapsed_count, total_cells)

            if state is SolverState.SOLVED:
                return solver.solution()
            if state is SolverState.CONTRADICTION:
                break

        last = solver.contradiction
        logger.warning(
            f"Layout attempt {attempt + 1}/{max_retries} failed: {last}"
        )

    raise LayoutGenerationError(max_retries, last)


def layout_grid(solution: Solution, width: int, height: int) -> list[list[str]]:
    """
    Convert a solution into a 2D grid of tile ids.

    Returns:
        2D list of tile ids, indexed as grid[y][x]
    """
    grid: list[list[str]] = [["" for _ in range(width)] for _ in range(height)]
    for (x, y), variant in solution:
        grid[y][x] = variant.id
    return grid
