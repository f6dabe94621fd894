"""
Wave Function Collapse solver.

This is the heart of WFC - the algorithm that observes (collapses) cells
and propagates constraints until the entire grid is determined.

The algorithm:
1. Apply prior assignments and propagate them (arc consistency)
2. Find the cell with the fewest remaining candidates (>1)
3. Collapse it to one candidate, chosen uniformly at random
4. Propagate: narrow neighbors based on the compatibility matrix
5. Repeat until every cell holds one tile, or some cell holds none

There is no backtracking. A contradiction ends the solve and reports where
it happened; callers retry with a new random stream or fall back.
"""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from enum import Enum, auto

from ...logging_config import get_logger, log_solver
from .grid import Grid, Cell
from .tile import Direction, TileSet, TileSetError, TileVariant

logger = get_logger(__name__)

Coord = tuple[int, int]
Solution = list[tuple[Coord, TileVariant]]


class WFCError(Exception):
    """Base exception for solver errors."""

    pass


class Contradiction(WFCError):
    """A cell's domain became empty. Recoverable: retry or fall back."""

    def __init__(self, at: Coord):
        super().__init__(f"Wave contradiction at {at}")
        self.at = at


class SolveCancelled(WFCError):
    """The solve was cancelled before reaching a result."""

    pass


class SolverState(Enum):
    """The current state of the WFC solver."""
    UNSOLVED = auto()       # Priors not yet applied
    PROPAGATING = auto()    # Narrowing domains after an assignment
    OBSERVING = auto()      # Ready to collapse the next cell
    SOLVED = auto()         # All cells collapsed successfully
    CONTRADICTION = auto()  # Some cell has 0 possibilities


class WFCSolver:
    """
    The WFC algorithm implementation.

    Each solver owns its grid and its random stream, so separate solves can
    run concurrently without sharing state.

    Usage:
        solver = WFCSolver(16, 16, tileset, seed=7)
        solver.set((8, 8), "grass")
        tiles = solver.solve()  # raises Contradiction on failure

    Or step by step:
        while solver.step() not in (SolverState.SOLVED, SolverState.CONTRADICTION):
            ...
    """

    def __init__(
        self,
        width: int,
        height: int,
        tileset: TileSet,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize the solver.

        Args:
            width: Grid width in cells
            height: Grid height in cells
            tileset: Tile alphabet; its compatibility matrix is built (and validated) here
            seed: Seed for the solver's own random stream
            rng: Explicit random stream (takes precedence over seed)
        """
        self.tileset = tileset
        self.matrix = tileset.compatibility()
        self.grid = Grid(width, height, tileset.ids)
        self.rng = rng if rng is not None else random.Random(seed)

        self.priors: dict[Coord, str] = {}
        self.state = SolverState.UNSOLVED
        self.contradiction: Contradiction | None = None
        self.step_count = 0

        # Number of candidates removed by propagation so far
        self.removed_count = 0

        # Cell observed by the most recent step
        self.last_collapsed: Cell | None = None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def collapsed_count(self) -> int:
        """Number of cells holding exactly one tile."""
        return sum(1 for cell in self.grid.all_cells() if cell.collapsed)

    def set(self, pos: Coord, tile_id: str) -> None:
        """Fix a tile at (x, y) before solving."""
        if self.state is not SolverState.UNSOLVED:
            raise WFCError("Priors can only be set before solving starts")
        x, y = pos
        if not self.grid.in_bounds(x, y):
            raise ValueError(f"Prior {pos} is outside the {self.width}x{self.height} grid")
        if tile_id not in self.tileset:
            raise TileSetError(f"Unknown tile id: {tile_id!r}")
        self.priors[(x, y)] = tile_id

    def step(self) -> SolverState:
        """
        Advance the solve by one unit of work.

        The first call applies priors; each later call observes one cell.
        Returns the state after this step.
        """
        if self.state in (SolverState.SOLVED, SolverState.CONTRADICTION):
            return self.state

        self.last_collapsed = None

        try:
            if self.state is SolverState.UNSOLVED:
                self._apply_priors()
            else:
                self._observe()
        except Contradiction as exc:
            self.contradiction = exc
            self.state = SolverState.CONTRADICTION
            return self.state

        self.step_count += 1
        if self.grid.min_entropy_cell() is None:
            self.state = SolverState.SOLVED
        else:
            self.state = SolverState.OBSERVING
        return self.state

    def _apply_priors(self) -> None:
        queue: deque[Cell] = deque()
        for (x, y), tile_id in sorted(self.priors.items(), key=lambda item: (item[0][1], item[0][0])):
            cell = self.grid.cells[y][x]
            cell.collapse_to(tile_id)
            queue.append(cell)
        self.state = SolverState.PROPAGATING
        self._propagate(queue)

    def _observe(self) -> None:
        cell = self.grid.min_entropy_cell()
        if cell is None:
            return
        self._collapse(cell)
        self.last_collapsed = cell
        self.state = SolverState.PROPAGATING
        self._propagate(deque([cell]))

    def _collapse(self, cell: Cell) -> None:
        """
        Collapse a cell to a single tile, uniformly at random.

        Candidates are ordered by tile set registration order so the pick
        depends only on the random stream. Socket weights are not used.
        """
        candidates = sorted(cell.possibilities, key=self.matrix.index.__getitem__)
        chosen = candidates[self.rng.randrange(len(candidates))]
        cell.collapse_to(chosen)

    def _propagate(self, queue: deque[Cell]) -> None:
        """
        Arc consistency from the queued cells outward.

        A neighbor keeps a candidate only if some candidate of the current
        cell allows it on that side. Raises Contradiction when a neighbor
        runs out of candidates.
        """
        in_queue: set[Coord] = {c.position for c in queue}

        while queue:
            cell = queue.popleft()
            in_queue.discard(cell.position)

            for neighbor, direction in self.grid.neighbors(cell):
                allowed = self._get_allowed_neighbors(cell, direction)
                before = neighbor.entropy
                if not neighbor.constrain_to(allowed):
                    continue

                self.removed_count += before - neighbor.entropy

                if neighbor.entropy == 0:
                    raise Contradiction(at=neighbor.position)

                if neighbor.position not in in_queue:
                    queue.append(neighbor)
                    in_queue.add(neighbor.position)

    def _get_allowed_neighbors(self, cell: Cell, direction: Direction) -> set[str]:
        """
        Get all tile IDs that are allowed adjacent to cell in the given direction.

        This unions the allowed neighbors of all tiles that cell could still be.
        """
        allowed: set[str] = set()
        for tile_id in cell.possibilities:
            allowed |= self.matrix.allowed(direction, tile_id)
        return allowed

    def solution(self) -> Solution:
        """The solved grid as a row-major list of ((x, y), variant)."""
        if self.state is not SolverState.SOLVED:
            raise WFCError(f"Solver is not solved (state={self.state.name})")
        return [
            ((cell.x, cell.y), self.tileset[cell.tile_id])
            for cell in self.grid.all_cells()
        ]

    def solve(self, cancel: threading.Event | None = None) -> Solution:
        """
        Run the solver to completion.

        Args:
            cancel: Optional event checked between steps

        Returns:
            Row-major list of ((x, y), TileVariant)

        Raises:
            Contradiction: If some cell's domain emptied
            SolveCancelled: If cancel was set before completion
        """
        started = time.perf_counter()
        log_solver(logger, "START", self.width, self.height, details=f"priors={len(self.priors)}")

        while True:
            if cancel is not None and cancel.is_set():
                log_solver(logger, "CANCELLED", self.width, self.height)
                raise SolveCancelled(f"Solve cancelled after {self.step_count} steps")

            state = self.step()
            if state is SolverState.SOLVED:
                break
            if state is SolverState.CONTRADICTION:
                duration_ms = int((time.perf_counter() - started) * 1000)
                log_solver(
                    logger, "CONTRADICTION", self.width, self.height,
                    duration_ms=duration_ms, details=f"at={self.contradiction.at}",
                )
                raise self.contradiction

        duration_ms = int((time.perf_counter() - started) * 1000)
        log_solver(
            logger, "SOLVED", self.width, self.height,
            duration_ms=duration_ms, details=f"steps={self.step_count}",
        )
        return self.solution()
