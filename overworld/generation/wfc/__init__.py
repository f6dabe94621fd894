"""
Wave Function Collapse (WFC) tile constraint solver.

The algorithm:
1. Start with all cells in superposition (any tile possible)
2. Find the cell with the fewest remaining candidates
3. Collapse it to one tile
4. Propagate constraints to neighbors
5. Repeat until done or a contradiction is found
"""

from .tile import CompatibilityMatrix, Direction, TileSet, TileSetError, TileVariant
from .grid import Grid, Cell
from .solver import Contradiction, SolveCancelled, Solution, SolverState, WFCError, WFCSolver
from .tasks import SolveOutcome, SolveTask

__all__ = [
    "CompatibilityMatrix",
    "Direction",
    "TileSet",
    "TileSetError",
    "TileVariant",
    "Grid",
    "Cell",
    "Contradiction",
    "SolveCancelled",
    "Solution",
    "SolverState",
    "WFCError",
    "WFCSolver",
    "SolveOutcome",
    "SolveTask",
]
