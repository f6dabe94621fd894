"""
Cell domains for Wave Function Collapse.

Every cell starts with the full tile alphabet as its domain. Observation
shrinks one domain to a single tile and propagation trims the rest; a cell
whose domain empties is a contradiction.

Cells are addressed (x, y) with x growing east and y growing south.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .tile import Direction


@dataclass(eq=False)
class Cell:
    """
    One grid position and the tile ids it may still become.

    Identity is the position: two Cell objects at the same (x, y) compare
    and hash equal regardless of their domains.
    """
    x: int
    y: int
    possibilities: set[str] = field(default_factory=set)

    def __hash__(self):
        return hash(self.position)

    def __eq__(self, other):
        if isinstance(other, Cell):
            return self.position == other.position
        return NotImplemented

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def entropy(self) -> int:
        """Domain size. 0 means contradiction, 1 means decided."""
        return len(self.possibilities)

    @property
    def collapsed(self) -> bool:
        return self.entropy == 1

    @property
    def tile_id(self) -> str | None:
        if not self.collapsed:
            return None
        (only,) = self.possibilities
        return only

    def collapse_to(self, tile_id: str) -> None:
        self.possibilities = {tile_id}

    def constrain_to(self, allowed: Iterable[str]) -> bool:
        """Intersect the domain with `allowed`. True if anything was removed."""
        before = self.entropy
        self.possibilities.intersection_update(allowed)
        return self.entropy != before


class Grid:
    """
    Row-major W x H array of cells, all starting in full superposition.

    Usage:
        grid = Grid(8, 8, tileset.ids)
        cell = grid.min_entropy_cell()
    """

    def __init__(self, width: int, height: int, tile_ids: Iterable[str]):
        """
        Args:
            width: Cells per row
            height: Number of rows
            tile_ids: The initial domain of every cell
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.tile_ids = frozenset(tile_ids)
        self.cells: list[list[Cell]] = []
        self.reset()

    def reset(self) -> None:
        """Put every cell back into full superposition."""
        self.cells = [
            [Cell(x, y, set(self.tile_ids)) for x in range(self.width)]
            for y in range(self.height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Cell | None:
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def neighbors(self, cell: Cell) -> Iterator[tuple[Cell, Direction]]:
        """
        In-bounds neighbors of `cell`, each with the direction that leads to it.

        (n, Direction.EAST) means n sits on cell's east side.
        """
        for direction in Direction:
            other = self.get_cell(cell.x + direction.dx, cell.y + direction.dy)
            if other is not None:
                yield other, direction

    def all_cells(self) -> Iterator[Cell]:
        """Cells in row-major order."""
        for row in self.cells:
            yield from row

    def min_entropy_cell(self) -> Cell | None:
        """
        The undecided cell with the smallest domain, or None if none is left.

        Ties go to the first cell in row-major scan order, which keeps a
        seeded solve reproducible.
        """
        best: Cell | None = None
        for cell in self.all_cells():
            entropy = cell.entropy
            if entropy < 2:
                continue
            if best is None or entropy < best.entropy:
                best = cell
                if entropy == 2:
                    # Nothing undecided can beat two choices
                    break
        return best

    def is_complete(self) -> bool:
        return all(cell.collapsed for cell in self.all_cells())
