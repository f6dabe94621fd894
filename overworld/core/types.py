"""Foundational types for Overworld.

This module defines the coordinate types used throughout the system:
- Position: World tile coordinates (x, y)
- ChunkCoord: Chunk grid coordinates (x, y)
- WorldPos: Continuous world-space position (pixels) of a viewer
"""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    """A tile position in the world.

    Coordinates use standard Cartesian orientation:
    - x increases to the east (right)
    - y increases to the north (up)
    """

    x: int
    y: int

    def distance_to(self, other: Position) -> int:
        """Calculate Manhattan distance to another position."""
        return abs(self.x - other.x) + abs(self.y - other.y)


class ChunkCoord(NamedTuple):
    """Integer coordinate of a chunk in the chunk grid."""

    x: int
    y: int

    def chebyshev_to(self, other: ChunkCoord) -> int:
        """Chebyshev (king-move) distance in chunk units."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def origin(self, chunk_width: int, chunk_height: int) -> Position:
        """World tile position of this chunk's local (0, 0) tile."""
        return Position(self.x * chunk_width, self.y * chunk_height)


class WorldPos(NamedTuple):
    """Continuous world-space position, in pixels."""

    x: float
    y: float
