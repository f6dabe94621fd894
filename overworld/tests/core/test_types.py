"""Tests for core types: Position, ChunkCoord, WorldPos."""

import pytest

from overworld.core import ChunkCoord, Position, WorldPos


class TestPosition:
    """Tests for Position NamedTuple."""

    def test_create_position(self):
        """Can create a position with x and y."""
        pos = Position(5, 10)
        assert pos.x == 5
        assert pos.y == 10

    def test_position_is_hashable(self):
        """Positions can be used as dict keys."""
        pos1 = Position(1, 2)
        pos2 = Position(1, 2)
        pos3 = Position(3, 4)

        d = {pos1: "a", pos3: "b"}
        assert d[pos2] == "a"  # pos2 equals pos1

    def test_distance_to(self):
        """Manhattan distance between positions."""
        assert Position(0, 0).distance_to(Position(3, 4)) == 7
        assert Position(-2, 1).distance_to(Position(-2, 1)) == 0


class TestChunkCoord:
    """Tests for ChunkCoord."""

    def test_chebyshev_distance(self):
        """Chebyshev distance takes the larger axis difference."""
        assert ChunkCoord(0, 0).chebyshev_to(ChunkCoord(2, -1)) == 2
        assert ChunkCoord(-3, 4).chebyshev_to(ChunkCoord(-3, 4)) == 0
        assert ChunkCoord(1, 1).chebyshev_to(ChunkCoord(-1, -1)) == 2

    def test_origin(self):
        """Chunk origin is chunk coord times chunk dimensions."""
        assert ChunkCoord(0, 0).origin(16, 8) == Position(0, 0)
        assert ChunkCoord(2, -1).origin(16, 8) == Position(32, -8)

    def test_equals_plain_tuple(self):
        """ChunkCoords compare equal to plain tuples."""
        assert ChunkCoord(1, 2) == (1, 2)


class TestWorldPos:
    """Tests for WorldPos."""

    def test_float_components(self):
        pos = WorldPos(12.5, -3.25)
        assert pos.x == 12.5
        assert pos.y == -3.25
