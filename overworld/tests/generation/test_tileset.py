"""Tests for the meadow tileset."""

import pytest

from overworld.generation.tileset import SocketType, create_meadow_tileset
from overworld.generation.wfc import Direction


class TestTilesetCreation:
    """Test tileset creation."""

    def test_creates_all_tiles(self, meadow):
        """Should create the four meadow tiles in order."""
        assert len(meadow) == 4
        assert meadow.ids == ("grass", "rose", "dandelion", "tree")

    def test_tiles_have_opaque_colors(self, meadow):
        for variant in meadow:
            assert len(variant.color) == 4
            assert variant.color[3] == 255

    def test_tiles_are_symmetric(self, meadow):
        """North/south sockets equal east/west sockets for every tile."""
        for variant in meadow:
            assert variant.sockets[Direction.NORTH] == variant.sockets[Direction.SOUTH]
            assert variant.sockets[Direction.EAST] == variant.sockets[Direction.WEST]
            assert variant.sockets[Direction.NORTH] == variant.sockets[Direction.EAST]

    def test_declared_weights(self, meadow):
        assert meadow["grass"].weights(Direction.NORTH) == {
            SocketType.GRASS: 95,
            SocketType.ROSE: 2,
            SocketType.DANDELION: 3,
        }
        assert meadow["tree"].weights(Direction.EAST) == {
            SocketType.TREE: 5,
            SocketType.GRASS: 2,
        }


class TestAdjacencyRules:
    """Test the derived compatibility."""

    def test_all_tiles_have_self_adjacency(self, meadow):
        """Every tile should be allowed to be adjacent to itself."""
        matrix = meadow.compatibility()
        for tile_id in meadow.ids:
            for direction in Direction:
                assert matrix.compatible(direction, tile_id, tile_id), \
                    f"{tile_id} is not self-adjacent in direction {direction}"

    def test_adjacency_is_bidirectional(self, meadow):
        """If A allows B to its north, B should allow A to its south."""
        matrix = meadow.compatibility()
        for a in meadow.ids:
            for direction in Direction:
                for b in matrix.allowed(direction, a):
                    assert a in matrix.allowed(direction.opposite(), b), \
                        f"Non-bidirectional rule: {a}->{b} ({direction})"

    def test_expected_graph(self, meadow):
        matrix = meadow.compatibility()
        assert matrix.allowed(Direction.NORTH, "grass") == {"grass", "rose", "dandelion", "tree"}
        assert matrix.allowed(Direction.NORTH, "rose") == {"grass", "rose"}
        assert matrix.allowed(Direction.NORTH, "dandelion") == {"grass", "dandelion"}
        assert matrix.allowed(Direction.NORTH, "tree") == {"grass", "tree"}

    def test_flowers_never_touch(self, meadow):
        matrix = meadow.compatibility()
        for direction in Direction:
            assert not matrix.compatible(direction, "rose", "dandelion")
            assert not matrix.compatible(direction, "rose", "tree")

    def test_fresh_instances(self):
        """Each call builds an independent tileset."""
        assert create_meadow_tileset() is not create_meadow_tileset()
