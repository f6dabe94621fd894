"""Tests for the world generator facade."""

import pytest

from overworld.core import Biome, TileId, biome_tile
from overworld.generation.noise import NoiseFieldSampler
from overworld.generation.world import WorldGenerator


class TestWorldGenerator:
    """Tests for WorldGenerator."""

    def test_seed_property(self, world):
        assert world.seed == 42

    def test_point_coordinates(self, world):
        point = world.get_point(7, -9)
        assert point.position == (7, -9)

    def test_deterministic(self):
        """Two generators with one seed agree on every tile."""
        a = WorldGenerator.from_seed(42)
        b = WorldGenerator.from_seed(42)
        for x in range(-20, 20, 3):
            for y in range(-20, 20, 7):
                assert a.tile_at(x, y) == b.tile_at(x, y)

    def test_tile_follows_biome(self, world):
        for x, y in [(0, 0), (100, -250), (-999, 31)]:
            biome = world.biome_at(x, y)
            assert isinstance(biome, Biome)
            assert world.tile_at(x, y) == biome_tile(biome)
            assert isinstance(world.tile_at(x, y), TileId)

    def test_cache_returns_equal_points(self):
        """Memoized points equal freshly computed ones."""
        sampler = NoiseFieldSampler(42)
        cached = WorldGenerator(sampler, cache_size=128)
        uncached = WorldGenerator(sampler)
        for _ in range(2):
            assert cached.get_point(5, 5) == uncached.get_point(5, 5)
