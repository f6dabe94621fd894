"""
World generator facade: sampler -> classifier -> picker for one coordinate.
"""

from __future__ import annotations

from functools import lru_cache

from ..core.biome import Biome, TileId, biome_tile
from ..core.point import Point
from .biomes import pick_biome
from .climate import classify
from .noise import NoiseFieldSampler


class WorldGenerator:
    """
    Computes Points, biomes and tile kinds for world tile coordinates.

    Everything here is a pure function of (seed, x, y). Points can be
    memoized with an LRU cache; the cache is the only mutable state and
    functools.lru_cache is safe to share between threads.

    Usage:
        world = WorldGenerator(NoiseFieldSampler(seed=42))
        tile = world.tile_at(10, -3)
    """

    def __init__(self, sampler: NoiseFieldSampler, cache_size: int = 0):
        """
        Args:
            sampler: Noise sampler for the world seed
            cache_size: Max memoized Points (0 disables the cache)
        """
        self.sampler = sampler
        self.cache_size = cache_size
        if cache_size > 0:
            self._point = lru_cache(maxsize=cache_size)(self._compute_point)
        else:
            self._point = self._compute_point

    @classmethod
    def from_seed(cls, seed: int, octaves: int = 4, cache_size: int = 0) -> WorldGenerator:
        return cls(NoiseFieldSampler(seed, octaves=octaves), cache_size=cache_size)

    @property
    def seed(self) -> int:
        return self.sampler.seed

    def _compute_point(self, x: int, y: int) -> Point:
        return classify(x, y, self.sampler.sample_all(x, y))

    def get_point(self, x: int, y: int) -> Point:
        """Classified climate sample at a world tile."""
        return self._point(x, y)

    def biome_at(self, x: int, y: int) -> Biome:
        return pick_biome(self.get_point(x, y))

    def tile_at(self, x: int, y: int) -> TileId:
        return biome_tile(self.biome_at(x, y))
