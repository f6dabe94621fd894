"""Core domain models for Overworld.

This module contains pure data with no I/O: coordinate types, the classified
Point model, and the static biome/tile tables.

Usage:
    from overworld.core import Position, ChunkCoord, Point, Biome, TileId
"""

# Types
from .types import Position, ChunkCoord, WorldPos

# Points
from .point import Point

# Biomes and tiles
from .biome import (
    DATA_VERSION,
    Biome,
    TileId,
    WeirdnessSign,
    BiomePrototype,
    BIOME_PROTOTYPES,
    BIOME_TILES,
    BIOME_COLORS,
    TILE_COLORS,
    biome_tile,
    biome_color,
    tile_color,
)

__all__ = [
    # Types
    "Position",
    "ChunkCoord",
    "WorldPos",
    # Points
    "Point",
    # Biomes and tiles
    "DATA_VERSION",
    "Biome",
    "TileId",
    "WeirdnessSign",
    "BiomePrototype",
    "BIOME_PROTOTYPES",
    "BIOME_TILES",
    "BIOME_COLORS",
    "TILE_COLORS",
    "biome_tile",
    "biome_color",
    "tile_color",
]
