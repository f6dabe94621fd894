"""World generation for Overworld."""

from .noise import Channel, NoiseFieldSampler, mix_seed
from .climate import classify
from .biomes import pick_biome, pick_tile
from .world import WorldGenerator
from .chunks import (
    Chunk,
    ChunkBuilder,
    ChunkManager,
    ChunkRegistry,
    MaintenanceReport,
    maintain_chunks,
    world_to_chunk,
)
from .tileset import create_meadow_tileset
from .layout import LayoutGenerationError, generate_layout, layout_grid
from .render import render_layout, render_world_map

__all__ = [
    "Channel",
    "NoiseFieldSampler",
    "mix_seed",
    "classify",
    "pick_biome",
    "pick_tile",
    "WorldGenerator",
    "Chunk",
    "ChunkBuilder",
    "ChunkManager",
    "ChunkRegistry",
    "MaintenanceReport",
    "maintain_chunks",
    "world_to_chunk",
    "create_meadow_tileset",
    "LayoutGenerationError",
    "generate_layout",
    "layout_grid",
    "render_layout",
    "render_world_map",
]
