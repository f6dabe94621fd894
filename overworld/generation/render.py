"""
Diagnostic rasterizers.

Renders generated worlds and solved layouts to Pillow images, one tile per
pixel (or per scale x scale block). Callers decide where to save them.
"""

from __future__ import annotations

from PIL import Image

from ..core.biome import biome_color, tile_color
from ..core.types import ChunkCoord
from ..logging_config import get_logger
from .wfc import Solution
from .world import WorldGenerator

logger = get_logger(__name__)

BACKGROUND = (0, 0, 0, 255)


def render_world_map(
    world: WorldGenerator,
    chunk_width: int,
    chunk_height: int,
    radius_chunks: int,
    center: ChunkCoord | tuple[int, int] = (0, 0),
    by_biome: bool = False,
) -> Image.Image:
    """
    Render the square of chunks around a center chunk.

    World y grows north, so image rows are flipped: the top row of the image
    is the northernmost tile row.

    Args:
        world: World generator to sample
        chunk_width: Tiles per chunk horizontally
        chunk_height: Tiles per chunk vertically
        radius_chunks: Chebyshev radius around center, in chunks
        center: Center chunk
        by_biome: Color by biome instead of by tile kind
    """
    if radius_chunks < 0:
        raise ValueError(f"radius_chunks must be >= 0, got {radius_chunks}")

    cx, cy = center
    span = 2 * radius_chunks + 1
    width_px = span * chunk_width
    height_px = span * chunk_height
    min_x = (cx - radius_chunks) * chunk_width
    max_y = (cy + radius_chunks + 1) * chunk_height - 1

    image = Image.new("RGBA", (width_px, height_px), BACKGROUND)
    pixels = image.load()

    for py in range(height_px):
        y = max_y - py
        for px in range(width_px):
            x = min_x + px
            if by_biome:
                color = biome_color(world.biome_at(x, y))
            else:
                color = tile_color(world.tile_at(x, y))
            pixels[px, py] = color

    logger.info(f"Rendered world map {width_px}x{height_px} around chunk ({cx}, {cy})")
    return image


def render_layout(solution: Solution, width: int, height: int, scale: int = 1) -> Image.Image:
    """
    Render a solved layout, each cell as a scale x scale block.

    Layout rows are drawn top-down (y = 0 is the top row).
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    image = Image.new("RGBA", (width * scale, height * scale), BACKGROUND)
    for (x, y), variant in solution:
        px, py = x * scale, y * scale
        image.paste(variant.color, (px, py, px + scale, py + scale))
    return image
