"""
Chunked tile buffers around a viewer.

A chunk is a W x H block of tile kinds keyed by its chunk coordinate.
Chunks within load_radius (Chebyshev, chunk units) of the viewer's chunk are
generated; chunks beyond unload_radius are dropped. unload_radius must be
larger than load_radius so a viewer pacing along a chunk border does not
make chunks thrash.

The registry of generated chunks has a single writer: the maintenance step.
Consumers read through snapshots and read-only views.
"""

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping

from pydantic import BaseModel, ConfigDict, model_validator

from ..core.biome import Rgba, TileId, tile_color
from ..core.types import ChunkCoord, Position, WorldPos
from ..logging_config import get_logger, log_chunk, log_maintenance
from .world import WorldGenerator

if TYPE_CHECKING:
    from ..config import ChunkConfig

logger = get_logger(__name__)

# Max chunks generated by a single maintenance pass
DEFAULT_MAX_CHUNKS_PER_TICK = 16


def world_to_chunk(
    pos: WorldPos | tuple[float, float],
    chunk_width: int,
    chunk_height: int,
    tile_size: float,
) -> ChunkCoord:
    """Chunk containing a world-space (pixel) position."""
    chunk_width_world = chunk_width * tile_size
    chunk_height_world = chunk_height * tile_size
    return ChunkCoord(
        math.floor(pos[0] / chunk_width_world),
        math.floor(pos[1] / chunk_height_world),
    )


def spiral_offsets(radius: int) -> Iterator[tuple[int, int]]:
    """
    Offsets covering the (2r+1)^2 square, ring by ring from the center.

    Nearest chunks come first, so a capped maintenance pass fills in
    around the viewer before the edges.
    """
    yield (0, 0)
    for r in range(1, radius + 1):
        # bottom edge: left -> right
        for x in range(-r, r + 1):
            yield (x, -r)
        # right edge: bottom+1 -> top
        for y in range(-r + 1, r + 1):
            yield (r, y)
        # top edge: right-1 -> left
        for x in range(r - 1, -r - 1, -1):
            yield (x, r)
        # left edge: top-1 -> bottom+1
        for y in range(r - 1, -r, -1):
            yield (-r, y)


class Chunk(BaseModel):
    """A generated W x H tile buffer.

    Tiles are stored row-major: index = local_y * width + local_x, where
    local (0, 0) is world tile (coord.x * width, coord.y * height).
    """

    model_config = ConfigDict(frozen=True)

    coord: ChunkCoord
    width: int
    height: int
    tiles: tuple[TileId, ...]

    @model_validator(mode="after")
    def _check_size(self) -> Chunk:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Chunk dimensions must be positive, got {self.width}x{self.height}")
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"Chunk {tuple(self.coord)} has {len(self.tiles)} tiles, "
                f"expected {self.width}x{self.height}"
            )
        return self

    def tile(self, local_x: int, local_y: int) -> TileId:
        """Tile at a local index."""
        if not (0 <= local_x < self.width and 0 <= local_y < self.height):
            raise IndexError(f"Local tile ({local_x}, {local_y}) outside {self.width}x{self.height} chunk")
        return self.tiles[local_y * self.width + local_x]

    def rows(self) -> list[list[TileId]]:
        """Tiles as rows, indexed [local_y][local_x]."""
        return [
            list(self.tiles[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    def colors(self) -> list[Rgba]:
        """Row-major RGBA colors, parallel to tiles."""
        return [tile_color(tile) for tile in self.tiles]

    def world_position(self, local_x: int, local_y: int) -> Position:
        return Position(self.coord.x * self.width + local_x, self.coord.y * self.height + local_y)


class ChunkBuilder:
    """Materializes chunks from a world generator."""

    def __init__(self, world: WorldGenerator, chunk_width: int, chunk_height: int):
        if chunk_width <= 0 or chunk_height <= 0:
            raise ValueError(f"Chunk dimensions must be positive, got {chunk_width}x{chunk_height}")
        self.world = world
        self.chunk_width = chunk_width
        self.chunk_height = chunk_height

    def build(self, coord: ChunkCoord | tuple[int, int]) -> Chunk:
        """Generate the tile buffer for a chunk coordinate."""
        coord = ChunkCoord(*coord)
        base = coord.origin(self.chunk_width, self.chunk_height)
        tiles = [
            self.world.tile_at(base.x + local_x, base.y + local_y)
            for local_y in range(self.chunk_height)
            for local_x in range(self.chunk_width)
        ]
        return Chunk(
            coord=coord,
            width=self.chunk_width,
            height=self.chunk_height,
            tiles=tuple(tiles),
        )


class ChunkRegistry:
    """Generated chunks keyed by coordinate.

    Only maintain_chunks() should add or remove entries.
    """

    def __init__(self) -> None:
        self._chunks: dict[ChunkCoord, Chunk] = {}

    def __contains__(self, coord: object) -> bool:
        return coord in self._chunks

    def __len__(self) -> int:
        return len(self._chunks)

    def get(self, coord: ChunkCoord | tuple[int, int]) -> Chunk | None:
        return self._chunks.get(ChunkCoord(*coord))

    def coords(self) -> frozenset[ChunkCoord]:
        """Snapshot of generated chunk coordinates."""
        return frozenset(self._chunks)

    def view(self) -> Mapping[ChunkCoord, Chunk]:
        """Read-only live view of the registry."""
        return MappingProxyType(self._chunks)

    def _insert(self, chunk: Chunk) -> None:
        self._chunks[chunk.coord] = chunk

    def _remove(self, coord: ChunkCoord) -> Chunk | None:
        return self._chunks.pop(coord, None)


@dataclass(frozen=True)
class MaintenanceReport:
    """What one maintenance pass changed."""

    viewer_chunk: ChunkCoord
    loaded: tuple[ChunkCoord, ...] = ()
    unloaded: tuple[ChunkCoord, ...] = ()


def maintain_chunks(
    registry: ChunkRegistry,
    builder: ChunkBuilder,
    viewer_chunk: ChunkCoord,
    load_radius: int,
    unload_radius: int,
    max_new: int | None = None,
) -> MaintenanceReport:
    """
    Load missing chunks near the viewer and drop far ones.

    Args:
        registry: Registry to update (owned by the caller)
        builder: Chunk builder
        viewer_chunk: Chunk containing the viewer
        load_radius: Chebyshev radius to keep generated
        unload_radius: Chebyshev radius beyond which chunks are dropped
        max_new: Cap on chunks generated this pass (None = no cap)

    Returns:
        MaintenanceReport listing loaded and unloaded coordinates
    """
    if unload_radius <= load_radius:
        raise ValueError(
            f"unload_radius ({unload_radius}) must be greater than load_radius ({load_radius})"
        )

    loaded: list[ChunkCoord] = []
    for dx, dy in spiral_offsets(load_radius):
        if max_new is not None and len(loaded) >= max_new:
            break
        coord = ChunkCoord(viewer_chunk.x + dx, viewer_chunk.y + dy)
        if coord in registry:
            continue
        registry._insert(builder.build(coord))
        loaded.append(coord)
        log_chunk(logger, "LOAD", coord)

    unloaded: list[ChunkCoord] = []
    for coord in sorted(registry.coords()):
        if coord.chebyshev_to(viewer_chunk) > unload_radius:
            registry._remove(coord)
            unloaded.append(coord)
            log_chunk(logger, "UNLOAD", coord)

    return MaintenanceReport(
        viewer_chunk=viewer_chunk,
        loaded=tuple(loaded),
        unloaded=tuple(unloaded),
    )


class ChunkManager:
    """
    Owns a chunk registry and runs maintenance on a bounded cadence.

    Call tick() as often as convenient (e.g. every frame); maintenance runs
    at most once per interval. A missing viewer is deferred work, not an
    error.

    Usage:
        manager = ChunkManager(builder, load_radius=2, unload_radius=4)
        report = manager.tick(WorldPos(px, py))
    """

    def __init__(
        self,
        builder: ChunkBuilder,
        load_radius: int,
        unload_radius: int,
        tile_size: float = 32.0,
        interval_ms: int = 500,
        max_chunks_per_tick: int | None = DEFAULT_MAX_CHUNKS_PER_TICK,
    ):
        if load_radius < 0:
            raise ValueError(f"load_radius must be >= 0, got {load_radius}")
        if unload_radius <= load_radius:
            raise ValueError(
                f"unload_radius ({unload_radius}) must be greater than load_radius ({load_radius})"
            )
        self.builder = builder
        self.load_radius = load_radius
        self.unload_radius = unload_radius
        self.tile_size = tile_size
        self.interval_ms = interval_ms
        self.max_chunks_per_tick = max_chunks_per_tick

        self._registry = ChunkRegistry()
        self._lock = threading.Lock()
        self._last_run: float | None = None

    @classmethod
    def from_config(cls, builder: ChunkBuilder, config: ChunkConfig) -> ChunkManager:
        return cls(
            builder,
            load_radius=config.load_radius,
            unload_radius=config.unload_radius,
            tile_size=config.tile_size,
            interval_ms=config.interval_ms,
            max_chunks_per_tick=config.max_chunks_per_tick,
        )

    @property
    def registry(self) -> ChunkRegistry:
        return self._registry

    def generated(self) -> frozenset[ChunkCoord]:
        """Coordinates of currently generated chunks."""
        return self._registry.coords()

    def get(self, coord: ChunkCoord | tuple[int, int]) -> Chunk | None:
        return self._registry.get(coord)

    def viewer_chunk(self, viewer: WorldPos | tuple[float, float]) -> ChunkCoord:
        return world_to_chunk(
            viewer, self.builder.chunk_width, self.builder.chunk_height, self.tile_size
        )

    def due(self, now: float) -> bool:
        """Whether the cadence allows a maintenance pass at time `now` (seconds)."""
        if self._last_run is None:
            return True
        return (now - self._last_run) * 1000.0 >= self.interval_ms

    def tick(
        self,
        viewer: WorldPos | tuple[float, float] | None,
        now: float | None = None,
    ) -> MaintenanceReport | None:
        """
        Run maintenance if the interval has elapsed and a viewer exists.

        Args:
            viewer: Viewer world position in pixels, or None if there is no viewer yet
            now: Monotonic time in seconds (defaults to time.monotonic())

        Returns:
            MaintenanceReport if a pass ran, else None
        """
        if viewer is None:
            return None
        if now is None:
            now = time.monotonic()

        with self._lock:
            if not self.due(now):
                return None
            self._last_run = now
            return self._maintain(viewer)

    def maintain(self, viewer: WorldPos | tuple[float, float]) -> MaintenanceReport:
        """Run one maintenance pass immediately, ignoring the cadence."""
        with self._lock:
            return self._maintain(viewer)

    def _maintain(self, viewer: WorldPos | tuple[float, float]) -> MaintenanceReport:
        started = time.perf_counter()
        report = maintain_chunks(
            self._registry,
            self.builder,
            self.viewer_chunk(viewer),
            self.load_radius,
            self.unload_radius,
            max_new=self.max_chunks_per_tick,
        )
        duration_ms = int((time.perf_counter() - started) * 1000)
        log_maintenance(
            logger,
            report.viewer_chunk,
            loaded=len(report.loaded),
            unloaded=len(report.unloaded),
            duration_ms=duration_ms,
        )
        return report
