"""
Nearest-prototype biome selection.

Each biome prototype is a target point in discrete level space. A query
point picks the prototype at the smallest Euclidean distance; wildcard
dimensions take the point's own level, and a mismatched weirdness sign adds
a fixed penalty. Ties go to the prototype listed first, so the declaration
order of the table is part of the output.
"""

from __future__ import annotations

import math
from typing import Iterable, TypeVar

from ..core.biome import BIOME_PROTOTYPES, Biome, BiomePrototype, TileId, biome_tile
from ..core.point import Point

K = TypeVar("K")

WEIRDNESS_PENALTY = 0.5


def prototype_distance(point: Point, prototype: BiomePrototype) -> float:
    """Distance from a point to a prototype in level space, plus weirdness penalty."""
    t = prototype.temperature if prototype.temperature is not None else point.temperature_level
    h = prototype.humidity if prototype.humidity is not None else point.humidity_level
    c = (
        prototype.continentalness
        if prototype.continentalness is not None
        else point.continentalness_level
    )
    e = prototype.erosion if prototype.erosion is not None else point.erosion_level
    pv = (
        prototype.peaks_and_valleys
        if prototype.peaks_and_valleys is not None
        else point.peaks_and_valleys_level
    )

    distance = math.sqrt(
        (t - point.temperature_level) ** 2
        + (h - point.humidity_level) ** 2
        + (c - point.continentalness_level) ** 2
        + (e - point.erosion_level) ** 2
        + (pv - point.peaks_and_valleys_level) ** 2
    )

    if not prototype.weirdness.matches(point.is_weird):
        distance += WEIRDNESS_PENALTY

    return distance


def nearest_prototype(point: Point, prototypes: Iterable[tuple[K, BiomePrototype]]) -> K:
    """
    Pick the key of the closest prototype.

    Args:
        point: Classified point
        prototypes: (key, prototype) pairs in tie-break order

    Returns:
        The key of the first prototype at minimum distance

    Raises:
        ValueError: If prototypes is empty
    """
    best_key: K | None = None
    best_distance = math.inf
    found = False

    for key, prototype in prototypes:
        distance = prototype_distance(point, prototype)
        # Strict comparison: earlier entries win ties
        if not found or distance < best_distance:
            best_key = key
            best_distance = distance
            found = True

    if not found:
        raise ValueError("No biome prototypes to choose from")
    return best_key  # type: ignore[return-value]


def pick_biome(
    point: Point,
    prototypes: dict[Biome, BiomePrototype] | None = None,
) -> Biome:
    """Select the biome for a point from the static prototype table."""
    table = BIOME_PROTOTYPES if prototypes is None else prototypes
    return nearest_prototype(point, table.items())


def pick_tile(point: Point) -> TileId:
    """Select the tile kind for a point."""
    return biome_tile(pick_biome(point))
