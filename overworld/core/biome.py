"""Biome and tile types for Overworld.

This module holds the static biome tables: the Biome and TileId enumerations,
each biome's prototype (its ideal channel levels), and the color and tile
lookups used by renderers.

These tables are a versioned data contract. Changing a prototype, a mapping
or the declaration order of Biome changes generated output for existing
seeds; bump DATA_VERSION when doing so.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DATA_VERSION = 1

Rgba = tuple[int, int, int, int]


class WeirdnessSign(Enum):
    """Weirdness sign a biome requires."""

    ANY = "any"
    POSITIVE = "positive"
    NEGATIVE = "negative"

    def matches(self, is_weird: bool) -> bool:
        """Whether a point with the given weirdness sign satisfies this requirement."""
        if self is WeirdnessSign.POSITIVE:
            return is_weird
        if self is WeirdnessSign.NEGATIVE:
            return not is_weird
        return True


class Biome(Enum):
    """Biomes in fixed enumeration order.

    The order matters: when two prototypes are equally close to a point,
    the one declared first wins.
    """

    # Oceans
    FROZEN_OCEAN = "frozen_ocean"
    DEEP_FROZEN_OCEAN = "deep_frozen_ocean"
    COLD_OCEAN = "cold_ocean"
    DEEP_COLD_OCEAN = "deep_cold_ocean"
    OCEAN = "ocean"
    DEEP_OCEAN = "deep_ocean"
    LUKEWARM_OCEAN = "lukewarm_ocean"
    DEEP_LUKEWARM_OCEAN = "deep_lukewarm_ocean"
    WARM_OCEAN = "warm_ocean"

    # Rivers
    RIVER = "river"
    FROZEN_RIVER = "frozen_river"

    # Beaches
    SNOWY_BEACH = "snowy_beach"
    BEACH = "beach"
    DESERT_BEACH = "desert_beach"

    # Middle biomes
    SNOWY_PLAINS = "snowy_plains"
    ICE_SPIKES = "ice_spikes"
    PLAINS = "plains"
    FLOWER_FOREST = "flower_forest"
    SUNFLOWER_PLAINS = "sunflower_plains"
    SAVANNA = "savanna"
    DESERT = "desert"
    SNOWY_TAIGA = "snowy_taiga"
    TAIGA = "taiga"
    BIRCH_FOREST = "birch_forest"
    OLD_GROWTH_BIRCH_FOREST = "old_growth_birch_forest"
    JUNGLE = "jungle"
    SPARSE_JUNGLE = "sparse_jungle"
    OLD_GROWTH_SPRUCE_TAIGA = "old_growth_spruce_taiga"
    OLD_GROWTH_PINE_TAIGA = "old_growth_pine_taiga"
    FOREST = "forest"
    DARK_FOREST = "dark_forest"
    BAMBOO_JUNGLE = "bamboo_jungle"

    # Badlands
    BADLANDS = "badlands"
    ERODED_BADLANDS = "eroded_badlands"
    WOODED_BADLANDS = "wooded_badlands"

    # Plateau
    MEADOW = "meadow"
    CHERRY_GROVE = "cherry_grove"
    PALE_GARDEN = "pale_garden"
    SAVANNA_PLATEAU = "savanna_plateau"

    # Shattered
    WINDSWEPT_GRAVELLY_HILLS = "windswept_gravelly_hills"
    WINDSWEPT_HILLS = "windswept_hills"
    WINDSWEPT_FOREST = "windswept_forest"

    # Peaks
    JAGGED_PEAKS = "jagged_peaks"
    FROZEN_PEAKS = "frozen_peaks"
    STONY_PEAKS = "stony_peaks"


class TileId(Enum):
    """Tile kinds handed to the tilemap consumer."""

    RAINFOREST = "rainforest"
    SAVANNAH = "savannah"
    TROPICAL_SEASONAL_FOREST = "tropical_seasonal_forest"
    DESERT = "desert"
    SEMI_DESERT = "semi_desert"
    XERIC_SHRUBLAND = "xeric_shrubland"
    GRASSLAND = "grassland"
    DECIDUOUS_FOREST = "deciduous_forest"
    TEMPERATE_RAINFOREST = "temperate_rainforest"
    MEDITERRANEAN = "mediterranean"
    TAIGA = "taiga"
    BOREAL_FOREST = "boreal_forest"
    TUNDRA = "tundra"
    ICE_SHEET = "ice_sheet"
    MOUNTAIN = "mountain"
    SWAMP = "swamp"
    RIVER = "river"
    SNOW = "snow"
    BEACH = "beach"
    SHALLOW_OCEAN = "shallow_ocean"
    OCEAN = "ocean"
    DEEP_OCEAN = "deep_ocean"


@dataclass(frozen=True)
class BiomePrototype:
    """Target profile of a biome in level space.

    A None level is a wildcard: it takes the query point's own level and
    so never contributes distance.
    """

    temperature: int | None = None
    humidity: int | None = None
    continentalness: int | None = None
    erosion: int | None = None
    peaks_and_valleys: int | None = None
    weirdness: WeirdnessSign = WeirdnessSign.ANY


_P = BiomePrototype
_POS = WeirdnessSign.POSITIVE
_NEG = WeirdnessSign.NEGATIVE

# Continentalness levels: 0=deep ocean, 1=ocean, 2=coast, 3..5=inland.
# Peaks-and-valleys levels: 0=valleys, 2=mid, 4=peaks.
BIOME_PROTOTYPES: dict[Biome, BiomePrototype] = {
    # Oceans depend only on temperature and ocean depth
    Biome.FROZEN_OCEAN: _P(temperature=0, continentalness=1),
    Biome.DEEP_FROZEN_OCEAN: _P(temperature=0, continentalness=0),
    Biome.COLD_OCEAN: _P(temperature=1, continentalness=1),
    Biome.DEEP_COLD_OCEAN: _P(temperature=1, continentalness=0),
    Biome.OCEAN: _P(temperature=2, continentalness=1),
    Biome.DEEP_OCEAN: _P(temperature=2, continentalness=0),
    Biome.LUKEWARM_OCEAN: _P(temperature=3, continentalness=1),
    Biome.DEEP_LUKEWARM_OCEAN: _P(temperature=3, continentalness=0),
    Biome.WARM_OCEAN: _P(temperature=4, continentalness=1),
    # Rivers sit in valleys
    Biome.RIVER: _P(peaks_and_valleys=0),
    Biome.FROZEN_RIVER: _P(temperature=0, peaks_and_valleys=0),
    # Beaches are chosen by temperature on the coast
    Biome.SNOWY_BEACH: _P(temperature=0, continentalness=2),
    Biome.BEACH: _P(temperature=2, continentalness=2),
    Biome.DESERT_BEACH: _P(temperature=4, continentalness=2),
    # Middle biomes: temperature/humidity, sometimes weirdness sign
    Biome.SNOWY_PLAINS: _P(temperature=0, humidity=0),
    Biome.ICE_SPIKES: _P(temperature=0, humidity=0, weirdness=_POS),
    Biome.PLAINS: _P(temperature=1, humidity=1),
    Biome.FLOWER_FOREST: _P(temperature=2, humidity=0, weirdness=_NEG),
    Biome.SUNFLOWER_PLAINS: _P(temperature=2, humidity=0, weirdness=_POS),
    Biome.SAVANNA: _P(temperature=3, humidity=0),
    Biome.DESERT: _P(temperature=4, humidity=0),
    Biome.SNOWY_TAIGA: _P(temperature=0, humidity=2, weirdness=_POS),
    Biome.TAIGA: _P(temperature=1, humidity=3),
    Biome.BIRCH_FOREST: _P(temperature=2, humidity=3, weirdness=_NEG),
    Biome.OLD_GROWTH_BIRCH_FOREST: _P(temperature=2, humidity=3, weirdness=_POS),
    Biome.JUNGLE: _P(temperature=3, humidity=3, weirdness=_NEG),
    Biome.SPARSE_JUNGLE: _P(temperature=3, humidity=3, weirdness=_POS),
    Biome.OLD_GROWTH_SPRUCE_TAIGA: _P(temperature=4, humidity=4, weirdness=_NEG),
    Biome.OLD_GROWTH_PINE_TAIGA: _P(temperature=4, humidity=4, weirdness=_POS),
    Biome.FOREST: _P(temperature=2, humidity=2),
    Biome.DARK_FOREST: _P(temperature=3, humidity=4),
    Biome.BAMBOO_JUNGLE: _P(temperature=3, humidity=4, weirdness=_POS),
    # Badlands: hot, split by humidity and weirdness sign
    Biome.BADLANDS: _P(temperature=4, humidity=2),
    Biome.ERODED_BADLANDS: _P(temperature=4, humidity=0, weirdness=_POS),
    Biome.WOODED_BADLANDS: _P(temperature=4, humidity=3),
    # Plateau: mid peaks-and-valleys
    Biome.MEADOW: _P(temperature=2, humidity=1, peaks_and_valleys=2),
    Biome.CHERRY_GROVE: _P(temperature=2, humidity=1, peaks_and_valleys=2, weirdness=_POS),
    Biome.PALE_GARDEN: _P(temperature=4, humidity=4, peaks_and_valleys=2),
    Biome.SAVANNA_PLATEAU: _P(temperature=3, humidity=0, peaks_and_valleys=2),
    # Shattered: high erosion
    Biome.WINDSWEPT_GRAVELLY_HILLS: _P(temperature=0, humidity=0, erosion=5),
    Biome.WINDSWEPT_HILLS: _P(temperature=2, humidity=2, erosion=5),
    Biome.WINDSWEPT_FOREST: _P(temperature=2, humidity=3, erosion=5),
    # Peaks: low erosion, peaks-and-valleys at its top level
    Biome.JAGGED_PEAKS: _P(temperature=1, erosion=0, peaks_and_valleys=4, weirdness=_NEG),
    Biome.FROZEN_PEAKS: _P(temperature=1, erosion=0, peaks_and_valleys=4, weirdness=_POS),
    Biome.STONY_PEAKS: _P(temperature=3, erosion=0, peaks_and_valleys=4),
}


BIOME_TILES: dict[Biome, TileId] = {
    Biome.FROZEN_OCEAN: TileId.ICE_SHEET,
    Biome.DEEP_FROZEN_OCEAN: TileId.DEEP_OCEAN,
    Biome.COLD_OCEAN: TileId.OCEAN,
    Biome.DEEP_COLD_OCEAN: TileId.DEEP_OCEAN,
    Biome.OCEAN: TileId.OCEAN,
    Biome.DEEP_OCEAN: TileId.DEEP_OCEAN,
    Biome.LUKEWARM_OCEAN: TileId.SHALLOW_OCEAN,
    Biome.DEEP_LUKEWARM_OCEAN: TileId.DEEP_OCEAN,
    Biome.WARM_OCEAN: TileId.SHALLOW_OCEAN,
    Biome.RIVER: TileId.RIVER,
    Biome.FROZEN_RIVER: TileId.ICE_SHEET,
    Biome.SNOWY_BEACH: TileId.SNOW,
    Biome.BEACH: TileId.BEACH,
    Biome.DESERT_BEACH: TileId.BEACH,
    Biome.SNOWY_PLAINS: TileId.TUNDRA,
    Biome.ICE_SPIKES: TileId.ICE_SHEET,
    Biome.PLAINS: TileId.GRASSLAND,
    Biome.FLOWER_FOREST: TileId.DECIDUOUS_FOREST,
    Biome.SUNFLOWER_PLAINS: TileId.GRASSLAND,
    Biome.SAVANNA: TileId.SAVANNAH,
    Biome.DESERT: TileId.DESERT,
    Biome.SNOWY_TAIGA: TileId.TAIGA,
    Biome.TAIGA: TileId.TAIGA,
    Biome.BIRCH_FOREST: TileId.DECIDUOUS_FOREST,
    Biome.OLD_GROWTH_BIRCH_FOREST: TileId.DECIDUOUS_FOREST,
    Biome.JUNGLE: TileId.RAINFOREST,
    Biome.SPARSE_JUNGLE: TileId.TROPICAL_SEASONAL_FOREST,
    Biome.OLD_GROWTH_SPRUCE_TAIGA: TileId.BOREAL_FOREST,
    Biome.OLD_GROWTH_PINE_TAIGA: TileId.BOREAL_FOREST,
    Biome.FOREST: TileId.DECIDUOUS_FOREST,
    Biome.DARK_FOREST: TileId.TEMPERATE_RAINFOREST,
    Biome.BAMBOO_JUNGLE: TileId.RAINFOREST,
    Biome.BADLANDS: TileId.SEMI_DESERT,
    Biome.ERODED_BADLANDS: TileId.XERIC_SHRUBLAND,
    Biome.WOODED_BADLANDS: TileId.MEDITERRANEAN,
    Biome.MEADOW: TileId.GRASSLAND,
    Biome.CHERRY_GROVE: TileId.MEDITERRANEAN,
    Biome.PALE_GARDEN: TileId.SWAMP,
    Biome.SAVANNA_PLATEAU: TileId.SAVANNAH,
    Biome.WINDSWEPT_GRAVELLY_HILLS: TileId.MOUNTAIN,
    Biome.WINDSWEPT_HILLS: TileId.MOUNTAIN,
    Biome.WINDSWEPT_FOREST: TileId.TAIGA,
    Biome.JAGGED_PEAKS: TileId.MOUNTAIN,
    Biome.FROZEN_PEAKS: TileId.SNOW,
    Biome.STONY_PEAKS: TileId.MOUNTAIN,
}


_WATER: Rgba = (0, 0, 255, 255)

BIOME_COLORS: dict[Biome, Rgba] = {
    Biome.FROZEN_OCEAN: _WATER,
    Biome.DEEP_FROZEN_OCEAN: _WATER,
    Biome.COLD_OCEAN: _WATER,
    Biome.DEEP_COLD_OCEAN: _WATER,
    Biome.OCEAN: _WATER,
    Biome.DEEP_OCEAN: _WATER,
    Biome.LUKEWARM_OCEAN: _WATER,
    Biome.DEEP_LUKEWARM_OCEAN: _WATER,
    Biome.WARM_OCEAN: _WATER,
    Biome.RIVER: _WATER,
    Biome.FROZEN_RIVER: _WATER,
    Biome.SNOWY_BEACH: (240, 240, 255, 255),  # Icy white
    Biome.BEACH: (238, 214, 175, 255),  # Sand
    Biome.DESERT_BEACH: (237, 201, 175, 255),  # Sandy beige
    Biome.SNOWY_PLAINS: (255, 255, 255, 255),
    Biome.ICE_SPIKES: (200, 240, 255, 255),
    Biome.PLAINS: (124, 252, 0, 255),
    Biome.FLOWER_FOREST: (205, 133, 63, 255),
    Biome.SUNFLOWER_PLAINS: (255, 215, 0, 255),
    Biome.SAVANNA: (189, 183, 107, 255),
    Biome.DESERT: (237, 201, 175, 255),
    Biome.SNOWY_TAIGA: (175, 238, 238, 255),
    Biome.TAIGA: (34, 139, 34, 255),
    Biome.BIRCH_FOREST: (152, 251, 152, 255),
    Biome.OLD_GROWTH_BIRCH_FOREST: (143, 188, 143, 255),
    Biome.JUNGLE: (0, 100, 0, 255),
    Biome.SPARSE_JUNGLE: (60, 179, 113, 255),
    Biome.OLD_GROWTH_SPRUCE_TAIGA: (0, 128, 0, 255),
    Biome.OLD_GROWTH_PINE_TAIGA: (46, 139, 87, 255),
    Biome.FOREST: (34, 139, 34, 255),
    Biome.DARK_FOREST: (0, 80, 0, 255),
    Biome.BAMBOO_JUNGLE: (107, 142, 35, 255),
    Biome.BADLANDS: (210, 105, 30, 255),
    Biome.ERODED_BADLANDS: (233, 150, 122, 255),
    Biome.WOODED_BADLANDS: (139, 69, 19, 255),
    Biome.MEADOW: (124, 252, 0, 255),
    Biome.CHERRY_GROVE: (255, 182, 193, 255),
    Biome.PALE_GARDEN: (255, 239, 213, 255),
    Biome.SAVANNA_PLATEAU: (189, 183, 107, 255),
    Biome.WINDSWEPT_GRAVELLY_HILLS: (169, 169, 169, 255),
    Biome.WINDSWEPT_HILLS: (85, 107, 47, 255),
    Biome.WINDSWEPT_FOREST: (34, 139, 34, 255),
    Biome.JAGGED_PEAKS: (220, 220, 220, 255),
    Biome.FROZEN_PEAKS: (245, 245, 255, 255),
    Biome.STONY_PEAKS: (112, 128, 144, 255),
}


TILE_COLORS: dict[TileId, Rgba] = {
    TileId.RAINFOREST: (0, 100, 0, 255),  # Dark green
    TileId.SAVANNAH: (189, 183, 107, 255),  # Dark khaki
    TileId.TROPICAL_SEASONAL_FOREST: (34, 139, 34, 255),  # Forest green
    TileId.DESERT: (237, 201, 175, 255),  # Sandy beige
    TileId.SEMI_DESERT: (210, 180, 140, 255),  # Tan
    TileId.XERIC_SHRUBLAND: (160, 82, 45, 255),  # Sienna
    TileId.GRASSLAND: (124, 252, 0, 255),  # Lawn green
    TileId.DECIDUOUS_FOREST: (34, 139, 34, 255),  # Forest green
    TileId.TEMPERATE_RAINFOREST: (0, 100, 0, 255),  # Dark green
    TileId.MEDITERRANEAN: (107, 142, 35, 255),  # Olive drab
    TileId.TAIGA: (46, 139, 87, 255),  # Sea green
    TileId.BOREAL_FOREST: (0, 128, 0, 255),  # Green
    TileId.TUNDRA: (176, 196, 222, 255),  # Light steel blue
    TileId.ICE_SHEET: (240, 248, 255, 255),  # Alice blue
    TileId.MOUNTAIN: (139, 137, 137, 255),  # Gray
    TileId.SWAMP: (47, 79, 47, 255),  # Dark slate gray
    TileId.RIVER: (30, 144, 255, 255),  # Dodger blue
    TileId.SNOW: (255, 250, 250, 255),  # Snow white
    TileId.BEACH: (255, 228, 196, 255),  # Bisque
    TileId.SHALLOW_OCEAN: (70, 130, 180, 255),  # Steel blue
    TileId.OCEAN: (0, 0, 139, 255),  # Dark blue
    TileId.DEEP_OCEAN: (0, 0, 255, 255),  # Blue
}


def biome_tile(biome: Biome) -> TileId:
    """Get the tile kind a biome is drawn with."""
    return BIOME_TILES[biome]


def biome_color(biome: Biome) -> Rgba:
    """Get the RGBA color for a biome."""
    return BIOME_COLORS[biome]


def tile_color(tile: TileId) -> Rgba:
    """Get the RGBA color for a tile kind."""
    return TILE_COLORS[tile]
