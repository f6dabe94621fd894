"""The classified climate sample at one world coordinate."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .types import Position


class Point(BaseModel):
    """Raw channel values and their ordinal levels at a tile coordinate.

    Points are computed on demand and have no identity beyond their
    coordinate. Level ranges: temperature 0..4, humidity 0..4,
    continentalness 0..5, erosion 0..6, peaks_and_valleys 0..4.
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    # Raw channel values, roughly in [-1, 1]
    temperature: float
    humidity: float
    continentalness: float
    erosion: float
    weirdness: float
    peaks_and_valleys: float

    # Ordinal levels
    temperature_level: int
    humidity_level: int
    continentalness_level: int
    erosion_level: int
    peaks_and_valleys_level: int

    is_weird: bool

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def levels(self) -> tuple[int, int, int, int, int]:
        """Levels as (T, H, C, E, PV)."""
        return (
            self.temperature_level,
            self.humidity_level,
            self.continentalness_level,
            self.erosion_level,
            self.peaks_and_valleys_level,
        )
