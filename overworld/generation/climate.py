"""
Quantize raw climate channels into ordinal levels.

The threshold tables below set the scale of the biome distribution and are
part of the generation data contract. A value exactly on a threshold falls
into the upper bucket.

    temperature      -0.45  -0.15   0.2    0.55                   -> 0..4
    humidity         -0.35  -0.1    0.1    0.3                    -> 0..4
    continentalness  -0.455 -0.19  -0.11   0.03   0.3             -> 0..5
    erosion          -0.78  -0.375 -0.2225 0.05   0.45   0.55     -> 0..6
    peaks/valleys    -0.85  -0.2    0.2    0.7                    -> 0..4
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Mapping

from ..core.point import Point
from .noise import Channel

TEMPERATURE_THRESHOLDS: tuple[float, ...] = (-0.45, -0.15, 0.2, 0.55)
HUMIDITY_THRESHOLDS: tuple[float, ...] = (-0.35, -0.1, 0.1, 0.3)
# 0=deep ocean, 1=ocean, 2=coast, 3=near inland, 4=mid inland, 5=far inland
CONTINENTALNESS_THRESHOLDS: tuple[float, ...] = (-0.455, -0.19, -0.11, 0.03, 0.3)
EROSION_THRESHOLDS: tuple[float, ...] = (-0.78, -0.375, -0.2225, 0.05, 0.45, 0.55)
# 0=valleys, 1=low, 2=mid, 3=high, 4=peaks
PEAKS_AND_VALLEYS_THRESHOLDS: tuple[float, ...] = (-0.85, -0.2, 0.2, 0.7)


def quantize(value: float, thresholds: tuple[float, ...]) -> int:
    """Number of thresholds at or below value."""
    return bisect_right(thresholds, value)


def temperature_level(value: float) -> int:
    return quantize(value, TEMPERATURE_THRESHOLDS)


def humidity_level(value: float) -> int:
    return quantize(value, HUMIDITY_THRESHOLDS)


def continentalness_level(value: float) -> int:
    return quantize(value, CONTINENTALNESS_THRESHOLDS)


def erosion_level(value: float) -> int:
    return quantize(value, EROSION_THRESHOLDS)


def peaks_and_valleys(weirdness: float) -> float:
    """Fold weirdness into peaks-and-valleys: 1 - |3|w| - 2|."""
    return 1.0 - abs(3.0 * abs(weirdness) - 2.0)


def peaks_and_valleys_level(value: float) -> int:
    return quantize(value, PEAKS_AND_VALLEYS_THRESHOLDS)


def classify(x: int, y: int, raw: Mapping[Channel, float]) -> Point:
    """
    Build a Point from raw channel values.

    Args:
        x: World tile x
        y: World tile y
        raw: Raw value for every Channel

    Returns:
        The classified Point
    """
    temperature = raw[Channel.TEMPERATURE]
    humidity = raw[Channel.HUMIDITY]
    continentalness = raw[Channel.CONTINENTALNESS]
    erosion = raw[Channel.EROSION]
    weirdness = raw[Channel.WEIRDNESS]
    pv = peaks_and_valleys(weirdness)

    return Point(
        x=x,
        y=y,
        temperature=temperature,
        humidity=humidity,
        continentalness=continentalness,
        erosion=erosion,
        weirdness=weirdness,
        peaks_and_valleys=pv,
        temperature_level=temperature_level(temperature),
        humidity_level=humidity_level(humidity),
        continentalness_level=continentalness_level(continentalness),
        erosion_level=erosion_level(erosion),
        peaks_and_valleys_level=peaks_and_valleys_level(pv),
        is_weird=weirdness > 0,
    )
