"""
Layered noise channels for climate sampling.

Each climate channel is a fractal (octave) sum of OpenSimplex noise. Channels
get their own sub-seed, a large pseudo-random coordinate offset and a
rotation, all derived once from the world seed, so that channels never show
shared lattice structure.

The frequency table and the latitude blend are part of the generation data
contract: changing them changes output for existing seeds.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum

from opensimplex import OpenSimplex

_MASK64 = (1 << 64) - 1
_MASK63 = (1 << 63) - 1

# Largest per-channel coordinate offset, in tiles
MAX_CHANNEL_OFFSET = 1_000_000.0

# Latitude gradient: one sample of the root lattice at a fixed offset
LATITUDE_OFFSET = (10_000.0, 10_000.0)
LATITUDE_FREQUENCY = 1.0 / 2048.0
LATITUDE_BLEND = 0.3


class Channel(Enum):
    """Independent noise channels. The value is the channel's seed salt."""

    TEMPERATURE = 1
    HUMIDITY = 2
    CONTINENTALNESS = 3
    EROSION = 4
    WEIRDNESS = 5


# Base sampling frequency per channel (1 / feature size in tiles)
CHANNEL_FREQUENCIES: dict[Channel, float] = {
    Channel.TEMPERATURE: 1.0 / 512.0,
    Channel.HUMIDITY: 1.0 / 512.0,
    Channel.CONTINENTALNESS: 1.0 / 768.0,
    Channel.EROSION: 1.0 / 384.0,
    Channel.WEIRDNESS: 1.0 / 256.0,
}

_LATITUDE_CHANNELS = frozenset({Channel.TEMPERATURE, Channel.HUMIDITY})


def mix_seed(seed: int, salt: int) -> int:
    """Derive a sub-seed from a root seed and a salt.

    SplitMix64 finalizer, masked to 63 bits so it stays a valid signed seed.
    """
    z = (seed + (salt + 1) * 0x9E3779B97F4A7C15) & _MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
    return (z ^ (z >> 31)) & _MASK63


@dataclass(frozen=True)
class ChannelTransform:
    """Per-channel decorrelation derived from the seed."""

    seed: int
    offset_x: float
    offset_y: float
    angle: float

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Offset then rotate a world coordinate."""
        ox = x + self.offset_x
        oy = y + self.offset_y
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        return ox * cos_a - oy * sin_a, ox * sin_a + oy * cos_a

    @classmethod
    def derive(cls, root_seed: int, channel: Channel) -> ChannelTransform:
        sub_seed = mix_seed(root_seed, channel.value)
        rng = random.Random(sub_seed)
        return cls(
            seed=sub_seed,
            offset_x=rng.uniform(-MAX_CHANNEL_OFFSET, MAX_CHANNEL_OFFSET),
            offset_y=rng.uniform(-MAX_CHANNEL_OFFSET, MAX_CHANNEL_OFFSET),
            angle=rng.uniform(0.0, 2.0 * math.pi),
        )


class NoiseFieldSampler:
    """
    Evaluates the climate noise channels at world coordinates.

    The only state is the immutable per-channel transforms and noise
    lattices built at construction, so a sampler can be shared between
    threads and its results memoized by coordinate.

    Usage:
        sampler = NoiseFieldSampler(seed=42)
        t = sampler.sample(Channel.TEMPERATURE, 10, -3)
    """

    def __init__(
        self,
        seed: int,
        octaves: int = 4,
        lacunarity: float = 2.0,
        persistence: float = 0.5,
    ):
        """
        Build the channel lattices for a world seed.

        Args:
            seed: World seed
            octaves: Number of noise layers summed per channel
            lacunarity: Frequency multiplier between octaves
            persistence: Amplitude multiplier between octaves
        """
        if octaves < 1:
            raise ValueError(f"octaves must be >= 1, got {octaves}")

        self.seed = seed
        self.octaves = octaves
        self.lacunarity = lacunarity
        self.persistence = persistence

        self._root = OpenSimplex(mix_seed(seed, 0))
        self._transforms: dict[Channel, ChannelTransform] = {
            channel: ChannelTransform.derive(seed, channel) for channel in Channel
        }
        self._lattices: dict[Channel, OpenSimplex] = {
            channel: OpenSimplex(transform.seed)
            for channel, transform in self._transforms.items()
        }

    def transform(self, channel: Channel) -> ChannelTransform:
        """The derived offset/rotation for a channel."""
        return self._transforms[channel]

    def fractal(self, channel: Channel, x: float, y: float) -> float:
        """Amplitude-normalized octave sum for a channel, without latitude blending."""
        lattice = self._lattices[channel]
        tx, ty = self._transforms[channel].apply(x, y)
        frequency = CHANNEL_FREQUENCIES[channel]

        total = 0.0
        amplitude = 1.0
        max_amplitude = 0.0
        for _ in range(self.octaves):
            total += amplitude * lattice.noise2(tx * frequency, ty * frequency)
            max_amplitude += amplitude
            amplitude *= self.persistence
            frequency *= self.lacunarity

        return float(total / max_amplitude)

    def latitude_gradient(self, x: float, y: float) -> float:
        """Large-scale pole-to-equator banding shared by temperature and humidity."""
        lx = (x + LATITUDE_OFFSET[0]) * LATITUDE_FREQUENCY
        ly = (y + LATITUDE_OFFSET[1]) * LATITUDE_FREQUENCY
        return float(self._root.noise2(lx, ly))

    def sample(self, channel: Channel, x: int, y: int) -> float:
        """Sample one channel at an integer world coordinate."""
        value = self.fractal(channel, x, y)
        if channel in _LATITUDE_CHANNELS:
            gradient = self.latitude_gradient(x, y)
            value = (1.0 - LATITUDE_BLEND) * value + LATITUDE_BLEND * gradient
        return value

    def sample_all(self, x: int, y: int) -> dict[Channel, float]:
        """Sample every channel at an integer world coordinate."""
        gradient = self.latitude_gradient(x, y)
        values: dict[Channel, float] = {}
        for channel in Channel:
            value = self.fractal(channel, x, y)
            if channel in _LATITUDE_CHANNELS:
                value = (1.0 - LATITUDE_BLEND) * value + LATITUDE_BLEND * gradient
            values[channel] = value
        return values
