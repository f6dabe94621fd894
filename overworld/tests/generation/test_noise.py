"""Tests for the layered noise sampler."""

import math

import pytest

from overworld.generation.noise import (
    CHANNEL_FREQUENCIES,
    MAX_CHANNEL_OFFSET,
    Channel,
    ChannelTransform,
    NoiseFieldSampler,
    mix_seed,
)


class TestMixSeed:
    """Tests for seed mixing."""

    def test_deterministic(self):
        assert mix_seed(42, 1) == mix_seed(42, 1)

    def test_salts_differ(self):
        """Each channel salt gives a different sub-seed."""
        seeds = {mix_seed(42, channel.value) for channel in Channel}
        assert len(seeds) == len(Channel)

    def test_fits_in_63_bits(self):
        for seed in (0, 1, -1, 2**64 + 5, 23_534_536_336_534):
            value = mix_seed(seed, 3)
            assert 0 <= value < 2**63


class TestChannelTransform:
    """Tests for per-channel decorrelation."""

    def test_offsets_within_range(self):
        for channel in Channel:
            transform = ChannelTransform.derive(42, channel)
            assert abs(transform.offset_x) <= MAX_CHANNEL_OFFSET
            assert abs(transform.offset_y) <= MAX_CHANNEL_OFFSET
            assert 0.0 <= transform.angle < 2 * math.pi

    def test_channels_get_distinct_transforms(self):
        transforms = [ChannelTransform.derive(42, channel) for channel in Channel]
        assert len({t.seed for t in transforms}) == len(Channel)
        assert len({t.offset_x for t in transforms}) == len(Channel)

    def test_zero_rotation_is_pure_offset(self):
        transform = ChannelTransform(seed=1, offset_x=10.0, offset_y=-5.0, angle=0.0)
        assert transform.apply(1.0, 2.0) == pytest.approx((11.0, -3.0))


class TestNoiseFieldSampler:
    """Tests for NoiseFieldSampler."""

    def test_same_seed_same_values(self):
        """Two samplers with one seed agree everywhere."""
        a = NoiseFieldSampler(42)
        b = NoiseFieldSampler(42)
        for x, y in [(0, 0), (17, -3), (-1000, 2500)]:
            assert a.sample_all(x, y) == b.sample_all(x, y)

    def test_different_seeds_differ(self):
        a = NoiseFieldSampler(1)
        b = NoiseFieldSampler(2)
        coords = [(x * 37, x * -53) for x in range(10)]
        assert any(
            a.sample(Channel.CONTINENTALNESS, x, y) != b.sample(Channel.CONTINENTALNESS, x, y)
            for x, y in coords
        )

    def test_channels_are_decorrelated(self):
        """Channels don't share values at the same coordinate."""
        sampler = NoiseFieldSampler(42)
        values = sampler.sample_all(123, 456)
        assert len(set(values.values())) == len(Channel)

    def test_values_bounded(self):
        """Normalized fractal noise stays within [-1, 1]."""
        sampler = NoiseFieldSampler(7)
        for x in range(-200, 200, 23):
            for y in range(-200, 200, 29):
                for value in sampler.sample_all(x, y).values():
                    assert -1.0 <= value <= 1.0

    def test_sample_matches_sample_all(self):
        sampler = NoiseFieldSampler(42)
        values = sampler.sample_all(-40, 90)
        for channel in Channel:
            assert sampler.sample(channel, -40, 90) == pytest.approx(values[channel])

    def test_continuity(self):
        """Adjacent tiles have nearly equal values."""
        sampler = NoiseFieldSampler(42)
        for channel in Channel:
            a = sampler.sample(channel, 300, 300)
            b = sampler.sample(channel, 301, 300)
            assert abs(a - b) < 0.1

    def test_has_every_channel_frequency(self):
        assert set(CHANNEL_FREQUENCIES) == set(Channel)

    def test_rejects_zero_octaves(self):
        with pytest.raises(ValueError):
            NoiseFieldSampler(42, octaves=0)

    def test_single_octave_in_range(self):
        """A single octave is still normalized."""
        sampler = NoiseFieldSampler(42, octaves=1)
        value = sampler.fractal(Channel.EROSION, 10, 10)
        assert -1.0 <= value <= 1.0
