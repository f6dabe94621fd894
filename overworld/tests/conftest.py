"""Shared test fixtures for Overworld."""

import tempfile
from pathlib import Path
from typing import Callable

import pytest

from overworld.core import Point
from overworld.generation.tileset import create_meadow_tileset
from overworld.generation.wfc import TileSet
from overworld.generation.world import WorldGenerator


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (skipped by default, run with --run-slow)")


def pytest_addoption(parser):
    """Add --run-slow and --record-golden options to pytest."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests (skipped by default)",
    )
    parser.addoption(
        "--record-golden",
        action="store_true",
        default=False,
        help="Rewrite the golden grid fixture before comparing",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        # --run-slow given: don't skip slow tests
        return

    skip_slow = pytest.mark.skip(reason="Slow test (use --run-slow to run)")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def temp_data_dir() -> Path:
    """Create a temporary data directory for tests."""
    with tempfile.TemporaryDirectory(prefix="overworld_test_") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def world() -> WorldGenerator:
    """World generator for seed 42."""
    return WorldGenerator.from_seed(42)


@pytest.fixture
def meadow() -> TileSet:
    """The meadow demo tileset."""
    return create_meadow_tileset()


@pytest.fixture
def make_point() -> Callable[..., Point]:
    """Build a Point directly from levels (raw values are placeholders)."""

    def _make(
        t: int = 2,
        h: int = 2,
        c: int = 3,
        e: int = 3,
        pv: int = 2,
        weird: bool = False,
        x: int = 0,
        y: int = 0,
    ) -> Point:
        return Point(
            x=x,
            y=y,
            temperature=0.0,
            humidity=0.0,
            continentalness=0.0,
            erosion=0.0,
            weirdness=0.1 if weird else -0.1,
            peaks_and_valleys=0.0,
            temperature_level=t,
            humidity_level=h,
            continentalness_level=c,
            erosion_level=e,
            peaks_and_valleys_level=pv,
            is_weird=weird,
        )

    return _make
