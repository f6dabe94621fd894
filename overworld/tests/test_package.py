"""Basic package tests for Overworld."""

import pytest


def test_package_imports():
    """Test that the package can be imported."""
    import overworld
    assert overworld.__version__ == "0.1.0"


def test_core_imports():
    """Test that core subpackage can be imported."""
    import overworld.core


def test_generation_imports():
    """Test that generation subpackage can be imported."""
    import overworld.generation
    import overworld.generation.wfc


def test_config_imports():
    """Test that config can be imported."""
    from overworld.config import load_config, WorldGenConfig


def test_logging_config_imports():
    """Test that logging_config can be imported."""
    from overworld.logging_config import setup_logging, get_logger


def test_logging_setup(temp_data_dir):
    """Test that logging can be set up."""
    from overworld.logging_config import setup_logging

    log_path = setup_logging(temp_data_dir)
    assert log_path.exists()
    assert log_path.name == "debug.log"


def test_get_logger():
    """Test logger creation."""
    from overworld.logging_config import get_logger

    logger = get_logger("test_module")
    assert logger.name == "overworld.test_module"

    # Already prefixed should stay as-is
    logger2 = get_logger("overworld.something")
    assert logger2.name == "overworld.something"


def test_structured_log_helpers(caplog):
    """Structured helpers emit one line each on the overworld logger."""
    import logging

    from overworld.core import ChunkCoord
    from overworld.logging_config import get_logger, log_chunk, log_maintenance, log_solver

    logger = get_logger("test_helpers")
    with caplog.at_level(logging.DEBUG, logger="overworld"):
        log_chunk(logger, "LOAD", ChunkCoord(1, -2))
        log_maintenance(logger, ChunkCoord(0, 0), loaded=9, unloaded=0, duration_ms=3)
        log_solver(logger, "SOLVED", 8, 8, details="steps=5")

    text = caplog.text
    assert "CHUNK | LOAD | (1, -2)" in text
    assert "loaded=9 | unloaded=0 | 3ms" in text
    assert "SOLVER | 8x8 | SOLVED | steps=5" in text
