"""Tests for generation settings."""

import pytest

from overworld.config import (
    DEFAULT_CONFIG_PATH,
    SEED_ENV_VAR,
    ChunkConfig,
    ConfigError,
    WorldGenConfig,
    load_config,
)
from overworld.generation.world import WorldGenerator


@pytest.fixture(autouse=True)
def no_seed_env(monkeypatch):
    """Keep a developer's OVERWORLD_SEED out of these tests."""
    monkeypatch.delenv(SEED_ENV_VAR, raising=False)
    monkeypatch.setattr("overworld.config.load_dotenv", lambda *args, **kwargs: False)


class TestLoadConfig:
    """Tests for load_config."""

    def test_packaged_defaults(self):
        """The packaged worldgen.yaml loads and validates."""
        assert DEFAULT_CONFIG_PATH.exists()
        config = load_config()
        assert config.seed == 42
        assert config.chunks.unload_radius > config.chunks.load_radius
        assert config.wfc.max_retries >= 1

    def test_user_file(self, tmp_path):
        path = tmp_path / "worldgen.yaml"
        path.write_text("seed: 7\nchunks:\n  width: 8\n  height: 8\n")
        config = load_config(path)
        assert config.seed == 7
        assert config.chunks.width == 8
        # Unspecified sections fall back to defaults
        assert config.noise.octaves == 4

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == WorldGenConfig()

    def test_env_seed_override(self, tmp_path, monkeypatch):
        path = tmp_path / "worldgen.yaml"
        path.write_text("seed: 7\n")
        monkeypatch.setenv(SEED_ENV_VAR, "1234")
        assert load_config(path).seed == 1234
        assert load_config(path, env=False).seed == 7

    def test_bad_env_seed(self, monkeypatch):
        monkeypatch.setenv(SEED_ENV_VAR, "not-a-number")
        with pytest.raises(ConfigError):
            load_config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("seed: [1, 2\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "radii.yaml"
        path.write_text("chunks:\n  load_radius: 3\n  unload_radius: 3\n")
        with pytest.raises(ConfigError):
            load_config(path)


class TestModels:
    """Tests for the settings models."""

    def test_unload_must_exceed_load(self):
        with pytest.raises(ValueError):
            ChunkConfig(load_radius=2, unload_radius=1)

    def test_positive_dimensions(self):
        with pytest.raises(ValueError):
            ChunkConfig(width=0)

    def test_frozen(self):
        config = WorldGenConfig()
        with pytest.raises(Exception):
            config.seed = 1

    def test_build_world(self):
        config = WorldGenConfig(seed=5)
        world = config.build_world()
        assert isinstance(world, WorldGenerator)
        assert world.seed == 5
        assert world.tile_at(0, 0) == WorldGenerator.from_seed(5).tile_at(0, 0)
