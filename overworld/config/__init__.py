"""
Generation settings for Overworld.

Settings are loaded from YAML (the packaged worldgen.yaml by default) into
frozen pydantic models. The world seed can be overridden from the
environment with OVERWORLD_SEED (a .env file is honored).

Usage:
    from overworld.config import load_config
    config = load_config()
    world = config.build_world()
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

DEFAULT_CONFIG_PATH = Path(__file__).parent / "worldgen.yaml"

SEED_ENV_VAR = "OVERWORLD_SEED"


class ConfigError(Exception):
    """Settings could not be read or failed validation."""

    pass


class NoiseConfig(BaseModel):
    """Fractal noise parameters shared by every climate channel."""

    model_config = ConfigDict(frozen=True)

    octaves: int = Field(default=4, ge=1)
    lacunarity: float = Field(default=2.0, gt=0)
    persistence: float = Field(default=0.5, gt=0)
    cache_size: int = Field(default=0, ge=0)


class ChunkConfig(BaseModel):
    """Chunk dimensions and load/unload behavior."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=64, gt=0)
    height: int = Field(default=64, gt=0)
    tile_size: float = Field(default=32.0, gt=0)
    load_radius: int = Field(default=2, ge=0)
    unload_radius: int = 4
    interval_ms: int = Field(default=500, ge=0)
    max_chunks_per_tick: int | None = Field(default=16, ge=1)

    @model_validator(mode="after")
    def _check_radii(self) -> ChunkConfig:
        if self.unload_radius <= self.load_radius:
            raise ValueError(
                f"unload_radius ({self.unload_radius}) must be greater than "
                f"load_radius ({self.load_radius})"
            )
        return self


class WfcConfig(BaseModel):
    """Layout solve settings."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=48, gt=0)
    height: int = Field(default=48, gt=0)
    seed: int = 23_534_536_336_534
    max_retries: int = Field(default=10, ge=1)


class WorldGenConfig(BaseModel):
    """Top-level generation settings."""

    model_config = ConfigDict(frozen=True)

    seed: int = 42
    data_dir: Path = Path("data")
    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    chunks: ChunkConfig = Field(default_factory=ChunkConfig)
    wfc: WfcConfig = Field(default_factory=WfcConfig)

    def build_world(self):
        """World generator for these settings."""
        from ..generation.noise import NoiseFieldSampler
        from ..generation.world import WorldGenerator

        sampler = NoiseFieldSampler(
            self.seed,
            octaves=self.noise.octaves,
            lacunarity=self.noise.lacunarity,
            persistence=self.noise.persistence,
        )
        return WorldGenerator(sampler, cache_size=self.noise.cache_size)


def _read_yaml(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Path | str | None = None, env: bool = True) -> WorldGenConfig:
    """
    Load generation settings.

    Args:
        path: YAML file to read. If None, uses the packaged worldgen.yaml.
        env: Apply OVERWORLD_SEED from the environment (and .env)

    Returns:
        Validated WorldGenConfig

    Raises:
        ConfigError: If the file can't be read or the values are invalid
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    data = _read_yaml(config_path)

    if env:
        load_dotenv()
        raw_seed = os.environ.get(SEED_ENV_VAR)
        if raw_seed:
            try:
                data["seed"] = int(raw_seed)
            except ValueError as e:
                raise ConfigError(f"{SEED_ENV_VAR} must be an integer, got {raw_seed!r}") from e

    try:
        return WorldGenConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}:\n{e}") from e
