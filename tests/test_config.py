"""Tests for game configuration."""

import json

import numpy as np
import pytest

from snake_world.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.world_size == 10
        assert cfg.spawn_index is None
        assert cfg.initial_snake_length == 2
        assert cfg.fps == 6.0
        assert cfg.size == 100

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.world_size = 5  # type: ignore[misc]

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(world_size=8, spawn_index=12, seed=4)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert json.loads(path.read_text())["world_size"] == 8
        assert GameConfig.load(path) == cfg


class TestGameConfigValidation:
    def test_world_too_small(self):
        with pytest.raises(ValueError, match="world_size"):
            GameConfig(world_size=1)

    def test_length_too_small(self):
        with pytest.raises(ValueError, match="at least 1"):
            GameConfig(initial_snake_length=0)

    def test_length_exceeds_grid(self):
        with pytest.raises(ValueError, match="does not fit"):
            GameConfig(world_size=2, initial_snake_length=5)

    def test_negative_fps(self):
        with pytest.raises(ValueError, match="fps"):
            GameConfig(fps=-1)

    def test_spawn_underflow(self):
        with pytest.raises(ValueError, match="spawn_index"):
            GameConfig(spawn_index=1, initial_snake_length=3)

    def test_spawn_outside_grid(self):
        with pytest.raises(ValueError, match="spawn_index"):
            GameConfig(world_size=4, spawn_index=16)


class TestSpawnResolution:
    def test_explicit_spawn_returned(self):
        cfg = GameConfig(spawn_index=42)
        assert cfg.resolve_spawn_index(np.random.default_rng(0)) == 42

    def test_random_spawn_fits_body(self):
        cfg = GameConfig(world_size=4, initial_snake_length=3)
        rng = np.random.default_rng(0)
        for _ in range(100):
            assert 2 <= cfg.resolve_spawn_index(rng) < 16
