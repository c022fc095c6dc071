"""Game configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings for a single game world and the loop that drives it.

    ``spawn_index=None`` picks a random valid spawn cell per world.
    """

    world_size: int = 10
    spawn_index: int | None = None
    initial_snake_length: int = 2
    fps: float = 6.0
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.world_size < 2:
            raise ValueError("world_size must be at least 2.")
        if self.initial_snake_length < 1:
            raise ValueError("initial_snake_length must be at least 1.")
        if self.initial_snake_length > self.size:
            raise ValueError("initial_snake_length does not fit the grid.")
        if self.fps < 0:
            raise ValueError("fps must be >= 0.")
        if self.spawn_index is not None:
            low, high = self.spawn_range
            if not low <= self.spawn_index < high:
                raise ValueError(
                    f"spawn_index must be in [{low}, {high}) for a snake of "
                    f"length {self.initial_snake_length}.",
                )

    @property
    def size(self) -> int:
        return self.world_size * self.world_size

    @property
    def spawn_range(self) -> tuple[int, int]:
        """Half-open range of spawn cells that fit the whole initial body."""
        return self.initial_snake_length - 1, self.size

    def resolve_spawn_index(self, rng: np.random.Generator) -> int:
        """Return the configured spawn index, or draw a valid one."""
        if self.spawn_index is not None:
            return self.spawn_index
        low, high = self.spawn_range
        return int(rng.integers(low, high))

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
