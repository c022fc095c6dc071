"""Headless driver that ticks a world at a fixed rate."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace

import numpy as np

from snake_world.config import GameConfig
from snake_world.game import GameState
from snake_world.random_source import NumpyRandomSource, RandomSource
from snake_world.snake import Direction
from snake_world.world import World

logger = logging.getLogger(__name__)


class GameSession:
    """Owns one world at a time and drives it tick by tick.

    :meth:`reset` swaps in a fresh world with a new random spawn cell, the
    way a player restarts after a finished game.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = np.random.default_rng(self.config.seed)
        self.random_source = (
            random_source if random_source is not None
            else NumpyRandomSource(rng=self.rng)
        )
        self.ticks = 0
        self.world = self._new_world(self.config)

    def _new_world(self, config: GameConfig) -> World:
        return World.from_config(
            config, random_source=self.random_source, rng=self.rng,
        )

    @property
    def finished(self) -> bool:
        return self.world.game_state().is_terminal

    def start(self) -> None:
        self.world.start()

    def request_direction(self, direction: Direction) -> None:
        self.world.request_direction(direction)

    def tick(self) -> dict:
        """Step the world once if it is in play; return its state."""
        if self.world.game_state() is GameState.PLAYING:
            self.world.step()
            self.ticks += 1
        return self.world.to_dict()

    def reset(self) -> World:
        """Replace the world with a new one at a random spawn cell."""
        self.world = self._new_world(replace(self.config, spawn_index=None))
        self.ticks = 0
        logger.info(
            "Session reset; new spawn cell %d.", self.world.snake_head_index(),
        )
        return self.world

    async def run(
        self,
        max_ticks: int | None = None,
        on_tick: Callable[[dict], None] | None = None,
    ) -> dict:
        """Tick until the game ends or *max_ticks* ticks have run.

        Sleeps ``1 / fps`` seconds between ticks; ``fps == 0`` runs without
        pausing. Returns the final state.
        """
        interval = 1.0 / self.config.fps if self.config.fps > 0 else 0.0
        self.start()
        state = self.world.to_dict()
        try:
            while not self.finished:
                if max_ticks is not None and self.ticks >= max_ticks:
                    break
                await asyncio.sleep(interval)
                state = self.tick()
                if on_tick is not None:
                    on_tick(state)
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled after %d ticks.", self.ticks)
            raise
        except Exception:
            logger.exception("Tick loop error after %d ticks.", self.ticks)
            raise

        logger.info(
            "Session stopped after %d ticks: state=%s score=%d.",
            self.ticks, self.world.game_state().value, self.world.score(),
        )
        return state
