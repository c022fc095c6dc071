"""Toroidal snake world composing the grid, snake, and game lifecycle."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_world.game import GameEngine, GameState
from snake_world.grid import Cell, Grid
from snake_world.random_source import NumpyRandomSource, RandomSource, random_range
from snake_world.snake import Direction, Snake

if TYPE_CHECKING:
    from snake_world.config import GameConfig


class World:
    """Single-snake, step-based game world on a wrapping square grid.

    The world owns the snake, the lifecycle engine, the food cell, and the
    score. A driver calls :meth:`start` once and then :meth:`step` once per
    tick; steps outside the PLAYING state do nothing.
    """

    def __init__(
        self,
        width: int,
        spawn_index: Cell,
        *,
        initial_length: int = 2,
        random_source: RandomSource | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.grid = Grid(width)
        if not self.grid.contains(spawn_index):
            raise ValueError(
                f"Spawn index {spawn_index} is outside the "
                f"{width}x{width} grid.",
            )
        self.snake = Snake(spawn_index, length=initial_length)
        self.engine = GameEngine()
        self.food_cell: Cell | None = None
        self.points = 0
        self.random_source = (
            random_source if random_source is not None else NumpyRandomSource()
        )
        self.logger = (
            logger if logger is not None else logging.getLogger(__name__)
        )

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        random_source: RandomSource | None = None,
        logger: logging.Logger | None = None,
        rng: np.random.Generator | None = None,
    ) -> World:
        """Build a world from a :class:`GameConfig`.

        A missing spawn index is drawn from *rng* (by default a generator
        seeded from the config), which also feeds food placement unless a
        *random_source* is given.
        """
        if rng is None:
            rng = np.random.default_rng(config.seed)
        if random_source is None:
            random_source = NumpyRandomSource(rng=rng)
        return cls(
            config.world_size,
            config.resolve_spawn_index(rng),
            initial_length=config.initial_snake_length,
            random_source=random_source,
            logger=logger,
        )

    # --- commands ---

    def start(self) -> None:
        """Begin play and place the first food item. No-op unless READY."""
        if self.engine.start():
            self.logger.info(
                "Game started on a %dx%d grid at cell %d.",
                self.grid.width, self.grid.width, self.snake.head_index(),
            )
            self.place_food()

    def request_direction(self, direction: Direction) -> None:
        """Buffer a turn for the next step; later requests replace it."""
        self.snake.request_direction(direction)

    def step(self) -> None:
        """Advance the game by one tick."""
        if not self.engine.is_playing():
            return

        next_head = self._next_head()

        # A losing move leaves the board untouched.
        if self.snake.would_collide(next_head):
            self.engine.lose()
            self.logger.info(
                "Snake collided with itself at cell %d with score %d.",
                next_head, self.points,
            )
            return

        self.snake.advance(next_head)

        if self.food_cell is not None:
            if self.snake.head_index() == self.food_cell:
                self.logger.debug("Food eaten at cell %d.", self.food_cell)
                self.snake.grow()
                self.points += 1
                self.place_food()
        else:
            self.place_food()

    def place_food(self) -> None:
        """Put food on a random free cell, or win if none can be spared.

        Cell 0 is never chosen. Candidates are redrawn until one misses the
        snake.
        """
        if self.snake.length() >= self.grid.size - 1:
            self.food_cell = None
            self.engine.win()
            self.logger.info(
                "Grid filled: game won with score %d.", self.points,
            )
            return

        while True:
            candidate = random_range(self.random_source, 1, self.grid.size)
            if not self.snake.occupies(candidate):
                self.food_cell = candidate
                self.logger.debug("Food placed at cell %d.", candidate)
                return

    def _next_head(self) -> Cell:
        """Apply any buffered turn and return the wrapped next head cell."""
        head = self.snake.head_index()
        leaving_edge = self.grid.at_edge(head, self.snake.direction)
        if self.snake.apply_pending_direction() and leaving_edge:
            self.logger.debug(
                "Turn to %s taken at border cell %d.",
                self.snake.direction.name, head,
            )
        return self.grid.neighbour(head, self.snake.direction)

    # --- queries ---

    def width(self) -> int:
        return self.grid.width

    def snake_length(self) -> int:
        return self.snake.length()

    def snake_head_index(self) -> Cell:
        return self.snake.head_index()

    def snake_body(self) -> tuple[Cell, ...]:
        """Return a read-only snapshot of the body, head first."""
        return tuple(self.snake.body)

    def food_index(self) -> Cell | None:
        return self.food_cell

    def score(self) -> int:
        return self.points

    def game_state(self) -> GameState:
        return self.engine.state

    def direction(self) -> Direction:
        return self.snake.direction

    def board(self) -> np.ndarray:
        """Return the current board as a ``(width, width)`` array."""
        return self.grid.to_array(self.snake.body, self.food_cell)

    def to_dict(self) -> dict:
        """Return the full, serializable world state."""
        return {
            "width": self.grid.width,
            "state": self.engine.state.value,
            "direction": self.snake.direction.name.lower(),
            "score": self.points,
            "snake": self.snake.to_dict(),
            "food": self.food_cell,
        }
