"""Snake World — toroidal snake rules engine."""

from snake_world.config import GameConfig
from snake_world.game import GameEngine, GameState
from snake_world.grid import Cell, CellType, Grid
from snake_world.random_source import NumpyRandomSource, RandomSource, random_range
from snake_world.session import GameSession
from snake_world.snake import Direction, Snake
from snake_world.world import World

__all__ = [
    "Cell",
    "CellType",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameSession",
    "GameState",
    "Grid",
    "NumpyRandomSource",
    "RandomSource",
    "Snake",
    "World",
    "random_range",
]
