"""Numeric and string mappings for callers outside the Python core."""

from __future__ import annotations

from snake_world.game import GameState
from snake_world.snake import Direction

_STATE_NUMBERS: dict[GameState, int] = {
    GameState.PLAYING: 0,
    GameState.WON: 1,
    GameState.GAME_OVER: 2,
    GameState.READY: 3,
}

_DIRECTION_NUMBERS: dict[Direction, int] = {
    Direction.UP: 0,
    Direction.RIGHT: 1,
    Direction.DOWN: 2,
    Direction.LEFT: 3,
}

_NUMBER_STATES = {v: k for k, v in _STATE_NUMBERS.items()}
_NUMBER_DIRECTIONS = {v: k for k, v in _DIRECTION_NUMBERS.items()}

_DIRECTION_NAMES: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "arrowright": Direction.RIGHT,
}


def state_to_number(state: GameState) -> int:
    return _STATE_NUMBERS[state]


def number_to_state(number: int) -> GameState:
    try:
        return _NUMBER_STATES[number]
    except KeyError:
        raise ValueError(f"Unknown game state number: {number!r}.") from None


def direction_to_number(direction: Direction) -> int:
    return _DIRECTION_NUMBERS[direction]


def number_to_direction(number: int) -> Direction:
    try:
        return _NUMBER_DIRECTIONS[number]
    except KeyError:
        raise ValueError(f"Unknown direction number: {number!r}.") from None


def direction_from_name(name: str) -> Direction:
    """Map ``"up"``, ``"ArrowUp"`` and similar names to a direction."""
    direction = _DIRECTION_NAMES.get(name.strip().lower())
    if direction is None:
        raise ValueError(f"Unknown direction name: {name!r}.")
    return direction
