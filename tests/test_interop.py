"""Tests for boundary enum mappings."""

import pytest

from snake_world.game import GameState
from snake_world.interop import (
    direction_from_name,
    direction_to_number,
    number_to_direction,
    number_to_state,
    state_to_number,
)
from snake_world.snake import Direction


class TestStateNumbers:
    def test_known_codes(self):
        assert state_to_number(GameState.PLAYING) == 0
        assert state_to_number(GameState.WON) == 1
        assert state_to_number(GameState.GAME_OVER) == 2
        assert state_to_number(GameState.READY) == 3

    def test_reverse_mapping(self):
        for state in GameState:
            assert number_to_state(state_to_number(state)) is state

    def test_unknown_number(self):
        with pytest.raises(ValueError, match="Unknown game state"):
            number_to_state(7)


class TestDirectionNumbers:
    def test_known_codes(self):
        assert direction_to_number(Direction.UP) == 0
        assert direction_to_number(Direction.RIGHT) == 1
        assert direction_to_number(Direction.DOWN) == 2
        assert direction_to_number(Direction.LEFT) == 3

    def test_number_to_direction(self):
        assert number_to_direction(3) is Direction.LEFT

    def test_unknown_number(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            number_to_direction(-1)


class TestDirectionNames:
    def test_plain_names(self):
        assert direction_from_name("up") is Direction.UP
        assert direction_from_name(" Left ") is Direction.LEFT

    def test_arrow_key_names(self):
        assert direction_from_name("ArrowDown") is Direction.DOWN
        assert direction_from_name("ArrowRight") is Direction.RIGHT

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown direction name"):
            direction_from_name("north")
