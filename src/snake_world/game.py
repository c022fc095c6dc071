"""Game lifecycle state machine."""

from __future__ import annotations

import enum


class GameState(str, enum.Enum):
    """Lifecycle states for a single game."""

    READY = "ready"
    PLAYING = "playing"
    WON = "won"
    GAME_OVER = "game_over"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.GAME_OVER)


class GameEngine:
    """Tracks whether simulation steps should have any effect.

    Starts in READY. :meth:`start` moves to PLAYING; the world ends the game
    with :meth:`win` or :meth:`lose`. Terminal states are never left.
    """

    def __init__(self) -> None:
        self.state = GameState.READY

    def is_ready(self) -> bool:
        return self.state is GameState.READY

    def is_playing(self) -> bool:
        return self.state is GameState.PLAYING

    def start(self) -> bool:
        """Enter PLAYING from READY. Returns False if nothing changed."""
        if not self.is_ready():
            return False
        self.state = GameState.PLAYING
        return True

    def win(self) -> None:
        self._finish(GameState.WON)

    def lose(self) -> None:
        self._finish(GameState.GAME_OVER)

    def _finish(self, state: GameState) -> None:
        if not self.state.is_terminal:
            self.state = state
