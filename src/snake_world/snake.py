"""Snake representation and movement logic."""

from __future__ import annotations

import enum

from snake_world.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered list of flat cell indices.

    The head is ``body[0]``; the tail is ``body[-1]``. Direction changes are
    buffered in a single slot and only take effect on the next move.
    """

    def __init__(
        self,
        spawn_index: Cell,
        length: int = 2,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        if spawn_index - (length - 1) < 0:
            raise ValueError(
                f"Spawn index {spawn_index} is too small for a snake of "
                f"length {length}.",
            )
        self.body: list[Cell] = [spawn_index - i for i in range(length)]
        self.direction = direction
        self.pending_direction: Direction | None = None

    def __len__(self) -> int:
        return len(self.body)

    def head_index(self) -> Cell:
        return self.body[0]

    def length(self) -> int:
        return len(self.body)

    def occupies(self, cell: Cell) -> bool:
        """Check whether any segment, head included, sits on *cell*."""
        return cell in self.body

    def would_collide(self, cell: Cell) -> bool:
        """Check whether moving the head to *cell* hits the body.

        The current head is excluded since it vacates on the move.
        """
        return cell in self.body[1:]

    def request_direction(self, direction: Direction) -> None:
        """Buffer a direction change, replacing any earlier request."""
        self.pending_direction = direction

    def apply_pending_direction(self) -> bool:
        """Commit the buffered direction unless it reverses the snake.

        The slot is cleared either way. Returns True if the direction changed.
        """
        pending = self.pending_direction
        self.pending_direction = None
        if pending is None or pending is self.direction.opposite:
            return False
        changed = pending is not self.direction
        self.direction = pending
        return changed

    def advance(self, next_head: Cell) -> None:
        """Move the head to *next_head*; every other segment follows."""
        self.apply_pending_direction()
        self.body = [next_head, *self.body[:-1]]

    def grow(self) -> None:
        """Append a segment on top of the one just behind the head.

        The duplicate separates from its twin on the following move.
        """
        if len(self.body) >= 2:
            self.body.append(self.body[1])

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": list(self.body),
            "direction": self.direction.name.lower(),
        }
