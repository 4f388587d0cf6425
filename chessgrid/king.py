"""The king: one square in any direction."""

from __future__ import annotations

from .piece import Piece

_STEPS = (
    (1, 0),
    (0, 1),
    (-1, 0),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)


class King(Piece):
    """Moves to any neighbouring square not held by its own side."""

    def drag(self, grid, start, end):
        """Move one square towards the drop point; return True if moved."""
        if not self._picked_up(grid, start):
            return False
        return self._leap(grid, end, _STEPS, {self.value})