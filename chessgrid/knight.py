"""The knight: an L-shaped jump."""

from __future__ import annotations

from .piece import Piece

_STEPS = (
    (-1, 2),
    (-1, -2),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (2, 1),
    (2, -1),
)


class Knight(Piece):
    """Jumps to a square not held by its own side or its own king."""

    def drag(self, grid, start, end):
        """Jump towards the drop point; return True if moved."""
        if not self._picked_up(grid, start):
            return False
        return self._leap(grid, end, _STEPS, {self.value, self.king})