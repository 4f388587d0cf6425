"""The queen: slides any distance along a rank, file or diagonal."""

from __future__ import annotations

from .rook import _SlidingPiece

# Each ray is (direction of travel, direction scanned for the enemy king).
# Going up, the scan runs along the row, as the board logic always has.
_RAYS = (
    ((1, 0), (1, 0)),
    ((0, 1), (0, 1)),
    ((-1, 0), (0, 1)),
    ((0, -1), (0, -1)),
    ((1, 1), (1, 1)),
    ((1, -1), (1, -1)),
    ((-1, 1), (-1, 1)),
    ((-1, -1), (-1, -1)),
)


class Queen(_SlidingPiece):
    """Slides straight or diagonally until blocked by its own side or a piece in the way."""

    def drag(self, grid, start, end):
        """Slide towards the drop point; return True if the queen moved."""
        if not self._picked_up(grid, start):
            return False
        return self._slide(grid, end, _RAYS)