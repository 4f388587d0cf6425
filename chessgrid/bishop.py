"""The bishop: slides any distance along a diagonal."""

from __future__ import annotations

from .rook import _SlidingPiece

_RAYS = (
    ((1, 1), (1, 1)),
    ((1, -1), (1, -1)),
    ((-1, 1), (-1, 1)),
    ((-1, -1), (-1, -1)),
)


class Bishop(_SlidingPiece):
    """Slides diagonally until blocked by its own side or a piece in the way."""

    def drag(self, grid, start, end):
        """Slide towards the drop point; return True if the bishop moved."""
        if not self._picked_up(grid, start):
            return False
        return self._slide(grid, end, _RAYS)