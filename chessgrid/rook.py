"""The rook: slides any distance along a rank or file."""

from __future__ import annotations

from .board import COLS, ROWS
from .piece import Piece

# Each ray is (direction of travel, direction scanned for the enemy king).
# Going up, the scan runs along the row, as the board logic always has.
_RAYS = (
    ((1, 0), (1, 0)),
    ((0, 1), (0, 1)),
    ((-1, 0), (0, 1)),
    ((0, -1), (0, -1)),
)


def _value_at(grid, row, col):
    if 0 <= row < ROWS and 0 <= col < COLS:
        return grid.position[row][col]
    return None


class _SlidingPiece(Piece):
    """A piece that moves any distance along a set of rays."""

    def _blocked(self, grid, d_row, d_col, distance):
        path = [
            grid.position[self.row + d_row * k][self.col + d_col * k]
            for k in range(1, distance + 1)
        ]
        if any(value in (self.value, self.king) for value in path):
            return True
        return any(value == self.enemy for value in path[:-1])

    def _passes_enemy_king(self, grid, s_row, s_col, distance):
        return any(
            _value_at(grid, self.row + s_row * k, self.col + s_col * k) == self.king_enemy
            for k in range(distance)
        )

    def _slide(self, grid, end, rays):
        """Try every distance on every ray, each from the current square."""
        moved = False
        for distance in range(max(ROWS, COLS)):
            for (d_row, d_col), (s_row, s_col) in rays:
                row = self.row + d_row * distance
                col = self.col + d_col * distance
                if not (0 <= row < ROWS and 0 <= col < COLS):
                    continue
                if not grid.cell_contains(row, col, *end):
                    self.place(grid, self.row, self.col)
                    continue
                if self._blocked(grid, d_row, d_col, distance):
                    continue
                if self._passes_enemy_king(grid, s_row, s_col, distance):
                    self.king_check = True
                self._move_to(grid, row, col)
                moved = moved or distance > 0
        return moved


class Rook(_SlidingPiece):
    """Slides straight until blocked by its own side or a piece in the way."""

    def drag(self, grid, start, end):
        """Slide towards the drop point; return True if the rook moved."""
        if not self._picked_up(grid, start):
            return False
        return self._slide(grid, end, _RAYS)