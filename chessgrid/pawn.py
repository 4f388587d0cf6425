"""The pawn: one square forward, two on its first move, captures diagonally."""

from __future__ import annotations

from .board import COLS, ROWS
from .piece import Piece


def _value_at(grid, row, col):
    if 0 <= row < ROWS and 0 <= col < COLS:
        return grid.position[row][col]
    return None


def _aimed_at(grid, row, col, end):
    return 0 <= row < ROWS and 0 <= col < COLS and grid.cell_contains(row, col, *end)


class Pawn(Piece):
    """A pawn that advances towards the far side of the board.

    Black pawns advance down the board (increasing row); white pawns advance up.
    """

    def __init__(self, sound=None):
        super().__init__(sound)
        self.first_move = True
        self.white = False

    def set_color(self, white):
        """Choose the side: True for white, False for black."""
        self.white = bool(white)

    def _step_allowed(self, grid, ahead):
        occupied = {self.value, self.enemy, self.king, self.king_enemy}
        if self.white and self.first_move:
            # A white pawn's opening single step looks at the square behind it
            # for enemies and kings, and only at the square ahead for its own side.
            behind = _value_at(grid, self.row + 1, self.col)
            return (
                _value_at(grid, ahead, self.col) != self.value
                and behind not in {self.enemy, self.king, self.king_enemy}
            )
        return _value_at(grid, ahead, self.col) not in occupied

    def drag(self, grid, start, end):
        """Advance or capture towards the drop point; return True if moved."""
        if not self._picked_up(grid, start):
            return False

        forward = -1 if self.white else 1
        row, col = self.row, self.col
        ahead = row + forward
        occupied = {self.value, self.enemy, self.king, self.king_enemy}

        candidates = [(ahead, col, lambda: self._step_allowed(grid, ahead))]
        if self.first_move:
            two_ahead = row + 2 * forward
            candidates.append(
                (
                    two_ahead,
                    col,
                    lambda: _value_at(grid, ahead, col) not in occupied
                    and _value_at(grid, two_ahead, col) not in occupied,
                )
            )
        for side in (1, -1):
            target_col = col + side
            candidates.append(
                (
                    ahead,
                    target_col,
                    lambda c=target_col: _value_at(grid, ahead, c) == self.enemy,
                )
            )

        moved = False
        for target_row, target_col, allowed in candidates:
            if _aimed_at(grid, target_row, target_col, end) and allowed():
                self._move_to(grid, target_row, target_col)
                moved = True
                break
        else:
            self.place(grid, row, col)

        self.first_move = False
        return moved