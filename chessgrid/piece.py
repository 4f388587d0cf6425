"""Common state and move helpers shared by every chessman."""

from __future__ import annotations

import abc
import os

import pygame

from .board import COLS, EMPTY, ROWS


class Piece(abc.ABC):
    """A chessman occupying one square of a grid."""

    def __init__(self, sound=None):
        self.sound = sound
        self.alive = True
        self.king_check = False
        self.row = 0
        self.col = 0
        self.value = EMPTY
        self.enemy = EMPTY
        self.king = EMPTY
        self.king_enemy = EMPTY
        self.image = None
        self.offset = (0, 0)
        self.sprite_pos = (0, 0)

    def set_sprite(self, image, offset_x, offset_y):
        """Set the image (surface or file path) and its offset inside a cell."""
        if isinstance(image, (str, os.PathLike)):
            image = pygame.image.load(os.fspath(image))
        self.image = image
        self.offset = (offset_x, offset_y)

    def set_values(self, value, enemy, king, king_enemy):
        """Set the board values for this side, the enemy and both kings."""
        self.value = value
        self.enemy = enemy
        self.king = king
        self.king_enemy = king_enemy

    def place(self, grid, row, col):
        """Put the piece on a square and record it in the grid."""
        self.row, self.col = row, col
        grid.position[row][col] = self.value
        x, y = grid.cells[row][col]
        self.sprite_pos = (x + self.offset[0], y + self.offset[1])

    @abc.abstractmethod
    def drag(self, grid, start, end):
        """Handle a mouse drag from start to end; return True if the piece moved."""

    def draw(self, surface):
        """Blit the piece if it is still on the board."""
        if self.alive and self.image is not None:
            surface.blit(self.image, self.sprite_pos)

    def _picked_up(self, grid, start):
        """Detect capture, then tell whether the drag started on this piece."""
        if grid.position[self.row][self.col] == self.enemy:
            self.alive = False
        return self.alive and grid.cell_contains(self.row, self.col, *start)

    def _move_to(self, grid, row, col):
        grid.position[self.row][self.col] = EMPTY
        if self.sound is not None:
            self.sound.play()
        self.place(grid, row, col)

    def _step(self, grid, end, d_row, d_col, forbidden):
        row, col = self.row + d_row, self.col + d_col
        if not (0 <= row < ROWS and 0 <= col < COLS):
            return False
        if grid.cell_contains(row, col, *end) and grid.position[row][col] not in forbidden:
            self._move_to(grid, row, col)
            return True
        self.place(grid, self.row, self.col)
        return False

    def _leap(self, grid, end, steps, forbidden):
        """Try each single jump in order, each from the current square."""
        moved = False
        for d_row, d_col in steps:
            moved = self._step(grid, end, d_row, d_col, forbidden) or moved
        return moved