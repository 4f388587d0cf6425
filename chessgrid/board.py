"""The 8x8 board: cell geometry, occupancy matrix and hover highlight."""

from __future__ import annotations

import os

import pygame

ROWS = 8
COLS = 8
CELL_SIZE = 80
ORIGIN = (363, 64)
BACKGROUND_POS = (327, 28)
HIGHLIGHT = (0, 0, 255, 80)
EMPTY = 0


class Grid:
    """Board cells laid out on screen plus the value stored in each square."""

    def __init__(self, background=None):
        if isinstance(background, (str, os.PathLike)):
            background = pygame.image.load(os.fspath(background))
        self.background = background
        start_x, start_y = ORIGIN
        self.cells = [
            [(start_x + col * CELL_SIZE, start_y + row * CELL_SIZE) for col in range(COLS)]
            for row in range(ROWS)
        ]
        self.position = [[EMPTY] * COLS for _ in range(ROWS)]
        self.highlighted: set[tuple[int, int]] = set()

    def cell_contains(self, row, col, x, y):
        """Whether point (x, y) lies in the cell, borders included."""
        left, top = self.cells[row][col]
        return left <= x <= left + CELL_SIZE and top <= y <= top + CELL_SIZE

    def cell_at(self, x, y):
        """The first (row, col) whose cell holds the point, or None."""
        return next(
            (
                (row, col)
                for row in range(ROWS)
                for col in range(COLS)
                if self.cell_contains(row, col, x, y)
            ),
            None,
        )

    def highlight(self, pos_x, pos_y):
        """Mark every cell under the pointer as highlighted, clearing the rest."""
        self.highlighted = {
            (row, col)
            for row in range(ROWS)
            for col in range(COLS)
            if self.cell_contains(row, col, pos_x, pos_y)
        }

    def draw(self, surface):
        """Draw the background and the highlight overlay onto a surface."""
        if self.background is not None:
            surface.blit(self.background, BACKGROUND_POS)
        if not self.highlighted:
            return
        overlay = pygame.Surface((CELL_SIZE, CELL_SIZE), pygame.SRCALPHA)
        overlay.fill(HIGHLIGHT)
        for row, col in sorted(self.highlighted):
            surface.blit(overlay, self.cells[row][col])