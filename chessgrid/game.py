"""The chess game: board set-up, screens and the main loop."""

from __future__ import annotations

import argparse
import os

import pygame

from .bishop import Bishop
from .board import Grid
from .king import King
from .knight import Knight
from .pawn import Pawn
from .queen import Queen
from .rook import Rook
from .screen import Screen

BLACK_VALUES = (1, 2, 3, 4)
WHITE_VALUES = (2, 1, 4, 3)
BUTTON_SIZE = (250, 100)
WHITE = (255, 255, 255)
SOUND_FILE = os.path.join("Music", "4.mp3")
SOUND_VOLUME = 0.6


class Game:
    """All pieces on a grid, plus the menu and board screens."""

    def __init__(self, sound_factory=None):
        make_sound = sound_factory or (lambda: None)
        self.grid = Grid()
        self._sprites = []

        self.pawns = [Pawn(make_sound()) for _ in range(16)]
        for i, pawn in enumerate(self.pawns):
            if i < 8:
                pawn.set_color(False)
                self._setup(pawn, "pawnblack.png", (2, -4), BLACK_VALUES)
                pawn.place(self.grid, 1, i)
            else:
                pawn.set_color(True)
                self._setup(pawn, "pawnwhite.png", (2, 4), WHITE_VALUES)
                pawn.place(self.grid, 6, i - 8)

        self.rooks = [Rook(make_sound()) for _ in range(4)]
        self.bishops = [Bishop(make_sound()) for _ in range(4)]
        self.knights = [Knight(make_sound()) for _ in range(4)]
        for i in range(4):
            if i < 2:
                self._setup(self.rooks[i], "rookblack.png", (7, -4), BLACK_VALUES)
                self._setup(self.bishops[i], "bishopblack.png", (7, -4), BLACK_VALUES)
                self._setup(self.knights[i], "knightblack.png", (0, -4), BLACK_VALUES)
            else:
                self._setup(self.rooks[i], "rookwhite.png", (7, 4), WHITE_VALUES)
                self._setup(self.bishops[i], "bishopwhite.png", (3, 4), WHITE_VALUES)
                self._setup(self.knights[i], "knightwhite.png", (4, 4), WHITE_VALUES)

        for piece, row, col in zip(self.rooks, (0, 0, 7, 7), (0, 7, 0, 7)):
            piece.place(self.grid, row, col)
        for piece, row, col in zip(self.bishops, (0, 0, 7, 7), (2, 5, 2, 5)):
            piece.place(self.grid, row, col)
        for piece, row, col in zip(self.knights, (0, 0, 7, 7), (1, 6, 1, 6)):
            piece.place(self.grid, row, col)

        self.queens = [Queen(make_sound()) for _ in range(2)]
        self.kings = [King(make_sound()) for _ in range(2)]
        self._setup(self.queens[0], "queenblack.png", (0, -4), BLACK_VALUES)
        self.queens[0].place(self.grid, 0, 3)
        self._setup(self.kings[0], "kingblack.png", (0, -4), BLACK_VALUES)
        self.kings[0].place(self.grid, 0, 4)
        self._setup(self.queens[1], "queenwhite.png", (4, 4), WHITE_VALUES)
        self.queens[1].place(self.grid, 7, 3)
        self._setup(self.kings[1], "kingwhite.png", (4, 4), WHITE_VALUES)
        self.kings[1].place(self.grid, 7, 4)

        self.back = Screen()
        self.back.set_screen(None, 1)
        self.back.set_button(1, None, *BUTTON_SIZE, 50, 650, WHITE)
        self.menu = Screen()
        self.menu.set_screen(None, 1)
        self.menu.set_button(1, None, *BUTTON_SIZE, 550, 650, WHITE)
        self.on_menu = True

    def _setup(self, piece, texture, offset, values):
        piece.set_sprite(None, *offset)
        piece.set_values(*values)
        self._sprites.append((piece, texture, offset))

    def pieces(self):
        """Every piece, in drawing order."""
        ordered = list(self.pawns)
        for rook, bishop, knight in zip(self.rooks, self.bishops, self.knights):
            ordered += [rook, bishop, knight]
        for queen, king in zip(self.queens, self.kings):
            ordered += [queen, king]
        return ordered

    def _move_order(self):
        for i, pawn in enumerate(self.pawns):
            if i < 2:
                yield self.queens[i]
                yield self.kings[i]
            if i < 4:
                yield self.rooks[i]
                yield self.bishops[i]
                yield self.knights[i]
            yield pawn

    def handle_drag(self, start, end):
        """Offer a drag from start to end to every piece; True if any moved."""
        moved = False
        for piece in self._move_order():
            moved = piece.drag(self.grid, start, end) or moved
        return moved

    def _update(self, mouse_pos, pressed):
        """Advance the screens for one frame."""
        if self.on_menu:
            self.menu.update(mouse_pos, pressed)
            self.on_menu = self.menu.is_active(1)
            return
        self.back.update(mouse_pos, pressed)
        if not self.back.is_active(1):
            self.on_menu = True
        self.grid.highlight(*mouse_pos)

    def draw(self, surface):
        """Draw the menu, or the board with its pieces."""
        if self.on_menu:
            self.menu.draw(surface)
            return
        surface.fill((0, 0, 0))
        self.back.draw(surface)
        self.grid.draw(surface)
        for piece in self.pieces():
            piece.draw(surface)


def _load(path):
    return pygame.image.load(path) if os.path.isfile(path) else None


def _apply_textures(game, root):
    textures = os.path.join(root, "Textures")
    for piece, name, offset in game._sprites:
        image = _load(os.path.join(textures, name))
        if image is not None:
            piece.set_sprite(image, *offset)
    game.grid.background = _load(os.path.join(textures, "background.jpg"))
    for screen, background, button, x in (
        (game.back, "bg.jpg", "backbutton.png", 50),
        (game.menu, "bg2.jpg", "button.png", 550),
    ):
        screen.set_screen(_load(os.path.join(textures, background)), 1)
        screen.set_button(1, _load(os.path.join(textures, button)), *BUTTON_SIZE, x, 650, WHITE)


def _sound_factory(root):
    path = os.path.join(root, SOUND_FILE)
    if not os.path.isfile(path):
        return None
    try:
        pygame.mixer.init()
        pygame.mixer.Sound(path)
    except pygame.error:
        return None

    def make():
        sound = pygame.mixer.Sound(path)
        sound.set_volume(SOUND_VOLUME)
        return sound

    return make


def main(argv=None):
    """Run the game until the window is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="chessgrid", description="Two-player chess board.")
    parser.add_argument("--assets", default=".", help="directory holding Textures/ and Music/")
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        if args.windowed:
            window = pygame.display.set_mode((1366, 800))
        else:
            window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        pygame.display.set_caption("Chess")

        game = Game(_sound_factory(args.assets))
        _apply_textures(game, args.assets)

        clock = pygame.time.Clock()
        drag_start = None
        running = True
        while running:
            pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    pressed = True
                    drag_start = event.pos
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    if drag_start is not None and not game.on_menu:
                        game.handle_drag(drag_start, event.pos)
                    drag_start = None
            game._update(pygame.mouse.get_pos(), pressed)
            game.draw(window)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0