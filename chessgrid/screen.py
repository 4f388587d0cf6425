"""A full-window screen: a background image and a row of buttons."""

from __future__ import annotations

import os

import pygame

from .buttons import Button

BACKGROUND_ALPHA = int(255 * 0.9)


class Screen:
    """A background with numbered buttons (numbered from 1)."""

    def __init__(self):
        self.path = ""
        self.background = None
        self.buttons: list[Button] = []
        self.active = True

    def set_screen(self, image, count):
        """Set the background (surface or file path) and make `count` buttons."""
        if isinstance(image, (str, os.PathLike)):
            self.path = os.fspath(image)
            image = pygame.image.load(self.path)
        if image is not None:
            image = image.copy()
            image.set_alpha(BACKGROUND_ALPHA)
        self.background = image
        self.buttons = [Button() for _ in range(count)]

    def _button(self, number):
        if not 1 <= number <= len(self.buttons):
            raise IndexError(f"no button {number} on this screen")
        return self.buttons[number - 1]

    def set_button(self, number, image, width, height, x, y, color):
        """Configure button `number`."""
        self._button(number).configure(image, width, height, x, y, color)

    def update(self, mouse_pos, pressed):
        """Let every button react to the pointer."""
        for button in self.buttons:
            button.update(mouse_pos, pressed)

    def is_active(self, number):
        """False once button `number` was pressed; a screen without buttons is never active."""
        if not self.buttons:
            self.active = False
            return False
        return self._button(number).active

    def draw(self, surface):
        """Draw the background, then the buttons."""
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        for button in self.buttons:
            button.draw(surface)