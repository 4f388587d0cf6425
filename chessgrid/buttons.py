"""A clickable, textured rectangle that grows while the pointer is over it."""

from __future__ import annotations

import os

import pygame

HOVER_GROWTH = 20
WHITE = (255, 255, 255)


class Button:
    """A button with a base rectangle and a drawn rectangle that reacts to hover."""

    def __init__(self):
        self.path = ""
        self.image = None
        self.x = 0.0
        self.y = 0.0
        self.width = 0.0
        self.height = 0.0
        self.color = WHITE
        self.rect = (0.0, 0.0, 0.0, 0.0)
        self.active = True

    def configure(self, image, width, height, x, y, color):
        """Set the image (surface or file path), size, position and tint."""
        if isinstance(image, (str, os.PathLike)):
            self.path = os.fspath(image)
            image = pygame.image.load(self.path)
        self.image = image
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.color = color
        self.active = True
        self.hover(width, height, x, y)

    def hover(self, width, height, x, y):
        """Change the rectangle the button is drawn in."""
        self.rect = (x, y, width, height)

    def contains(self, x, y):
        """Whether a point lies in the base rectangle, borders included."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def update(self, mouse_pos, pressed):
        """React to the pointer; a press on the button makes it inactive."""
        self.active = True
        if self.contains(*mouse_pos):
            self.hover(
                self.width + HOVER_GROWTH,
                self.height + HOVER_GROWTH,
                self.x - HOVER_GROWTH,
                self.y - HOVER_GROWTH,
            )
            if pressed:
                self.active = False
        else:
            self.hover(self.width, self.height, self.x, self.y)
        return self.active

    def draw(self, surface):
        """Draw the button in its current rectangle."""
        x, y, width, height = (int(v) for v in self.rect)
        if width <= 0 or height <= 0:
            return
        color = pygame.Color(self.color)
        if self.image is None:
            pygame.draw.rect(surface, color, pygame.Rect(x, y, width, height))
            return
        scaled = pygame.transform.scale(self.image, (width, height))
        scaled.fill(color, special_flags=pygame.BLEND_RGB_MULT)
        surface.blit(scaled, (x, y))