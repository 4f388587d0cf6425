import pygame
import pytest

from chessgrid.screen import Screen


@pytest.fixture
def screen():
    s = Screen()
    s.set_screen(None, 2)
    s.set_button(1, None, 100, 50, 0, 0, (255, 255, 255))
    s.set_button(2, None, 100, 50, 200, 0, (0, 0, 255))
    return s


def test_set_screen_creates_buttons(screen):
    assert len(screen.buttons) == 2


def test_screen_without_buttons_is_inactive():
    s = Screen()
    assert s.is_active(1) is False
    assert s.active is False


@pytest.mark.parametrize("number", [0, 3])
def test_set_button_out_of_range(screen, number):
    with pytest.raises(IndexError):
        screen.set_button(number, None, 1, 1, 0, 0, (0, 0, 0))


def test_is_active_out_of_range(screen):
    with pytest.raises(IndexError):
        screen.is_active(5)


def test_pressing_one_button(screen):
    screen.update((50, 25), True)
    assert screen.is_active(1) is False
    assert screen.is_active(2) is True


def test_hover_without_press_keeps_active(screen):
    screen.update((250, 25), False)
    assert screen.is_active(2) is True
    assert screen.is_active(1) is True


def test_background_is_translucent():
    s = Screen()
    s.set_screen(pygame.Surface((10, 10)), 1)
    assert s.background.get_alpha() == 229


def test_draw_shows_buttons(screen):
    surface = pygame.Surface((400, 100))
    screen.draw(surface)
    assert surface.get_at((50, 25))[:3] == (255, 255, 255)
    assert surface.get_at((250, 25))[:3] == (0, 0, 255)