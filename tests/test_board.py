import pygame
import pytest

from chessgrid.board import CELL_SIZE, COLS, ROWS, Grid


def _center(grid, row, col):
    x, y = grid.cells[row][col]
    return x + CELL_SIZE // 2, y + CELL_SIZE // 2


def test_position_starts_empty():
    grid = Grid()
    assert all(value == 0 for row in grid.position for value in row)
    assert len(grid.position) == ROWS
    assert all(len(row) == COLS for row in grid.position)


def test_first_cell_origin():
    grid = Grid()
    assert grid.cells[0][0] == (363, 64)


def test_cells_are_adjacent():
    grid = Grid()
    for row in range(ROWS):
        for col in range(1, COLS):
            assert grid.cells[row][col][0] - grid.cells[row][col - 1][0] == CELL_SIZE
            assert grid.cells[row][col][1] == grid.cells[row][col - 1][1]


def test_cell_contains_includes_border():
    grid = Grid()
    x, y = grid.cells[2][2]
    assert grid.cell_contains(2, 2, x, y)
    assert grid.cell_contains(2, 2, x + CELL_SIZE, y + CELL_SIZE)
    assert grid.cell_contains(2, 3, x + CELL_SIZE, y)
    assert not grid.cell_contains(2, 2, x - 1, y)


@pytest.mark.parametrize("row,col", [(0, 0), (3, 5), (7, 7)])
def test_cell_at_round_trip(row, col):
    grid = Grid()
    assert grid.cell_at(*_center(grid, row, col)) == (row, col)


def test_cell_at_outside_board():
    grid = Grid()
    assert grid.cell_at(0, 0) is None


def test_highlight_single_cell():
    grid = Grid()
    grid.highlight(*_center(grid, 4, 1))
    assert grid.highlighted == {(4, 1)}


def test_highlight_on_shared_border():
    grid = Grid()
    x, y = grid.cells[1][1]
    grid.highlight(x, y + CELL_SIZE // 2)
    assert grid.highlighted == {(1, 0), (1, 1)}


def test_highlight_cleared_outside():
    grid = Grid()
    grid.highlight(*_center(grid, 4, 1))
    grid.highlight(0, 0)
    assert grid.highlighted == set()


def test_draw_highlight_overlay():
    grid = Grid()
    surface = pygame.Surface((1100, 800))
    surface.fill((0, 0, 0))
    grid.highlight(*_center(grid, 2, 3))
    grid.draw(surface)
    x, y = grid.cells[2][3]
    lit = surface.get_at((x + 5, y + 5))
    assert lit.b > 0 and lit.r == 0 and lit.g == 0
    ox, oy = grid.cells[5][5]
    assert tuple(surface.get_at((ox + 5, oy + 5))) == (0, 0, 0, 255)


def test_draw_background():
    background = pygame.Surface((10, 10))
    background.fill((255, 0, 0))
    grid = Grid(background)
    surface = pygame.Surface((1100, 800))
    grid.draw(surface)
    assert tuple(surface.get_at((327, 28))) == (255, 0, 0, 255)