import pytest

from chessgrid.board import CELL_SIZE, Grid
from chessgrid.knight import Knight


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def _center(grid, row, col):
    x, y = grid.cells[row][col]
    return x + CELL_SIZE // 2, y + CELL_SIZE // 2


def _knight(grid, row=4, col=4, sound=None):
    knight = Knight(sound)
    knight.set_values(2, 1, 4, 3)
    knight.place(grid, row, col)
    return knight


@pytest.mark.parametrize(
    "d_row,d_col",
    [(-1, 2), (-1, -2), (-2, 1), (-2, -1), (1, 2), (1, -2), (2, 1), (2, -1)],
)
def test_knight_jumps(d_row, d_col):
    grid = Grid()
    sound = FakeSound()
    knight = _knight(grid, sound=sound)
    target = (4 + d_row, 4 + d_col)
    assert knight.drag(grid, _center(grid, 4, 4), _center(grid, *target)) is True
    assert (knight.row, knight.col) == target
    assert grid.position[4][4] == 0
    assert grid.position[target[0]][target[1]] == 2
    assert sound.plays == 1


def test_knight_jumps_over_pieces():
    grid = Grid()
    knight = _knight(grid)
    grid.position[3][4] = 2
    grid.position[3][5] = 1
    assert knight.drag(grid, _center(grid, 4, 4), _center(grid, 2, 5)) is True
    assert (knight.row, knight.col) == (2, 5)


def test_knight_blocked_by_own_piece():
    grid = Grid()
    knight = _knight(grid)
    grid.position[6][5] = 2
    assert knight.drag(grid, _center(grid, 4, 4), _center(grid, 6, 5)) is False
    assert (knight.row, knight.col) == (4, 4)


def test_knight_blocked_by_own_king():
    grid = Grid()
    knight = _knight(grid)
    grid.position[6][3] = 4
    assert knight.drag(grid, _center(grid, 4, 4), _center(grid, 6, 3)) is False
    assert grid.position[6][3] == 4


def test_knight_captures_enemy():
    grid = Grid()
    knight = _knight(grid)
    grid.position[5][6] = 1
    assert knight.drag(grid, _center(grid, 4, 4), _center(grid, 5, 6)) is True
    assert grid.position[5][6] == 2


def test_knight_rejects_straight_move():
    grid = Grid()
    sound = FakeSound()
    knight = _knight(grid, sound=sound)
    assert knight.drag(grid, _center(grid, 4, 4), _center(grid, 4, 6)) is False
    assert (knight.row, knight.col) == (4, 4)
    assert sound.plays == 0


def test_knight_near_edge_skips_off_board_jumps():
    grid = Grid()
    knight = _knight(grid, 7, 0)
    assert knight.drag(grid, _center(grid, 7, 0), _center(grid, 5, 1)) is True
    assert (knight.row, knight.col) == (5, 1)


def test_captured_knight_is_removed():
    grid = Grid()
    knight = _knight(grid)
    grid.position[4][4] = 1
    assert knight.drag(grid, _center(grid, 4, 4), _center(grid, 6, 5)) is False
    assert knight.alive is False