# chessgrid

A chess board for two players sitting at the same screen. It shows an
8×8 board and you move pieces by dragging them with the mouse from one
square to another.

## Installing

```
pip install .
```

pygame is installed along with the package.

## Playing

```
chessgrid
```

Options:

- `--assets DIR` – the directory that holds the `Textures/` and `Music/`
  folders (default: the current directory).
- `--windowed` – open a 1366×800 window instead of going full screen.

### Assets

Images and the move sound are read from the assets directory when they
exist:

- `Textures/background.jpg` – the board picture.
- `Textures/bg2.jpg` and `Textures/button.png` – the title screen and its
  button.
- `Textures/bg.jpg` and `Textures/backbutton.png` – the board screen's
  background and its back button.
- `Textures/pawnblack.png`, `pawnwhite.png`, `rookblack.png`,
  `rookwhite.png`, `knightblack.png`, `knightwhite.png`,
  `bishopblack.png`, `bishopwhite.png`, `queenblack.png`,
  `queenwhite.png`, `kingblack.png`, `kingwhite.png` – the pieces.
- `Music/4.mp3` – played whenever a piece moves.

The package ships none of these files. A missing button image is drawn as
a plain white rectangle and a missing sound is simply not played, but a
piece whose image is missing is not drawn at all, so you need the piece
images to see the pieces.

### How to play

The title screen opens first. Click its button to get to the board.

- Press the left mouse button on a piece, drag it to the square you want,
  and let go. If the move is allowed, the piece goes there and the move
  sound plays. If it is not, the piece stays where it was.
- The square under the mouse pointer is highlighted.
- Landing on an enemy piece captures it.
- The back button in the lower left of the board screen takes you back to
  the title screen.
- Press Escape or close the window to quit.

The move rules are simple ones:

- Kings step one square in any direction.
- Knights jump in an L shape.
- Rooks slide along ranks and files, bishops along diagonals, and queens
  in both ways. None of them can pass through other pieces.
- Pawns step forward one square, or two on their first move, and capture
  diagonally forward. Black pawns advance down the board, white pawns up.

## What it does not do

Turns are not enforced, and nothing checks for check or checkmate; the
players keep to those rules themselves. There is no castling, en passant
or pawn promotion, no computer opponent, and games cannot be saved or
loaded. Sliding pieces set a `king_check` flag when their path crosses
the enemy king, but nothing in the game acts on it.

## Using it from code

The board logic works without a window, so you can drive it from code or
from tests:

```python
from chessgrid.game import Game

game = Game()
for piece in game.pieces():
    print(type(piece).__name__, piece.row, piece.col)

# Drag the white pawn on row 6, column 0 one square up.
game.handle_drag((400, 580), (400, 500))
```

`Game.handle_drag(start, end)` offers a drag between two screen points to
every piece and returns `True` if any of them moved. `Game(sound_factory)`
takes an optional callable that returns an object with a `play()` method
for each piece.

- `chessgrid.board.Grid` holds the 8×8 matrix of square values
  (`position`), maps screen points to squares (`cell_at`,
  `cell_contains`) and keeps the hover highlight (`highlight`).
- The piece classes `King`, `Queen`, `Rook`, `Bishop`, `Knight` and
  `Pawn` (in the modules of the same names in lower case) share the
  `chessgrid.piece.Piece` base, with `set_sprite`, `set_values`, `place`,
  `drag` and `draw`.
- `chessgrid.buttons.Button` and `chessgrid.screen.Screen` provide the
  title and board screens.

## Tests

```
pip install ".[test]"
pytest
```