# echecs

A small chess game on an 8×8 board. It has four kinds of piece: kings (`Roi`),
queens (`Dame`), rooks (`Tour`) and knights (`Cavalier`). The game refuses any
move that would leave your own king in check. No more than two kings can
exist at a time. Creating a third raises `TropDeRoisException`.

The game starts from a fixed practice position:

- white king on D8
- black king on D5
- white queen on G7
- black rook on B6

White moves first.

## Installing

```
pip install .
```

The window uses Tkinter from the standard library.

## Playing

```
echecs
```

Piece images are read from an `images/` folder in the current directory, for
example `roi_blanc.png`, `reine_blanc.png` and `tour_noir.png`. Use
`--images DIR` to read them from another folder. If an image is missing, a
warning is shown and the square stays blank, but the piece is still in play.

To play:

1. Click one of your own pieces. It turns yellow, and the squares it can
   reach without leaving its king in check turn orange.
2. Click a target square to move there, or to capture the piece on it.

Messages appear under the board. The "Nouvelle partie" button resets the game
to the starting position.

## Using the library

```python
from echecs.echiquier import Echiquier
from echecs.pieces import Couleur, Roi, Dame

board = Echiquier()
board.placer_piece(0, 3, Roi(Couleur.BLANC))
board.placer_piece(1, 6, Dame(Couleur.BLANC))
board.deplacer_piece(1, 6, 1, 3)   # True: the move was made, black to play
board.est_en_echec(Couleur.NOIR)   # False: there is no black king
```

### `echecs.pieces`

- `Couleur`: `BLANC` or `NOIR`. `adverse` gives the other colour.
- `Piece`: each piece has a `couleur`, a `nom` and an
  `est_mouvement_valide(x1, y1, x2, y2)` method.
- The king is limited to two at once. That count covers kings that are still
  alive as objects.

### `echecs.echiquier`

- `Echiquier` has the following members:
  - `placer_piece`: puts a piece on a square. An off-board square raises
    `IndexError`.
  - `piece_en`: returns the piece on a square, or `None` for an empty or
    off-board square.
  - `deplacer_piece`: moves a piece and returns whether the move was made.
  - `changer_joueur`: passes the turn to the other side.
  - `est_en_echec`: reports whether the given side is in check.
  - `joueur_actuel`: the side whose turn it is.
- `deplacement_temporaire(echiquier, x1, y1, x2, y2)` is a context manager. It
  moves a piece for the duration of a `with` block and puts both squares back
  afterwards.

### `echecs.partie`

`Partie` is the click-driven game state that the window displays. You can use
it without a GUI.

- `case_cliquee(ligne, colonne)` handles a click.
- After a click, you can read:
  - `info` and `statut`: the messages to show.
  - `selection`: the selected square.
  - `cases_surbrillantes`: the highlighted squares.
  - `couleur_case(ligne, colonne)`: a square's background colour.
  - `images`: the image file name on each square.
  - `alertes`: errors such as too many kings.
- `reinitialiser_echiquier()` starts a new game.

Two helper functions go with it:

- `notation_echecs(ligne, colonne)` names a square. Row 0 is rank 8 and
  column 0 is file A.
- `piece_depuis_fichier(nom)` builds a piece from an image file name.

### `echecs.interface`

- `FenetreEchecs` is the Tk window.
- `main(argv=None)` is the entry point of the `echecs` command.

## What it does not do

This is a simplified game, not full chess:

- There are no pawns and no bishops.
- Moves do not check for pieces in the way. A rook or queen can pass through
  other pieces, and pieces also give check through them.
- There is no castling, no promotion and no en passant.
- There is no checkmate or stalemate detection.
- Games cannot be saved or loaded, and there is no move history.

## Running the tests

```
pip install .[test]
pytest
```