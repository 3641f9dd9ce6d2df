"""The board: piece placement, turn order and check detection."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from .pieces import Couleur, Piece, Roi

TAILLE = 8


def _sur_plateau(ligne: int, colonne: int) -> bool:
    return 0 <= ligne < TAILLE and 0 <= colonne < TAILLE


class Echiquier:
    """An 8x8 board holding pieces, with the side whose turn it is."""

    def __init__(self) -> None:
        self._grille: list[list[Piece | None]] = [
            [None] * TAILLE for _ in range(TAILLE)
        ]
        self.joueur_actuel = Couleur.BLANC

    def placer_piece(self, x: int, y: int, piece: Piece | None) -> None:
        """Put a piece (or None to empty the square) at (x, y)."""
        if not _sur_plateau(x, y):
            raise IndexError(f"case hors de l'échiquier: ({x}, {y})")
        self._grille[x][y] = piece

    def piece_en(self, ligne: int, colonne: int) -> Piece | None:
        """The piece at a square, or None if it is empty or off the board."""
        if not _sur_plateau(ligne, colonne):
            return None
        return self._grille[ligne][colonne]

    def deplacer_piece(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Move the current player's piece; return whether the move was made."""
        piece = self.piece_en(x1, y1)
        if (
            piece is None
            or piece.couleur is not self.joueur_actuel
            or not _sur_plateau(x2, y2)
            or not piece.est_mouvement_valide(x1, y1, x2, y2)
        ):
            return False

        with deplacement_temporaire(self, x1, y1, x2, y2):
            if self.est_en_echec(self.joueur_actuel):
                return False

        self._grille[x2][y2] = piece
        self._grille[x1][y1] = None
        self.changer_joueur()
        return True

    def changer_joueur(self) -> None:
        """Hand the turn to the other side."""
        self.joueur_actuel = self.joueur_actuel.adverse

    def _cases(self) -> Iterator[tuple[int, int, Piece]]:
        for i, ligne in enumerate(self._grille):
            for j, piece in enumerate(ligne):
                if piece is not None:
                    yield i, j, piece

    def est_en_echec(self, couleur: Couleur) -> bool:
        """Whether the king of the given colour is attacked by any enemy piece."""
        position_roi = None
        for i, j, piece in self._cases():
            if isinstance(piece, Roi) and piece.couleur is couleur:
                position_roi = (i, j)
        if position_roi is None:
            return False

        roi_x, roi_y = position_roi
        return any(
            piece.couleur is not couleur
            and piece.est_mouvement_valide(i, j, roi_x, roi_y)
            for i, j, piece in self._cases()
        )


@contextmanager
def deplacement_temporaire(
    echiquier: Echiquier, x1: int, y1: int, x2: int, y2: int
) -> Iterator[Echiquier]:
    """Move a piece for the duration of the block, then restore both squares."""
    source = echiquier.piece_en(x1, y1)
    destination = echiquier.piece_en(x2, y2)
    echiquier.placer_piece(x2, y2, source)
    echiquier.placer_piece(x1, y1, None)
    try:
        yield echiquier
    finally:
        echiquier.placer_piece(x1, y1, source)
        echiquier.placer_piece(x2, y2, destination)