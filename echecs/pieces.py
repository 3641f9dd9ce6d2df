"""Chess pieces and their movement rules."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from enum import Enum


class Couleur(Enum):
    """Side a piece belongs to."""

    BLANC = "blanc"
    NOIR = "noir"

    @property
    def adverse(self) -> Couleur:
        """The opposing colour."""
        return Couleur.NOIR if self is Couleur.BLANC else Couleur.BLANC


class TropDeRoisException(RuntimeError):
    """Raised when more than two kings would exist at once."""

    def __init__(self) -> None:
        super().__init__(
            "Trop de rois, seul les 2 premiers rois sont pris en consideration"
        )


class Piece(ABC):
    """A piece of a given colour that knows which displacements it can make."""

    nom: str = ""

    def __init__(self, couleur: Couleur) -> None:
        self._couleur = couleur

    @property
    def couleur(self) -> Couleur:
        return self._couleur

    @abstractmethod
    def est_mouvement_valide(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Whether the piece may move from (x1, y1) to (x2, y2) on an empty board."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._couleur.name})"


class Roi(Piece):
    """The king. At most two kings may be alive at any time."""

    nom = "Roi"
    _LIMITE = 2
    _vivants: weakref.WeakSet[Roi] = weakref.WeakSet()

    def __init__(self, couleur: Couleur) -> None:
        if len(Roi._vivants) >= Roi._LIMITE:
            raise TropDeRoisException()
        super().__init__(couleur)
        Roi._vivants.add(self)

    def est_mouvement_valide(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        return dx <= 1 and dy <= 1 and dx + dy != 0


class Dame(Piece):
    """The queen: straight lines and diagonals, any distance."""

    nom = "Dame"

    def est_mouvement_valide(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        return (x1 == x2 or y1 == y2 or dx == dy) and not (x1 == x2 and y1 == y2)


class Tour(Piece):
    """The rook: straight lines, any distance."""

    nom = "Tour"

    def est_mouvement_valide(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        return (x1 == x2 or y1 == y2) and not (x1 == x2 and y1 == y2)


class Cavalier(Piece):
    """The knight: an L-shaped jump."""

    nom = "Cavalier"

    def est_mouvement_valide(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        return (dx, dy) in ((2, 1), (1, 2))