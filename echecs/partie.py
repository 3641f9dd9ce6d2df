"""Game state behind the board window: selection, highlighting and messages."""

from __future__ import annotations

from .echiquier import TAILLE, Echiquier, deplacement_temporaire
from .pieces import Cavalier, Couleur, Dame, Piece, Roi, Tour, TropDeRoisException

CLAIR = "#A9DFBF"
FONCE = "#196F3D"
SELECTION = "yellow"
SURBRILLANCE = "orange"

BIENVENUE = "Bienvenue dans le jeu d'échecs !"

POSITION_INITIALE: tuple[tuple[int, int, str], ...] = (
    (0, 3, "roi_blanc.png"),
    (3, 3, "roi_noir.png"),
    (1, 6, "reine_blanc.png"),
    (2, 1, "tour_noir.png"),
)

_TYPES_PAR_MOTIF: tuple[tuple[str, type[Piece]], ...] = (
    ("roi", Roi),
    ("reine", Dame),
    ("tour", Tour),
    ("chevalier", Cavalier),
)


def _fond(ligne: int, colonne: int) -> str:
    return CLAIR if (ligne + colonne) % 2 == 0 else FONCE


def notation_echecs(ligne: int, colonne: int) -> str:
    """Algebraic name of a square, row 0 being rank 8 and column 0 file A."""
    return f"{chr(ord('A') + colonne)}{TAILLE - ligne}"


def piece_depuis_fichier(nom_fichier: str) -> Piece | None:
    """Build the piece an image file name stands for, or None if none matches.

    Raises TropDeRoisException when the name asks for a king beyond the limit.
    """
    nom = nom_fichier.casefold()
    couleur = Couleur.BLANC if "blanc" in nom else Couleur.NOIR
    for motif, classe in _TYPES_PAR_MOTIF:
        if motif in nom:
            return classe(couleur)
    return None


class Partie:
    """A game as seen by the player: board, selected square, highlights and messages."""

    def __init__(self) -> None:
        self.echiquier = Echiquier()
        self.images: list[list[str | None]] = [[None] * TAILLE for _ in range(TAILLE)]
        self._styles = [[_fond(i, j) for j in range(TAILLE)] for i in range(TAILLE)]
        self.selection: tuple[int, int] | None = None
        self.cases_surbrillantes: list[tuple[int, int]] = []
        self.info = BIENVENUE
        self.statut = BIENVENUE
        self.alertes: list[str] = []
        self._placer_position_initiale()

    def _placer_position_initiale(self) -> None:
        for ligne, colonne, nom_fichier in POSITION_INITIALE:
            self.placer_image_piece(ligne, colonne, nom_fichier)

    def couleur_case(self, ligne: int, colonne: int) -> str:
        """Background colour currently shown for a square."""
        return self._styles[ligne][colonne]

    def placer_image_piece(self, i: int, j: int, nom_fichier: str) -> None:
        """Place the piece an image file stands for, with that image, at (i, j)."""
        try:
            piece = piece_depuis_fichier(nom_fichier)
        except TropDeRoisException as erreur:
            self.alertes.append(str(erreur))
            return
        if piece is None:
            return
        self.echiquier.placer_piece(i, j, piece)
        self.images[i][j] = nom_fichier

    def case_cliquee(self, ligne: int, colonne: int) -> None:
        """Handle a click: select a piece, or try to move the selected one."""
        if self.selection is None:
            self.selectionner_ou_afficher_message_si_vide(ligne, colonne)
        else:
            self.tenter_deplacer_piece_vers(ligne, colonne)
            self.deselectionner_case()

    def selectionner_ou_afficher_message_si_vide(self, ligne: int, colonne: int) -> None:
        """Select the current player's piece at a square, or report why not."""
        piece = self.echiquier.piece_en(ligne, colonne)
        self.info = ""
        self.statut = ""
        if piece is None:
            self.info = f"La case {notation_echecs(ligne, colonne)} est vide."
            return
        if piece.couleur is not self.echiquier.joueur_actuel:
            self.info = "Erreur: Ce n'est pas à ton tour !"
            return
        self.selection = (ligne, colonne)
        self._styles[ligne][colonne] = SELECTION
        self.info = f"La piece {piece.nom} sélectionné."
        self.montrer_mouvements_possibles(ligne, colonne)

    def tenter_deplacer_piece_vers(self, ligne: int, colonne: int) -> None:
        """Try to move the selected piece to a square and report the outcome."""
        self.info = ""
        self.statut = ""
        if self.selection is None:
            return
        depart_l, depart_c = self.selection
        piece = self.echiquier.piece_en(depart_l, depart_c)
        if piece is None:
            return

        if piece.couleur is not self.echiquier.joueur_actuel:
            self.info = "Erreur: Ce n'est pas à ton tour !"
            return
        if self.cible_est_alliee(ligne, colonne):
            self.info = "Erreur: Tu ne peux pas capturer une piece allie !"
            return
        case = notation_echecs(ligne, colonne)
        if not piece.est_mouvement_valide(depart_l, depart_c, ligne, colonne):
            self.info = f"La pièce {piece.nom} ne peut pas aller en {case}."
            return

        capturee = self.echiquier.piece_en(ligne, colonne)
        if not self.echiquier.deplacer_piece(depart_l, depart_c, ligne, colonne):
            self.statut = "Erreur: Tu es en échec, tu ne peux pas faire ce déplacement."
            return

        image = self.images[depart_l][depart_c]
        if image is None:
            return
        self.images[ligne][colonne] = image
        self.images[depart_l][depart_c] = None
        if capturee is not None:
            self.info = f"La pièce {piece.nom} a capturé une pièce en {case}."
        else:
            self.info = f"La pièce {piece.nom} s'est déplacée en {case}."

    def cible_est_alliee(self, ligne: int, colonne: int) -> bool:
        """Whether the square holds a piece of the selected piece's colour."""
        if self.selection is None:
            return False
        source = self.echiquier.piece_en(*self.selection)
        cible = self.echiquier.piece_en(ligne, colonne)
        return (
            source is not None
            and cible is not None
            and cible.couleur is source.couleur
        )

    def deselectionner_case(self) -> None:
        """Drop the selection and restore the colours of the squares involved."""
        if self.selection is not None:
            ligne, colonne = self.selection
            self._styles[ligne][colonne] = _fond(ligne, colonne)
        self.selection = None
        self.reinitialiser_surbrillance()

    def montrer_mouvements_possibles(self, ligne: int, colonne: int) -> None:
        """Highlight every square the piece may reach without leaving its king in check."""
        piece = self.echiquier.piece_en(ligne, colonne)
        if piece is None:
            return
        for i in range(TAILLE):
            for j in range(TAILLE):
                if not piece.est_mouvement_valide(ligne, colonne, i, j):
                    continue
                cible = self.echiquier.piece_en(i, j)
                if cible is not None and cible.couleur is piece.couleur:
                    continue
                with deplacement_temporaire(self.echiquier, ligne, colonne, i, j):
                    en_echec = self.echiquier.est_en_echec(piece.couleur)
                if en_echec:
                    continue
                self._styles[i][j] = SURBRILLANCE
                self.cases_surbrillantes.append((i, j))

    def reinitialiser_surbrillance(self) -> None:
        """Restore the colours of all highlighted squares."""
        for i, j in self.cases_surbrillantes:
            self._styles[i][j] = _fond(i, j)
        self.cases_surbrillantes.clear()

    def reinitialiser_echiquier(self) -> None:
        """Start a new game from the initial position."""
        self.images = [[None] * TAILLE for _ in range(TAILLE)]
        self._styles = [[_fond(i, j) for j in range(TAILLE)] for i in range(TAILLE)]
        self.echiquier = Echiquier()
        self.selection = None
        self.cases_surbrillantes.clear()
        self._placer_position_initiale()
        self.info = "Nouvelle partie commencée !"
        self.statut = ""