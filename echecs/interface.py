"""Tk window showing a game and forwarding clicks to it."""

from __future__ import annotations

import argparse
import math
import tkinter as tk
from pathlib import Path
from tkinter import messagebox

from .echiquier import TAILLE
from .partie import Partie

TAILLE_CASE = 60
TAILLE_IMAGE = 50


def chemin_image(dossier: str | Path, nom_fichier: str) -> Path:
    """Path of a piece image inside the image directory."""
    return Path(dossier) / nom_fichier


def _facteur_reduction(largeur: int, hauteur: int, cible: int = TAILLE_IMAGE) -> int:
    """Smallest integer step that shrinks an image to fit within cible pixels."""
    return max(1, math.ceil(max(largeur, hauteur) / cible))


class FenetreEchecs:
    """The board window: an 8x8 grid of clickable squares plus message lines."""

    def __init__(self, racine: tk.Misc, partie: Partie, dossier_images: str | Path) -> None:
        self.racine = racine
        self.partie = partie
        self.dossier_images = Path(dossier_images)
        self._images: dict[str, tk.PhotoImage | None] = {}
        self._vide = tk.PhotoImage(master=racine, width=1, height=1)

        plateau = tk.Frame(racine)
        plateau.pack(padx=6, pady=6)
        self._cases: list[list[tk.Label]] = []
        for i in range(TAILLE):
            rang = []
            for j in range(TAILLE):
                case = tk.Label(
                    plateau,
                    image=self._vide,
                    compound="center",
                    width=TAILLE_CASE,
                    height=TAILLE_CASE,
                    borderwidth=0,
                )
                case.grid(row=i, column=j)
                case.bind("<Button-1>", lambda _evt, i=i, j=j: self._clic(i, j))
                rang.append(case)
            self._cases.append(rang)

        tk.Button(racine, text="Nouvelle partie", command=self._nouvelle_partie).pack(
            fill="x", padx=6
        )
        police = ("TkDefaultFont", 10, "bold")
        self._info = tk.Label(racine, font=police, pady=6)
        self._info.pack(fill="x")
        self._statut = tk.Label(racine, font=police, pady=6, fg="white", bg="red")
        self._statut.pack(fill="x")

        self.rafraichir()

    def _clic(self, ligne: int, colonne: int) -> None:
        self.partie.case_cliquee(ligne, colonne)
        self.rafraichir()

    def _nouvelle_partie(self) -> None:
        self._images.clear()
        self.partie.reinitialiser_echiquier()
        self.rafraichir()

    def _image(self, nom_fichier: str) -> tk.PhotoImage | None:
        if nom_fichier in self._images:
            return self._images[nom_fichier]
        chemin = chemin_image(self.dossier_images, nom_fichier)
        image = None
        if not chemin.is_file():
            messagebox.showwarning(
                "Image introuvable", f"Fichier non trouvé: {chemin}", parent=self.racine
            )
        else:
            try:
                brute = tk.PhotoImage(master=self.racine, file=str(chemin))
            except tk.TclError:
                brute = None
            if brute is not None:
                facteur = _facteur_reduction(brute.width(), brute.height())
                image = brute.subsample(facteur, facteur) if facteur > 1 else brute
        self._images[nom_fichier] = image
        return image

    def rafraichir(self) -> None:
        """Redraw squares and messages from the game state."""
        for i, rang in enumerate(self._cases):
            for j, case in enumerate(rang):
                nom_fichier = self.partie.images[i][j]
                image = self._image(nom_fichier) if nom_fichier else None
                case.configure(
                    bg=self.partie.couleur_case(i, j),
                    image=image if image is not None else self._vide,
                )
        self._info.configure(text=self.partie.info)
        self._statut.configure(text=self.partie.statut)
        while self.partie.alertes:
            messagebox.showerror("Erreur", self.partie.alertes.pop(0), parent=self.racine)


def main(argv: list[str] | None = None) -> int:
    """Open the chess window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="echecs", description="Jeu d'échecs simplifié.")
    parser.add_argument(
        "--images",
        type=Path,
        default=Path.cwd() / "images",
        help="dossier contenant les images des pièces",
    )
    args = parser.parse_args(argv)

    racine = tk.Tk()
    racine.title("Jeu d'échecs")
    FenetreEchecs(racine, Partie(), args.images)
    racine.mainloop()
    return 0