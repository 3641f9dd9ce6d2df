import gc

import pytest

from echecs.echiquier import deplacement_temporaire
from echecs.partie import Partie, notation_echecs, piece_depuis_fichier
from echecs.pieces import Cavalier, Couleur, Dame, Roi, Tour, TropDeRoisException


@pytest.fixture
def partie():
    gc.collect()
    jeu = Partie()
    yield jeu
    del jeu
    gc.collect()


def test_notation_coins():
    assert notation_echecs(0, 0) == "A8"
    assert notation_echecs(7, 7) == "H1"


def test_notation_unique_pour_chaque_case():
    noms = {notation_echecs(i, j) for i in range(8) for j in range(8)}
    assert len(noms) == 64


def test_piece_depuis_fichier_dame_noire():
    piece = piece_depuis_fichier("reine_noir.png")
    assert isinstance(piece, Dame)
    assert piece.couleur is Couleur.NOIR


def test_piece_depuis_fichier_cavalier_blanc():
    piece = piece_depuis_fichier("chevalier_blanc.png")
    assert isinstance(piece, Cavalier)
    assert piece.couleur is Couleur.BLANC


def test_piece_depuis_fichier_insensible_casse():
    piece = piece_depuis_fichier("TOUR_BLANC.PNG")
    assert isinstance(piece, Tour)
    assert piece.couleur is Couleur.BLANC


def test_piece_depuis_fichier_inconnu():
    assert piece_depuis_fichier("inconnu.png") is None


def test_troisieme_roi_refuse(partie):
    with pytest.raises(TropDeRoisException):
        piece_depuis_fichier("roi_blanc.png")


def test_position_initiale(partie):
    roi = partie.echiquier.piece_en(0, 3)
    assert isinstance(roi, Roi)
    assert roi.couleur is Couleur.BLANC
    assert partie.images[0][3] == "roi_blanc.png"
    assert partie.images[2][1] == "tour_noir.png"
    assert partie.echiquier.joueur_actuel is Couleur.BLANC
    assert partie.couleur_case(0, 0) == "#A9DFBF"
    assert partie.couleur_case(0, 1) == "#196F3D"
    assert partie.alertes == []


def test_clic_case_vide(partie):
    partie.case_cliquee(7, 7)
    assert partie.info == f"La case {notation_echecs(7, 7)} est vide."
    assert partie.selection is None


def test_clic_piece_adverse(partie):
    partie.case_cliquee(3, 3)
    assert partie.info == "Erreur: Ce n'est pas à ton tour !"
    assert partie.selection is None


def test_selection_dame(partie):
    partie.case_cliquee(1, 6)
    assert partie.selection == (1, 6)
    assert partie.couleur_case(1, 6) == "yellow"
    assert partie.info == "La piece Dame sélectionné."
    assert (1, 5) in partie.cases_surbrillantes


def test_surbrillance_coherente(partie):
    partie.case_cliquee(1, 6)
    dame = partie.echiquier.piece_en(1, 6)
    oranges = [
        (i, j) for i in range(8) for j in range(8)
        if partie.couleur_case(i, j) == "orange"
    ]
    assert sorted(oranges) == sorted(partie.cases_surbrillantes)
    for i, j in partie.cases_surbrillantes:
        assert dame.est_mouvement_valide(1, 6, i, j)
        cible = partie.echiquier.piece_en(i, j)
        assert cible is None or cible.couleur is Couleur.NOIR


def test_surbrillance_exclut_cases_en_echec(partie):
    partie.echiquier.placer_piece(5, 2, Tour(Couleur.NOIR))
    partie.case_cliquee(0, 3)
    assert (0, 2) not in partie.cases_surbrillantes
    assert (1, 2) not in partie.cases_surbrillantes
    assert (0, 4) in partie.cases_surbrillantes
    for i, j in partie.cases_surbrillantes:
        with deplacement_temporaire(partie.echiquier, 0, 3, i, j):
            assert not partie.echiquier.est_en_echec(Couleur.BLANC)


def test_deplacement_simple(partie):
    partie.case_cliquee(1, 6)
    partie.case_cliquee(1, 5)
    assert isinstance(partie.echiquier.piece_en(1, 5), Dame)
    assert partie.echiquier.piece_en(1, 6) is None
    assert partie.images[1][5] == "reine_blanc.png"
    assert partie.images[1][6] is None
    assert partie.info == f"La pièce Dame s'est déplacée en {notation_echecs(1, 5)}."
    assert partie.echiquier.joueur_actuel is Couleur.NOIR
    assert partie.selection is None
    assert partie.cases_surbrillantes == []
    assert partie.couleur_case(1, 6) == partie.couleur_case(0, 7)


def test_tour_suivant_refuse_piece_blanche(partie):
    partie.case_cliquee(1, 6)
    partie.case_cliquee(1, 5)
    partie.case_cliquee(1, 5)
    assert partie.info == "Erreur: Ce n'est pas à ton tour !"
    assert partie.selection is None


def test_capture(partie):
    partie.echiquier.placer_piece(1, 1, Tour(Couleur.NOIR))
    partie.case_cliquee(1, 6)
    partie.case_cliquee(1, 1)
    assert isinstance(partie.echiquier.piece_en(1, 1), Dame)
    assert partie.info == f"La pièce Dame a capturé une pièce en {notation_echecs(1, 1)}."


def test_cible_alliee(partie):
    partie.selectionner_ou_afficher_message_si_vide(1, 6)
    assert partie.cible_est_alliee(0, 3) is True
    assert partie.cible_est_alliee(2, 1) is False
    partie.case_cliquee(0, 3)
    assert partie.info == "Erreur: Tu ne peux pas capturer une piece allie !"
    assert isinstance(partie.echiquier.piece_en(1, 6), Dame)


def test_mouvement_invalide(partie):
    partie.case_cliquee(1, 6)
    partie.case_cliquee(3, 5)
    assert partie.info == f"La pièce Dame ne peut pas aller en {notation_echecs(3, 5)}."
    assert isinstance(partie.echiquier.piece_en(1, 6), Dame)
    assert partie.echiquier.joueur_actuel is Couleur.BLANC


def test_deplacement_en_echec_refuse(partie):
    partie.echiquier.placer_piece(5, 2, Tour(Couleur.NOIR))
    partie.case_cliquee(0, 3)
    partie.case_cliquee(0, 2)
    assert partie.statut == "Erreur: Tu es en échec, tu ne peux pas faire ce déplacement."
    assert isinstance(partie.echiquier.piece_en(0, 3), Roi)
    assert partie.echiquier.piece_en(0, 2) is None
    assert partie.echiquier.joueur_actuel is Couleur.BLANC


def test_tentative_sans_selection(partie):
    partie.tenter_deplacer_piece_vers(0, 0)
    assert partie.info == ""
    assert partie.echiquier.piece_en(0, 0) is None


def test_troisieme_roi_alerte(partie):
    partie.placer_image_piece(7, 7, "roi_noir.png")
    assert partie.alertes == [
        "Trop de rois, seul les 2 premiers rois sont pris en consideration"
    ]
    assert partie.echiquier.piece_en(7, 7) is None
    assert partie.images[7][7] is None


def test_placer_fichier_inconnu(partie):
    partie.placer_image_piece(5, 5, "inconnu.png")
    assert partie.echiquier.piece_en(5, 5) is None
    assert partie.images[5][5] is None


def test_reinitialiser(partie):
    partie.case_cliquee(1, 6)
    partie.case_cliquee(1, 5)
    partie.reinitialiser_echiquier()
    assert partie.echiquier.piece_en(1, 5) is None
    assert isinstance(partie.echiquier.piece_en(1, 6), Dame)
    assert partie.images[1][6] == "reine_blanc.png"
    assert partie.echiquier.joueur_actuel is Couleur.BLANC
    assert partie.info == "Nouvelle partie commencée !"
    assert partie.statut == ""
    assert partie.alertes == []
    assert partie.selection is None