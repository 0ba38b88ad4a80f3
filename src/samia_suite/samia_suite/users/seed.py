"""Comptes initiaux: le Boss plus un compte par poste et par site."""

from __future__ import annotations

from ..core.enums import Role, Site

# (identifiant, nom, poste, site, mot de passe)
SEED_ACCOUNTS: list[tuple[str, str, Role, Site, str]] = [
    ("1", "Le Boss", Role.BOSS, Site.SIEGE, "1"),
    ("G1", "Gérant Fnideq", Role.GERANT, Site.FNIDEQ, "1"),
    ("Ch1", "Chef Fnideq", Role.CHEF, Site.FNIDEQ, "1"),
    ("M1", "Magasinier Fnideq", Role.MAGASINIER, Site.FNIDEQ, "1"),
    ("C1", "Caissier Fnideq", Role.CAISSIER, Site.FNIDEQ, "1"),
    ("R1", "Réception Fnideq", Role.RECEPTIONNISTE, Site.FNIDEQ, "1"),
    ("G2", "Gérant M'diq", Role.GERANT, Site.MDIQ, "1"),
    ("Ch2", "Chef M'diq", Role.CHEF, Site.MDIQ, "1"),
    ("M2", "Magasinier M'diq", Role.MAGASINIER, Site.MDIQ, "1"),
    ("C2", "Caissier M'diq", Role.CAISSIER, Site.MDIQ, "1"),
    ("R2", "Réception M'diq", Role.RECEPTIONNISTE, Site.MDIQ, "1"),
    ("G3", "Gérant Hoceima", Role.GERANT, Site.AL_HOCEIMA, "1"),
    ("Ch3", "Chef Hoceima", Role.CHEF, Site.AL_HOCEIMA, "3"),
    ("M3", "Magasinier Hoceima", Role.MAGASINIER, Site.AL_HOCEIMA, "1"),
    ("C3", "Caissier Hoceima", Role.CAISSIER, Site.AL_HOCEIMA, "1"),
    ("R3", "Réception Hoceima", Role.RECEPTIONNISTE, Site.AL_HOCEIMA, "1"),
]
