"""
Objet valeur pour les informations de serie extraites d'un titre.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesInfo:
    """
    Informations de serie detectees dans un titre.

    Attributs:
        series_title: Titre d'origine prive du segment saison/episode
        season: Numero de saison (>= 0)
        episode: Numero d'episode (>= 0)
    """

    series_title: str
    season: int
    episode: int
