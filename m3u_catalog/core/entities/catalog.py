"""
Entites du catalogue imbrique.

Projection des entrees classees vers une structure films / flux en direct /
series -> saisons -> episodes. Les listes de saisons et d'episodes sont creuses :
elles sont indexees par numero et les indices inutilises valent None.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass
class LiveStreamItem:
    """Flux en direct du catalogue."""

    name: Optional[str]
    stream_url: str
    stream_icon: Optional[str] = None
    duration: Optional[int] = None


@dataclass
class MovieItem:
    """Film du catalogue."""

    name: Optional[str]
    stream_url: str
    stream_icon: Optional[str] = None
    duration: Optional[int] = None


@dataclass
class EpisodeItem:
    """
    Episode d'une serie.

    Attributs:
        stream_url: Emplacement du media
        episode_title: Titre complet de la directive
        episode_num: Numero d'episode
        season: Numero de saison
        duration: Duree en secondes sous forme de texte ("None" si inconnue)
    """

    stream_url: str
    episode_title: Optional[str]
    episode_num: int
    season: int
    duration: str


@dataclass
class SeasonItem:
    """Saison d'une serie ; episodes indexes par numero d'episode."""

    episodes: list[Optional[EpisodeItem]] = field(default_factory=list)


@dataclass
class SeriesItem:
    """
    Serie du catalogue.

    Attributs:
        name: Titre de la serie (titre de l'episode prive du segment SxxEyy)
        cover: Jaquette (metadonnee tvg-logo du premier episode rencontre)
        seasons: Saisons indexees par numero de saison
    """

    name: str
    cover: Optional[str] = None
    seasons: list[Optional[SeasonItem]] = field(default_factory=list)


@dataclass
class Catalog:
    """Catalogue produit par une execution d'assemblage ; jamais partage."""

    movies: list[MovieItem] = field(default_factory=list)
    live_streams: list[LiveStreamItem] = field(default_factory=list)
    series: list[SeriesItem] = field(default_factory=list)

    def find_series(self, name: str) -> Optional[SeriesItem]:
        """Recherche une serie par son nom exact."""
        for item in self.series:
            if item.name == name:
                return item
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convertit le catalogue en structure serialisable JSON."""
        return asdict(self)
