"""
Entites entree de playlist.

Une entree est creee une seule fois pendant l'assemblage puis n'est plus modifiee ;
la sequence ordonnee des entrees appartient a l'appelant.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Optional

from m3u_catalog.core.value_objects import MediaLocation, Metadata, SeriesInfo


class EntryKind(Enum):
    """Type de contenu d'une entree.

    Valeurs:
        CHANNEL: Chaine / flux en direct
        MOVIE: Film (VOD)
        SERIES: Episode de serie TV (VOD avec saison/episode)
    """

    CHANNEL = "channel"
    MOVIE = "movie"
    SERIES = "series"


@dataclass(frozen=True)
class M3uEntry:
    """
    Represente un element d'une playlist .m3u.

    Attributs :
        location : Emplacement du media (obligatoire)
        duration : Duree, ou None si inconnue
        title : Titre, ou None sans directive (la chaine vide reste distincte de None)
        kind : Type de contenu detecte
        metadata : Metadonnees cle/valeur de la directive
        series : Titre de serie, saison et episode (uniquement pour SERIES)
    """

    location: MediaLocation
    duration: Optional[timedelta] = None
    title: Optional[str] = None
    kind: EntryKind = EntryKind.CHANNEL
    metadata: Metadata = field(default_factory=Metadata.empty)
    series: Optional[SeriesInfo] = None

    @property
    def is_vod(self) -> bool:
        """Vrai pour les films et episodes."""
        return self.kind is not EntryKind.CHANNEL

    @property
    def duration_seconds(self) -> Optional[int]:
        """Duree en secondes entieres, ou None."""
        if self.duration is None:
            return None
        return int(self.duration.total_seconds())
