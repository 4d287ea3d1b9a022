"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- MediaLocation, MediaPath, MediaUrl : Emplacement d'un media
- resolve_location : Construction validee d'un emplacement
- Metadata : Mapping cle/valeur d'une directive
- Directive : Directive #EXTINF en attente
- SeriesInfo : Titre de serie, saison, episode
"""

from m3u_catalog.core.value_objects.directive import Directive
from m3u_catalog.core.value_objects.location import (
    MediaLocation,
    MediaPath,
    MediaUrl,
    resolve_location,
)
from m3u_catalog.core.value_objects.metadata import Metadata
from m3u_catalog.core.value_objects.series_info import SeriesInfo

__all__ = [
    "Directive",
    "MediaLocation",
    "MediaPath",
    "MediaUrl",
    "resolve_location",
    "Metadata",
    "SeriesInfo",
]
