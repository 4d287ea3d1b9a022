"""
m3u-catalog - Parsing et classification de playlists .m3u.

Ce package lit les playlists .m3u / .m3u etendues, classe chaque entree
(chaine en direct, film, episode de serie) et peut agreger le resultat
en catalogue imbrique (films, flux en direct, series -> saisons -> episodes).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (assemblage, classification, catalogue)
- adapters/ : Couche infrastructure (CLI, systeme de fichiers, grammaire)
"""

__version__ = "0.1.0"

from m3u_catalog.api import (  # noqa: E402
    parse_and_format,
    parse_file,
    parse_stream,
    parse_string,
    resolve_nested_playlists,
)

__all__ = [
    "__version__",
    "parse_and_format",
    "parse_file",
    "parse_stream",
    "parse_string",
    "resolve_nested_playlists",
]
