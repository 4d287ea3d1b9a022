"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports systeme de fichiers :
- ILineSource : Lecture paresseuse des lignes d'une playlist
"""

from m3u_catalog.core.ports.line_source import ILineSource

__all__ = [
    "ILineSource",
]
