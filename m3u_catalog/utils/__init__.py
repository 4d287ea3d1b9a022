"""
Utilitaires et constantes pour m3u-catalog.

Ce module contient les constantes partagees par la grammaire et le classifieur.
"""

from m3u_catalog.utils.constants import (
    COMMENT_START,
    EXTENDED_HEADER,
    PLAYLIST_EXTENSIONS,
    VOD_EXTENSIONS,
)

__all__ = [
    "COMMENT_START",
    "EXTENDED_HEADER",
    "PLAYLIST_EXTENSIONS",
    "VOD_EXTENSIONS",
]
