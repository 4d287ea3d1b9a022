"""
Constantes globales pour m3u-catalog.

Ce module contient les constantes utilisees dans l'application:
- Marqueurs de la grammaire .m3u (commentaire, en-tete etendu, directive)
- Extensions video a la demande (VOD)
- Extensions des playlists imbriquees
"""

# Marqueur de commentaire (et prefixe des directives)
COMMENT_START = "#"

# En-tete optionnel des playlists etendues
EXTENDED_HEADER = f"{COMMENT_START}EXTM3U"

# Prefixe de la directive d'information etendue
EXTENDED_INFO_PREFIX = f"{COMMENT_START}EXTINF:"

# Extensions video a la demande (comparaison sensible a la casse, sans point)
VOD_EXTENSIONS = frozenset({
    "mkv",
    "avi",
    "mp4",
    "mov",
    "wmv",
    "flv",
    "webm",
})

# Extensions des fichiers de playlist (comparaison insensible a la casse)
PLAYLIST_EXTENSIONS = frozenset({
    ".m3u",
    ".m3u8",
})

# Cle de metadonnee portant le logo / la jaquette
LOGO_KEY = "tvg-logo"
